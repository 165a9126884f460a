"""
Feedback Repository Interface

Defines the contract for feedback data access operations.
"""

from abc import abstractmethod

from ..review.value_objects.identifiers import FeedbackId, KpiId, UserId
from ..shared.base import Repository
from .entities import FeedbackRecord


class FeedbackRecordRepository(Repository[FeedbackRecord, FeedbackId]):
    """Abstract repository interface for FeedbackRecord aggregates."""

    @abstractmethod
    def save(self, feedback: FeedbackRecord) -> None:
        """Save a feedback record, replacing any stored version with the same ID."""

    @abstractmethod
    def find_by_id(self, feedback_id: FeedbackId) -> FeedbackRecord | None:
        """Retrieve a feedback record by its ID."""

    @abstractmethod
    def find_all(self) -> list[FeedbackRecord]:
        """Retrieve all feedback records."""

    def find_by_receiver(self, receiver_id: UserId) -> list[FeedbackRecord]:
        """Retrieve feedback received by a user."""
        return [f for f in self.find_all() if f.receiver_id == receiver_id]

    def find_by_giver(self, giver_id: UserId) -> list[FeedbackRecord]:
        """Retrieve feedback given by a user."""
        return [f for f in self.find_all() if f.giver_id == giver_id]

    def find_by_kpi(self, kpi_id: KpiId) -> list[FeedbackRecord]:
        """Retrieve feedback about a KPI."""
        return [f for f in self.find_all() if f.context.kpi_id == kpi_id]

    def find_unresolved_for_receiver(self, receiver_id: UserId) -> list[FeedbackRecord]:
        """Retrieve feedback received by a user that is not yet resolved."""
        return [
            f
            for f in self.find_by_receiver(receiver_id)
            if not f.is_resolved
        ]
