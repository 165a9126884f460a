"""
Review Cycle Repository Interface

Defines the contract for review cycle data access operations.
"""

from abc import abstractmethod

from ...shared.base import Repository
from ..entities.review_cycle import ReviewCycle
from ..value_objects.enums import ReviewCycleStatus
from ..value_objects.identifiers import ReviewCycleId, UserId


class ReviewCycleRepository(Repository[ReviewCycle, ReviewCycleId]):
    """
    Abstract repository interface for ReviewCycle aggregates.

    Defines the contract that infrastructure layer must implement
    for review cycle persistence and retrieval operations.
    """

    @abstractmethod
    def save(self, review_cycle: ReviewCycle) -> None:
        """
        Save a review cycle, replacing any stored version with the same ID.

        Args:
            review_cycle: ReviewCycle aggregate to save
        """

    @abstractmethod
    def find_by_id(self, cycle_id: ReviewCycleId) -> ReviewCycle | None:
        """
        Retrieve a review cycle by its ID.

        Args:
            cycle_id: Unique review cycle identifier

        Returns:
            ReviewCycle aggregate or None if not found
        """

    @abstractmethod
    def find_all(self) -> list[ReviewCycle]:
        """Retrieve all review cycles."""

    @abstractmethod
    def find_by_status(self, status: ReviewCycleStatus) -> list[ReviewCycle]:
        """
        Retrieve review cycles with a specific status.

        Args:
            status: Review cycle status to filter by

        Returns:
            List of review cycles with the status
        """

    def find_active_cycles(self) -> list[ReviewCycle]:
        """Retrieve cycles that still accept submissions."""
        return [cycle for cycle in self.find_all() if not cycle.is_completed]

    def find_cycles_for_employee(self, employee_id: UserId) -> list[ReviewCycle]:
        """Retrieve cycles in which the user is reviewed."""
        return [
            cycle
            for cycle in self.find_all()
            if cycle.has_participant_for_employee(employee_id)
        ]

    def find_cycles_for_supervisor(self, supervisor_id: UserId) -> list[ReviewCycle]:
        """Retrieve cycles in which the user reviews at least one participant."""
        return [
            cycle
            for cycle in self.find_all()
            if cycle.participants_for_supervisor(supervisor_id)
        ]
