"""
Domain Events

Events raised by the ``ReviewCycle`` aggregate. Identifier payloads are plain
UUIDs so events serialise without knowledge of the identifier wrappers.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import computed_field

from ...shared.base import DomainEvent
from ..value_objects.assessment_score import AssessmentScore

REVIEW_CYCLE_AGGREGATE = "ReviewCycle"


class ReviewCycleEvent(DomainEvent):
    """Base for events whose aggregate is a review cycle."""

    aggregate_type: str = REVIEW_CYCLE_AGGREGATE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cycle_id(self) -> UUID:
        return self.aggregate_id


class SelfAssessmentSubmitted(ReviewCycleEvent):
    """Raised when an employee submits their self-assessment."""

    participant_id: UUID
    employee_id: UUID
    supervisor_id: UUID
    submitted_date: datetime
    kpi_scores: tuple[AssessmentScore, ...]
    comments: str | None = None
    extra_mile_efforts: str | None = None


class ManagerAssessmentSubmitted(ReviewCycleEvent):
    """Raised when a supervisor submits the manager assessment."""

    participant_id: UUID
    employee_id: UUID
    supervisor_id: UUID
    submitted_date: datetime
    kpi_scores: tuple[AssessmentScore, ...]
    overall_comments: str | None = None
    final_score: Decimal


class ReviewCycleCompleted(ReviewCycleEvent):
    """Raised when every participant is assessed and the cycle closes."""

    cycle_name: str
    completed_date: datetime
    participant_count: int
    average_score: Decimal
