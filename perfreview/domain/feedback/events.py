"""Domain events raised by the ``FeedbackRecord`` aggregate."""

from datetime import datetime
from uuid import UUID

from pydantic import computed_field

from ..shared.base import DomainEvent
from .value_objects import FeedbackType

FEEDBACK_AGGREGATE = "FeedbackRecord"


class FeedbackEvent(DomainEvent):
    aggregate_type: str = FEEDBACK_AGGREGATE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def feedback_id(self) -> UUID:
        return self.aggregate_id


class FeedbackProvided(FeedbackEvent):
    """Raised when a user gives feedback on a colleague's KPI."""

    giver_id: UUID
    receiver_id: UUID
    kpi_id: UUID
    feedback_type: FeedbackType
    created_date: datetime


class FeedbackResponseProvided(FeedbackEvent):
    """Raised when the receiver responds to feedback."""

    response_id: UUID
    responder_id: UUID
    response_date: datetime
