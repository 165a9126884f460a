"""
Feedback Entities

``FeedbackRecord`` is the aggregate root for a feedback conversation between
two users about one KPI. Records are never deleted, only resolved.
"""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from ...core.config import settings
from ..review.value_objects.identifiers import FeedbackId, KpiId, ResponseId, UserId
from ..shared.base import AggregateRoot, Entity, utc_now
from ..shared.exceptions import InvalidFeedbackOperationError
from .events import FeedbackProvided, FeedbackResponseProvided
from .value_objects import FeedbackContext, FeedbackStatus, FeedbackType


class FeedbackResponse(Entity):
    """A reply from the feedback receiver."""

    id: ResponseId = Field(default_factory=ResponseId.generate)
    responder_id: UserId
    response_text: str
    response_date: datetime = Field(default_factory=utc_now)

    @field_validator("response_text", mode="before")
    @classmethod
    def _validate_response_text(cls, v: Any) -> Any:
        if v is None or not str(v).strip():
            raise InvalidFeedbackOperationError("Response text cannot be empty")
        max_length = settings.FEEDBACK_MAX_RESPONSE_LENGTH
        if len(v) > max_length:
            raise InvalidFeedbackOperationError(
                f"Response text cannot exceed {max_length} characters",
                {"length": len(v), "max_length": max_length},
            )
        return v


class FeedbackRecord(AggregateRoot):
    """
    Feedback given by one user to another about a KPI.

    Lifecycle: CREATED → ACKNOWLEDGED → RESPONDED → RESOLVED. Only the
    receiver may respond, and a resolved record accepts no further changes.
    Use ``FeedbackRecord.create`` for new feedback so ``FeedbackProvided``
    is raised.
    """

    def __init__(
        self,
        giver_id: UserId,
        receiver_id: UserId,
        feedback_type: FeedbackType,
        context: FeedbackContext,
        feedback_id: FeedbackId | None = None,
        created_date: datetime | None = None,
    ) -> None:
        super().__init__()
        if giver_id is None or receiver_id is None:
            raise ValueError("Giver and receiver cannot be null")
        if feedback_type is None:
            raise ValueError("Feedback type cannot be null")

        self._id = feedback_id or FeedbackId.generate()
        self._giver_id = giver_id
        self._receiver_id = receiver_id
        self._created_date = created_date or utc_now()
        self._status = FeedbackStatus.CREATED
        self._feedback_type = feedback_type
        self._context = context
        self._responses: list[FeedbackResponse] = []

    @classmethod
    def create(
        cls,
        giver_id: UserId,
        receiver_id: UserId,
        kpi_id: KpiId,
        kpi_name: str | None,
        feedback_type: FeedbackType,
        content_text: str,
    ) -> "FeedbackRecord":
        """
        Create new feedback and raise ``FeedbackProvided``.

        Raises:
            InvalidFeedbackOperationError: If the KPI is missing or the content
                is blank or too long
        """
        context = FeedbackContext(
            kpi_id=kpi_id, kpi_name=kpi_name, content_text=content_text
        )
        feedback = cls(giver_id, receiver_id, feedback_type, context)
        feedback.add_domain_event(
            FeedbackProvided(
                aggregate_id=feedback.id.value,
                giver_id=giver_id.value,
                receiver_id=receiver_id.value,
                kpi_id=kpi_id.value,
                feedback_type=feedback_type,
                created_date=feedback.created_date,
            )
        )
        return feedback

    @property
    def id(self) -> FeedbackId:
        return self._id

    @property
    def giver_id(self) -> UserId:
        return self._giver_id

    @property
    def receiver_id(self) -> UserId:
        return self._receiver_id

    @property
    def created_date(self) -> datetime:
        return self._created_date

    @property
    def status(self) -> FeedbackStatus:
        return self._status

    @property
    def feedback_type(self) -> FeedbackType:
        return self._feedback_type

    @property
    def context(self) -> FeedbackContext:
        return self._context

    @property
    def responses(self) -> tuple[FeedbackResponse, ...]:
        return tuple(self._responses)

    @property
    def is_resolved(self) -> bool:
        return self._status.is_resolved

    def acknowledge(self) -> None:
        """Mark the feedback as seen by the receiver."""
        if self._status != FeedbackStatus.CREATED:
            raise InvalidFeedbackOperationError(
                "Feedback can only be acknowledged when in Created status",
                {"feedback_id": str(self._id), "status": self._status.value},
            )
        self._status = FeedbackStatus.ACKNOWLEDGED

    def add_response(self, responder_id: UserId, response_text: str) -> FeedbackResponse:
        """
        Record the receiver's reply and raise ``FeedbackResponseProvided``.

        Raises:
            InvalidFeedbackOperationError: If the responder is not the
                receiver, the record is resolved, or the text is invalid
        """
        if responder_id != self._receiver_id:
            raise InvalidFeedbackOperationError(
                "Only feedback receiver can respond",
                {"feedback_id": str(self._id), "responder_id": str(responder_id)},
            )
        if self._status.is_resolved:
            raise InvalidFeedbackOperationError(
                "Cannot respond to resolved feedback",
                {"feedback_id": str(self._id)},
            )

        response = FeedbackResponse(responder_id=responder_id, response_text=response_text)
        self._responses.append(response)
        self._status = FeedbackStatus.RESPONDED

        self.add_domain_event(
            FeedbackResponseProvided(
                aggregate_id=self._id.value,
                response_id=response.id.value,
                responder_id=responder_id.value,
                response_date=response.response_date,
            )
        )
        return response

    def resolve(self) -> None:
        if self._status.is_resolved:
            raise InvalidFeedbackOperationError(
                "Feedback is already resolved", {"feedback_id": str(self._id)}
            )
        self._status = FeedbackStatus.RESOLVED

    def can_be_deleted(self) -> bool:
        """Feedback is archived by resolving it, never deleted."""
        return False

    def __str__(self) -> str:
        return (
            f"FeedbackRecord(id={self._id}, type={self._feedback_type.value}, "
            f"status={self._status.value})"
        )
