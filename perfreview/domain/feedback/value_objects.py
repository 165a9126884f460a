"""Value objects for the feedback domain."""

from enum import Enum
from typing import Any

from pydantic import model_validator

from ...core.config import settings
from ..review.value_objects.identifiers import KpiId
from ..shared.base import ValueObject
from ..shared.exceptions import InvalidFeedbackOperationError


class FeedbackType(str, Enum):
    """Kind of feedback given."""

    POSITIVE = "positive"
    IMPROVEMENT = "improvement"


class FeedbackStatus(str, Enum):
    """
    Lifecycle of a feedback record.

    created → acknowledged → responded → resolved. Responding and resolving
    are allowed from any earlier status.
    """

    CREATED = "created"
    ACKNOWLEDGED = "acknowledged"
    RESPONDED = "responded"
    RESOLVED = "resolved"

    @property
    def is_resolved(self) -> bool:
        return self == FeedbackStatus.RESOLVED


class FeedbackContext(ValueObject):
    """The KPI a piece of feedback refers to and what was said about it."""

    kpi_id: KpiId
    kpi_name: str | None = None
    content_text: str

    @model_validator(mode="before")
    @classmethod
    def _validate_context(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if data.get("kpi_id") is None:
            raise InvalidFeedbackOperationError("Feedback must be linked to a KPI")

        content_text = data.get("content_text")
        if content_text is None or not str(content_text).strip():
            raise InvalidFeedbackOperationError("Feedback content cannot be empty")
        max_length = settings.FEEDBACK_MAX_CONTENT_LENGTH
        if len(str(content_text)) > max_length:
            raise InvalidFeedbackOperationError(
                f"Feedback content cannot exceed {max_length} characters",
                {"length": len(content_text), "max_length": max_length},
            )
        return data
