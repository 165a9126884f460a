"""Continuous feedback bounded context."""

from .entities import FeedbackRecord, FeedbackResponse
from .events import FeedbackEvent, FeedbackProvided, FeedbackResponseProvided
from .repositories import FeedbackRecordRepository
from .value_objects import FeedbackContext, FeedbackStatus, FeedbackType

__all__ = [
    "FeedbackRecord",
    "FeedbackResponse",
    "FeedbackEvent",
    "FeedbackProvided",
    "FeedbackResponseProvided",
    "FeedbackRecordRepository",
    "FeedbackContext",
    "FeedbackStatus",
    "FeedbackType",
]
