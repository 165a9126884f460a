"""Shared domain building blocks."""

from .base import (
    AggregateRoot,
    DomainEvent,
    DomainService,
    Entity,
    Repository,
    ValueObject,
    utc_now,
)
from .exceptions import (
    BusinessRuleError,
    DomainError,
    ErrorType,
    FeedbackNotFoundError,
    InvalidAssessmentError,
    InvalidFeedbackOperationError,
    ReviewCycleNotFoundError,
    StatusTransitionError,
    ValidationError,
)

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "DomainService",
    "Entity",
    "Repository",
    "ValueObject",
    "utc_now",
    "BusinessRuleError",
    "DomainError",
    "ErrorType",
    "FeedbackNotFoundError",
    "InvalidAssessmentError",
    "InvalidFeedbackOperationError",
    "ReviewCycleNotFoundError",
    "StatusTransitionError",
    "ValidationError",
]
