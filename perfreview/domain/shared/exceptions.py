"""
Domain Exceptions

Custom exceptions for performance review domain errors. Every error carries
a discriminating ``ErrorType`` so API layers can map failures without
inspecting messages.
"""

from enum import Enum
from typing import Any


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    NOT_FOUND = "not_found"
    STATUS_TRANSITION = "status_transition"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when caller input fails validation before reaching the domain model."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, ErrorType.VALIDATION, details)
        self.field = field


class BusinessRuleError(DomainError):
    """Raised when business rules are violated."""

    def __init__(
        self, message: str, details: dict[str, str | int | bool | None] | None = None
    ) -> None:
        super().__init__(message, ErrorType.BUSINESS_RULE, details)


class StatusTransitionError(DomainError):
    """Raised when a lifecycle status transition is not allowed."""

    def __init__(self, entity: str, current_status: str, attempted_status: str) -> None:
        details = {
            "entity": entity,
            "current_status": current_status,
            "attempted_status": attempted_status,
        }
        super().__init__(
            f"Invalid {entity} status transition from {current_status} to {attempted_status}",
            ErrorType.STATUS_TRANSITION,
            details,
        )
        self.current_status = current_status
        self.attempted_status = attempted_status


# Review cycle exceptions
class InvalidAssessmentError(BusinessRuleError):
    """Raised when an assessment or review cycle rule is violated."""

    pass


class ReviewCycleNotFoundError(DomainError):
    """Raised when a review cycle, or a participant within one, cannot be resolved."""

    def __init__(
        self, message: str, details: dict[str, str | int | bool | None] | None = None
    ) -> None:
        super().__init__(message, ErrorType.NOT_FOUND, details)

    @classmethod
    def for_cycle(cls, cycle_id: Any) -> "ReviewCycleNotFoundError":
        return cls(
            f"Review cycle not found: {cycle_id}",
            {"cycle_id": str(cycle_id), "entity_type": "review_cycle"},
        )

    @classmethod
    def for_participant(cls, participant_id: Any) -> "ReviewCycleNotFoundError":
        return cls(
            f"Participant not found: {participant_id}",
            {"participant_id": str(participant_id), "entity_type": "participant"},
        )


# Feedback exceptions
class InvalidFeedbackOperationError(BusinessRuleError):
    """Raised when a feedback operation breaks a feedback rule."""

    pass


class FeedbackNotFoundError(DomainError):
    """Raised when a feedback record is not found."""

    def __init__(self, feedback_id: Any) -> None:
        details = {"feedback_id": str(feedback_id), "entity_type": "feedback"}
        super().__init__(f"Feedback not found: {feedback_id}", ErrorType.NOT_FOUND, details)
        self.feedback_id = feedback_id
