"""Value objects for the performance review domain."""

from .assessment_score import AssessmentScore
from .enums import ParticipantStatus, ReviewCycleStatus
from .identifiers import (
    AssessmentId,
    FeedbackId,
    KpiId,
    ParticipantId,
    ResponseId,
    ReviewCycleId,
    UserId,
)

__all__ = [
    "AssessmentScore",
    "ParticipantStatus",
    "ReviewCycleStatus",
    "AssessmentId",
    "FeedbackId",
    "KpiId",
    "ParticipantId",
    "ResponseId",
    "ReviewCycleId",
    "UserId",
]
