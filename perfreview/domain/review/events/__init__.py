from .domain_events import (
    ManagerAssessmentSubmitted,
    ReviewCycleCompleted,
    ReviewCycleEvent,
    SelfAssessmentSubmitted,
)

__all__ = [
    "ManagerAssessmentSubmitted",
    "ReviewCycleCompleted",
    "ReviewCycleEvent",
    "SelfAssessmentSubmitted",
]
