"""
Application services for coordinating use cases.
"""

from .base_service import ApplicationServiceBase
from .feedback_service import FeedbackApplicationService
from .review_cycle_service import ReviewCycleApplicationService

__all__ = [
    "ApplicationServiceBase",
    "FeedbackApplicationService",
    "ReviewCycleApplicationService",
]
