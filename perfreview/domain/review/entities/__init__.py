from .assessment import ManagerAssessment, SelfAssessment
from .participant import ReviewParticipant
from .review_cycle import ReviewCycle

__all__ = [
    "ManagerAssessment",
    "SelfAssessment",
    "ReviewParticipant",
    "ReviewCycle",
]
