"""
Status Enumerations

Lifecycle statuses for review cycles and their participants, with the
transition rules each lifecycle allows.
"""

from enum import Enum

from ...shared.exceptions import StatusTransitionError


class ReviewCycleStatus(str, Enum):
    """
    Status of a review cycle.

    Valid transitions:
    - active → in_progress, completed
    - in_progress → completed
    - completed → (no transitions allowed - terminal state)
    """

    ACTIVE = "active"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @property
    def allowed_transitions(self) -> frozenset["ReviewCycleStatus"]:
        """Get allowed status transitions from current status."""
        transitions = {
            ReviewCycleStatus.ACTIVE: frozenset(
                [ReviewCycleStatus.IN_PROGRESS, ReviewCycleStatus.COMPLETED]
            ),
            ReviewCycleStatus.IN_PROGRESS: frozenset([ReviewCycleStatus.COMPLETED]),
            ReviewCycleStatus.COMPLETED: frozenset(),  # Terminal state
        }
        return transitions[self]

    def can_transition_to(self, new_status: "ReviewCycleStatus") -> bool:
        """Check if transition to new status is valid."""
        return new_status in self.allowed_transitions

    def transition_to(self, new_status: "ReviewCycleStatus") -> "ReviewCycleStatus":
        """Validate transition and return new status."""
        if not self.can_transition_to(new_status):
            raise StatusTransitionError("review cycle", self.value, new_status.value)
        return new_status

    @property
    def is_terminal(self) -> bool:
        """Check if status is terminal (no further transitions allowed)."""
        return len(self.allowed_transitions) == 0


class ParticipantStatus(str, Enum):
    """
    Status of a participant within a review cycle.

    Valid transitions (strictly forward, one step at a time):
    - pending → self_assessment_submitted
    - self_assessment_submitted → manager_assessment_submitted
    - manager_assessment_submitted → completed
    - completed → (no transitions allowed - terminal state)
    """

    PENDING = "pending"
    SELF_ASSESSMENT_SUBMITTED = "self_assessment_submitted"
    MANAGER_ASSESSMENT_SUBMITTED = "manager_assessment_submitted"
    COMPLETED = "completed"

    @property
    def allowed_transitions(self) -> frozenset["ParticipantStatus"]:
        """Get allowed status transitions from current status."""
        transitions = {
            ParticipantStatus.PENDING: frozenset(
                [ParticipantStatus.SELF_ASSESSMENT_SUBMITTED]
            ),
            ParticipantStatus.SELF_ASSESSMENT_SUBMITTED: frozenset(
                [ParticipantStatus.MANAGER_ASSESSMENT_SUBMITTED]
            ),
            ParticipantStatus.MANAGER_ASSESSMENT_SUBMITTED: frozenset(
                [ParticipantStatus.COMPLETED]
            ),
            ParticipantStatus.COMPLETED: frozenset(),  # Terminal state
        }
        return transitions[self]

    def can_transition_to(self, new_status: "ParticipantStatus") -> bool:
        """Check if transition to new status is valid."""
        return new_status in self.allowed_transitions

    def transition_to(self, new_status: "ParticipantStatus") -> "ParticipantStatus":
        """Validate transition and return new status."""
        if not self.can_transition_to(new_status):
            raise StatusTransitionError("participant", self.value, new_status.value)
        return new_status

    @property
    def is_terminal(self) -> bool:
        """Check if status is terminal (no further transitions allowed)."""
        return len(self.allowed_transitions) == 0
