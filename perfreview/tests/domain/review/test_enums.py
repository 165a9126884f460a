import pytest

from perfreview.domain.review.value_objects.enums import (
    ParticipantStatus,
    ReviewCycleStatus,
)
from perfreview.domain.shared.exceptions import ErrorType, StatusTransitionError


class TestReviewCycleStatus:
    """Test review cycle status transitions."""

    def test_active_can_move_forward(self):
        assert ReviewCycleStatus.ACTIVE.can_transition_to(ReviewCycleStatus.IN_PROGRESS)
        assert ReviewCycleStatus.ACTIVE.can_transition_to(ReviewCycleStatus.COMPLETED)

    def test_in_progress_cannot_go_back(self):
        assert not ReviewCycleStatus.IN_PROGRESS.can_transition_to(ReviewCycleStatus.ACTIVE)

    def test_completed_is_terminal(self):
        assert ReviewCycleStatus.COMPLETED.is_terminal
        with pytest.raises(StatusTransitionError) as exc_info:
            ReviewCycleStatus.COMPLETED.transition_to(ReviewCycleStatus.IN_PROGRESS)

        assert exc_info.value.error_type == ErrorType.STATUS_TRANSITION
        assert exc_info.value.details["current_status"] == "completed"
        assert exc_info.value.details["attempted_status"] == "in_progress"


class TestParticipantStatus:
    """Test participant status transitions."""

    @pytest.mark.parametrize(
        "current,expected",
        [
            (ParticipantStatus.PENDING, ParticipantStatus.SELF_ASSESSMENT_SUBMITTED),
            (
                ParticipantStatus.SELF_ASSESSMENT_SUBMITTED,
                ParticipantStatus.MANAGER_ASSESSMENT_SUBMITTED,
            ),
            (ParticipantStatus.MANAGER_ASSESSMENT_SUBMITTED, ParticipantStatus.COMPLETED),
        ],
    )
    def test_single_forward_step(self, current, expected):
        assert current.transition_to(expected) == expected
        assert current.allowed_transitions == frozenset([expected])

    def test_cannot_skip_steps(self):
        with pytest.raises(StatusTransitionError, match="pending to completed"):
            ParticipantStatus.PENDING.transition_to(ParticipantStatus.COMPLETED)

    def test_completed_is_terminal(self):
        assert ParticipantStatus.COMPLETED.is_terminal
        assert not ParticipantStatus.PENDING.is_terminal
