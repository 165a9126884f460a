"""
Review Participant Entity

An employee/supervisor pairing inside a review cycle. Participants are owned
by their ``ReviewCycle``; the record_* methods are called by the aggregate
after it has checked the cycle-level rules.
"""

from decimal import Decimal

from ..value_objects.enums import ParticipantStatus
from ..value_objects.identifiers import ParticipantId, ReviewCycleId, UserId
from .assessment import ManagerAssessment, SelfAssessment


class ReviewParticipant:
    """
    An employee being reviewed, together with the supervisor reviewing them.

    Progresses strictly forward through ``ParticipantStatus``. The final
    score is set exactly once, together with the manager assessment.
    """

    def __init__(
        self,
        employee_id: UserId,
        supervisor_id: UserId,
        participant_id: ParticipantId | None = None,
    ) -> None:
        if employee_id is None:
            raise ValueError("Employee ID cannot be null")
        if supervisor_id is None:
            raise ValueError("Supervisor ID cannot be null")

        self._id = participant_id or ParticipantId.generate()
        self._employee_id = employee_id
        self._supervisor_id = supervisor_id
        self._status = ParticipantStatus.PENDING
        self._self_assessment: SelfAssessment | None = None
        self._manager_assessment: ManagerAssessment | None = None
        self._final_score: Decimal | None = None
        self._cycle_id: ReviewCycleId | None = None

    @property
    def id(self) -> ParticipantId:
        return self._id

    @property
    def cycle_id(self) -> ReviewCycleId | None:
        """Cycle that owns this participant, None until adopted."""
        return self._cycle_id

    @property
    def employee_id(self) -> UserId:
        return self._employee_id

    @property
    def supervisor_id(self) -> UserId:
        return self._supervisor_id

    @property
    def status(self) -> ParticipantStatus:
        return self._status

    @property
    def self_assessment(self) -> SelfAssessment | None:
        return self._self_assessment

    @property
    def manager_assessment(self) -> ManagerAssessment | None:
        return self._manager_assessment

    @property
    def final_score(self) -> Decimal | None:
        return self._final_score

    @property
    def has_self_assessment(self) -> bool:
        """Check if the employee has submitted their self-assessment."""
        return self._self_assessment is not None

    @property
    def has_manager_assessment(self) -> bool:
        """Check if the supervisor has submitted their assessment."""
        return self._manager_assessment is not None

    def record_self_assessment(self, assessment: SelfAssessment) -> None:
        """Attach the self-assessment and advance to SELF_ASSESSMENT_SUBMITTED."""
        self._status = self._status.transition_to(
            ParticipantStatus.SELF_ASSESSMENT_SUBMITTED
        )
        self._self_assessment = assessment

    def record_manager_assessment(
        self, assessment: ManagerAssessment, final_score: Decimal
    ) -> None:
        """Attach the manager assessment with its final score."""
        self._status = self._status.transition_to(
            ParticipantStatus.MANAGER_ASSESSMENT_SUBMITTED
        )
        self._manager_assessment = assessment
        self._final_score = final_score

    def complete(self) -> None:
        self._status = self._status.transition_to(ParticipantStatus.COMPLETED)

    def assign_to_cycle(self, cycle_id: ReviewCycleId) -> None:
        """
        Record the owning cycle.

        Raises:
            ValueError: If the participant is not PENDING or already belongs
                to another cycle
        """
        if self._cycle_id is not None and self._cycle_id != cycle_id:
            raise ValueError(
                f"Participant {self._id} already belongs to review cycle: {self._cycle_id}"
            )
        if self._status != ParticipantStatus.PENDING:
            raise ValueError(
                f"Participant {self._id} must be pending to join a review cycle, "
                f"got: {self._status.value}"
            )
        self._cycle_id = cycle_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReviewParticipant):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return (
            f"ReviewParticipant(id={self._id}, employee={self._employee_id}, "
            f"status={self._status.value})"
        )
