"""
Review Cycle Aggregate

A time-boxed performance review in which each participant's employee submits
a self-assessment and their supervisor then submits a manager assessment.
Acts as the aggregate root for everything that happens inside a cycle.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ...shared.base import AggregateRoot, utc_now
from ...shared.exceptions import InvalidAssessmentError, ReviewCycleNotFoundError
from ..events.domain_events import (
    ManagerAssessmentSubmitted,
    ReviewCycleCompleted,
    SelfAssessmentSubmitted,
)
from ..services.score_calculation_service import PerformanceScoreCalculationService
from ..value_objects.assessment_score import AssessmentScore
from ..value_objects.enums import ParticipantStatus, ReviewCycleStatus
from ..value_objects.identifiers import ParticipantId, ReviewCycleId, UserId
from .assessment import ManagerAssessment, SelfAssessment
from .participant import ReviewParticipant

AVERAGE_QUANTUM = Decimal("0.01")


class ReviewCycle(AggregateRoot):
    """
    A review cycle and the participants reviewed in it.

    This is the aggregate root that enforces submission ordering, owns the
    participant lifecycle and queues domain events for every transition.
    Callers drain those events with ``get_domain_events``.
    """

    def __init__(
        self,
        cycle_name: str,
        start_date: date,
        end_date: date,
        participants: Iterable[ReviewParticipant] | None = None,
        cycle_id: ReviewCycleId | None = None,
    ) -> None:
        """
        Initialize a new ReviewCycle in ACTIVE status.

        Args:
            cycle_name: Human-readable cycle name (non-blank)
            start_date: First day of the cycle
            end_date: Last day of the cycle (not before start_date)
            participants: Participants to review; the collection is copied
            cycle_id: Identity to use, generated when omitted

        Raises:
            ValueError: If the name is blank, the dates are missing or inverted,
                or a participant is duplicated, not pending or owned by
                another cycle
        """
        super().__init__()
        if cycle_name is None or not cycle_name.strip():
            raise ValueError("Cycle name cannot be null or empty")
        if start_date is None or end_date is None:
            raise ValueError("Start date and end date cannot be null")
        if end_date < start_date:
            raise ValueError("End date cannot be before start date")

        self._id = cycle_id or ReviewCycleId.generate()
        members = list(participants or [])
        self._validate_participants(members)

        self._cycle_name = cycle_name
        self._start_date = start_date
        self._end_date = end_date
        self._status = ReviewCycleStatus.ACTIVE
        for participant in members:
            participant.assign_to_cycle(self._id)
        self._participants: list[ReviewParticipant] = members

    @property
    def id(self) -> ReviewCycleId:
        return self._id

    @property
    def cycle_name(self) -> str:
        return self._cycle_name

    @property
    def start_date(self) -> date:
        return self._start_date

    @property
    def end_date(self) -> date:
        return self._end_date

    @property
    def status(self) -> ReviewCycleStatus:
        return self._status

    @property
    def participants(self) -> tuple[ReviewParticipant, ...]:
        """Get participants (read-only view)."""
        return tuple(self._participants)

    @property
    def participant_count(self) -> int:
        return len(self._participants)

    @property
    def is_completed(self) -> bool:
        return self._status == ReviewCycleStatus.COMPLETED

    @property
    def completion_progress(self) -> Decimal:
        """Fraction of participants with a manager assessment, 0 to 1."""
        if not self._participants:
            return Decimal("0.00")
        assessed = sum(1 for p in self._participants if p.has_manager_assessment)
        return (Decimal(assessed) / Decimal(len(self._participants))).quantize(
            AVERAGE_QUANTUM, rounding=ROUND_HALF_UP
        )

    def get_participant(self, participant_id: ParticipantId) -> ReviewParticipant:
        """
        Resolve a participant of this cycle.

        Raises:
            ReviewCycleNotFoundError: If no participant has this id
        """
        for participant in self._participants:
            if participant.id == participant_id:
                return participant
        raise ReviewCycleNotFoundError.for_participant(participant_id)

    def participants_for_employee(self, employee_id: UserId) -> list[ReviewParticipant]:
        return [p for p in self._participants if p.employee_id == employee_id]

    def participants_for_supervisor(
        self, supervisor_id: UserId
    ) -> list[ReviewParticipant]:
        return [p for p in self._participants if p.supervisor_id == supervisor_id]

    def has_participant_for_employee(self, employee_id: UserId) -> bool:
        return any(p.employee_id == employee_id for p in self._participants)

    def submit_self_assessment(
        self,
        participant_id: ParticipantId,
        kpi_scores: Iterable[AssessmentScore] | None,
        comments: str | None = None,
        extra_mile_efforts: str | None = None,
    ) -> SelfAssessment:
        """
        Record a participant's self-assessment.

        The first self-assessment in the cycle moves it to IN_PROGRESS.

        Raises:
            InvalidAssessmentError: If the cycle is completed, the participant
                already submitted, or no KPI scores are given
            ReviewCycleNotFoundError: If the participant is not in this cycle
        """
        self._ensure_cycle_is_active()
        participant = self.get_participant(participant_id)
        if participant.has_self_assessment:
            raise InvalidAssessmentError(
                f"Self-assessment already submitted for participant: {participant_id}",
                {"participant_id": str(participant_id), "cycle_id": str(self._id)},
            )

        assessment = SelfAssessment.create(kpi_scores, comments, extra_mile_efforts)

        participant.record_self_assessment(assessment)
        if self._status == ReviewCycleStatus.ACTIVE:
            self._status = self._status.transition_to(ReviewCycleStatus.IN_PROGRESS)

        self.add_domain_event(
            SelfAssessmentSubmitted(
                aggregate_id=self._id.value,
                participant_id=participant.id.value,
                employee_id=participant.employee_id.value,
                supervisor_id=participant.supervisor_id.value,
                submitted_date=assessment.submitted_date,
                kpi_scores=assessment.kpi_scores,
                comments=assessment.comments,
                extra_mile_efforts=assessment.extra_mile_efforts,
            )
        )
        return assessment

    def submit_manager_assessment(
        self,
        participant_id: ParticipantId,
        kpi_scores: Iterable[AssessmentScore] | None,
        overall_comments: str | None = None,
        score_service: PerformanceScoreCalculationService | None = None,
    ) -> ManagerAssessment:
        """
        Record the supervisor's assessment and the resulting final score.

        Args:
            participant_id: Participant being assessed
            kpi_scores: Manager KPI scores (at least one)
            overall_comments: Optional free-text summary
            score_service: Calculator for the final score; a default
                service is used when omitted

        Raises:
            InvalidAssessmentError: If the cycle is completed, the
                self-assessment is missing, a manager assessment already
                exists, or the scores are invalid
            ReviewCycleNotFoundError: If the participant is not in this cycle
        """
        self._ensure_cycle_is_active()
        participant = self.get_participant(participant_id)
        if not participant.has_self_assessment:
            raise InvalidAssessmentError(
                "Self-assessment must be submitted before manager assessment "
                f"for participant: {participant_id}",
                {"participant_id": str(participant_id), "cycle_id": str(self._id)},
            )
        if participant.has_manager_assessment:
            raise InvalidAssessmentError(
                f"Manager assessment already submitted for participant: {participant_id}",
                {"participant_id": str(participant_id), "cycle_id": str(self._id)},
            )

        assessment = ManagerAssessment.create(kpi_scores, overall_comments)
        service = score_service or PerformanceScoreCalculationService()
        final_score = service.calculate_final_score(assessment.kpi_scores)

        participant.record_manager_assessment(assessment, final_score)

        self.add_domain_event(
            ManagerAssessmentSubmitted(
                aggregate_id=self._id.value,
                participant_id=participant.id.value,
                employee_id=participant.employee_id.value,
                supervisor_id=participant.supervisor_id.value,
                submitted_date=assessment.submitted_date,
                kpi_scores=assessment.kpi_scores,
                overall_comments=assessment.overall_comments,
                final_score=final_score,
            )
        )
        return assessment

    def complete(self) -> Decimal:
        """
        Close the cycle once every participant has a manager assessment.

        Returns:
            Average final score across participants (0.00 when there are none)

        Raises:
            InvalidAssessmentError: If the cycle is already completed or any
                participant is missing a manager assessment or cannot complete
        """
        self._ensure_cycle_is_active()
        if not all(p.has_manager_assessment for p in self._participants):
            raise InvalidAssessmentError(
                "All participants must have manager assessments before completing cycle",
                {"cycle_id": str(self._id)},
            )

        blocked = [
            p for p in self._participants
            if not p.status.can_transition_to(ParticipantStatus.COMPLETED)
        ]
        if blocked:
            raise InvalidAssessmentError(
                "All participants must be ready for completion before completing cycle",
                {
                    "cycle_id": str(self._id),
                    "participant_ids": [str(p.id) for p in blocked],
                },
            )

        average_score = self._calculate_average_score()
        self._status = self._status.transition_to(ReviewCycleStatus.COMPLETED)
        for participant in self._participants:
            participant.complete()

        completed_date: datetime = utc_now()
        self.add_domain_event(
            ReviewCycleCompleted(
                aggregate_id=self._id.value,
                cycle_name=self._cycle_name,
                completed_date=completed_date,
                participant_count=len(self._participants),
                average_score=average_score,
            )
        )
        return average_score

    def _calculate_average_score(self) -> Decimal:
        scores = [
            p.final_score for p in self._participants if p.final_score is not None
        ]
        if not scores:
            return Decimal("0.00")
        total = sum(scores, Decimal("0"))
        return (total / Decimal(len(scores))).quantize(
            AVERAGE_QUANTUM, rounding=ROUND_HALF_UP
        )

    def _validate_participants(self, participants: list[ReviewParticipant]) -> None:
        seen: set[ParticipantId] = set()
        for participant in participants:
            if participant.id in seen:
                raise ValueError(f"Duplicate participant in review cycle: {participant.id}")
            seen.add(participant.id)
            if participant.status != ParticipantStatus.PENDING:
                raise ValueError(
                    f"Participant must be pending to join a review cycle: {participant.id}"
                )
            if participant.cycle_id is not None and participant.cycle_id != self._id:
                raise ValueError(
                    f"Participant already belongs to review cycle: {participant.cycle_id}"
                )

    def _ensure_cycle_is_active(self) -> None:
        if self._status == ReviewCycleStatus.COMPLETED:
            raise InvalidAssessmentError(
                f"Cannot modify completed review cycle: {self._id}",
                {"cycle_id": str(self._id), "status": self._status.value},
            )

    def __str__(self) -> str:
        return (
            f"ReviewCycle(id={self._id}, name='{self._cycle_name}', "
            f"status={self._status.value}, participants={len(self._participants)})"
        )
