"""
Review cycle application service for coordinating review use cases.

This service orchestrates review cycle operations across the domain layer:
it loads the aggregate, invokes it, saves it and publishes the events the
aggregate raised.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Iterable

from ...domain.review.entities.participant import ReviewParticipant
from ...domain.review.entities.review_cycle import ReviewCycle
from ...domain.review.repositories.review_cycle_repository import (
    ReviewCycleRepository,
)
from ...domain.review.services.score_calculation_service import (
    PerformanceScoreCalculationService,
)
from ...domain.review.value_objects.assessment_score import AssessmentScore
from ...domain.review.value_objects.identifiers import (
    ParticipantId,
    ReviewCycleId,
    UserId,
)
from ...domain.shared.exceptions import ReviewCycleNotFoundError
from ...infrastructure.events.domain_event_publisher import DomainEventPublisher
from .base_service import ApplicationServiceBase


class ReviewCycleApplicationService(ApplicationServiceBase):
    """
    Application service for review cycle operations.

    Coordinates cycle creation, self and manager assessment submission and
    cycle completion, publishing the resulting domain events.
    """

    def __init__(
        self,
        repository: ReviewCycleRepository,
        event_publisher: DomainEventPublisher,
        score_service: PerformanceScoreCalculationService | None = None,
    ) -> None:
        """
        Initialize the review cycle application service.

        Args:
            repository: Review cycle persistence
            event_publisher: Publisher for drained domain events
            score_service: Optional score calculation domain service
        """
        super().__init__(event_publisher)
        self._repository = repository
        self._score_service = score_service or PerformanceScoreCalculationService()

    def create_review_cycle(
        self,
        cycle_name: str,
        start_date: date,
        end_date: date,
        participants: Iterable[ReviewParticipant] | None = None,
    ) -> ReviewCycleId:
        """
        Create a new review cycle.

        Returns:
            Identifier of the created cycle

        Raises:
            ValueError: If the name is blank or the dates are invalid
        """
        cycle = ReviewCycle(cycle_name, start_date, end_date, participants)
        self._repository.save(cycle)
        self._publish_events(cycle)

        self._logger.info(
            "review_cycle_created",
            cycle_id=str(cycle.id),
            cycle_name=cycle.cycle_name,
            participant_count=cycle.participant_count,
        )
        return cycle.id

    def submit_self_assessment(
        self,
        cycle_id: ReviewCycleId | str,
        participant_id: ParticipantId | str,
        kpi_scores: Iterable[AssessmentScore],
        comments: str | None = None,
        extra_mile_efforts: str | None = None,
    ) -> None:
        """
        Submit a participant's self-assessment.

        Raises:
            ReviewCycleNotFoundError: If the cycle or participant does not exist
            InvalidAssessmentError: If review rules are violated
        """
        cycle = self._load_cycle(cycle_id)
        participant_id = self.validate_identifier(
            participant_id, ParticipantId, "participant_id"
        )

        cycle.submit_self_assessment(
            participant_id, kpi_scores, comments, extra_mile_efforts
        )

        self._repository.save(cycle)
        self._publish_events(cycle)
        self._logger.info(
            "self_assessment_submitted",
            cycle_id=str(cycle.id),
            participant_id=str(participant_id),
        )

    def submit_manager_assessment(
        self,
        cycle_id: ReviewCycleId | str,
        participant_id: ParticipantId | str,
        kpi_scores: Iterable[AssessmentScore],
        overall_comments: str | None = None,
    ) -> Decimal:
        """
        Submit the manager assessment for a participant.

        Returns:
            The participant's final score

        Raises:
            ReviewCycleNotFoundError: If the cycle or participant does not exist
            InvalidAssessmentError: If review rules are violated
        """
        cycle = self._load_cycle(cycle_id)
        participant_id = self.validate_identifier(
            participant_id, ParticipantId, "participant_id"
        )

        cycle.submit_manager_assessment(
            participant_id, kpi_scores, overall_comments, self._score_service
        )
        final_score = cycle.get_participant(participant_id).final_score

        self._repository.save(cycle)
        self._publish_events(cycle)
        self._logger.info(
            "manager_assessment_submitted",
            cycle_id=str(cycle.id),
            participant_id=str(participant_id),
            final_score=str(final_score),
        )
        return final_score  # type: ignore[return-value]

    def complete_review_cycle(self, cycle_id: ReviewCycleId | str) -> Decimal:
        """
        Complete a review cycle.

        Returns:
            Average final score across participants

        Raises:
            ReviewCycleNotFoundError: If the cycle does not exist
            InvalidAssessmentError: If any participant lacks a manager assessment
        """
        cycle = self._load_cycle(cycle_id)

        average_score = cycle.complete()

        self._repository.save(cycle)
        self._publish_events(cycle)
        self._logger.info(
            "review_cycle_completed",
            cycle_id=str(cycle.id),
            participant_count=cycle.participant_count,
            average_score=str(average_score),
        )
        return average_score

    def get_review_cycle(self, cycle_id: ReviewCycleId | str) -> ReviewCycle:
        """
        Get review cycle by ID.

        Raises:
            ReviewCycleNotFoundError: If the cycle does not exist
        """
        return self._load_cycle(cycle_id)

    def get_all_review_cycles(self) -> list[ReviewCycle]:
        return self._repository.find_all()

    def get_active_review_cycles(self) -> list[ReviewCycle]:
        """Cycles that have not been completed yet."""
        return self._repository.find_active_cycles()

    def get_cycles_for_employee(self, employee_id: UserId | str) -> list[ReviewCycle]:
        employee_id = self.validate_identifier(employee_id, UserId, "employee_id")
        return self._repository.find_cycles_for_employee(employee_id)

    def get_cycles_for_supervisor(self, supervisor_id: UserId | str) -> list[ReviewCycle]:
        supervisor_id = self.validate_identifier(supervisor_id, UserId, "supervisor_id")
        return self._repository.find_cycles_for_supervisor(supervisor_id)

    def _load_cycle(self, cycle_id: Any) -> ReviewCycle:
        cycle_id = self.validate_identifier(cycle_id, ReviewCycleId, "cycle_id")
        cycle = self._repository.find_by_id(cycle_id)
        if cycle is None:
            self._logger.warning("review_cycle_not_found", cycle_id=str(cycle_id))
            raise ReviewCycleNotFoundError.for_cycle(cycle_id)
        return cycle
