"""
Feedback application service for coordinating feedback use cases.
"""

from typing import Any

from ...domain.feedback.entities import FeedbackRecord
from ...domain.feedback.repositories import FeedbackRecordRepository
from ...domain.feedback.value_objects import FeedbackType
from ...domain.review.value_objects.identifiers import FeedbackId, KpiId, UserId
from ...domain.shared.exceptions import FeedbackNotFoundError, ValidationError
from ...infrastructure.events.domain_event_publisher import DomainEventPublisher
from .base_service import ApplicationServiceBase


class FeedbackApplicationService(ApplicationServiceBase):
    """
    Application service for feedback operations.

    Coordinates giving, acknowledging, answering and resolving KPI feedback.
    """

    def __init__(
        self,
        repository: FeedbackRecordRepository,
        event_publisher: DomainEventPublisher,
    ) -> None:
        super().__init__(event_publisher)
        self._repository = repository

    def provide_feedback(
        self,
        giver_id: UserId | str,
        receiver_id: UserId | str,
        kpi_id: KpiId | str,
        kpi_name: str | None,
        feedback_type: FeedbackType | str,
        content_text: str,
    ) -> FeedbackId:
        """
        Give feedback to a colleague about one of their KPIs.

        Returns:
            Identifier of the new feedback record

        Raises:
            ValidationError: If an identifier or the feedback type is invalid
            InvalidFeedbackOperationError: If the content breaks feedback rules
        """
        giver_id = self.validate_identifier(giver_id, UserId, "giver_id")
        receiver_id = self.validate_identifier(receiver_id, UserId, "receiver_id")
        kpi_id = self.validate_identifier(kpi_id, KpiId, "kpi_id")
        feedback_type = self._validate_feedback_type(feedback_type)

        feedback = FeedbackRecord.create(
            giver_id, receiver_id, kpi_id, kpi_name, feedback_type, content_text
        )

        self._repository.save(feedback)
        self._publish_events(feedback)
        self._logger.info(
            "feedback_provided",
            feedback_id=str(feedback.id),
            feedback_type=feedback_type.value,
            kpi_id=str(kpi_id),
        )
        return feedback.id

    def acknowledge_feedback(self, feedback_id: FeedbackId | str) -> None:
        feedback = self._load_feedback(feedback_id)
        feedback.acknowledge()
        self._repository.save(feedback)
        self._logger.info("feedback_acknowledged", feedback_id=str(feedback.id))

    def respond_to_feedback(
        self,
        feedback_id: FeedbackId | str,
        responder_id: UserId | str,
        response_text: str,
    ) -> None:
        """
        Record the receiver's response to feedback.

        Raises:
            FeedbackNotFoundError: If the feedback does not exist
            InvalidFeedbackOperationError: If the responder is not the receiver,
                the feedback is resolved, or the text is invalid
        """
        feedback = self._load_feedback(feedback_id)
        responder_id = self.validate_identifier(responder_id, UserId, "responder_id")

        feedback.add_response(responder_id, response_text)

        self._repository.save(feedback)
        self._publish_events(feedback)
        self._logger.info(
            "feedback_response_added",
            feedback_id=str(feedback.id),
            response_count=len(feedback.responses),
        )

    def resolve_feedback(self, feedback_id: FeedbackId | str) -> None:
        feedback = self._load_feedback(feedback_id)
        feedback.resolve()
        self._repository.save(feedback)
        self._logger.info("feedback_resolved", feedback_id=str(feedback.id))

    def get_feedback(self, feedback_id: FeedbackId | str) -> FeedbackRecord:
        """
        Get feedback by ID.

        Raises:
            FeedbackNotFoundError: If the feedback does not exist
        """
        return self._load_feedback(feedback_id)

    def get_feedback_for_employee(self, employee_id: UserId | str) -> list[FeedbackRecord]:
        """Feedback received by the employee."""
        employee_id = self.validate_identifier(employee_id, UserId, "employee_id")
        return self._repository.find_by_receiver(employee_id)

    def get_unresolved_feedback(self, employee_id: UserId | str) -> list[FeedbackRecord]:
        """Feedback received by the employee that is still open."""
        employee_id = self.validate_identifier(employee_id, UserId, "employee_id")
        return self._repository.find_unresolved_for_receiver(employee_id)

    def get_all_feedback(self) -> list[FeedbackRecord]:
        return self._repository.find_all()

    def _validate_feedback_type(self, feedback_type: Any) -> FeedbackType:
        if isinstance(feedback_type, FeedbackType):
            return feedback_type
        try:
            return FeedbackType(str(feedback_type).lower())
        except ValueError as e:
            raise ValidationError(
                f"Unknown feedback type: {feedback_type}", field="feedback_type"
            ) from e

    def _load_feedback(self, feedback_id: Any) -> FeedbackRecord:
        feedback_id = self.validate_identifier(feedback_id, FeedbackId, "feedback_id")
        feedback = self._repository.find_by_id(feedback_id)
        if feedback is None:
            self._logger.warning("feedback_not_found", feedback_id=str(feedback_id))
            raise FeedbackNotFoundError(feedback_id)
        return feedback
