"""
Tests for FeedbackApplicationService
"""

import pytest

from perfreview.application.services.feedback_service import (
    FeedbackApplicationService,
)
from perfreview.domain.feedback.events import FeedbackProvided, FeedbackResponseProvided
from perfreview.domain.feedback.value_objects import FeedbackStatus, FeedbackType
from perfreview.domain.review.value_objects.identifiers import FeedbackId, KpiId, UserId
from perfreview.domain.shared.exceptions import (
    ErrorType,
    FeedbackNotFoundError,
    InvalidFeedbackOperationError,
    ValidationError,
)


@pytest.fixture
def service(feedback_repository, event_publisher):
    return FeedbackApplicationService(feedback_repository, event_publisher)


@pytest.fixture
def provided_feedback(service, employee_id, supervisor_id):
    return service.provide_feedback(
        supervisor_id,
        employee_id,
        KpiId.generate(),
        "Code Quality",
        FeedbackType.IMPROVEMENT,
        "Please add tests for the billing module.",
    )


class TestProvideFeedback:
    def test_provide_feedback_saves_and_publishes(
        self, service, event_bus, feedback_repository, provided_feedback
    ):
        stored = feedback_repository.find_by_id(provided_feedback)

        assert stored is not None
        assert stored.status == FeedbackStatus.CREATED
        history = event_bus.get_event_history(FeedbackProvided)
        assert len(history) == 1
        assert history[0].feedback_id == provided_feedback.value

    def test_feedback_type_may_be_given_by_name(self, service):
        feedback_id = service.provide_feedback(
            str(UserId.generate()),
            str(UserId.generate()),
            str(KpiId.generate()),
            None,
            "POSITIVE",
            "Great demo.",
        )

        assert service.get_feedback(feedback_id).feedback_type == FeedbackType.POSITIVE

    def test_unknown_feedback_type_is_rejected(self, service):
        with pytest.raises(ValidationError, match="Unknown feedback type") as exc_info:
            service.provide_feedback(
                UserId.generate(), UserId.generate(), KpiId.generate(), None, "neutral", "Hmm"
            )

        assert exc_info.value.error_type == ErrorType.VALIDATION
        assert exc_info.value.details["field"] == "feedback_type"

    def test_invalid_content_is_not_saved(self, service):
        with pytest.raises(InvalidFeedbackOperationError):
            service.provide_feedback(
                UserId.generate(), UserId.generate(), KpiId.generate(), None,
                FeedbackType.POSITIVE, "   ",
            )

        assert service.get_all_feedback() == []


class TestFeedbackLifecycle:
    def test_acknowledge_respond_resolve(
        self, service, event_bus, employee_id, provided_feedback
    ):
        service.acknowledge_feedback(provided_feedback)
        assert service.get_feedback(provided_feedback).status == FeedbackStatus.ACKNOWLEDGED

        service.respond_to_feedback(provided_feedback, employee_id, "Will do this sprint.")
        feedback = service.get_feedback(provided_feedback)
        assert feedback.status == FeedbackStatus.RESPONDED
        assert len(feedback.responses) == 1
        assert len(event_bus.get_event_history(FeedbackResponseProvided)) == 1

        service.resolve_feedback(provided_feedback)
        assert service.get_feedback(provided_feedback).is_resolved

    def test_non_receiver_response_is_rejected(self, service, supervisor_id, provided_feedback):
        with pytest.raises(InvalidFeedbackOperationError, match="Only feedback receiver can respond"):
            service.respond_to_feedback(provided_feedback, supervisor_id, "Reply as giver")

    def test_unknown_feedback_raises_not_found(self, service):
        missing = FeedbackId.generate()

        with pytest.raises(FeedbackNotFoundError, match=f"Feedback not found: {missing}"):
            service.acknowledge_feedback(missing)


class TestFeedbackQueries:
    def test_feedback_for_employee_and_unresolved(
        self, service, employee_id, supervisor_id, provided_feedback
    ):
        second = service.provide_feedback(
            supervisor_id, employee_id, KpiId.generate(), None, FeedbackType.POSITIVE, "Nice"
        )
        service.provide_feedback(
            employee_id, supervisor_id, KpiId.generate(), None, FeedbackType.POSITIVE, "Thanks"
        )
        service.resolve_feedback(second)

        received = service.get_feedback_for_employee(employee_id)
        unresolved = service.get_unresolved_feedback(employee_id)

        assert {f.id for f in received} == {provided_feedback, second}
        assert [f.id for f in unresolved] == [provided_feedback]
        assert len(service.get_all_feedback()) == 3
