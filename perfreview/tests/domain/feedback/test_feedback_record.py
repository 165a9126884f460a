"""
Unit Tests for the FeedbackRecord Aggregate

Covers creation, the acknowledge/respond/resolve lifecycle, receiver-only
responses and content validation.
"""

import pytest

from perfreview.core.config import settings
from perfreview.domain.feedback.entities import FeedbackRecord, FeedbackResponse
from perfreview.domain.feedback.events import FeedbackProvided, FeedbackResponseProvided
from perfreview.domain.feedback.value_objects import (
    FeedbackContext,
    FeedbackStatus,
    FeedbackType,
)
from perfreview.domain.review.value_objects.identifiers import KpiId, UserId
from perfreview.domain.shared.exceptions import InvalidFeedbackOperationError
from perfreview.tests.fixtures import create_feedback


class TestFeedbackCreation:
    """Test feedback creation and validation."""

    def test_create_feedback(self, employee_id, supervisor_id, kpi_id):
        feedback = FeedbackRecord.create(
            giver_id=supervisor_id,
            receiver_id=employee_id,
            kpi_id=kpi_id,
            kpi_name="Customer Satisfaction",
            feedback_type=FeedbackType.IMPROVEMENT,
            content_text="Follow up on open tickets within a day.",
        )

        assert feedback.giver_id == supervisor_id
        assert feedback.receiver_id == employee_id
        assert feedback.status == FeedbackStatus.CREATED
        assert feedback.feedback_type == FeedbackType.IMPROVEMENT
        assert feedback.context.kpi_id == kpi_id
        assert feedback.context.kpi_name == "Customer Satisfaction"
        assert feedback.responses == ()
        assert not feedback.can_be_deleted()

    def test_create_raises_feedback_provided(self, employee_id, supervisor_id, kpi_id):
        feedback = FeedbackRecord.create(
            supervisor_id, employee_id, kpi_id, "Sales", FeedbackType.POSITIVE, "Nice work"
        )

        events = feedback.get_domain_events()

        assert len(events) == 1
        event = events[0]
        assert isinstance(event, FeedbackProvided)
        assert event.feedback_id == feedback.id.value
        assert event.aggregate_type == "FeedbackRecord"
        assert event.giver_id == supervisor_id.value
        assert event.receiver_id == employee_id.value
        assert event.kpi_id == kpi_id.value
        assert event.feedback_type == FeedbackType.POSITIVE
        assert event.created_date == feedback.created_date
        assert feedback.get_domain_events() == []

    def test_feedback_requires_kpi(self):
        with pytest.raises(InvalidFeedbackOperationError, match="Feedback must be linked to a KPI"):
            FeedbackRecord.create(
                UserId.generate(), UserId.generate(), None, "Sales", FeedbackType.POSITIVE, "Nice"
            )

    @pytest.mark.parametrize("content", ["", "   ", None])
    def test_blank_content_fails(self, content):
        with pytest.raises(InvalidFeedbackOperationError, match="Feedback content cannot be empty"):
            FeedbackContext(kpi_id=KpiId.generate(), kpi_name="Sales", content_text=content)

    def test_content_length_limit(self):
        limit = settings.FEEDBACK_MAX_CONTENT_LENGTH

        FeedbackContext(kpi_id=KpiId.generate(), content_text="x" * limit)
        with pytest.raises(
            InvalidFeedbackOperationError,
            match=f"Feedback content cannot exceed {limit} characters",
        ):
            FeedbackContext(kpi_id=KpiId.generate(), content_text="x" * (limit + 1))


class TestFeedbackLifecycle:
    """Test acknowledge, respond and resolve."""

    def test_acknowledge_from_created(self):
        feedback = create_feedback()

        feedback.acknowledge()

        assert feedback.status == FeedbackStatus.ACKNOWLEDGED

    def test_acknowledge_twice_fails(self):
        feedback = create_feedback()
        feedback.acknowledge()

        with pytest.raises(
            InvalidFeedbackOperationError,
            match="Feedback can only be acknowledged when in Created status",
        ):
            feedback.acknowledge()

    def test_receiver_can_respond(self, employee_id):
        feedback = create_feedback(receiver_id=employee_id)
        feedback.get_domain_events()

        response = feedback.add_response(employee_id, "Thanks, will keep it up.")

        assert feedback.status == FeedbackStatus.RESPONDED
        assert feedback.responses == (response,)
        assert response.responder_id == employee_id
        events = feedback.get_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], FeedbackResponseProvided)
        assert events[0].response_id == response.id.value
        assert events[0].responder_id == employee_id.value

    def test_only_receiver_can_respond(self, employee_id):
        feedback = create_feedback(receiver_id=employee_id)

        with pytest.raises(InvalidFeedbackOperationError, match="Only feedback receiver can respond"):
            feedback.add_response(UserId.generate(), "Not my feedback")

        assert feedback.responses == ()
        assert feedback.status == FeedbackStatus.CREATED

    def test_multiple_responses_are_kept_in_order(self, employee_id):
        feedback = create_feedback(receiver_id=employee_id)

        feedback.add_response(employee_id, "First")
        feedback.add_response(employee_id, "Second")

        assert [r.response_text for r in feedback.responses] == ["First", "Second"]

    def test_resolve(self):
        feedback = create_feedback()

        feedback.resolve()

        assert feedback.status == FeedbackStatus.RESOLVED
        assert feedback.is_resolved

    def test_resolve_twice_fails(self):
        feedback = create_feedback()
        feedback.resolve()

        with pytest.raises(InvalidFeedbackOperationError, match="Feedback is already resolved"):
            feedback.resolve()

    def test_cannot_respond_after_resolution(self, employee_id):
        feedback = create_feedback(receiver_id=employee_id)
        feedback.resolve()

        with pytest.raises(InvalidFeedbackOperationError, match="resolved"):
            feedback.add_response(employee_id, "Late reply")


class TestFeedbackResponse:
    @pytest.mark.parametrize("text", ["", "  ", None])
    def test_blank_text_fails(self, employee_id, text):
        with pytest.raises(InvalidFeedbackOperationError, match="Response text cannot be empty"):
            FeedbackResponse(responder_id=employee_id, response_text=text)

    def test_text_length_limit(self, employee_id):
        limit = settings.FEEDBACK_MAX_RESPONSE_LENGTH

        FeedbackResponse(responder_id=employee_id, response_text="y" * limit)
        with pytest.raises(
            InvalidFeedbackOperationError,
            match=f"Response text cannot exceed {limit} characters",
        ):
            FeedbackResponse(responder_id=employee_id, response_text="y" * (limit + 1))
