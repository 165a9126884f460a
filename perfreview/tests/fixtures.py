"""
Test fixtures and factories for performance review domain objects.

Provides reusable test data for scores, participants, review cycles and
feedback. Includes both simple fixtures and configurable factory functions
for multi-step review scenarios.
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from perfreview.domain.feedback.entities import FeedbackRecord
from perfreview.domain.feedback.value_objects import FeedbackType
from perfreview.domain.review.entities.participant import ReviewParticipant
from perfreview.domain.review.entities.review_cycle import ReviewCycle
from perfreview.domain.review.services.score_calculation_service import (
    PerformanceScoreCalculationService,
)
from perfreview.domain.review.value_objects.assessment_score import AssessmentScore
from perfreview.domain.review.value_objects.identifiers import KpiId, UserId
from perfreview.infrastructure.events.domain_event_publisher import (
    DomainEventPublisher,
)
from perfreview.infrastructure.events.event_bus import InMemoryEventBus
from perfreview.tests.utils.in_memory_repositories import (
    InMemoryFeedbackRecordRepository,
    InMemoryReviewCycleRepository,
)


# Factory functions
def create_score(
    rating: Decimal | str = "4.0",
    achievement: Decimal | str = "85",
    kpi_id: KpiId | None = None,
    comment: str | None = None,
) -> AssessmentScore:
    """Create an assessment score with sensible defaults."""
    return AssessmentScore(
        kpi_id=kpi_id or KpiId.generate(),
        rating_value=Decimal(rating),
        achievement_percentage=Decimal(achievement),
        comment=comment,
    )


def create_scores(
    count: int = 3, rating: Decimal | str = "4.0", achievement: Decimal | str = "85"
) -> list[AssessmentScore]:
    """Create ``count`` scores that all share one rating and achievement."""
    return [create_score(rating, achievement) for _ in range(count)]


def create_participant(
    employee_id: UserId | None = None, supervisor_id: UserId | None = None
) -> ReviewParticipant:
    return ReviewParticipant(
        employee_id=employee_id or UserId.generate(),
        supervisor_id=supervisor_id or UserId.generate(),
    )


def create_review_cycle(
    participant_count: int = 1,
    cycle_name: str = "Q4 2024 Performance Review",
    start_date: date | None = None,
    end_date: date | None = None,
    participants: list[ReviewParticipant] | None = None,
) -> ReviewCycle:
    """Create an ACTIVE review cycle with fresh participants."""
    start = start_date or date(2024, 10, 1)
    end = end_date or start + timedelta(days=90)
    if participants is None:
        participants = [create_participant() for _ in range(participant_count)]
    return ReviewCycle(cycle_name, start, end, participants)


def complete_assessments(
    cycle: ReviewCycle,
    participant: ReviewParticipant,
    rating: Decimal | str = "4.0",
    achievement: Decimal | str = "85",
    kpi_count: int = 3,
) -> Decimal:
    """Submit self and manager assessments for a participant; return the final score."""
    cycle.submit_self_assessment(
        participant.id,
        create_scores(kpi_count, rating, achievement),
        comments="Delivered the quarter's goals",
    )
    cycle.submit_manager_assessment(
        participant.id,
        create_scores(kpi_count, rating, achievement),
        overall_comments="Solid quarter",
    )
    return cycle.get_participant(participant.id).final_score


def create_feedback(
    giver_id: UserId | None = None,
    receiver_id: UserId | None = None,
    feedback_type: FeedbackType = FeedbackType.POSITIVE,
    content_text: str = "Great work on the sales pipeline review.",
) -> FeedbackRecord:
    return FeedbackRecord.create(
        giver_id=giver_id or UserId.generate(),
        receiver_id=receiver_id or UserId.generate(),
        kpi_id=KpiId.generate(),
        kpi_name="Sales Pipeline",
        feedback_type=feedback_type,
        content_text=content_text,
    )


# Identifier fixtures
@pytest.fixture
def employee_id():
    """Generate an employee ID for testing."""
    return UserId.generate()


@pytest.fixture
def supervisor_id():
    """Generate a supervisor ID for testing."""
    return UserId.generate()


@pytest.fixture
def kpi_id():
    return KpiId.generate()


# Domain object fixtures
@pytest.fixture
def participant(employee_id, supervisor_id):
    return ReviewParticipant(employee_id=employee_id, supervisor_id=supervisor_id)


@pytest.fixture
def review_cycle(participant):
    """An ACTIVE cycle with a single participant."""
    return create_review_cycle(participants=[participant])


@pytest.fixture
def uniform_scores():
    """Three KPI scores rated 4.0 with 85% achievement."""
    return create_scores(3, "4.0", "85")


@pytest.fixture
def score_service():
    return PerformanceScoreCalculationService()


# Infrastructure fixtures
@pytest.fixture
def event_bus():
    return InMemoryEventBus()


@pytest.fixture
def event_publisher(event_bus):
    return DomainEventPublisher(event_bus)


@pytest.fixture
def review_cycle_repository():
    return InMemoryReviewCycleRepository()


@pytest.fixture
def feedback_repository():
    return InMemoryFeedbackRecordRepository()
