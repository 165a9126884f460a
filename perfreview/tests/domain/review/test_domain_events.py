"""
Unit Tests for Review Cycle Domain Events
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from perfreview.domain.review.events.domain_events import (
    ReviewCycleCompleted,
    SelfAssessmentSubmitted,
)
from perfreview.tests.fixtures import create_scores


def _completed_event(**overrides) -> ReviewCycleCompleted:
    data = {
        "aggregate_id": uuid4(),
        "cycle_name": "Q4 2024",
        "completed_date": datetime.now(timezone.utc),
        "participant_count": 3,
        "average_score": Decimal("4.17"),
    }
    data.update(overrides)
    return ReviewCycleCompleted(**data)


class TestDomainEventEnvelope:
    def test_envelope_fields_are_generated(self):
        event = _completed_event()

        assert isinstance(event.event_id, UUID)
        assert event.occurred_at.tzinfo is not None
        assert event.event_version == 1
        assert event.event_type == "ReviewCycleCompleted"
        assert event.aggregate_type == "ReviewCycle"

    def test_each_event_gets_its_own_id(self):
        assert _completed_event().event_id != _completed_event().event_id

    def test_cycle_id_mirrors_aggregate_id(self):
        cycle_id = uuid4()

        event = _completed_event(aggregate_id=cycle_id)

        assert event.cycle_id == cycle_id

    def test_events_are_immutable(self):
        event = _completed_event()

        with pytest.raises(Exception):
            event.participant_count = 4


class TestEventSerialisation:
    def test_dump_includes_cycle_id_and_payload(self):
        event = _completed_event()

        data = event.model_dump(mode="json")

        assert data["cycle_id"] == str(event.aggregate_id)
        assert data["average_score"] == "4.17"
        assert data["participant_count"] == 3

    def test_self_assessment_event_carries_scores(self):
        scores = tuple(create_scores(2))

        event = SelfAssessmentSubmitted(
            aggregate_id=uuid4(),
            participant_id=uuid4(),
            employee_id=uuid4(),
            supervisor_id=uuid4(),
            submitted_date=datetime.now(timezone.utc),
            kpi_scores=scores,
        )

        assert event.kpi_scores == scores
        assert event.comments is None
        assert event.extra_mile_efforts is None
