"""
Assessment Entities

Self and manager assessments captured during a review cycle. Both are
immutable once created; a submitted assessment is never edited.
"""

from datetime import datetime
from typing import Any, Iterable

from pydantic import Field, field_validator

from ...shared.base import Entity, utc_now
from ...shared.exceptions import InvalidAssessmentError
from ..value_objects.assessment_score import AssessmentScore
from ..value_objects.identifiers import AssessmentId


def _require_scores(value: Any) -> tuple[AssessmentScore, ...]:
    if value is None:
        raise InvalidAssessmentError("At least one KPI score is required")
    scores = tuple(value)
    if not scores:
        raise InvalidAssessmentError("At least one KPI score is required")
    return scores


class SelfAssessment(Entity):
    """An employee's own rating of their KPIs for the cycle."""

    id: AssessmentId = Field(default_factory=AssessmentId.generate)
    submitted_date: datetime = Field(default_factory=utc_now)
    comments: str | None = None
    extra_mile_efforts: str | None = None
    kpi_scores: tuple[AssessmentScore, ...]

    @field_validator("kpi_scores", mode="before")
    @classmethod
    def _validate_kpi_scores(cls, v: Any) -> tuple[AssessmentScore, ...]:
        return _require_scores(v)

    @classmethod
    def create(
        cls,
        kpi_scores: Iterable[AssessmentScore] | None,
        comments: str | None = None,
        extra_mile_efforts: str | None = None,
    ) -> "SelfAssessment":
        """Create a self-assessment submitted now."""
        return cls(
            kpi_scores=_require_scores(kpi_scores),
            comments=comments,
            extra_mile_efforts=extra_mile_efforts,
        )

    @property
    def score_count(self) -> int:
        return len(self.kpi_scores)


class ManagerAssessment(Entity):
    """A supervisor's rating of an employee's KPIs for the cycle."""

    id: AssessmentId = Field(default_factory=AssessmentId.generate)
    submitted_date: datetime = Field(default_factory=utc_now)
    overall_comments: str | None = None
    kpi_scores: tuple[AssessmentScore, ...]

    @field_validator("kpi_scores", mode="before")
    @classmethod
    def _validate_kpi_scores(cls, v: Any) -> tuple[AssessmentScore, ...]:
        return _require_scores(v)

    @classmethod
    def create(
        cls,
        kpi_scores: Iterable[AssessmentScore] | None,
        overall_comments: str | None = None,
    ) -> "ManagerAssessment":
        """Create a manager assessment submitted now."""
        return cls(kpi_scores=_require_scores(kpi_scores), overall_comments=overall_comments)

    @property
    def score_count(self) -> int:
        return len(self.kpi_scores)
