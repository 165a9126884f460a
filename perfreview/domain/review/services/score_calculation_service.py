"""
Performance Score Calculation Domain Service

Reduces a participant's manager-submitted KPI scores to a single final score
for the review cycle.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ....core.config import settings
from ....core.observability import get_logger
from ...shared.base import DomainService
from ...shared.exceptions import InvalidAssessmentError
from ..value_objects.assessment_score import MAX_RATING, MIN_RATING, AssessmentScore

logger = get_logger(__name__)


class PerformanceScoreCalculationService(DomainService):
    """
    Weighted blend of KPI performance and competency ratings.

    final = kpi_average * kpi_weight + competency_average * competency_weight

    Averages are rounded HALF_UP to the configured precision before blending
    and the blended result is quantized to exactly that many places. When no
    competency scores are supplied the competency average equals the KPI
    average, so a uniform rating ``r`` yields ``r`` itself.
    """

    def __init__(
        self,
        kpi_weight: Decimal | None = None,
        competency_weight: Decimal | None = None,
        decimal_places: int | None = None,
    ) -> None:
        self._kpi_weight = (
            kpi_weight if kpi_weight is not None else settings.SCORE_KPI_WEIGHT
        )
        self._competency_weight = (
            competency_weight
            if competency_weight is not None
            else settings.SCORE_COMPETENCY_WEIGHT
        )
        places = (
            decimal_places if decimal_places is not None else settings.SCORE_DECIMAL_PLACES
        )
        if self._kpi_weight + self._competency_weight != Decimal("1"):
            raise ValueError("Score weights must sum to 1")
        if places < 0:
            raise ValueError("Decimal places cannot be negative")
        self._quantum = Decimal(1).scaleb(-places)

    @property
    def kpi_weight(self) -> Decimal:
        return self._kpi_weight

    @property
    def competency_weight(self) -> Decimal:
        return self._competency_weight

    def calculate_final_score(
        self,
        kpi_scores: Iterable[AssessmentScore] | None,
        competency_scores: Iterable[AssessmentScore] | None = None,
    ) -> Decimal:
        """
        Calculate the final score for a participant.

        Args:
            kpi_scores: Manager-submitted KPI scores (at least one)
            competency_scores: Optional competency ratings; defaults to the KPI scores

        Returns:
            Final score with exactly the configured number of decimal places

        Raises:
            InvalidAssessmentError: If no KPI scores are given or the result
                falls outside the rating range
        """
        scores = list(kpi_scores) if kpi_scores is not None else []
        if not scores:
            raise InvalidAssessmentError("KPI scores are required for score calculation")

        kpi_average = self.calculate_kpi_average(scores)
        if competency_scores is not None and (competencies := list(competency_scores)):
            competency_average = self.calculate_kpi_average(competencies)
        else:
            competency_average = kpi_average

        final_score = (
            kpi_average * self._kpi_weight + competency_average * self._competency_weight
        ).quantize(self._quantum, rounding=ROUND_HALF_UP)

        if final_score < MIN_RATING or final_score > MAX_RATING:
            raise InvalidAssessmentError(
                f"Final score must be between {MIN_RATING} and {MAX_RATING}, got: {final_score}"
            )

        logger.debug(
            "final_score_calculated",
            kpi_count=len(scores),
            kpi_average=str(kpi_average),
            competency_average=str(competency_average),
            final_score=str(final_score),
        )
        return final_score

    def calculate_kpi_average(self, scores: Iterable[AssessmentScore]) -> Decimal:
        """Mean rating across scores, rounded HALF_UP to the configured precision."""
        ratings = [score.rating_value for score in scores]
        if not ratings:
            raise InvalidAssessmentError("KPI scores are required for score calculation")
        total = sum(ratings, Decimal("0"))
        return (total / Decimal(len(ratings))).quantize(
            self._quantum, rounding=ROUND_HALF_UP
        )

    def calculate_average_achievement(self, scores: Iterable[AssessmentScore]) -> Decimal:
        """Mean achievement percentage across scores, rounded HALF_UP."""
        achievements = [score.achievement_percentage for score in scores]
        if not achievements:
            return Decimal("0").quantize(self._quantum)
        total = sum(achievements, Decimal("0"))
        return (total / Decimal(len(achievements))).quantize(
            self._quantum, rounding=ROUND_HALF_UP
        )
