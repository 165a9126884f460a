"""Assessment score value object for KPI ratings."""

from decimal import Decimal, InvalidOperation
from typing import Any
from uuid import UUID

from pydantic import model_validator

from ...shared.base import ValueObject
from ...shared.exceptions import InvalidAssessmentError
from .identifiers import KpiId

MIN_RATING = Decimal("1.0")
MAX_RATING = Decimal("5.0")
MIN_ACHIEVEMENT = Decimal("0")
MAX_ACHIEVEMENT = Decimal("100")


def _to_decimal(value: Any, field_label: str) -> Decimal:
    if isinstance(value, bool):
        raise InvalidAssessmentError(f"{field_label} must be numeric, got: {value}")
    if isinstance(value, float):
        value = str(value)
    try:
        result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidAssessmentError(
            f"{field_label} must be numeric, got: {value}"
        ) from e
    if not result.is_finite():
        raise InvalidAssessmentError(f"{field_label} must be numeric, got: {value}")
    return result


class AssessmentScore(ValueObject):
    """
    Rating and achievement recorded against a single KPI.

    Ratings lie in the closed range [1.0, 5.0] and achievement percentages in
    [0, 100]. Numeric inputs are normalised to ``Decimal``; floats pass
    through ``str`` so ``4.5`` becomes ``Decimal("4.5")``.
    """

    kpi_id: KpiId
    rating_value: Decimal
    achievement_percentage: Decimal
    comment: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _validate_score(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)

        kpi_id = data.get("kpi_id")
        if kpi_id is None:
            raise InvalidAssessmentError("KPI ID cannot be null")
        if isinstance(kpi_id, (str, UUID)):
            try:
                kpi_id = KpiId.of(kpi_id)
            except ValueError as e:
                raise InvalidAssessmentError(
                    f"KPI ID must be a valid UUID, got: {data['kpi_id']}"
                ) from e
            data["kpi_id"] = kpi_id
        if not isinstance(kpi_id, KpiId):
            raise InvalidAssessmentError(
                f"KPI ID must be a KpiId, got: {type(kpi_id).__name__}"
            )

        rating = data.get("rating_value")
        if rating is None:
            raise InvalidAssessmentError("Rating value cannot be null")
        rating = _to_decimal(rating, "Rating")
        if rating < MIN_RATING or rating > MAX_RATING:
            raise InvalidAssessmentError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got: {rating}"
            )
        data["rating_value"] = rating

        achievement = data.get("achievement_percentage")
        if achievement is None:
            raise InvalidAssessmentError("Achievement percentage cannot be null")
        achievement = _to_decimal(achievement, "Achievement percentage")
        if achievement < MIN_ACHIEVEMENT or achievement > MAX_ACHIEVEMENT:
            raise InvalidAssessmentError(
                f"Achievement percentage must be between {MIN_ACHIEVEMENT} and "
                f"{MAX_ACHIEVEMENT}, got: {achievement}"
            )
        data["achievement_percentage"] = achievement
        return data

    @classmethod
    def create(
        cls,
        kpi_id: KpiId,
        rating_value: Decimal | int | float | str,
        achievement_percentage: Decimal | int | float | str,
        comment: str | None = None,
    ) -> "AssessmentScore":
        """Factory method mirroring the keyword constructor."""
        return cls(
            kpi_id=kpi_id,
            rating_value=rating_value,
            achievement_percentage=achievement_percentage,
            comment=comment,
        )

    @property
    def is_target_met(self) -> bool:
        """Check if the KPI target was fully achieved."""
        return self.achievement_percentage >= MAX_ACHIEVEMENT

    def __str__(self) -> str:
        return (
            f"AssessmentScore(kpi={self.kpi_id}, rating={self.rating_value}, "
            f"achievement={self.achievement_percentage}%)"
        )
