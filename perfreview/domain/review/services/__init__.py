from .score_calculation_service import PerformanceScoreCalculationService

__all__ = ["PerformanceScoreCalculationService"]
