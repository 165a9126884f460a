"""
Repository Interfaces

Abstract contracts for review cycle persistence. Implementations live outside
the domain layer.
"""

from .review_cycle_repository import ReviewCycleRepository

__all__ = ["ReviewCycleRepository"]
