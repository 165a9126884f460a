"""Identifier value objects for the performance review domain.

These wrap raw UUIDs to provide strong typing and intent clarity across the
codebase while remaining lightweight and serializable. Identifiers of
different kinds never compare equal, even when they wrap the same UUID.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID, uuid4

IdentifierT = TypeVar("IdentifierT", bound="_UuidIdentifier")


@dataclass(frozen=True, slots=True)
class _UuidIdentifier:
    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise ValueError(
                f"{type(self).__name__} requires a UUID value, got: {self.value!r}"
            )

    @classmethod
    def generate(cls: type[IdentifierT]) -> IdentifierT:
        """Create a new random identifier."""
        return cls(uuid4())

    @classmethod
    def of(cls: type[IdentifierT], value: str | UUID) -> IdentifierT:
        """Build an identifier from its string or UUID form."""
        if value is None:
            raise ValueError(f"{cls.__name__} value cannot be null")
        if isinstance(value, UUID):
            return cls(value)
        return cls(UUID(str(value)))

    def __str__(self) -> str:  # pragma: no cover - trivial
        return str(self.value)


@dataclass(frozen=True, slots=True)
class ReviewCycleId(_UuidIdentifier):
    pass


@dataclass(frozen=True, slots=True)
class ParticipantId(_UuidIdentifier):
    pass


@dataclass(frozen=True, slots=True)
class AssessmentId(_UuidIdentifier):
    pass


@dataclass(frozen=True, slots=True)
class KpiId(_UuidIdentifier):
    pass


@dataclass(frozen=True, slots=True)
class UserId(_UuidIdentifier):
    pass


@dataclass(frozen=True, slots=True)
class FeedbackId(_UuidIdentifier):
    pass


@dataclass(frozen=True, slots=True)
class ResponseId(_UuidIdentifier):
    pass
