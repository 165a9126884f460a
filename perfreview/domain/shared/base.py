"""Base classes for domain entities, value objects and aggregates."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class ValueObject(BaseModel):
    """Base class for value objects (immutable, defined by their values)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def _equality_components(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def __eq__(self, other: Any) -> bool:
        """Value objects are equal if all their attributes are equal."""
        if not isinstance(other, self.__class__):
            return False
        return self._equality_components() == other._equality_components()

    def __hash__(self) -> int:
        """Value objects with same values have same hash."""
        return hash((self.__class__.__name__, self._equality_components()))


class Entity(BaseModel, ABC):
    """
    Base class for entities captured as immutable records.

    Subclasses declare their own typed ``id`` field. Equality is by identity,
    never by attribute values.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash(self.id)  # type: ignore[attr-defined]


class DomainEvent(BaseModel):
    """Base class for domain events."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    event_id: UUID = Field(default_factory=uuid4)
    occurred_at: datetime = Field(default_factory=utc_now)
    aggregate_id: UUID
    aggregate_type: str = ""
    event_version: int = 1

    @property
    def event_type(self) -> str:
        """Name of the concrete event class."""
        return type(self).__name__


class AggregateRoot(ABC):
    """
    Base class for aggregate roots (entities that control consistency boundaries).

    Domain events raised by the aggregate are buffered on the instance until a
    caller drains them with ``get_domain_events``.
    """

    def __init__(self) -> None:
        self._domain_events: list[DomainEvent] = []

    @property
    @abstractmethod
    def id(self) -> Any:
        """Aggregate identity."""

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def add_domain_event(self, event: DomainEvent) -> None:
        """Add a domain event to be published."""
        self._domain_events.append(event)

    def get_domain_events(self) -> list[DomainEvent]:
        """Return the events raised since the last call and clear the buffer."""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events

    def peek_domain_events(self) -> list[DomainEvent]:
        """Get all pending domain events without clearing them."""
        return self._domain_events.copy()

    def clear_domain_events(self) -> None:
        """Clear all domain events (typically after publishing)."""
        self._domain_events.clear()


AggregateT = TypeVar("AggregateT", bound=AggregateRoot)
IdT = TypeVar("IdT")


class Repository(ABC, Generic[AggregateT, IdT]):
    """Base repository interface for aggregate persistence."""

    @abstractmethod
    def save(self, aggregate: AggregateT) -> None:
        """Save (insert or replace) an aggregate."""

    @abstractmethod
    def find_by_id(self, aggregate_id: IdT) -> AggregateT | None:
        """Find an aggregate by its ID."""

    @abstractmethod
    def find_all(self) -> list[AggregateT]:
        """Return every stored aggregate."""

    def exists_by_id(self, aggregate_id: IdT) -> bool:
        """Check whether an aggregate with this ID is stored."""
        return self.find_by_id(aggregate_id) is not None


class DomainService(ABC):
    """Base class for domain services (business logic that doesn't belong to a single entity)."""

    pass
