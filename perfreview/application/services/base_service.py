"""
Base application service providing common functionality.

This module provides a base class for all application services,
including input validation, logging and domain event publication.
"""

from abc import ABC
from typing import Any, TypeVar
from uuid import UUID

from ...core.observability import get_logger
from ...domain.shared.base import AggregateRoot
from ...domain.shared.exceptions import ValidationError
from ...infrastructure.events.domain_event_publisher import DomainEventPublisher

IdentifierT = TypeVar("IdentifierT")


class ApplicationServiceBase(ABC):
    """
    Base class for application services.

    Provides common functionality for validation and event publication
    across all application services. Use cases follow the same shape:
    load or build the aggregate, invoke it, save it, then publish its events.
    """

    def __init__(self, event_publisher: DomainEventPublisher) -> None:
        """
        Initialize the application service.

        Args:
            event_publisher: Publisher that receives drained domain events
        """
        self._event_publisher = event_publisher
        self._logger = get_logger(type(self).__module__)

    def validate_identifier(
        self, value: Any, id_type: type[IdentifierT], field_name: str
    ) -> IdentifierT:
        """
        Validate and convert a value to a typed identifier.

        Accepts the identifier itself, a UUID or the UUID's string form.

        Raises:
            ValidationError: If the value is missing or not a valid UUID
        """
        if isinstance(value, id_type):
            return value
        if value is None:
            raise ValidationError(f"{field_name} is required", field=field_name)
        if isinstance(value, UUID):
            return id_type(value)  # type: ignore[call-arg]
        try:
            return id_type(UUID(str(value)))  # type: ignore[call-arg]
        except (ValueError, TypeError) as e:
            raise ValidationError(
                f"{field_name} must be a valid UUID", field=field_name
            ) from e

    def validate_non_empty_string(self, value: str | None, field_name: str) -> None:
        """
        Validate that a string field is not empty.

        Raises:
            ValidationError: If string is None or blank
        """
        if not value or not value.strip():
            raise ValidationError(f"{field_name} cannot be empty", field=field_name)

    def _publish_events(self, aggregate: AggregateRoot) -> int:
        """Drain the aggregate's pending events and publish them."""
        published = self._event_publisher.publish_aggregate_events(aggregate)
        self._logger.debug(
            "aggregate_events_published",
            aggregate_id=str(aggregate.id),
            event_count=published,
        )
        return published
