"""
Domain Event Publisher Implementation.

Bridges aggregates in the domain layer to the infrastructure event bus.
"""

from collections.abc import Iterable

from ...core.observability import get_logger
from ...domain.shared.base import AggregateRoot, DomainEvent
from .event_bus import EventBusInterface

logger = get_logger(__name__)


class DomainEventPublisher:
    """
    Publisher for domain events that bridges domain and infrastructure.

    Application services hand it the events drained from an aggregate after
    the aggregate has been saved.
    """

    def __init__(self, event_bus: EventBusInterface) -> None:
        """
        Initialize the domain event publisher.

        Args:
            event_bus: Event sink that receives every published event
        """
        self._event_bus = event_bus

    @property
    def event_bus(self) -> EventBusInterface:
        return self._event_bus

    def publish_domain_event(self, event: DomainEvent) -> None:
        """
        Publish a domain event synchronously.

        Args:
            event: Domain event to publish
        """
        try:
            self._event_bus.publish(event)
            logger.debug(
                "domain_event_published",
                event_type=event.event_type,
                event_id=str(event.event_id),
                aggregate_type=event.aggregate_type,
                aggregate_id=str(event.aggregate_id),
            )
        except Exception as e:
            logger.error(
                "domain_event_publish_failed",
                event_type=event.event_type,
                event_id=str(event.event_id),
                error=str(e),
            )
            raise

    def publish_batch(self, events: Iterable[DomainEvent]) -> int:
        """
        Publish multiple domain events in order.

        Args:
            events: Domain events to publish

        Returns:
            Number of events published
        """
        count = 0
        for event in events:
            self.publish_domain_event(event)
            count += 1
        if count:
            logger.debug("domain_event_batch_published", event_count=count)
        return count

    def publish_aggregate_events(self, aggregate: AggregateRoot) -> int:
        """Drain an aggregate's pending events and publish them."""
        return self.publish_batch(aggregate.get_domain_events())
