"""
Event bus implementation for domain event publishing and subscription.

The event bus provides a central mechanism for publishing domain events
and routing them to registered event handlers. Delivery is fire-and-forget:
a failing handler is logged and never stops the remaining handlers.
"""

from abc import ABC, abstractmethod
from collections import defaultdict, deque
from collections.abc import Callable

from ...core.config import settings
from ...core.observability import get_logger
from ...domain.shared.base import DomainEvent

logger = get_logger(__name__)

EventHandler = Callable[[DomainEvent], None]


class EventBusInterface(ABC):
    """
    Abstract interface for event sinks.

    Defines the contract for publishing events and subscribing to event types.
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event to all registered handlers.

        Args:
            event: Domain event to publish
        """

    @abstractmethod
    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """
        Subscribe a handler to a specific event type.

        Handlers subscribed to a base class receive every subclass event too,
        so subscribing to ``DomainEvent`` observes all traffic.
        """

    @abstractmethod
    def unsubscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Unsubscribe a handler from a specific event type."""

    @abstractmethod
    def clear_handlers(self, event_type: type[DomainEvent] | None = None) -> None:
        """
        Clear event handlers.

        Args:
            event_type: Optional event type to clear handlers for. If None, clears all.
        """


class InMemoryEventBus(EventBusInterface):
    """
    In-memory, synchronous implementation of the event bus.

    Events are processed in the order they are published, and handlers for
    one event run in subscription order. A bounded history of published
    events is kept for inspection.
    """

    def __init__(self, max_history_size: int | None = None) -> None:
        """
        Initialize the event bus.

        Args:
            max_history_size: Number of published events to remember
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        history_size = (
            max_history_size
            if max_history_size is not None
            else settings.EVENT_HISTORY_SIZE
        )
        self._event_history: deque[DomainEvent] = deque(maxlen=history_size)

    def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event synchronously to all registered handlers.

        Args:
            event: Domain event to publish
        """
        self._add_to_history(event)

        event_name = type(event).__name__
        handlers = self._handlers_for(type(event))

        if not handlers:
            logger.debug("no_event_handlers", event_type=event_name)
            return

        logger.info(
            "publishing_event",
            event_type=event_name,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                # Continue with other handlers even if one fails
                logger.error(
                    "event_handler_failed",
                    event_type=event_name,
                    event_id=str(event.event_id),
                    handler=repr(handler),
                    error=str(e),
                    exc_info=True,
                )

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """
        Subscribe a handler to a specific event type.

        Args:
            event_type: Type of event to subscribe to
            handler: Handler function to call when event is published
        """
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)
            logger.debug(
                "event_handler_subscribed",
                event_type=event_type.__name__,
                handler=repr(handler),
            )
        else:
            logger.warning(
                "event_handler_already_subscribed",
                event_type=event_type.__name__,
                handler=repr(handler),
            )

    def unsubscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """
        Unsubscribe a handler from a specific event type.

        Args:
            event_type: Type of event to unsubscribe from
            handler: Handler function to remove
        """
        if handler in self._handlers.get(event_type, []):
            self._handlers[event_type].remove(handler)
            logger.debug(
                "event_handler_unsubscribed",
                event_type=event_type.__name__,
                handler=repr(handler),
            )
        else:
            logger.warning(
                "event_handler_not_found",
                event_type=event_type.__name__,
                handler=repr(handler),
            )

    def clear_handlers(self, event_type: type[DomainEvent] | None = None) -> None:
        if event_type:
            self._handlers.pop(event_type, None)
            logger.debug("event_handlers_cleared", event_type=event_type.__name__)
        else:
            self._handlers.clear()
            logger.debug("all_event_handlers_cleared")

    def get_handler_count(self, event_type: type[DomainEvent]) -> int:
        """Number of handlers that would receive an event of this type."""
        return len(self._handlers_for(event_type))

    def get_event_history(
        self, event_type: type[DomainEvent] | None = None
    ) -> list[DomainEvent]:
        """
        Get history of published events.

        Args:
            event_type: Optional event type to filter by (subclasses included)

        Returns:
            List of published events, oldest first
        """
        if event_type:
            return [e for e in self._event_history if isinstance(e, event_type)]
        return list(self._event_history)

    def clear_event_history(self) -> None:
        self._event_history.clear()

    def _handlers_for(self, event_type: type[DomainEvent]) -> list[EventHandler]:
        handlers: list[EventHandler] = []
        for cls in event_type.__mro__:
            for handler in self._handlers.get(cls, []):
                if handler not in handlers:
                    handlers.append(handler)
        return handlers

    def _add_to_history(self, event: DomainEvent) -> None:
        """Add event to history; the deque drops the oldest past its limit."""
        self._event_history.append(event)
