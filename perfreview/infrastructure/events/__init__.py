"""
Event infrastructure for domain event publishing and handling.
"""

from .domain_event_publisher import DomainEventPublisher
from .event_bus import EventBusInterface, EventHandler, InMemoryEventBus

__all__ = [
    "DomainEventPublisher",
    "EventBusInterface",
    "EventHandler",
    "InMemoryEventBus",
]
