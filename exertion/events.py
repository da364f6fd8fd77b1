"""Global event system for stamina notifications.

This event bus is for feedback that other systems (message log, sound, UI)
may want to react to when a character's exertion state changes.

USE FOR:
- Messages to the message log ("You're winded!")
- Notifying listeners that a character became winded or strained their back

DO NOT USE FOR:
- The stamina arithmetic itself (burn, regen, clamping)
- Anything that needs a return value or confirmation

The event bus is fire-and-forget: publish an event without expecting return values
or confirmations. All handlers execute immediately (synchronously). A handler
that raises is logged and skipped so one bad listener cannot break a tick.
"""

import logging
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass
from typing import Any

from exertion import colors

logger = logging.getLogger(__name__)


@dataclass
class GameEvent:
    """Base class for all game events."""

    pass


@dataclass
class MessageEvent(GameEvent):
    """Event for adding messages to the message log."""

    text: str
    color: colors.Color = colors.WHITE


@dataclass
class WindedEvent(GameEvent):
    """Fired when a character overdraws their stamina and becomes winded.

    Attributes:
        character: The character that became winded.
        duration: Turns the winded effect will last.
    """

    character: Any  # Avoid circular imports
    duration: int


@dataclass
class StrainEvent(GameEvent):
    """Fired when carrying too much weight hurts a character.

    Attributes:
        character: The character that felt the strain.
        pain: Pain added by this strain.
        load_percent: Carried weight as a percentage of capacity.
    """

    character: Any  # Avoid circular imports
    pain: int
    load_percent: float


class EventBus:
    """Simple event bus for publish/subscribe pattern."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable]] = {}

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Subscribe a handler to an event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Unsubscribe a handler from an event type."""
        if event_type in self._handlers:
            with suppress(ValueError):
                self._handlers[event_type].remove(handler)

    def publish(self, event: GameEvent) -> None:
        """Publish an event to all subscribed handlers."""
        event_type = type(event)
        if event_type in self._handlers:
            # Copy the handler list to allow safe subscribe/unsubscribe during dispatch
            for handler in list(self._handlers[event_type]):
                try:
                    handler(event)
                except Exception:
                    logger.exception(f"Error handling event {event_type.__name__}")


# Global event bus instance
_global_event_bus = EventBus()


# Public API functions


def subscribe_to_event(event_type: type, handler: Callable) -> None:
    """Subscribe to an event type globally."""
    _global_event_bus.subscribe(event_type, handler)


def unsubscribe_from_event(event_type: type, handler: Callable) -> None:
    """Unsubscribe from an event type globally."""
    _global_event_bus.unsubscribe(event_type, handler)


def publish_event(event: GameEvent) -> None:
    """Publish an event globally."""
    _global_event_bus.publish(event)


def reset_event_bus_for_testing() -> None:
    """Reset the global event bus. Use only in tests."""
    global _global_event_bus
    _global_event_bus = EventBus()
