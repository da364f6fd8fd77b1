"""Tests for the event bus system."""

import logging

import pytest

from exertion.events import (
    EventBus,
    GameEvent,
    MessageEvent,
    WindedEvent,
    publish_event,
    subscribe_to_event,
    unsubscribe_from_event,
)


def test_handler_exception_does_not_crash_event_bus(
    caplog: pytest.LogCaptureFixture,
) -> None:
    bus = EventBus()
    calls: list[str] = []

    def failing_handler(event: GameEvent) -> None:
        calls.append("failing")
        raise ValueError("Handler failed!")

    bus.subscribe(MessageEvent, failing_handler)
    bus.subscribe(MessageEvent, lambda e: calls.append("succeeding"))

    with caplog.at_level(logging.ERROR):
        bus.publish(MessageEvent(text="Test message"))

    assert calls == ["failing", "succeeding"]
    assert "Error handling event MessageEvent" in caplog.text


def test_handlers_only_receive_their_event_type() -> None:
    messages: list[GameEvent] = []
    subscribe_to_event(MessageEvent, messages.append)
    publish_event(WindedEvent(character=None, duration=3))
    publish_event(MessageEvent("hi"))
    assert [type(e) for e in messages] == [MessageEvent]


def test_unsubscribe_stops_delivery() -> None:
    messages: list[GameEvent] = []
    subscribe_to_event(MessageEvent, messages.append)
    unsubscribe_from_event(MessageEvent, messages.append)
    unsubscribe_from_event(MessageEvent, messages.append)
    publish_event(MessageEvent("ignored"))
    assert messages == []
