"""Tests for EventBus."""

from discordlink.platform.bus import EventBus
from discordlink.platform.event import DispatchEvent, EventKind


def event(kind=EventKind.MESSAGE_CREATE, **payload) -> DispatchEvent:
    return DispatchEvent(kind=kind, payload=payload)


async def test_publishes_to_matching_kind_only():
    bus = EventBus()
    seen = []

    async def on_create(e):
        seen.append(("create", e.kind))

    async def on_delete(e):
        seen.append(("delete", e.kind))

    bus.subscribe(EventKind.MESSAGE_CREATE, on_create)
    bus.subscribe(EventKind.MESSAGE_DELETE, on_delete)

    await bus.publish(event())

    assert seen == [("create", EventKind.MESSAGE_CREATE)]


async def test_catch_all_runs_after_specific_handlers():
    bus = EventBus()
    order = []

    async def catch_all(e):
        order.append("all")

    async def specific(e):
        order.append("specific")

    bus.subscribe(None, catch_all)
    bus.subscribe(EventKind.MESSAGE_CREATE, specific)

    await bus.publish(event())

    assert order == ["specific", "all"]


async def test_handlers_run_in_registration_order():
    bus = EventBus()
    order = []

    async def first(e):
        order.append(1)

    async def second(e):
        order.append(2)

    bus.subscribe(EventKind.MESSAGE_CREATE, first)
    bus.subscribe(EventKind.MESSAGE_CREATE, second)

    await bus.publish(event())

    assert order == [1, 2]


async def test_failing_handler_is_isolated(caplog):
    bus = EventBus()
    seen = []

    async def broken(e):
        raise RuntimeError("boom")

    async def healthy(e):
        seen.append(e.payload)

    bus.subscribe(EventKind.MESSAGE_CREATE, broken)
    bus.subscribe(EventKind.MESSAGE_CREATE, healthy)

    await bus.publish(event(content="hi"))

    assert seen == [{"content": "hi"}]
    assert "message/create" in caplog.text


async def test_unsubscribe():
    bus = EventBus()
    seen = []

    async def handler(e):
        seen.append(e)

    bus.subscribe(EventKind.MESSAGE_CREATE, handler)
    bus.unsubscribe(EventKind.MESSAGE_CREATE, handler)
    bus.unsubscribe(EventKind.MESSAGE_CREATE, handler)  # Second call is a no-op

    await bus.publish(event())

    assert seen == []


async def test_publish_without_handlers_is_noop():
    await EventBus().publish(event())
