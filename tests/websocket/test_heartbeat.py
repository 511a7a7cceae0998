"""Tests for HeartbeatDriver cadence and lifecycle."""

import asyncio

import pytest
from websockets.exceptions import ConnectionClosedError

from discordlink.client.streaming import HeartbeatDriver

HEARTBEAT = {"op": 1, "d": None}


class ScriptedSleep:
    """Records requested delays; cancels the loop after ``limit`` sleeps."""

    def __init__(self, sent: list, limit: int):
        self.sent = sent
        self.limit = limit
        self.delays: list[float] = []
        self.sent_before_each: list[int] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
        self.sent_before_each.append(len(self.sent))
        if len(self.delays) > self.limit:
            raise asyncio.CancelledError


async def test_sends_heartbeat_every_interval():
    sent = []

    async def send(frame):
        sent.append(frame)

    sleep = ScriptedSleep(sent, limit=3)
    driver = HeartbeatDriver(send, 45000, sleep=sleep)

    with pytest.raises(asyncio.CancelledError):
        await driver._heartbeat_loop()

    assert sleep.delays == [45.0, 45.0, 45.0, 45.0]
    assert sent == [HEARTBEAT, HEARTBEAT, HEARTBEAT]
    assert driver.beats_sent == 3


async def test_first_heartbeat_waits_one_interval():
    sent = []

    async def send(frame):
        sent.append(frame)

    sleep = ScriptedSleep(sent, limit=2)
    driver = HeartbeatDriver(send, 1000, sleep=sleep)

    with pytest.raises(asyncio.CancelledError):
        await driver._heartbeat_loop()

    # Nothing is sent before the first full interval has elapsed
    assert sleep.sent_before_each == [0, 1, 2]


async def test_interval_converted_to_seconds():
    async def send(frame):
        pass

    driver = HeartbeatDriver(send, 41250)

    assert driver.interval == 41.25


async def test_beat_sends_immediately():
    sent = []

    async def send(frame):
        sent.append(frame)

    driver = HeartbeatDriver(send, 45000)
    await driver.beat()

    assert sent == [HEARTBEAT]


async def test_closed_connection_ends_loop_quietly():
    async def send(frame):
        raise ConnectionClosedError(None, None)

    async def no_wait(seconds):
        pass

    driver = HeartbeatDriver(send, 45000, sleep=no_wait)

    await driver._heartbeat_loop()  # Should return, not raise

    assert driver.beats_sent == 0


async def test_start_and_stop():
    async def send(frame):
        pass

    driver = HeartbeatDriver(send, 45000)
    driver.start()
    assert driver.is_running is True

    await driver.stop()

    assert driver.is_running is False


async def test_start_twice_keeps_single_task():
    async def send(frame):
        pass

    driver = HeartbeatDriver(send, 45000)
    driver.start()
    task = driver._task
    driver.start()

    assert driver._task is task
    await driver.stop()


async def test_stop_without_start_is_noop():
    async def send(frame):
        pass

    driver = HeartbeatDriver(send, 45000)
    await driver.stop()

    assert driver.is_running is False
