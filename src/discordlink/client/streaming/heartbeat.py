"""
Heartbeat driver for a gateway connection.

Sends a heartbeat frame every ``interval_ms`` milliseconds once the hello
frame has been received. One driver belongs to exactly one connection.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from websockets.exceptions import ConnectionClosed

from .payloads import heartbeat_frame

logger = logging.getLogger(__name__)


class HeartbeatDriver:
    """
    Periodically sends heartbeats through ``send``.

    The first heartbeat goes out one full interval after start().
    """

    def __init__(
        self,
        send: Callable[[dict[str, Any]], Awaitable[None]],
        interval_ms: int,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        """
        Initialize heartbeat driver.

        Args:
            send: Coroutine that writes one frame to the connection
            interval_ms: Heartbeat interval dictated by the hello frame
            sleep: Sleep function (injectable for tests)
        """
        self._send = send
        self.interval_ms = interval_ms
        self._sleep = sleep
        self._task: Optional[asyncio.Task] = None
        self.beats_sent = 0

    @property
    def interval(self) -> float:
        """Interval in seconds."""
        return self.interval_ms / 1000

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.is_running:
            logger.warning("Heartbeat driver already running")
            return
        self._task = asyncio.create_task(self._heartbeat_loop())
        logger.debug(f"[Gateway] Heartbeat started (interval: {self.interval}s)")

    async def stop(self) -> None:
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.debug("[Gateway] Heartbeat stopped")

    async def beat(self) -> None:
        """Send one heartbeat immediately."""
        await self._send(heartbeat_frame())
        self.beats_sent += 1

    async def _heartbeat_loop(self) -> None:
        try:
            while True:
                await self._sleep(self.interval)
                await self.beat()
        except ConnectionClosed:
            logger.debug("[Gateway] Heartbeat loop ended: connection closed")
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"[Gateway] Heartbeat loop error: {e}", exc_info=True)
