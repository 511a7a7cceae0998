"""
GatewayClient - one websocket connection to the gateway and its heartbeat.

A GatewayClient is single-use: the connector creates a new one for every
(re)connect and tears the old one down with ``__aexit__``, which stops the
heartbeat before closing the socket.
"""

from __future__ import annotations

import json
import logging
from typing import Any, AsyncIterator, Awaitable, Callable, Optional

import websockets
from pydantic import ValidationError
from websockets.exceptions import ConnectionClosed

from .heartbeat import HeartbeatDriver
from .payloads import GatewayFrame

logger = logging.getLogger(__name__)

# Close code reported when the socket dropped without a close frame.
ABNORMAL_CLOSURE = 1006

ConnectFactory = Callable[..., Awaitable[Any]]


class GatewayClient:
    def __init__(self, url: str, connect: Optional[ConnectFactory] = None):
        self.url = url
        self._connect = connect or websockets.connect
        self.ws: Any = None
        self.heartbeat: HeartbeatDriver | None = None

    async def __aenter__(self):
        """Open the websocket."""
        logger.info(f"[Gateway] Connecting to {self.url}")
        self.ws = await self._connect(self.url, max_size=None)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Stop the heartbeat and close the websocket."""
        await self.close()

    @property
    def is_open(self) -> bool:
        return self.ws is not None

    @property
    def close_code(self) -> int:
        code = getattr(self.ws, "close_code", None)
        return code if code is not None else ABNORMAL_CLOSURE

    @property
    def close_reason(self) -> str:
        return getattr(self.ws, "close_reason", None) or ""

    async def send(self, frame: dict[str, Any]) -> None:
        if self.ws is None:
            raise RuntimeError("Not connected")
        logger.debug(f"[Gateway] Sending op {frame.get('op')}")
        await self.ws.send(json.dumps(frame))

    def start_heartbeat(self, interval_ms: int) -> HeartbeatDriver:
        """Start (or restart) the heartbeat driver for this connection."""
        if self.heartbeat is not None and self.heartbeat.is_running:
            logger.warning("[Gateway] Heartbeat already running, ignoring hello")
            return self.heartbeat
        self.heartbeat = HeartbeatDriver(self.send, interval_ms)
        self.heartbeat.start()
        return self.heartbeat

    async def frames(self) -> AsyncIterator[GatewayFrame]:
        """
        Yield parsed frames until the connection closes.

        Frames that are not valid JSON or not a gateway frame are logged and
        skipped. Closure ends the iteration; read close_code afterwards.
        """
        if self.ws is None:
            raise RuntimeError("Not connected")
        try:
            async for message in self.ws:
                try:
                    if isinstance(message, bytes):
                        message = message.decode("utf-8")
                    yield GatewayFrame.model_validate(json.loads(message))
                except (json.JSONDecodeError, ValidationError) as e:
                    logger.error(f"[Gateway] Failed to parse frame: {e}")
        except ConnectionClosed as e:
            logger.debug(f"[Gateway] Connection closed: {e}")

    async def close(self) -> None:
        if self.heartbeat is not None:
            await self.heartbeat.stop()
            self.heartbeat = None
        if self.ws is None:
            return
        try:
            await self.ws.close()
        except Exception as e:
            logger.warning(f"[Gateway] Error closing websocket: {e}")
