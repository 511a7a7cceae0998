"""
DiscordLink - Live link to the Discord gateway.

Owns the gateway session: identify/resume, frame dispatch, heartbeat, and the
reconnect loop. REST client exposed directly via ``.rest``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional
from urllib.parse import urlsplit

from pydantic import ValidationError
from websockets.exceptions import ConnectionClosed, WebSocketException

from discordlink.client.rest import RestClient
from discordlink.client.streaming import (
    ABNORMAL_CLOSURE,
    GatewayClient,
    GatewayFrame,
    HelloPayload,
    OpCode,
    ReadyPayload,
    heartbeat_frame,
    identify_frame,
    resume_frame,
)
from discordlink.client.streaming.client import ConnectFactory
from discordlink.errors import GatewayClosedError
from discordlink.utils.casing import to_camel_case

from .bus import EventBus, EventHandler
from .event import DispatchEvent, EventKind
from .intents import resolve_intents
from .normalize import normalize
from .types import ConnectOptions, Credentials, SessionState

logger = logging.getLogger(__name__)


class DiscordLink:
    """
    Live link to the Discord gateway.

    Validates the token and intents on construction, before any network I/O.
    Handlers can be registered before or after the link is started.

    Example:
        link = DiscordLink(token, ConnectOptions(intents=["guilds", "guild_messages"]))

        async def on_message(event: DispatchEvent):
            print(event.payload["content"])

        link.on(EventKind.MESSAGE_CREATE, on_message)
        await link.run_forever()
    """

    def __init__(
        self,
        token: str,
        options: ConnectOptions | None = None,
        *,
        rest: RestClient | None = None,
        connect: Optional[ConnectFactory] = None,
    ):
        self.options = options or ConnectOptions()
        self.credentials = Credentials.from_token(token)
        self.intents = resolve_intents(self.options.intents)

        self.session = SessionState()
        self.bus = EventBus()

        # REST client - shares this link's credentials
        self.rest = rest or RestClient(self.credentials)

        self._connect = connect
        self._gateway: GatewayClient | None = None
        self._task: asyncio.Task | None = None
        self._should_reconnect = True
        self._waiting_to_reconnect = False
        self._sleep = asyncio.sleep
        self.reconnect_attempts = 0

    @property
    def is_connected(self) -> bool:
        return self._gateway is not None and self._gateway.is_open

    # --- Handler registration ---

    def on(
        self, kind: EventKind | str | None, handler: EventHandler
    ) -> EventHandler:
        """Register an async handler. ``kind=None`` receives every event."""
        self.bus.subscribe(_as_kind(kind), handler)
        return handler

    def off(self, kind: EventKind | str | None, handler: EventHandler) -> None:
        self.bus.unsubscribe(_as_kind(kind), handler)

    # --- Lifecycle ---

    def start(self) -> asyncio.Task:
        """Run the link in the background and return its task."""
        if self._task is not None and not self._task.done():
            logger.warning("DiscordLink already started")
            return self._task
        self._task = asyncio.create_task(self.run_forever())
        self._task.add_done_callback(_log_task_result)
        return self._task

    async def run_forever(self) -> None:
        """
        Connect and keep reconnecting until a fatal close or disconnect().

        Raises:
            GatewayClosedError: If the gateway closed with a fatal close code
        """
        self._should_reconnect = True
        while self._should_reconnect:
            code, reason = await self._run_connection()
            if not self._should_reconnect:
                break

            if self.options.close_codes.is_fatal(code):
                logger.error(f"[Gateway] Closed with fatal code {code}: {reason}")
                raise GatewayClosedError(code, reason)

            self.reconnect_attempts += 1
            delay = self.options.reconnect_delay
            logger.info(
                f"[Gateway] Closed with code {code}, reconnecting in {delay}s "
                f"(attempt {self.reconnect_attempts})"
            )
            self._waiting_to_reconnect = True
            try:
                await self._sleep(delay)
            finally:
                self._waiting_to_reconnect = False

        logger.info("[Gateway] Stopped")

    async def disconnect(self) -> None:
        """Stop reconnecting and close the current connection."""
        self._should_reconnect = False
        task = self._task

        # Nothing to close while waiting or still connecting, so stop the task
        idle = self._waiting_to_reconnect or not self.is_connected
        if idle and task is not None and not task.done():
            task.cancel()

        if self._gateway is not None:
            await self._gateway.close()

        if task is not None and task is not asyncio.current_task():
            try:
                await task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("Disconnected from gateway")

    # --- Connection ---

    async def _run_connection(self) -> tuple[int, str]:
        """Run one connection to completion and return (close code, reason)."""
        resuming = self.session.resumable
        url = self._resume_url() if resuming else self.options.gateway_url

        gateway = GatewayClient(url, connect=self._connect)
        self._gateway = gateway
        connected = False
        try:
            await gateway.__aenter__()
            connected = True
        except (OSError, WebSocketException, asyncio.TimeoutError) as e:
            logger.error(f"[Gateway] Failed to connect: {e}")
            return ABNORMAL_CLOSURE, str(e)
        finally:
            # Also reached when disconnect() cancels a pending connect
            if not connected and self._gateway is gateway:
                self._gateway = None

        try:
            if resuming:
                await self._resume(gateway)
            else:
                await self._identify(gateway)

            async for frame in gateway.frames():
                try:
                    await self._handle_frame(gateway, frame)
                except ValidationError as e:
                    logger.error(f"[Gateway] Invalid op {frame.op} payload: {e}")
        except ConnectionClosed as e:
            logger.debug(f"[Gateway] Send failed, connection closed: {e}")
        finally:
            await gateway.__aexit__(None, None, None)
            if self._gateway is gateway:
                self._gateway = None

        return gateway.close_code, gateway.close_reason

    def _resume_url(self) -> str:
        """Resume URL from READY, carrying the configured version/encoding query."""
        resume_url = self.session.resume_url
        if not resume_url:
            return self.options.gateway_url
        query = urlsplit(self.options.gateway_url).query
        if query and "?" not in resume_url:
            return f"{resume_url.rstrip('/')}/?{query}"
        return resume_url

    async def _identify(self, gateway: GatewayClient) -> None:
        # A fresh session restarts sequence numbering
        self.session.clear()
        logger.info(f"[Gateway] Identifying (intents={self.intents})")
        await gateway.send(
            identify_frame(self.credentials.token, self.intents, self.options.presence)
        )

    async def _resume(self, gateway: GatewayClient) -> None:
        if self.session.session_id is None:
            logger.warning("[Gateway] Resume requested but no session to resume")
            return
        logger.info(
            f"[Gateway] Resuming session {self.session.session_id} "
            f"at seq {self.session.sequence}"
        )
        await gateway.send(
            resume_frame(
                self.credentials.token, self.session.session_id, self.session.sequence
            )
        )

    # --- Frame handling ---

    async def _handle_frame(self, gateway: GatewayClient, frame: GatewayFrame) -> None:
        logger.debug(f"[Gateway] Received op {frame.op} t={frame.t} s={frame.s}")

        match frame.op:
            case OpCode.DISPATCH:
                if frame.s is not None and not self.session.record_sequence(frame.s):
                    logger.debug(
                        f"[Gateway] Ignoring out-of-order seq {frame.s} "
                        f"(stored {self.session.sequence})"
                    )
            case OpCode.HEARTBEAT:
                await gateway.send(heartbeat_frame())
            case OpCode.RECONNECT:
                await self._resume(gateway)
                await self._publish(DispatchEvent(kind=EventKind.RECONNECT))
            case OpCode.INVALID_SESSION:
                await self._on_invalid_session(gateway, bool(frame.d))
            case OpCode.HELLO:
                hello = HelloPayload.model_validate(frame.d)
                gateway.start_heartbeat(hello.heartbeat_interval)
                await self._publish(
                    DispatchEvent(kind=EventKind.HELLO, payload=to_camel_case(frame.d))
                )
            case OpCode.HEARTBEAT_ACK:
                logger.debug("[Gateway] Heartbeat acknowledged")
            case _:
                logger.debug(f"[Gateway] Unhandled op {frame.op}")

        if frame.t:
            await self._dispatch(frame)

    async def _on_invalid_session(self, gateway: GatewayClient, resumable: bool) -> None:
        await self._publish(
            DispatchEvent(kind=EventKind.INVALID_SESSION, payload=resumable)
        )
        if resumable and self.session.resumable:
            await self._resume(gateway)
        else:
            logger.warning("[Gateway] Session invalidated, identifying again")
            await self._identify(gateway)

    async def _dispatch(self, frame: GatewayFrame) -> None:
        """Capture session state from READY, then normalize and publish."""
        if frame.t == "READY":
            ready = ReadyPayload.model_validate(frame.d)
            self.session.session_id = ready.session_id
            self.session.resume_url = ready.resume_gateway_url
            self.reconnect_attempts = 0
            logger.info(f"[Gateway] Ready (session {ready.session_id})")
        elif frame.t == "RESUMED":
            self.reconnect_attempts = 0
            logger.info("[Gateway] Session resumed")

        event = normalize(frame.t, frame.d, sequence=frame.s, raw=frame.model_dump())
        if event is None:
            logger.warning(f"[Gateway] Dropping unregistered event '{frame.t}'")
            return
        await self._publish(event)

    async def _publish(self, event: DispatchEvent) -> None:
        logger.debug(f"[Gateway] Publishing {event.kind.value}")
        await self.bus.publish(event)


def _as_kind(kind: EventKind | str | None) -> EventKind | None:
    if kind is None or isinstance(kind, EventKind):
        return kind
    return EventKind(kind)


def _log_task_result(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error(f"DiscordLink stopped: {exc}")


def listen(token: str, options: ConnectOptions | dict[str, Any] | None = None) -> DiscordLink:
    """
    Create a DiscordLink and start it in the background.

    Must be called from a running event loop.

    Raises:
        RuntimeError: If no event loop is running
    """
    asyncio.get_running_loop()
    if isinstance(options, dict):
        options = ConnectOptions(**options)
    link = DiscordLink(token, options)
    link.start()
    return link
