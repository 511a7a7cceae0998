"""
Gateway wire payloads.

Inbound frames are validated with Pydantic; outbound frames are built as
plain dicts ready for json.dumps.
"""

from __future__ import annotations

import enum
import platform
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class OpCode(enum.IntEnum):
    DISPATCH = 0
    HEARTBEAT = 1
    IDENTIFY = 2
    RESUME = 6
    RECONNECT = 7
    INVALID_SESSION = 9
    HELLO = 10
    HEARTBEAT_ACK = 11


class GatewayFrame(BaseModel):
    """Any frame received from the gateway."""

    model_config = ConfigDict(extra="allow")

    op: int
    d: Any = None
    s: Optional[int] = None
    t: Optional[str] = None


class HelloPayload(BaseModel):
    """Payload of the op 10 handshake frame."""

    model_config = ConfigDict(extra="allow")

    heartbeat_interval: int


class ReadyPayload(BaseModel):
    """Payload of the READY dispatch (only the fields the connector needs)."""

    model_config = ConfigDict(extra="allow")

    session_id: str
    resume_gateway_url: Optional[str] = None
    v: Optional[int] = None
    user: Optional[dict[str, Any]] = None


def connection_properties() -> dict[str, str]:
    return {
        "os": platform.system().lower(),
        "browser": "discordlink",
        "device": "discordlink",
    }


def identify_frame(
    token: str, intents: int, presence: dict[str, Any] | None = None
) -> dict[str, Any]:
    return {
        "op": OpCode.IDENTIFY.value,
        "d": {
            "token": token,
            "properties": connection_properties(),
            "presence": presence if presence is not None else {"status": "online"},
            "intents": intents,
        },
    }


def resume_frame(token: str, session_id: str, seq: int | None) -> dict[str, Any]:
    return {
        "op": OpCode.RESUME.value,
        "d": {"token": token, "session_id": session_id, "seq": seq},
    }


def heartbeat_frame() -> dict[str, Any]:
    return {"op": OpCode.HEARTBEAT.value, "d": None}
