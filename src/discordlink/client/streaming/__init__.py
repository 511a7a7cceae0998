"""Gateway (websocket) transport.

Usage:
    from discordlink.client.streaming import GatewayClient
"""

from discordlink.client.streaming.client import ABNORMAL_CLOSURE, GatewayClient
from discordlink.client.streaming.heartbeat import HeartbeatDriver
from discordlink.client.streaming.payloads import (
    GatewayFrame,
    HelloPayload,
    OpCode,
    ReadyPayload,
    heartbeat_frame,
    identify_frame,
    resume_frame,
)

__all__ = [
    "ABNORMAL_CLOSURE",
    "GatewayClient",
    "HeartbeatDriver",
    "GatewayFrame",
    "HelloPayload",
    "OpCode",
    "ReadyPayload",
    "heartbeat_frame",
    "identify_frame",
    "resume_frame",
]
