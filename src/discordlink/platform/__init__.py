"""
Discord Platform Layer - gateway session management.

Components:
    DiscordLink: Gateway connection, reconnect/resume, event dispatch (REST via .rest)
    EventKind / DispatchEvent: Closed set of normalized gateway events
    Intent: Gateway intent flags
"""

from .bus import EventBus, EventHandler
from .event import DispatchEvent, EventKind
from .intents import Intent, resolve_intents
from .link import DiscordLink, listen
from .normalize import ALIASES, normalize, normalize_event_name, topic_path
from .types import (
    DEFAULT_FATAL_CLOSE_CODES,
    CloseCodePolicy,
    ConnectOptions,
    Credentials,
    SessionState,
)

__all__ = [
    "DiscordLink",
    "listen",
    "EventBus",
    "EventHandler",
    "DispatchEvent",
    "EventKind",
    "Intent",
    "resolve_intents",
    "ALIASES",
    "normalize",
    "normalize_event_name",
    "topic_path",
    "DEFAULT_FATAL_CLOSE_CODES",
    "CloseCodePolicy",
    "ConnectOptions",
    "Credentials",
    "SessionState",
]
