"""
Gateway intents.

Intents are bit flags sent in the identify frame; each set bit enables
delivery of one category of gateway events.
"""

from __future__ import annotations

import enum
from typing import Any, Iterable


class Intent(enum.IntFlag):
    GUILDS = 1 << 0
    GUILD_MEMBERS = 1 << 1
    GUILD_MODERATION = 1 << 2
    GUILD_EMOJIS_AND_STICKERS = 1 << 3
    GUILD_INTEGRATIONS = 1 << 4
    GUILD_WEBHOOKS = 1 << 5
    GUILD_INVITES = 1 << 6
    GUILD_VOICE_STATES = 1 << 7
    GUILD_PRESENCES = 1 << 8
    GUILD_MESSAGES = 1 << 9
    GUILD_MESSAGE_REACTIONS = 1 << 10
    GUILD_MESSAGE_TYPING = 1 << 11
    DIRECT_MESSAGES = 1 << 12
    DIRECT_MESSAGE_REACTIONS = 1 << 13
    DIRECT_MESSAGE_TYPING = 1 << 14
    MESSAGE_CONTENT = 1 << 15
    GUILD_SCHEDULED_EVENTS = 1 << 16
    AUTO_MODERATION_CONFIGURATION = 1 << 20
    AUTO_MODERATION_EXECUTION = 1 << 21


def intent_from_name(name: str) -> Intent:
    """Look up a flag by name, case-insensitively."""
    try:
        return Intent[name.upper()]
    except KeyError:
        valid = ", ".join(flag.name.lower() for flag in Intent)
        raise ValueError(
            f"Unknown intent '{name}'. Valid intents: {valid}"
        ) from None


def resolve_intents(value: Any) -> int:
    """
    Turn the ``intents`` connect option into the identify bitmask.

    Args:
        value: None, an integer bitmask, or an iterable of flag names

    Returns:
        The integer bitmask (0 when value is None)

    Raises:
        ValueError: If a flag name is not recognized
        TypeError: If value is neither an integer nor a collection of names
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise TypeError("intents must be a list of names or an integer, got bool")
    if isinstance(value, int):
        return int(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return int(_combine(value))
    raise TypeError(
        f"intents must be a list of names or an integer, got {type(value).__name__}"
    )


def _combine(names: Iterable[Any]) -> Intent:
    combined = Intent(0)
    for name in names:
        if isinstance(name, Intent):
            combined |= name
            continue
        if not isinstance(name, str):
            raise TypeError(
                f"intent names must be strings, got {type(name).__name__}"
            )
        combined |= intent_from_name(name)
    return combined
