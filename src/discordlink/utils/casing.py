"""Recursive key-case transcoding for JSON-like payloads."""

from __future__ import annotations

import re
from typing import Any

_SNAKE_SEGMENT = re.compile(r"_(\w)")
_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def camel_key(key: str) -> str:
    """``guild_id`` -> ``guildId``. Keys without underscores are unchanged."""
    return _SNAKE_SEGMENT.sub(lambda m: m.group(1).upper(), key)


def snake_key(key: str) -> str:
    """``guildId`` -> ``guild_id``. Only camel boundaries are touched, so
    keys like ``en-US`` pass through."""
    return _CAMEL_BOUNDARY.sub(lambda m: f"{m.group(1)}_{m.group(2).lower()}", key)


def to_camel_case(value: Any) -> Any:
    """Return a deep copy of ``value`` with every dict key camelCased.

    Lists are mapped element-wise; any other value is returned as-is.
    """
    if isinstance(value, dict):
        return {
            camel_key(k) if isinstance(k, str) else k: to_camel_case(v)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [to_camel_case(item) for item in value]
    return value


def to_snake_case(value: Any) -> Any:
    """Inverse of :func:`to_camel_case` for outbound request bodies."""
    if isinstance(value, dict):
        return {
            snake_key(k) if isinstance(k, str) else k: to_snake_case(v)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [to_snake_case(item) for item in value]
    return value
