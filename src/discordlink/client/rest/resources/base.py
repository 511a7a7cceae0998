from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

if TYPE_CHECKING:
    from discordlink.client.rest.client import RestClient


class ResourceApi:
    """One REST resource family, bound to a RestClient."""

    def __init__(self, client: "RestClient"):
        self._client = client


def params(**values: Any) -> dict[str, Any]:
    """Query params without unset (None) values."""
    return {key: value for key, value in values.items() if value is not None}


def encode_emoji(emoji: str) -> str:
    """URL-encode a unicode emoji or a ``name:id`` custom emoji."""
    return quote(emoji, safe="")
