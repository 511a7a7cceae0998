"""
Exception types raised by discordlink.

Configuration mistakes (missing token, bad intents) are raised as plain
ValueError/TypeError before any network I/O. Everything else derives from
DiscordLinkError.
"""

from __future__ import annotations

import json
from typing import Any


class DiscordLinkError(Exception):
    """Base class for discordlink errors."""


class GatewayClosedError(DiscordLinkError):
    """The gateway closed the connection with a non-retryable close code."""

    def __init__(self, code: int, reason: str = ""):
        self.code = code
        self.reason = reason
        message = f"Gateway closed with fatal code {code}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class NotLoggedInError(DiscordLinkError):
    """A request needed the application id but no credentials are set."""

    def __init__(self, message: str = "Not logged in"):
        super().__init__(message)


class RestError(DiscordLinkError):
    """Non-2xx response from the REST API."""

    def __init__(self, status_code: int, reason: str = "", body: Any = None):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(
            f"{status_code} {reason}\n{json.dumps(body, indent=2, default=str)}"
        )
