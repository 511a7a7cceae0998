"""
Connector types: credentials, resumable session state and connect options.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from discordlink.utils.token import token_to_id

logger = logging.getLogger(__name__)

DEFAULT_GATEWAY_URL = "wss://gateway.discord.gg/?v=10&encoding=json"

# Close codes after which the gateway must not be reconnected to.
DEFAULT_FATAL_CLOSE_CODES = frozenset(
    {
        4000,
        4001,
        4002,
        4003,
        4004,
        4005,
        4007,
        4008,
        4009,
    }
)


@dataclass(frozen=True)
class Credentials:
    """Bot token plus the application id decoded from it."""

    token: str
    app_id: str | None = None

    @classmethod
    def from_token(cls, token: str) -> Credentials:
        if not token:
            raise ValueError("token must be provided")
        try:
            app_id = token_to_id(token)
        except ValueError as e:
            logger.warning(f"Could not derive application id from token: {e}")
            app_id = None
        return cls(token=token, app_id=app_id)

    @property
    def authorization(self) -> str:
        return f"Bot {self.token}"


@dataclass
class SessionState:
    """Latest resume information received from the gateway."""

    session_id: str | None = None
    sequence: int | None = None
    resume_url: str | None = None

    @property
    def resumable(self) -> bool:
        return self.session_id is not None and self.sequence is not None

    def record_sequence(self, sequence: int | None) -> bool:
        """
        Store a dispatch sequence number.

        Returns:
            False when the number was ignored (missing or lower than stored)
        """
        if sequence is None:
            return False
        if self.sequence is not None and sequence < self.sequence:
            return False
        self.sequence = sequence
        return True

    def clear(self) -> None:
        self.session_id = None
        self.sequence = None
        self.resume_url = None


@dataclass
class CloseCodePolicy:
    """Classifies gateway close codes as fatal or retryable."""

    fatal_codes: frozenset[int] = DEFAULT_FATAL_CLOSE_CODES

    @classmethod
    def from_codes(cls, codes: Iterable[int]) -> CloseCodePolicy:
        return cls(fatal_codes=frozenset(codes))

    def is_fatal(self, code: int | None) -> bool:
        return code is not None and code in self.fatal_codes


@dataclass
class ConnectOptions:
    """Options for DiscordLink.

    ``intents`` is either a list of intent names or an integer bitmask.
    """

    presence: dict[str, Any] | None = None
    intents: list[str] | int | None = None
    reconnect_delay: float = 5.0
    gateway_url: str = DEFAULT_GATEWAY_URL
    close_codes: CloseCodePolicy = field(default_factory=CloseCodePolicy)
