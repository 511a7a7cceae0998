"""REST-only login (no gateway connection)."""

from __future__ import annotations

from discordlink.client.rest import RestClient
from discordlink.platform.types import Credentials


def login(token: str) -> RestClient:
    """
    Authenticate API requests without connecting to the gateway.

    Raises:
        ValueError: If token is empty
    """
    return RestClient(Credentials.from_token(token))
