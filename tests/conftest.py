"""
Pytest fixtures for discordlink tests.

Gateway tests run against scripted fake websockets (see tests/fakes.py), so
no test touches the network.
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from discordlink.platform.link import DiscordLink
from discordlink.platform.types import ConnectOptions
from tests.fakes import TOKEN, FakeConnector, FakeWebSocket


@pytest.fixture
def make_link():
    """Build a DiscordLink wired to fake sockets, with the reconnect delay mocked.

    The link's connector is available as ``link._connect`` for asserting on
    connect URLs and call counts.
    """

    def _make(*sockets: FakeWebSocket, **option_kwargs: Any) -> DiscordLink:
        link = DiscordLink(
            TOKEN,
            ConnectOptions(**option_kwargs),
            rest=MagicMock(),
            connect=FakeConnector(*sockets),
        )
        link._sleep = AsyncMock()
        return link

    return _make
