"""
discordlink - Discord gateway and REST client.

Platform Layer:
    DiscordLink: Gateway session (identify, heartbeat, resume, reconnect)
    EventKind / DispatchEvent: Normalized gateway events
    Intent: Gateway intent flags

Client Layer:
    RestClient: Authenticated REST calls with resource namespaces

Example:
    from discordlink import DiscordLink, ConnectOptions, EventKind

    link = DiscordLink(token, ConnectOptions(intents=["guilds", "guild_messages"]))

    async def on_ban(event):
        print(f"Banned {event.payload['user']['id']} in {event.payload['guildId']}")

    link.on(EventKind.BAN_ADD, on_ban)
    await link.run_forever()

Example (REST only):
    from discordlink import login

    rest = login(token)
    me = await rest.users.me()
"""

from .auth import login
from .client import GatewayClient, RestClient
from .errors import DiscordLinkError, GatewayClosedError, NotLoggedInError, RestError
from .platform import (
    CloseCodePolicy,
    ConnectOptions,
    Credentials,
    DiscordLink,
    DispatchEvent,
    EventBus,
    EventKind,
    Intent,
    SessionState,
    listen,
)

__all__ = [
    # Entry points
    "DiscordLink",
    "listen",
    "login",
    # Platform
    "ConnectOptions",
    "CloseCodePolicy",
    "Credentials",
    "SessionState",
    "DispatchEvent",
    "EventBus",
    "EventKind",
    "Intent",
    # Clients
    "GatewayClient",
    "RestClient",
    # Errors
    "DiscordLinkError",
    "GatewayClosedError",
    "NotLoggedInError",
    "RestError",
]

__version__ = "0.0.1"
