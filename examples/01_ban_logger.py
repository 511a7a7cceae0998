"""
Ban logger example.

Connects to the gateway and prints every ban and unban it sees, plus a
line when the session is ready or resumed.

Run with (after adding a `ban_logger` entry to bot_config.yaml):
    python 01_ban_logger.py
"""

import asyncio

from setup_logging import setup_logging
from discordlink import DiscordLink, DispatchEvent, EventKind
from discordlink.config import load_bot_config

setup_logging()


async def main():
    token, options = load_bot_config("ban_logger")
    link = DiscordLink(token, options)

    async def on_ban(event: DispatchEvent):
        user = event.payload["user"]
        action = "banned" if event.kind is EventKind.BAN_ADD else "unbanned"
        print(f"{user.get('username', user['id'])} {action} in {event.payload['guildId']}")

    async def on_session(event: DispatchEvent):
        print(f"Session {event.kind.value} (seq {link.session.sequence})")

    link.on(EventKind.BAN_ADD, on_ban)
    link.on(EventKind.BAN_REMOVE, on_ban)
    link.on(EventKind.READY, on_session)
    link.on(EventKind.RESUMED, on_session)

    try:
        await link.run_forever()
    finally:
        await link.rest.aclose()


if __name__ == "__main__":
    asyncio.run(main())
