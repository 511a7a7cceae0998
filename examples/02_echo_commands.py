"""
Slash command example.

Registers a global `/echo` command over REST, then answers each invocation
by replying to the interaction with the same text.

Run with (after adding an `echo_bot` entry to bot_config.yaml):
    python 02_echo_commands.py
"""

import asyncio

from setup_logging import setup_logging
from discordlink import DiscordLink, DispatchEvent, EventKind
from discordlink.config import load_bot_config

setup_logging()

ECHO_COMMAND = {
    "name": "echo",
    "description": "Repeat a message",
    "options": [
        {"type": 3, "name": "text", "description": "What to say", "required": True}
    ],
}


async def main():
    token, options = load_bot_config("echo_bot")
    link = DiscordLink(token, options)

    await link.rest.commands.bulk_overwrite([ECHO_COMMAND])
    print("Registered /echo")

    async def on_interaction(event: DispatchEvent):
        data = event.payload.get("data") or {}
        if data.get("name") != "echo":
            return
        text = next(
            (opt["value"] for opt in data.get("options", []) if opt["name"] == "text"),
            "",
        )
        await link.rest.interactions.reply(
            event.payload["id"], event.payload["token"], {"content": text}
        )

    link.on(EventKind.INTERACTION_CREATE, on_interaction)

    try:
        await link.run_forever()
    finally:
        await link.rest.aclose()


if __name__ == "__main__":
    asyncio.run(main())
