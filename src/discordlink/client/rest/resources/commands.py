"""
Application commands.

Every path is scoped to the application id decoded from the bot token;
passing ``guild_id`` targets guild commands instead of global ones.
"""

from __future__ import annotations

from typing import Any, Optional

from .base import ResourceApi, params


def _commands_path(guild_id: Optional[str] = None) -> str:
    if guild_id:
        return f"applications/{{APP_ID}}/guilds/{guild_id}/commands"
    return "applications/{APP_ID}/commands"


class CommandsApi(ResourceApi):
    async def create(
        self, command: dict[str, Any], guild_id: Optional[str] = None
    ) -> dict[str, Any]:
        return await self._client.post(_commands_path(guild_id), command)

    async def get(self, command_id: str, guild_id: Optional[str] = None) -> dict[str, Any]:
        return await self._client.get(f"{_commands_path(guild_id)}/{command_id}")

    async def edit(
        self,
        command_id: str,
        command: dict[str, Any],
        guild_id: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._client.patch(
            f"{_commands_path(guild_id)}/{command_id}", command
        )

    async def delete(self, command_id: str, guild_id: Optional[str] = None) -> None:
        await self._client.delete(f"{_commands_path(guild_id)}/{command_id}")

    async def list(
        self, guild_id: Optional[str] = None, with_localizations: Optional[bool] = None
    ) -> list[dict[str, Any]]:
        return await self._client.get(
            _commands_path(guild_id), params(withLocalizations=with_localizations)
        )

    async def bulk_overwrite(
        self, commands: list[dict[str, Any]], guild_id: Optional[str] = None
    ) -> list[dict[str, Any]]:
        """Replace every command in the scope with ``commands``."""
        return await self._client.put(_commands_path(guild_id), commands)

    async def list_permissions(self, guild_id: str) -> list[dict[str, Any]]:
        return await self._client.get(f"{_commands_path(guild_id)}/permissions")

    async def get_permissions(self, command_id: str, guild_id: str) -> dict[str, Any]:
        return await self._client.get(
            f"{_commands_path(guild_id)}/{command_id}/permissions"
        )
