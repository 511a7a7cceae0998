"""Guild bans."""

from __future__ import annotations

from typing import Any, Optional

from .base import ResourceApi, params


class BansApi(ResourceApi):
    async def list(
        self,
        guild_id: str,
        limit: Optional[int] = None,
        before: Optional[str] = None,
        after: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """Return the bans for a guild (up to 1000 per page)."""
        return await self._client.get(
            f"guilds/{guild_id}/bans", params(limit=limit, before=before, after=after)
        )

    async def get(self, guild_id: str, user_id: str) -> dict[str, Any]:
        return await self._client.get(f"guilds/{guild_id}/bans/{user_id}")

    async def create(
        self,
        guild_id: str,
        user_id: str,
        delete_message_seconds: Optional[int] = None,
    ) -> dict[str, Any]:
        """
        Ban a user, optionally deleting up to 7 days (604800s) of their messages.

        Returns:
            A ban object carrying only the user id
        """
        await self._client.put(
            f"guilds/{guild_id}/bans/{user_id}",
            params(deleteMessageSeconds=delete_message_seconds),
        )
        return {"guildId": guild_id, "user": {"id": user_id}}

    async def remove(self, guild_id: str, user_id: str) -> None:
        await self._client.delete(f"guilds/{guild_id}/bans/{user_id}")
