"""Guild members."""

from __future__ import annotations

from typing import Any, Optional

from .base import ResourceApi, params


class MembersApi(ResourceApi):
    async def get(self, guild_id: str, user_id: str) -> dict[str, Any]:
        return await self._client.get(f"guilds/{guild_id}/members/{user_id}")

    async def list(
        self, guild_id: str, limit: Optional[int] = None, after: Optional[str] = None
    ) -> list[dict[str, Any]]:
        return await self._client.get(
            f"guilds/{guild_id}/members", params(limit=limit, after=after)
        )

    async def search(
        self, guild_id: str, query: str, limit: Optional[int] = None
    ) -> list[dict[str, Any]]:
        """Members whose username or nickname starts with ``query``."""
        return await self._client.get(
            f"guilds/{guild_id}/members/search", params(query=query, limit=limit)
        )

    async def edit(
        self, guild_id: str, user_id: str, member: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._client.patch(f"guilds/{guild_id}/members/{user_id}", member)

    async def remove(self, guild_id: str, user_id: str) -> None:
        await self._client.delete(f"guilds/{guild_id}/members/{user_id}")

    async def add_role(self, guild_id: str, user_id: str, role_id: str) -> None:
        await self._client.put(f"guilds/{guild_id}/members/{user_id}/roles/{role_id}")

    async def remove_role(self, guild_id: str, user_id: str, role_id: str) -> None:
        await self._client.delete(
            f"guilds/{guild_id}/members/{user_id}/roles/{role_id}"
        )
