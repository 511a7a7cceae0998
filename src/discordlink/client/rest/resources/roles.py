"""Guild roles."""

from __future__ import annotations

from typing import Any, Optional

from .base import ResourceApi


class RolesApi(ResourceApi):
    async def list(self, guild_id: str) -> list[dict[str, Any]]:
        return await self._client.get(f"guilds/{guild_id}/roles")

    async def create(
        self, guild_id: str, role: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        return await self._client.post(f"guilds/{guild_id}/roles", role or {})

    async def edit(
        self, guild_id: str, role_id: str, role: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._client.patch(f"guilds/{guild_id}/roles/{role_id}", role)

    async def delete(self, guild_id: str, role_id: str) -> None:
        await self._client.delete(f"guilds/{guild_id}/roles/{role_id}")
