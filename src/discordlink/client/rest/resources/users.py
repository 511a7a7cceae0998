"""Users and DM channels."""

from __future__ import annotations

from typing import Any

from .base import ResourceApi


class UsersApi(ResourceApi):
    async def me(self) -> dict[str, Any]:
        return await self._client.get("users/@me")

    async def edit_me(self, settings: dict[str, Any]) -> dict[str, Any]:
        return await self._client.patch("users/@me", settings)

    async def get(self, user_id: str) -> dict[str, Any]:
        return await self._client.get(f"users/{user_id}")

    async def create_dm(self, recipient_id: str) -> dict[str, Any]:
        """Open (or fetch) the DM channel with a user."""
        return await self._client.post(
            "users/@me/channels", {"recipientId": recipient_id}
        )
