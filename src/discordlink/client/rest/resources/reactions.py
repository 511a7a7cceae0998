"""Message reactions."""

from __future__ import annotations

from typing import Any, Optional

from .base import ResourceApi, encode_emoji, params


class ReactionsApi(ResourceApi):
    def _path(self, channel_id: str, message_id: str, emoji: str) -> str:
        return (
            f"channels/{channel_id}/messages/{message_id}"
            f"/reactions/{encode_emoji(emoji)}"
        )

    async def create(self, channel_id: str, message_id: str, emoji: str) -> None:
        """React to a message as the bot."""
        await self._client.put(f"{self._path(channel_id, message_id, emoji)}/@me")

    async def list_users(
        self,
        channel_id: str,
        message_id: str,
        emoji: str,
        after: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        return await self._client.get(
            self._path(channel_id, message_id, emoji), params(after=after, limit=limit)
        )

    async def delete_own(self, channel_id: str, message_id: str, emoji: str) -> None:
        await self._client.delete(f"{self._path(channel_id, message_id, emoji)}/@me")

    async def delete_user(
        self, channel_id: str, message_id: str, emoji: str, user_id: str
    ) -> None:
        await self._client.delete(
            f"{self._path(channel_id, message_id, emoji)}/{user_id}"
        )

    async def delete_all(
        self, channel_id: str, message_id: str, emoji: Optional[str] = None
    ) -> None:
        """Remove every reaction, or every reaction for one emoji."""
        path = f"channels/{channel_id}/messages/{message_id}/reactions"
        if emoji:
            path = self._path(channel_id, message_id, emoji)
        await self._client.delete(path)
