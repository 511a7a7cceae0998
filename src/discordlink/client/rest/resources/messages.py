"""Channel messages."""

from __future__ import annotations

from typing import Any, Optional

from .base import ResourceApi, params


class MessagesApi(ResourceApi):
    async def create(self, channel_id: str, message: dict[str, Any]) -> dict[str, Any]:
        """
        Post a message to a channel.

        Args:
            channel_id: Target channel
            message: Message fields in camelCase or snake_case; at least one of
                content, embeds, components or stickerIds is required

        Raises:
            ValueError: If the message has no content-bearing field
        """
        if not any(
            message.get(key)
            for key in (
                "content",
                "embeds",
                "components",
                "stickerIds",
                "sticker_ids",
                "files",
            )
        ):
            raise ValueError(
                "message needs one of content, embeds, components, stickerIds or files"
            )
        return await self._client.post(f"channels/{channel_id}/messages", message)

    async def edit(
        self, channel_id: str, message_id: str, message: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._client.patch(
            f"channels/{channel_id}/messages/{message_id}", message
        )

    async def delete(self, channel_id: str, message_id: str) -> None:
        await self._client.delete(f"channels/{channel_id}/messages/{message_id}")

    async def bulk_delete(self, channel_id: str, message_ids: list[str]) -> None:
        """Delete 2-100 messages at once."""
        await self._client.post(
            f"channels/{channel_id}/messages/bulk-delete", {"messages": message_ids}
        )

    async def get(self, channel_id: str, message_id: str) -> dict[str, Any]:
        return await self._client.get(f"channels/{channel_id}/messages/{message_id}")

    async def list(
        self,
        channel_id: str,
        limit: Optional[int] = None,
        before: Optional[str] = None,
        after: Optional[str] = None,
        around: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        return await self._client.get(
            f"channels/{channel_id}/messages",
            params(limit=limit, before=before, after=after, around=around),
        )
