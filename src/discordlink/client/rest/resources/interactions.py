"""
Interaction responses and follow-up messages.

An interaction must be answered with ``respond()`` within three seconds.
Later messages go through the interaction's webhook, addressed by the
interaction token rather than the bot token.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional

from .base import ResourceApi


class CallbackType(IntEnum):
    PONG = 1
    REPLY = 4
    DEFERRED_REPLY = 5
    DEFERRED_EDIT_MESSAGE = 6
    EDIT_MESSAGE = 7
    AUTOCOMPLETE_RESULT = 8
    MODAL = 9


def _webhook_path(token: str, message_id: str = "@original") -> str:
    return f"webhooks/{{APP_ID}}/{token}/messages/{message_id}"


class InteractionsApi(ResourceApi):
    async def respond(
        self,
        interaction_id: str,
        interaction_token: str,
        callback_type: CallbackType | int,
        data: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Send the initial response to an interaction.

        Args:
            interaction_id: Id from the INTERACTION_CREATE payload
            interaction_token: Token from the same payload
            callback_type: How to respond, e.g. CallbackType.REPLY
            data: Callback data (message fields, choices or modal)
        """
        response: dict[str, Any] = {"type": int(callback_type)}
        if data is not None:
            response["data"] = data
        await self._client.post(
            f"interactions/{interaction_id}/{interaction_token}/callback", response
        )

    async def reply(
        self, interaction_id: str, interaction_token: str, message: dict[str, Any]
    ) -> None:
        """Answer with a message."""
        await self.respond(
            interaction_id, interaction_token, CallbackType.REPLY, message
        )

    async def defer(self, interaction_id: str, interaction_token: str) -> None:
        """Acknowledge now and edit the original response later."""
        await self.respond(
            interaction_id, interaction_token, CallbackType.DEFERRED_REPLY
        )

    # --- Original response ---

    async def get_original(self, interaction_token: str) -> dict[str, Any]:
        return await self._client.get(_webhook_path(interaction_token))

    async def edit_original(
        self, interaction_token: str, message: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._client.patch(_webhook_path(interaction_token), message)

    async def delete_original(self, interaction_token: str) -> None:
        await self._client.delete(_webhook_path(interaction_token))

    # --- Follow-ups ---

    async def create_followup(
        self, interaction_token: str, message: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._client.post(
            f"webhooks/{{APP_ID}}/{interaction_token}", message
        )

    async def get_followup(
        self, interaction_token: str, message_id: str
    ) -> dict[str, Any]:
        return await self._client.get(_webhook_path(interaction_token, message_id))

    async def edit_followup(
        self, interaction_token: str, message_id: str, message: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._client.patch(
            _webhook_path(interaction_token, message_id), message
        )

    async def delete_followup(self, interaction_token: str, message_id: str) -> None:
        await self._client.delete(_webhook_path(interaction_token, message_id))
