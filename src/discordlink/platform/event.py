"""
Gateway events as a closed set of kinds.

Every dispatch the connector publishes carries one EventKind, so handlers can
pattern match on ``event.kind`` instead of comparing free-form topic strings.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class EventKind(str, enum.Enum):
    """Canonical event topics, valued by their slash-joined path."""

    HELLO = "hello"
    READY = "ready"
    RESUMED = "resumed"
    RECONNECT = "reconnect"
    INVALID_SESSION = "invalid/session"
    COMMAND_PERMISSIONS_UPDATE = "command/permissions/update"
    AUTOMOD_RULE_CREATE = "automod/rule/create"
    AUTOMOD_RULE_UPDATE = "automod/rule/update"
    AUTOMOD_RULE_DELETE = "automod/rule/delete"
    AUTOMOD_ACTION_EXECUTE = "automod/action/execute"
    CHANNEL_CREATE = "channel/create"
    CHANNEL_UPDATE = "channel/update"
    CHANNEL_DELETE = "channel/delete"
    CHANNEL_PINS_UPDATE = "channel/pins/update"
    THREAD_CREATE = "thread/create"
    THREAD_UPDATE = "thread/update"
    THREAD_DELETE = "thread/delete"
    THREAD_LIST_SYNC = "thread/list/sync"
    THREAD_MEMBER_UPDATE = "thread/member/update"
    THREAD_MEMBERS_UPDATE = "thread/members/update"
    GUILD_CREATE = "guild/create"
    GUILD_UPDATE = "guild/update"
    GUILD_DELETE = "guild/delete"
    AUDITLOG_ENTRY_CREATE = "auditlog/entry/create"
    BAN_ADD = "ban/add"
    BAN_REMOVE = "ban/remove"
    EMOJIS_UPDATE = "emojis/update"
    STICKERS_UPDATE = "stickers/update"
    INTEGRATIONS_UPDATE = "integrations/update"
    MEMBER_ADD = "member/add"
    MEMBER_REMOVE = "member/remove"
    MEMBER_UPDATE = "member/update"
    MEMBERS_CHUNK = "members/chunk"
    ROLE_CREATE = "role/create"
    ROLE_UPDATE = "role/update"
    ROLE_DELETE = "role/delete"
    SCHEDULEDEVENT_CREATE = "scheduledevent/create"
    SCHEDULEDEVENT_UPDATE = "scheduledevent/update"
    SCHEDULEDEVENT_DELETE = "scheduledevent/delete"
    SCHEDULEDEVENT_USER_ADD = "scheduledevent/user/add"
    SCHEDULEDEVENT_USER_REMOVE = "scheduledevent/user/remove"
    INTEGRATION_CREATE = "integration/create"
    INTEGRATION_UPDATE = "integration/update"
    INTEGRATION_DELETE = "integration/delete"
    INTERACTION_CREATE = "interaction/create"
    INVITE_CREATE = "invite/create"
    INVITE_DELETE = "invite/delete"
    MESSAGE_CREATE = "message/create"
    MESSAGE_UPDATE = "message/update"
    MESSAGE_DELETE = "message/delete"
    MESSAGE_DELETE_BULK = "message/delete/bulk"
    MESSAGE_REACTION_ADD = "message/reaction/add"
    MESSAGE_REACTION_REMOVE = "message/reaction/remove"
    MESSAGE_REACTION_REMOVE_ALL = "message/reaction/remove/all"
    MESSAGE_REACTION_REMOVE_EMOJI = "message/reaction/remove/emoji"
    PRESENCE_UPDATE = "presence/update"
    STAGEINSTANCE_CREATE = "stageinstance/create"
    STAGEINSTANCE_UPDATE = "stageinstance/update"
    STAGEINSTANCE_DELETE = "stageinstance/delete"
    TYPING_START = "typing/start"
    USER_UPDATE = "user/update"
    VOICE_STATE_UPDATE = "voice/state/update"
    VOICE_SERVER_UPDATE = "voice/server/update"
    WEBHOOKS_UPDATE = "webhooks/update"

    @property
    def path(self) -> tuple[str, ...]:
        """Topic path segments, e.g. ``("ban", "add")``."""
        return tuple(self.value.split("/"))

    @classmethod
    def from_path(cls, path: tuple[str, ...] | list[str]) -> EventKind | None:
        """Return the kind for a topic path, or None if it is not declared."""
        try:
            return cls("/".join(path))
        except ValueError:
            return None


@dataclass
class DispatchEvent:
    """A normalized dispatch: canonical kind plus camelCased payload."""

    kind: EventKind
    payload: Any = None
    sequence: int | None = None
    raw: dict[str, Any] | None = field(default=None, repr=False)

    @property
    def path(self) -> tuple[str, ...]:
        return self.kind.path
