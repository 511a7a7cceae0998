"""
Event normalization.

Turns a wire event name (``GUILD_BAN_ADD``) into a canonical name
(``ban_add``), its topic path (``("ban", "add")``) and an EventKind, and
camelCases the payload keys.
"""

from __future__ import annotations

from typing import Any

from discordlink.platform.event import DispatchEvent, EventKind
from discordlink.utils.casing import to_camel_case


# Lowercased wire name -> canonical name. Unlisted names pass through.
ALIASES: dict[str, str] = {
    "application_command_permissions_update": "command_permissions_update",
    "auto_moderation_rule_create": "automod_rule_create",
    "auto_moderation_rule_update": "automod_rule_update",
    "auto_moderation_rule_delete": "automod_rule_delete",
    "auto_moderation_action_execution": "automod_action_execute",
    "guild_audit_log_entry_create": "auditlog_entry_create",
    "guild_ban_add": "ban_add",
    "guild_ban_remove": "ban_remove",
    "guild_emojis_update": "emojis_update",
    "guild_stickers_update": "stickers_update",
    "guild_integrations_update": "integrations_update",
    "guild_member_add": "member_add",
    "guild_member_remove": "member_remove",
    "guild_member_update": "member_update",
    "guild_members_chunk": "members_chunk",
    "guild_role_create": "role_create",
    "guild_role_update": "role_update",
    "guild_role_delete": "role_delete",
    "guild_scheduled_event_create": "scheduledevent_create",
    "guild_scheduled_event_update": "scheduledevent_update",
    "guild_scheduled_event_delete": "scheduledevent_delete",
    "guild_scheduled_event_user_add": "scheduledevent_user_add",
    "guild_scheduled_event_user_remove": "scheduledevent_user_remove",
    "stage_instance_create": "stageinstance_create",
    "stage_instance_update": "stageinstance_update",
    "stage_instance_delete": "stageinstance_delete",
}


def normalize_event_name(wire_name: str) -> str:
    """Lowercase the wire name and apply the alias table."""
    name = wire_name.lower()
    return ALIASES.get(name, name)


def topic_path(name: str) -> tuple[str, ...]:
    return tuple(name.split("_"))


def normalize(
    wire_name: str,
    payload: Any,
    sequence: int | None = None,
    raw: dict[str, Any] | None = None,
) -> DispatchEvent | None:
    """
    Build a DispatchEvent from a wire event.

    Returns:
        The event, or None when the canonical path is not a declared
        EventKind (the caller logs and drops it).
    """
    name = normalize_event_name(wire_name)
    kind = EventKind.from_path(topic_path(name))
    if kind is None:
        return None
    return DispatchEvent(
        kind=kind,
        payload=to_camel_case(payload),
        sequence=sequence,
        raw=raw,
    )
