"""Tests for intent flag resolution."""

import itertools

import pytest

from discordlink.platform.intents import Intent, intent_from_name, resolve_intents

DOCUMENTED = {
    "guilds": 1 << 0,
    "guild_members": 1 << 1,
    "guild_moderation": 1 << 2,
    "guild_emojis_and_stickers": 1 << 3,
    "guild_integrations": 1 << 4,
    "guild_webhooks": 1 << 5,
    "guild_invites": 1 << 6,
    "guild_voice_states": 1 << 7,
    "guild_presences": 1 << 8,
    "guild_messages": 1 << 9,
    "guild_message_reactions": 1 << 10,
    "guild_message_typing": 1 << 11,
    "direct_messages": 1 << 12,
    "direct_message_reactions": 1 << 13,
    "direct_message_typing": 1 << 14,
    "message_content": 1 << 15,
    "guild_scheduled_events": 1 << 16,
    "auto_moderation_configuration": 1 << 20,
    "auto_moderation_execution": 1 << 21,
}


@pytest.mark.parametrize("name,value", DOCUMENTED.items())
def test_each_flag_has_documented_value(name, value):
    assert resolve_intents([name]) == value


def test_all_flags_are_disjoint():
    assert resolve_intents(list(DOCUMENTED)) == sum(DOCUMENTED.values())


def test_order_independent():
    names = ["guilds", "guild_messages", "message_content"]
    expected = (1 << 0) | (1 << 9) | (1 << 15)

    for permutation in itertools.permutations(names):
        assert resolve_intents(list(permutation)) == expected


def test_duplicates_counted_once():
    assert resolve_intents(["guilds", "guilds", "guild_members"]) == 0b11


def test_names_are_case_insensitive():
    assert resolve_intents(["GUILDS", "Guild_Members"]) == 0b11


def test_accepts_tuple_and_set():
    assert resolve_intents(("guilds",)) == 1
    assert resolve_intents({"guild_members"}) == 2


def test_accepts_intent_members():
    assert resolve_intents([Intent.GUILDS, "guild_members"]) == 0b11


def test_integer_passed_through():
    assert resolve_intents(513) == 513
    assert resolve_intents(Intent.GUILDS | Intent.GUILD_MESSAGES) == 513


def test_none_means_no_intents():
    assert resolve_intents(None) == 0


def test_empty_list_means_no_intents():
    assert resolve_intents([]) == 0


def test_unknown_name_raises_and_names_it():
    with pytest.raises(ValueError) as exc_info:
        resolve_intents(["guilds", "guild_webhhooks"])

    assert "guild_webhhooks" in str(exc_info.value)


@pytest.mark.parametrize("value,type_name", [("guilds", "str"), (1.5, "float"), ({"a": 1}, "dict")])
def test_wrong_type_raises_type_error(value, type_name):
    with pytest.raises(TypeError) as exc_info:
        resolve_intents(value)

    assert type_name in str(exc_info.value)


def test_bool_rejected():
    with pytest.raises(TypeError):
        resolve_intents(True)


def test_non_string_name_rejected():
    with pytest.raises(TypeError):
        resolve_intents(["guilds", 3])


def test_intent_from_name():
    assert intent_from_name("message_content") is Intent.MESSAGE_CONTENT
