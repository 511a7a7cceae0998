"""Tests for recursive key-case transcoding."""

from discordlink.utils import camel_key, snake_key, to_camel_case, to_snake_case


class TestCamelCase:
    def test_rewrites_nested_keys(self):
        payload = {
            "guild_id": "1",
            "user": {"id": "2", "global_name": "Ann", "avatar_decoration_data": None},
        }

        assert to_camel_case(payload) == {
            "guildId": "1",
            "user": {"id": "2", "globalName": "Ann", "avatarDecorationData": None},
        }

    def test_maps_arrays_element_wise(self):
        payload = {"members": [{"joined_at": "t1"}, {"joined_at": "t2"}], "ids": ["1", "2"]}

        assert to_camel_case(payload) == {
            "members": [{"joinedAt": "t1"}, {"joinedAt": "t2"}],
            "ids": ["1", "2"],
        }

    def test_nested_arrays(self):
        assert to_camel_case([[{"a_b": 1}], []]) == [[{"aB": 1}], []]

    def test_leaves_pass_through(self):
        assert to_camel_case("guild_id") == "guild_id"
        assert to_camel_case(5) == 5
        assert to_camel_case(None) is None
        assert to_camel_case(True) is True

    def test_values_not_rewritten(self):
        assert to_camel_case({"status": "do_not_disturb"}) == {"status": "do_not_disturb"}

    def test_returns_copy(self):
        original = {"user": {"global_name": "Ann"}}

        result = to_camel_case(original)
        result["user"]["globalName"] = "Bob"

        assert original == {"user": {"global_name": "Ann"}}

    def test_idempotent(self):
        payload = {"guild_id": "1", "roles": [{"unicode_emoji": None}], "nested": {"a_b_c": 1}}

        once = to_camel_case(payload)

        assert to_camel_case(once) == once

    def test_keys_without_underscore_unchanged(self):
        assert camel_key("id") == "id"
        assert camel_key("guildId") == "guildId"
        assert camel_key("en-US") == "en-US"


class TestSnakeCase:
    def test_rewrites_camel_keys(self):
        assert to_snake_case({"allowedMentions": {"repliedUser": True}}) == {
            "allowed_mentions": {"replied_user": True}
        }

    def test_locale_keys_preserved(self):
        assert snake_key("en-US") == "en-US"

    def test_round_trip_restores_key_set(self):
        original = {
            "guild_id": "1",
            "user": {"global_name": "Ann", "id": "2"},
            "roles": [{"unicode_emoji": None, "permissions": "0"}],
        }

        assert to_snake_case(to_camel_case(original)) == original
