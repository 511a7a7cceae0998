"""Tests for RestClient (shared request helper)."""

import json

import httpx
import pytest

from discordlink.client.rest import RestClient
from discordlink.errors import NotLoggedInError, RestError
from discordlink.platform.types import Credentials
from tests.fakes import APP_ID, TOKEN


class Recorder:
    """httpx MockTransport handler that records requests."""

    def __init__(self, status_code: int = 200, json_body=None, content: bytes = b""):
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_rest(recorder: Recorder, credentials: Credentials | None = None) -> RestClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    return RestClient(credentials or Credentials.from_token(TOKEN), http_client=http)


class TestRequests:
    async def test_sends_bot_authorization(self):
        recorder = Recorder(json_body={})
        async with make_rest(recorder) as rest:
            await rest.get("users/@me")

        assert recorder.last.headers["Authorization"] == f"Bot {TOKEN}"
        assert recorder.last.headers["Content-Type"] == "application/json"

    async def test_uses_versioned_base_url(self):
        recorder = Recorder(json_body={})
        async with make_rest(recorder) as rest:
            await rest.get("users/@me")

        assert str(recorder.last.url) == "https://discord.com/api/v10/users/@me"

    async def test_custom_base_url_gets_trailing_slash(self):
        recorder = Recorder(json_body={})
        http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        rest = RestClient(
            Credentials.from_token(TOKEN),
            base_url="https://api.test/v10",
            http_client=http,
        )

        await rest.get("users/@me")

        assert str(recorder.last.url) == "https://api.test/v10/users/@me"
        await rest.aclose()

    async def test_response_keys_camel_cased(self):
        recorder = Recorder(
            json_body=[{"guild_id": "1", "user": {"global_name": "Ann"}}]
        )
        async with make_rest(recorder) as rest:
            result = await rest.get("guilds/1/bans")

        assert result == [{"guildId": "1", "user": {"globalName": "Ann"}}]

    async def test_request_body_snake_cased(self):
        recorder = Recorder(json_body={})
        async with make_rest(recorder) as rest:
            await rest.post("channels/1/messages", {"allowedMentions": {"parse": []}})

        assert json.loads(recorder.last.content) == {"allowed_mentions": {"parse": []}}

    async def test_params_snake_cased_and_none_dropped(self):
        recorder = Recorder(json_body=[])
        async with make_rest(recorder) as rest:
            await rest.get("x", {"withCounts": True, "limit": None})

        assert dict(recorder.last.url.params) == {"with_counts": "true"}

    async def test_empty_response_returns_none(self):
        recorder = Recorder(status_code=204)
        async with make_rest(recorder) as rest:
            result = await rest.delete("guilds/1/bans/2")

        assert result is None


class TestAppIdPlaceholder:
    async def test_substitutes_app_id(self):
        recorder = Recorder(json_body=[])
        async with make_rest(recorder) as rest:
            await rest.get("applications/{APP_ID}/commands")

        assert recorder.last.url.path == f"/api/v10/applications/{APP_ID}/commands"

    async def test_missing_app_id_raises_not_logged_in(self):
        recorder = Recorder(json_body=[])
        rest = make_rest(recorder, Credentials(token="opaque", app_id=None))

        with pytest.raises(NotLoggedInError, match="Not logged in"):
            await rest.get("applications/{APP_ID}/commands")

        assert recorder.requests == []
        await rest.aclose()

    def test_paths_without_placeholder_untouched(self):
        rest = RestClient(Credentials(token="opaque", app_id=None))

        assert rest.resolve_path("users/@me") == "users/@me"


class TestErrors:
    async def test_error_status_raises_rest_error(self):
        recorder = Recorder(
            status_code=404, json_body={"message": "Unknown Ban", "code": 10026}
        )
        async with make_rest(recorder) as rest:
            with pytest.raises(RestError) as exc_info:
                await rest.get("guilds/1/bans/2")

        error = exc_info.value
        assert error.status_code == 404
        assert error.reason == "Not Found"
        assert error.body == {"message": "Unknown Ban", "code": 10026}
        assert "404 Not Found" in str(error)
        assert '"Unknown Ban"' in str(error)

    async def test_non_json_error_body_kept_as_text(self):
        recorder = Recorder(status_code=502, content=b"bad gateway")
        async with make_rest(recorder) as rest:
            with pytest.raises(RestError) as exc_info:
                await rest.get("users/@me")

        assert exc_info.value.body == "bad gateway"
