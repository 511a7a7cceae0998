"""
RestClient - authenticated access to the Discord REST API.

Request bodies and query params are sent snake_cased; response bodies come
back camelCased, matching the payloads published by the gateway.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import httpx

from discordlink.errors import NotLoggedInError, RestError
from discordlink.utils.casing import to_camel_case, to_snake_case

from .resources import (
    BansApi,
    CommandsApi,
    InteractionsApi,
    MembersApi,
    MessagesApi,
    ReactionsApi,
    RolesApi,
    UsersApi,
)

if TYPE_CHECKING:
    from discordlink.platform.types import Credentials

logger = logging.getLogger(__name__)

API_BASE_URL = "https://discord.com/api/v10/"
APP_ID_PLACEHOLDER = "{APP_ID}"


class RestClient:
    """
    Shared request helper plus resource namespaces.

    Example:
        rest = RestClient(Credentials.from_token(token))
        bans = await rest.bans.list(guild_id, limit=10)
    """

    def __init__(
        self,
        credentials: "Credentials",
        base_url: str = API_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        self.credentials = credentials
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

        self.bans = BansApi(self)
        self.commands = CommandsApi(self)
        self.interactions = InteractionsApi(self)
        self.members = MembersApi(self)
        self.messages = MessagesApi(self)
        self.reactions = ReactionsApi(self)
        self.roles = RolesApi(self)
        self.users = UsersApi(self)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def resolve_path(self, path: str) -> str:
        """Substitute the application id placeholder."""
        if APP_ID_PLACEHOLDER not in path:
            return path
        if not self.credentials.app_id:
            raise NotLoggedInError()
        return path.replace(APP_ID_PLACEHOLDER, self.credentials.app_id)

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Send one request and return the camelCased response body.

        Raises:
            NotLoggedInError: If the path needs the application id and none is known
            RestError: On any response with status >= 400
        """
        url = self.base_url + self.resolve_path(path).lstrip("/")
        kwargs: dict[str, Any] = {
            "headers": {
                "Authorization": self.credentials.authorization,
                "Content-Type": "application/json",
            }
        }
        if params:
            kwargs["params"] = {
                key: value
                for key, value in to_snake_case(params).items()
                if value is not None
            }
        if body is not None:
            kwargs["json"] = to_snake_case(body)

        logger.debug(f"[REST] {method} {path}")
        response = await self._http.request(method, url, **kwargs)
        data = _decode(response)

        if response.status_code >= 400:
            logger.warning(f"[REST] {method} {path} failed: {response.status_code}")
            raise RestError(response.status_code, response.reason_phrase, data)

        return to_camel_case(data)

    async def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(
        self, path: str, body: Any = None, params: Optional[dict[str, Any]] = None
    ) -> Any:
        return await self.request("POST", path, body=body, params=params)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, body=body)

    async def patch(
        self, path: str, body: Any = None, params: Optional[dict[str, Any]] = None
    ) -> Any:
        return await self.request("PATCH", path, body=body, params=params)

    async def delete(
        self, path: str, body: Any = None, params: Optional[dict[str, Any]] = None
    ) -> Any:
        return await self.request("DELETE", path, body=body, params=params)


def _decode(response: httpx.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
