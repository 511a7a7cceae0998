"""
Discord REST API client.

Usage:
    from discordlink.client.rest import RestClient
    rest = RestClient(Credentials.from_token("your-bot-token"))
"""

from discordlink.client.rest.client import API_BASE_URL, RestClient
from discordlink.client.rest.resources import CallbackType
from discordlink.errors import NotLoggedInError, RestError

__all__ = [
    "API_BASE_URL",
    "CallbackType",
    "RestClient",
    "NotLoggedInError",
    "RestError",
]
