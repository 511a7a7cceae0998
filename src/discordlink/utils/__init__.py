"""Stateless helpers shared by the gateway and REST layers."""

from discordlink.utils.casing import (
    camel_key,
    snake_key,
    to_camel_case,
    to_snake_case,
)
from discordlink.utils.token import token_to_id

__all__ = [
    "camel_key",
    "snake_key",
    "to_camel_case",
    "to_snake_case",
    "token_to_id",
]
