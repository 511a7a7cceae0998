"""Bot token helpers."""

from __future__ import annotations

import base64
import binascii


def token_to_id(token: str) -> str:
    """
    Get the application (bot user) id from a bot token.

    The first dot-separated segment of a bot token is the base64-encoded id.
    Missing padding is tolerated.

    Raises:
        ValueError: If the first segment is not valid base64
    """
    segment = token.split(".")[0]
    segment += "=" * (-len(segment) % 4)
    try:
        return base64.urlsafe_b64decode(segment).decode("ascii")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError(f"Could not decode application id from token: {e}") from e
