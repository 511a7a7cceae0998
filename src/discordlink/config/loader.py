"""
Bot configuration management utilities.

This module loads bot credentials and gateway options from a YAML
configuration file at the project root.
"""

import logging
import os
from pathlib import Path
from typing import Tuple

import yaml

from discordlink.platform.types import CloseCodePolicy, ConnectOptions

logger = logging.getLogger(__name__)

OPTIONAL_FIELDS = ("intents", "presence", "reconnect_delay", "gateway_url")


def get_config_path() -> Path:
    """
    Get the path to the bot configuration file.

    Looks for bot_config.yaml in the current working directory (project root).
    """
    return Path(os.getcwd()) / "bot_config.yaml"


def load_bot_config(bot_key: str) -> Tuple[str, ConnectOptions]:
    """
    Load a bot token and connect options from YAML file at project root.

    Example file:

        my_bot:
          token: "MTA..."
          intents: [guilds, guild_messages, message_content]
          presence:
            status: idle
          fatal_close_codes: [4004, 4010, 4011, 4012, 4013, 4014]

    Args:
        bot_key: The key identifying the bot in the config file

    Returns:
        Tuple of (token, ConnectOptions)

    Raises:
        FileNotFoundError: If bot_config.yaml doesn't exist
        ValueError: If the bot entry or its token is missing
    """
    config_path = get_config_path()
    logger.debug(f"Loading config from: {config_path}")

    if not config_path.exists():
        raise FileNotFoundError(
            f"bot_config.yaml not found at {config_path}. "
            "Copy bot_config.yaml.example to bot_config.yaml and add your bot token."
        )

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}

        bot_config = config.get(bot_key, {})

        if not bot_config:
            raise ValueError(
                f"Bot '{bot_key}' not found in {config_path}. "
                f"Please add the bot configuration."
            )

        token = bot_config.get("token")
        if not token:
            raise ValueError(
                f"Missing required field for bot '{bot_key}': token. "
                f"Please add the bot token to {config_path}"
            )

        options = ConnectOptions(
            **{key: bot_config[key] for key in OPTIONAL_FIELDS if key in bot_config}
        )
        if "fatal_close_codes" in bot_config:
            options.close_codes = CloseCodePolicy.from_codes(
                bot_config["fatal_close_codes"]
            )

        return token, options
    except ValueError:
        raise
    except Exception as e:
        raise RuntimeError(f"Error loading bot config: {e}")
