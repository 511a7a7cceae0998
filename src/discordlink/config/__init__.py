"""
Bot configuration utilities.

Usage:
    from discordlink.config import load_bot_config

    token, options = load_bot_config("my_bot")
"""

from discordlink.config.loader import get_config_path, load_bot_config

__all__ = ["load_bot_config", "get_config_path"]
