"""Shared logging configuration for examples."""

import logging


def setup_logging(level=logging.INFO):
    """Show discordlink logs at ``level`` and dependencies only from WARNING."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("discordlink").setLevel(level)
