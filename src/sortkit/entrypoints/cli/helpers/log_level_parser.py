"""Parsing of ``-L NAME=LEVEL`` logger-level options.

Accepts repeated options or a single comma/space separated string (as read
from ``SORTKIT_LOGGER_LEVELS``) and turns them into a name -> level mapping.
"""

import logging
import re

import click

# Worker-pool chatter is quiet unless explicitly requested.
DEFAULT_LIB_LEVELS = {"concurrent.futures": logging.WARNING}


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten a string or sequence of strings on commas and whitespace."""
    raw = [value] if isinstance(value, str) else list(value)
    return [item for chunk in raw for item in re.split(r"[,\s]+", chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into a name -> level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
