"""Unit tests for the CLI logger-level parser.

Exercises sortkit.entrypoints.cli.helpers.log_level_parser.parse_log_level:
defaults, override order, comma/space normalization, case-insensitivity, and
rejection of malformed input.
"""

import logging
import types

import click
import pytest

from sortkit.entrypoints.cli.helpers.log_level_parser import parse_log_level

# pylint: disable=magic-value-comparison

# The callback ignores its context; a stub stands in for click.Context.
CTX = types.SimpleNamespace()


def test_empty_uses_defaults():
    """No items yields the default library levels."""
    assert parse_log_level(CTX, None, ()) == {"concurrent.futures": logging.WARNING}


def test_later_items_win():
    """Repeated names keep the last level given."""
    out = parse_log_level(
        CTX, None, ("sortkit=INFO", "concurrent.futures=ERROR", "sortkit=DEBUG")
    )
    assert out == {"sortkit": logging.DEBUG, "concurrent.futures": logging.ERROR}


@pytest.mark.parametrize(
    "value",
    [
        "sortkit=info,  urllib3=WaRnInG concurrent.futures=error",
        ("sortkit=info,urllib3=WARNING", "concurrent.futures=ERROR"),
    ],
)
def test_mixed_separators_and_case(value):
    """Commas, whitespace and mixed-case level names are all accepted."""
    out = parse_log_level(CTX, None, value)
    assert out["sortkit"] == logging.INFO
    assert out["urllib3"] == logging.WARNING
    assert out["concurrent.futures"] == logging.ERROR


@pytest.mark.parametrize(
    "item, message",
    [
        ("not-a-pair", "Expected NAME=LEVEL"),
        ("=INFO", "Expected NAME=LEVEL"),
        ("sortkit=LOUD", "Invalid log level: LOUD"),
        ("sortkit=", "Invalid log level"),
    ],
)
def test_malformed_items_raise(item, message):
    """Malformed items raise click.BadParameter."""
    with pytest.raises(click.BadParameter, match=message):
        parse_log_level(CTX, None, (item,))
