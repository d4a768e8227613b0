"""Reading sortable items from text streams.

One item per line; blank lines are skipped. In numeric mode every line must
parse as an ``int`` or, failing that, a ``float``.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from sortkit.errors import InvalidNumberError

if TYPE_CHECKING:
    from typing import TextIO


def parse_number(text: str, line_number: int = 1) -> int | float:
    """Parse *text* as an int, or a float when it is not an integer literal.

    Raises:
        InvalidNumberError: If *text* is neither.
    """
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError as e:
        raise InvalidNumberError(line_number, text) from e


def parse_items(lines: Iterable[str], numeric: bool = False) -> list[Any]:
    """Turn raw lines into a list of items, skipping blank lines."""
    items: list[Any] = []
    for line_number, line in enumerate(lines, start=1):
        text = line.rstrip("\r\n")
        if not text.strip():
            continue
        items.append(parse_number(text.strip(), line_number) if numeric else text)
    return items


def read_items(stream: TextIO, numeric: bool = False) -> list[Any]:
    """Read all items from *stream*."""
    return parse_items(stream, numeric=numeric)


def ordering(reverse: bool = False) -> Callable[[Any, Any], bool]:
    """Return the less-predicate for ascending or descending order."""
    return operator.gt if reverse else operator.lt
