"""SORTKIT sorting commands.

Behavior
- Items are read one per line from a file argument or stdin (``-``); blank
  lines are skipped.
- Results go to **stdout**; status lines and logs go to **stderr**.

Failure modes
- Non-numeric line under ``--numeric`` -> ``ClickException`` (exit code 1).
- Invalid ``SORTKIT_PARALLELISM`` -> ``ClickException`` (exit code 1).
- ``check`` exits 1 when the input is out of order; ``search`` exits 1 when
  the target is absent.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click

from sortkit import config
from sortkit.errors import InputError, InvalidParallelismError
from sortkit.sorting import binary_search, deduplicate, is_sorted, parallel_sort

from .helpers import error, ordering, parse_number, read_items, success, warn

if TYPE_CHECKING:
    from typing import TextIO

logger = logging.getLogger(__name__)

NOT_SORTED_EXIT_CODE = 1
NOT_FOUND_EXIT_CODE = 1

numeric_option = click.option(
    "--numeric",
    "-n",
    is_flag=True,
    default=False,
    help="Compare lines as numbers instead of text.",
)
reverse_option = click.option(
    "--reverse",
    "-r",
    is_flag=True,
    default=False,
    help="Use descending order.",
)
source_argument = click.argument(
    "source", type=click.File("r", encoding="utf-8"), default="-"
)


def _load(source: TextIO, numeric: bool) -> list[Any]:
    try:
        items = read_items(source, numeric=numeric)
    except InputError as e:
        raise click.ClickException(str(e)) from e
    logger.debug("Read %d items from %s", len(items), source.name)
    return items


def _resolve_parallelism(parallelism: int | None) -> int:
    if parallelism is not None:
        return parallelism
    try:
        return config.get_default_parallelism()
    except InvalidParallelismError as e:
        raise click.ClickException(
            f"{e}\nUnset {config.PARALLELISM_ENV_VAR} or pass --parallelism."
        ) from e


@click.command("sort")
@source_argument
@numeric_option
@reverse_option
@click.option(
    "--unique",
    "-u",
    is_flag=True,
    default=False,
    help="Drop repeated items after sorting.",
)
@click.option(
    "--parallelism",
    "-p",
    type=int,
    default=None,
    help=(
        "Maximum number of concurrent sort branches. Values of 1 or less sort "
        f"sequentially. Defaults to {config.PARALLELISM_ENV_VAR} or the CPU count."
    ),
)
def sort_cmd(
    source: TextIO,
    numeric: bool,
    reverse: bool,
    unique: bool,
    parallelism: int | None,
) -> None:
    """Sort lines from SOURCE (default: stdin) and print them."""
    items = _load(source, numeric)
    if not items:
        warn("No items to sort.")
        return

    budget = _resolve_parallelism(parallelism)
    parallel_sort(items, ordering(reverse), budget)
    if unique:
        removed = len(items) - deduplicate(items)
        logger.info("Removed %d duplicate items", removed)

    for item in items:
        click.echo(item)
    logger.info("Sorted %d items (parallelism=%d)", len(items), budget)


@click.command("check")
@source_argument
@numeric_option
@reverse_option
@click.pass_context
def check_cmd(ctx: click.Context, source: TextIO, numeric: bool, reverse: bool) -> None:
    """Exit 0 if SOURCE is sorted, 1 otherwise."""
    items = _load(source, numeric)
    if is_sorted(items, ordering(reverse)):
        success(f"Input is sorted ({len(items)} items).")
        return
    error("Input is not sorted.")
    ctx.exit(NOT_SORTED_EXIT_CODE)


@click.command("search")
@click.argument("target")
@source_argument
@numeric_option
@click.pass_context
def search_cmd(ctx: click.Context, target: str, source: TextIO, numeric: bool) -> None:
    """Binary search ascending SOURCE for TARGET.

    Prints the index and ``found``, or the insertion point and ``insert``.
    Exits 1 when TARGET is absent.
    """
    items = _load(source, numeric)
    if numeric:
        try:
            needle: Any = parse_number(target)
        except InputError as e:
            raise click.BadParameter(
                f"{target!r} is not a number", param_hint="TARGET"
            ) from e
    else:
        needle = target

    less = ordering()
    if not is_sorted(items, less):
        warn("Input is not sorted; the result is unspecified.")

    index, found = binary_search(items, needle, less)
    click.echo(f"{index}\t{'found' if found else 'insert'}")
    if not found:
        ctx.exit(NOT_FOUND_EXIT_CODE)
