"""SORTKIT CLI entry point.

Defines the top-level ``sortkit`` command (via Click-Extra), configures
console logging, and registers the sorting subcommands.

Commands
- ``sortkit sort``: sort lines with the parallel merge sort.
- ``sortkit check``: verify that lines are already sorted.
- ``sortkit search``: binary search sorted lines.

Examples
    $ sortkit --version
    $ sortkit sort -n -p 4 < numbers.txt
    $ sortkit -v check sorted.txt
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from sortkit import __version__
from sortkit.logging import config_console_handler, log_startup

from .helpers.log_level_parser import parse_log_level
from .sort_cmds import check_cmd, search_cmd, sort_cmd

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """SORTKIT command-line interface.

    Sort, check and search line-oriented data using SORTKIT's comparator
    sorts. Large inputs are sorted with a fork-join parallel merge sort whose
    fan-out is bounded by --parallelism (or SORTKIT_PARALLELISM).
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG output with timestamps and source paths).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="SORTKIT_LOGGER_LEVELS",
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L sortkit.sorting=INFO) or via SORTKIT_LOGGER_LEVELS "
        "(comma/space list)."
    ),
    default=("concurrent.futures=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def sortkit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """SORTKIT command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    logging.basicConfig(
        level=logging.DEBUG,  # handlers filter
        handlers=handlers,
        force=True,
    )

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


sortkit.add_command(sort_cmd)
sortkit.add_command(check_cmd)
sortkit.add_command(search_cmd)
