"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log records at every
level, plus fixtures to register it, obtain a CliRunner, and run each test in
an isolated filesystem.
"""

import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from sortkit.entrypoints.cli.main import sortkit

# pylint: disable=redefined-outer-name


E2E_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Add the `e2e` mark to items in `tests/e2e/cli/`."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents:
            item.add_marker(pytest.mark.e2e)


@click.command()
def log_demo():
    """Emit one record per level on a project and a third-party logger."""
    logger = logging.getLogger("sortkit.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")


def _remove_command(group: click.Group, name: str) -> None:
    """Remove a command from a group and any section registries it keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register `log-demo` on the `sortkit` group for one test."""
    sortkit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command(sortkit, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside the runner's isolated filesystem."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo the process-wide logging changes the CLI makes (handlers, -L levels)."""
    root = logging.getLogger()
    saved_root_level = root.level
    names = ["concurrent.futures", "some.thirdparty", "sortkit", "sortkit.sorting"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(saved_root_level)
