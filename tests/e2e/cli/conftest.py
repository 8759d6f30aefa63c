"""Fixtures for end-to-end tests of the ``utf8kit`` command.

Provides a test-only `log-demo` command that logs at every level on a project
logger and on a third-party logger, a CliRunner, and an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from utf8kit.entrypoints.cli.main import utf8kit

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Log one message per level, then a last DEBUG message after the WARNING."""
    logger = logging.getLogger("utf8kit.demo")
    vendor = logging.getLogger("some.vendor")
    logger.debug("demo debug message")
    logger.info("demo info message")
    vendor.debug("vendor debug message")
    vendor.info("vendor info message")
    logger.warning("demo warning message")
    logger.error("demo error message")
    logger.critical("demo critical message")
    logger.debug("demo trailing debug message")


def _remove_command_everywhere(group: click.Group, name: str) -> None:
    """Unregister ``name`` from the group and from click-extra's help sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Make `utf8kit log-demo` available for one test."""
    utf8kit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(utf8kit, "log-demo")


@pytest.fixture
def runner():
    """Return a CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside a temporary working directory."""
    with runner.isolated_filesystem():
        yield
