"""Fixtures for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log messages at every
level, plus fixtures to register it, obtain a CliRunner, and run each test
in an isolated filesystem so session log files stay local.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from persona.entrypoints.cli.main import persona

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on a project and a third-party logger."""
    logger = logging.getLogger("persona.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


@pytest.fixture
def registered_log_demo():
    """Register 'log-demo' on the top-level group for one test."""
    persona.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        persona.commands.pop("log-demo", None)
        for section in getattr(persona, "_section_set", []):
            getattr(section, "commands", {}).pop("log-demo", None)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside runner.isolated_filesystem()."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def log_args():
    """CLI arguments that keep the session log inside the test directory."""
    return ["--log-path", "session.log"]
