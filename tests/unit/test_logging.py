"""Unit tests for persona.logging."""

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler

from persona.logging import (
    ConsoleFormatter,
    configure_logging,
    console_handler,
    log_startup,
    session_log_handler,
)

# pylint: disable=magic-value-comparison, redefined-outer-name


def _record(name: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.fixture
def restore_root_logger():
    """Put the root logger's handlers and level back after the test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.mark.parametrize(
    ("logger_name", "expected"),
    [
        ("persona.entrypoints.cli.people", "msg"),
        ("persona", "msg"),
        ("personal.tools", "[personal] msg"),
        ("click_extra.colorize", "[click_extra] msg"),
    ],
)
def test_console_formatter_tags_other_packages(logger_name, expected):
    """Only records from outside the persona package get a bracketed tag."""
    assert ConsoleFormatter("%(message)s").format(_record(logger_name)) == expected


def test_console_handler_levels():
    """Debug mode lowers the console threshold to DEBUG."""
    handler = console_handler(logging.WARNING)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert isinstance(handler.formatter, ConsoleFormatter)
    assert console_handler(logging.WARNING, debug=True).level == logging.DEBUG


def test_session_log_is_written_on_close(tmp_path):
    """DEBUG records stay buffered until the handler closes."""
    path = tmp_path / "session.log"
    handler = session_log_handler(path)
    assert isinstance(handler, MemoryHandler)
    handler.handle(_record("persona.cli", logging.DEBUG))
    handler.handle(_record("persona.cli", logging.WARNING))
    assert path.read_text(encoding="utf-8") == ""
    handler.close()
    content = path.read_text(encoding="utf-8")
    assert "DEBUG" in content
    assert "WARNING" in content


def test_session_log_flushes_on_error(tmp_path):
    """An ERROR record writes the buffer out immediately."""
    path = tmp_path / "session.log"
    handler = session_log_handler(path)
    try:
        handler.handle(_record("persona.cli", logging.DEBUG))
        handler.handle(_record("persona.cli", logging.ERROR))
        assert "ERROR" in path.read_text(encoding="utf-8")
    finally:
        handler.close()


def test_session_log_truncates_existing_file(tmp_path):
    """A previous run's log is replaced."""
    path = tmp_path / "session.log"
    path.write_text("stale content\n", encoding="utf-8")
    session_log_handler(path).close()
    assert "stale content" not in path.read_text(encoding="utf-8")


def test_configure_logging_installs_handlers(tmp_path, restore_root_logger):
    """Console and session handlers land on the root logger with overrides applied."""
    handlers = configure_logging(
        level=logging.INFO,
        debug=False,
        color=False,
        session_log=tmp_path / "session.log",
        logger_levels={"some.noisy": logging.ERROR},
    )
    assert [type(h) for h in handlers] == [RichHandler, MemoryHandler]
    assert logging.getLogger().handlers == handlers
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("some.noisy").level == logging.ERROR


def test_configure_logging_without_session_log(restore_root_logger):
    """Disabling the session log leaves only the console handler."""
    handlers = configure_logging(
        level=logging.WARNING,
        debug=False,
        color=False,
        session_log=None,
        logger_levels={},
    )
    assert [type(h) for h in handlers] == [RichHandler]


def test_log_startup(caplog, tmp_path):
    """The summary names the session log and the diagnostics name the bounds."""
    logger = logging.getLogger("persona.test.startup")
    with caplog.at_level(logging.DEBUG, logger="persona.test.startup"):
        log_startup(
            logger,
            app_version="1.2.3",
            level=logging.INFO,
            session_log=tmp_path / "x.log",
            logger_levels={"click_extra": logging.WARNING},
        )
    text = caplog.text
    assert "PERSONA 1.2.3, console=INFO, session-log=" in text
    assert "x.log" in text
    assert "UserName length bounds: 1..10" in text
    assert "Per-logger overrides: {'click_extra': 'WARNING'}" in text


def test_log_startup_without_session_log(caplog):
    """A disabled session log is reported as OFF."""
    logger = logging.getLogger("persona.test.startup")
    with caplog.at_level(logging.INFO, logger="persona.test.startup"):
        log_startup(
            logger,
            app_version="1.2.3",
            level=logging.WARNING,
            session_log=None,
            logger_levels={},
        )
    assert "session-log=OFF" in caplog.text
