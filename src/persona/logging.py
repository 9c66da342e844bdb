"""Logging setup for the PERSONA CLI.

Console records are rendered by Rich on stderr. A session log can also be
kept: every record of the run, DEBUG included, is buffered in memory and
written to a file when the command ends (or as soon as an ERROR is logged),
so the trail behind a rejected user name can be read after the fact
whatever the console verbosity was.

The domain package never logs; only entrypoints do.
"""

from __future__ import annotations

import logging
import platform
import sys
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from persona.domain.value_objects import USERNAME_MAX_LENGTH, USERNAME_MIN_LENGTH

if TYPE_CHECKING:
    from pathlib import Path

PROJECT_PREFIX = "persona"
SESSION_LOG_CAPACITY = 1000
SESSION_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class ConsoleFormatter(logging.Formatter):
    """Tag records from other packages with their top-level package name.

    ``click_extra.colorize`` records render as ``[click_extra] message``;
    PERSONA's own records are left bare.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        package = record.name.partition(".")[0]
        if package == PROJECT_PREFIX:
            return message
        return f"[{package}] {message}"


def console_handler(level: int, *, debug: bool = False, color: bool = True) -> RichHandler:
    """Return a Rich handler writing to stderr.

    Args:
        level: Minimum console level; forced to DEBUG when `debug` is set.
        debug: Show timestamps, logger names and source locations.
        color: Emit ANSI colors (follows click-extra's --color/--no-color).
    """
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(color_system="auto" if color else None, stderr=True),
        rich_tracebacks=True,
        show_time=debug,
        show_path=debug,
        enable_link_path=debug,
    )
    handler.setFormatter(
        ConsoleFormatter("%(name)s: %(message)s" if debug else "%(message)s")
    )
    return handler


def session_log_handler(path: Path) -> MemoryHandler:
    """Return a handler buffering the whole run for `path`.

    The file is truncated up front, filled when an ERROR arrives or the
    buffer is full, and completed when the handler is closed.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setFormatter(logging.Formatter(SESSION_LOG_FORMAT))
    return MemoryHandler(
        SESSION_LOG_CAPACITY,
        flushLevel=logging.ERROR,
        target=target,
        flushOnClose=True,
    )


def configure_logging(
    *,
    level: int,
    debug: bool,
    color: bool,
    session_log: Path | None,
    logger_levels: dict[str, int],
) -> list[logging.Handler]:
    """Install PERSONA's handlers on the root logger.

    The root logger passes everything through and each handler applies its
    own threshold; `logger_levels` then narrows individual loggers for both.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[logging.Handler] = [console_handler(level, debug=debug, color=color)]
    if session_log is not None:
        handlers.append(session_log_handler(session_log))
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, logger_level in logger_levels.items():
        logging.getLogger(name).setLevel(logger_level)
    return handlers


def log_startup(
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    session_log: Path | None,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line summary at INFO and the run's settings at DEBUG."""
    logger.info(
        "PERSONA %s, console=%s, session-log=%s",
        app_version,
        logging.getLevelName(level),
        session_log if session_log is not None else "OFF",
    )
    logger.debug("Python %s on %s", sys.version.split()[0], platform.platform())
    logger.debug(
        "UserName length bounds: %d..%d", USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH
    )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
