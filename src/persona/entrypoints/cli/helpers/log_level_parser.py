"""Parsing of the ``-L/--logger-level NAME=LEVEL`` CLI option.

Values may be repeated on the command line or given as one comma/space
separated string (e.g. from ``PERSONA_LOGGER_LEVEL``). Each entry is split
into a logger name and a standard logging level name.
"""

import logging
import re

import click

from persona.config import DEFAULT_LOGGER_LEVELS

_SEPARATORS = re.compile(r"[,\s]+")


def _split_entries(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten a raw option value into individual NAME=LEVEL entries."""
    raw = [value] if isinstance(value, str) else list(value)
    return [entry for chunk in raw for entry in _SEPARATORS.split(chunk) if entry]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from `DEFAULT_LOGGER_LEVELS`; later entries override earlier ones
    for the same logger. Level names are case-insensitive.

    Args:
        ctx: Click context (unused).
        param: Click parameter (unused).
        value: The raw option value(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an entry is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LOGGER_LEVELS)
    for entry in _split_entries(value):
        name, sep, level_name = entry.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {entry!r}")
        level = logging.getLevelNamesMapping().get(level_name.strip().upper())
        if level is None:
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
