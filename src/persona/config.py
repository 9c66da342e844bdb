"""Configuration utilities for PERSONA.

This module centralizes small helpers and constants related to application configuration.
"""

import logging
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "persona"  # pragma: no mutate

DEFAULT_LOGGER_LEVELS: dict[str, int] = {"click_extra": logging.WARNING}


def default_log_path() -> Path:
    """Return the default session log location.

    The directory is the per-user log directory reported by platformdirs and
    is created if missing.

    Returns:
        Path to ``latest.log`` inside the user log directory.
    """
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / "latest.log"
