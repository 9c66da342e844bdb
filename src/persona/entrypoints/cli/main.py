"""PERSONA CLI entry point.

Defines the top-level ``persona`` command (via Click-Extra), configures
logging for every subcommand, and registers the subcommands from
`persona.entrypoints.cli.people`.

Examples
    $ persona --version
    $ persona check-username "lisa rocks"
    $ persona create-person --first-name Lisa --last-name Simpson "lisa rocks"
    $ persona -v --no-session-log demo
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from persona import __version__
from persona.config import default_log_path
from persona.logging import configure_logging, log_startup

from .helpers import parse_log_level
from .people import check_username, create_person, demo

logger = logging.getLogger(__name__)


HELP = """PERSONA command-line interface.

    Validate user names and build person records from raw strings. A user name
    must be between 1 and 10 characters long; first and last names are
    optional.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Lower the console threshold one level below WARNING per repetition.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Raise the console threshold one level above WARNING per repetition.",
)
@click.option(
    "--debug/--no-debug",
    help="Show every record on the console with logger names and source locations.",
    default=False,
)
@click.option(
    "--session-log/--no-session-log",
    "session_log",
    help=(
        "Write every record of the run, DEBUG included, to --log-path when the "
        "command ends. Console verbosity does not affect it."
    ),
    default=True,
    envvar="PERSONA_SESSION_LOG",
    show_envvar=True,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the session log is written to (truncated on each run).",
    default=default_log_path,
    envvar="PERSONA_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="PERSONA_LOGGER_LEVEL",
    help=(
        "Set the minimum level of individual loggers (NAME=LEVEL), for console "
        "and session log alike. Repeatable, or a comma/space list in "
        "PERSONA_LOGGER_LEVEL."
    ),
    default=(),
    show_envvar=True,
)
@clickx.pass_context
def persona(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    session_log: bool,
    log_path: Path,
    logger_levels: dict[str, int],
) -> None:
    """PERSONA command-line interface."""
    level = logging.WARNING - 10 * verbose_count + 10 * quiet_count
    level = max(logging.DEBUG, min(logging.CRITICAL, level))
    session_log_path = log_path if session_log else None

    configure_logging(
        level=level,
        debug=debug,
        color=ctx.color is not False,
        session_log=session_log_path,
        logger_levels=logger_levels,
    )
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        session_log=session_log_path,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


persona.add_command(check_username)
persona.add_command(create_person)
persona.add_command(demo)
