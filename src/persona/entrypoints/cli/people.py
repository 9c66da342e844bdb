"""PERSONA commands for user names and person records.

Command output (the user name, or the person as JSON) goes to **stdout**;
status lines and log records go to **stderr**. A rejected input exits with
status 1 and the domain's error message.
"""

from __future__ import annotations

import json
import logging

import click

from persona.domain import Failure, Success, UserName, try_create_person

from .helpers import error, success

logger = logging.getLogger(__name__)

# (first name, last name, user name)
DEMO_SAMPLES: tuple[tuple[str, str, str], ...] = (
    ("Lisa", "Simpson", "lisa rocks"),
    ("Homer", "Simpson", ""),
    ("Marge", "Simpson", "lisa rocks"),
)


@click.command("check-username")
@click.argument("user_name")
def check_username(user_name: str) -> None:
    """Check that USER_NAME is a valid user name."""
    logger.debug("Validating user name %r", user_name)
    match UserName.create(user_name):
        case Success(value=valid):
            click.echo(valid.value)
            success(f"'{valid}' is a valid user name.")
        case Failure(error=message):
            logger.info("Rejected user name %r: %s", user_name, message)
            raise click.ClickException(message)


@click.command("create-person")
@click.option("--first-name", "-f", default="", help="First name (optional).")
@click.option("--last-name", "-l", default="", help="Last name (optional).")
@click.argument("user_name")
def create_person(first_name: str, last_name: str, user_name: str) -> None:
    """Create a person with USER_NAME and print it as JSON."""
    logger.debug(
        "Creating person first=%r last=%r user=%r", first_name, last_name, user_name
    )
    match try_create_person(first_name, last_name, user_name):
        case Success(value=person):
            click.echo(json.dumps(person.to_dict(), indent=2))
            success(f"Created person '{person.user_name}'.")
        case Failure(error=message):
            logger.info("Person rejected: %s", message)
            raise click.ClickException(message)


@click.command()
def demo() -> None:
    """Run the person factory on a few sample inputs."""
    for first_name, last_name, user_name in DEMO_SAMPLES:
        label = f"{first_name} {last_name} ({user_name!r})"
        logger.debug("Demo sample %s", label)
        match try_create_person(first_name, last_name, user_name):
            case Success(value=person):
                click.echo(f"{label}: {json.dumps(person.to_dict())}")
            case Failure(error=message):
                click.echo(f"{label}: rejected")
                error(message)
