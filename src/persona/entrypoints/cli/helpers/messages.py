"""Terminal message helpers for the PERSONA CLI.

Status lines go to stderr so stdout only ever carries command output (a user
name, or a person as JSON). Emoji markers fall back to ASCII on terminals
that cannot encode them.
"""

import click

SUCCESS_MARKERS = ("✅", "[OK]")  # pragma: no mutate
ERROR_MARKERS = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call so tests and redirected streams
    are honoured.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(markers: tuple[str, str]) -> str:
    emoji, fallback = markers
    return emoji if _supports_character(emoji) else fallback


def success_glyph() -> str:
    """Return "✅", or "[OK]" when stderr cannot encode it."""
    return _glyph(SUCCESS_MARKERS)


def error_glyph() -> str:
    """Return "❌", or "[X]" when stderr cannot encode it."""
    return _glyph(ERROR_MARKERS)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Created person 'lisa rocks'.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Problem creating Person. UserName is invalid: ''.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
