"""The Person aggregate and its factory."""

from __future__ import annotations

from dataclasses import dataclass

from .result import Result
from .value_objects import FirstName, LastName, UserName

PERSON_ERROR_PREFIX = "Problem creating Person. "  # pragma: no mutate


@dataclass(frozen=True, slots=True)
class Person:
    """Immutable person record.

    Build instances with `try_create_person`, which guarantees the user name
    is valid. The name fields are None when the person did not give one.
    """

    first_name: FirstName | None
    last_name: LastName | None
    user_name: UserName

    def __post_init__(self) -> None:
        # A UserName instance is valid by construction, so its type is the invariant.
        if not isinstance(self.user_name, UserName):
            raise TypeError(
                f"user_name must be a UserName, got {type(self.user_name).__name__}"
            )
        if self.first_name is not None and not isinstance(self.first_name, FirstName):
            raise TypeError(
                f"first_name must be a FirstName or None, got {type(self.first_name).__name__}"
            )
        if self.last_name is not None and not isinstance(self.last_name, LastName):
            raise TypeError(
                f"last_name must be a LastName or None, got {type(self.last_name).__name__}"
            )

    def to_dict(self) -> dict[str, str | None]:
        """Return a plain-string view of the person, e.g. for JSON output."""
        return {
            "first_name": self.first_name.value if self.first_name else None,
            "last_name": self.last_name.value if self.last_name else None,
            "user_name": self.user_name.value,
        }


def optional_first_name(raw: str | None) -> FirstName | None:
    """Wrap `raw` as a FirstName, or return None when it is None or empty."""
    return FirstName(raw) if raw else None


def optional_last_name(raw: str | None) -> LastName | None:
    """Wrap `raw` as a LastName, or return None when it is None or empty."""
    return LastName(raw) if raw else None


def try_create_person(
    first_name: str | None, last_name: str | None, user_name: str | None
) -> Result[Person, str]:
    """Build a Person from raw strings.

    Empty or missing first and last names become None. The user name must
    pass `UserName.create`; when it does not, no Person is built and the
    user name error is returned with a ``Problem creating Person.`` prefix.

    Args:
        first_name: Raw first name; may be None or empty.
        last_name: Raw last name; may be None or empty.
        user_name: Raw user name to validate.

    Returns:
        Success wrapping the new Person, or Failure with a message such as
        ``Problem creating Person. UserName is invalid: ''.``

    Example:
        >>> try_create_person("", "", "lisa rocks").unwrap().first_name is None
        True
    """
    maybe_first = optional_first_name(first_name)
    maybe_last = optional_last_name(last_name)

    return (
        UserName.create(user_name)
        .map_error(lambda error: PERSON_ERROR_PREFIX + error)
        .map(lambda valid: Person(maybe_first, maybe_last, valid))
    )
