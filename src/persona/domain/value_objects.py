"""Module including value objects used across the domain layer."""

from __future__ import annotations

from dataclasses import InitVar, dataclass
from typing import TypeGuard

from .errors import DirectConstructionError
from .result import Failure, Result, Success

# Inclusive bounds on the length of a valid user name.
USERNAME_MIN_LENGTH = 1
USERNAME_MAX_LENGTH = 10

# Only UserName.create holds this key, so every UserName passed validation.
_CONSTRUCTION_KEY = object()


@dataclass(frozen=True, slots=True)
class FirstName:
    """Value object wrapping a person's first name."""

    value: str


@dataclass(frozen=True, slots=True)
class LastName:
    """Value object wrapping a person's last name."""

    value: str


@dataclass(frozen=True, slots=True, repr=False)
class UserName:
    """Value object for a user name that is always valid.

    A user name holds between `USERNAME_MIN_LENGTH` and `USERNAME_MAX_LENGTH`
    characters (inclusive). Instances can only be obtained through
    `UserName.create`; calling the class directly raises
    `DirectConstructionError`, and so does `dataclasses.replace`.

    Example:
        >>> UserName.create("lisa rocks").unwrap().value
        'lisa rocks'
        >>> UserName.create("")
        Failure(error="UserName is invalid: ''.")
    """

    _value: str
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        if _key is not _CONSTRUCTION_KEY:
            raise DirectConstructionError(type(self).__name__)

    @staticmethod
    def is_valid(candidate: str | None) -> TypeGuard[str]:
        """Return True if `candidate` satisfies the user name invariant.

        Args:
            candidate: The raw string to check. None is accepted and is invalid.

        Returns:
            bool: True when `candidate` is non-empty and no longer than
            `USERNAME_MAX_LENGTH` characters.
        """
        return (
            candidate is not None
            and USERNAME_MIN_LENGTH <= len(candidate) <= USERNAME_MAX_LENGTH
        )

    @classmethod
    def create(cls, candidate: str | None) -> Result[UserName, str]:
        """Validate `candidate` and wrap it in a UserName.

        The input is stored as given: no trimming or case folding.

        Args:
            candidate: The raw user name.

        Returns:
            Success wrapping the new UserName, or Failure with the message
            ``UserName is invalid: '<candidate>'.`` (None renders as empty).
        """
        if cls.is_valid(candidate):
            return Success(cls(candidate, _CONSTRUCTION_KEY))
        rendered = "" if candidate is None else candidate
        return Failure(f"UserName is invalid: '{rendered}'.")

    @property
    def value(self) -> str:
        """The validated user name string."""
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"UserName({self._value!r})"
