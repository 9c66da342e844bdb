"""Tagged success/failure results for fallible domain operations.

Domain factories report expected invalid input as data rather than raising.
A `Result` is either a `Success` carrying the constructed value or a
`Failure` carrying an error payload (a human-readable message throughout
this package). Both variants are frozen dataclasses, so they compare by
value and work with structural pattern matching:

    match UserName.create(raw):
        case Success(value=user_name):
            ...
        case Failure(error=message):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeAlias, TypeVar

from .errors import UnwrapFailureError

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """The successful outcome of a fallible operation."""

    value: T

    def is_success(self) -> bool:
        """Always True for Success."""
        return True

    def is_failure(self) -> bool:
        """Always False for Success."""
        return False

    def map(self, fn: Callable[[T], U]) -> Success[U]:
        """Transform the wrapped value.

        Exceptions raised by `fn` propagate; they are not converted into a
        Failure.
        """
        return Success(fn(self.value))

    def map_error(self, fn: Callable[[object], object]) -> Success[T]:  # pylint: disable=unused-argument
        """Return self unchanged; there is no error to transform."""
        return self

    def bind(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain another fallible operation on the wrapped value."""
        return fn(self.value)

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value

    def unwrap_or(self, default: object) -> T:  # pylint: disable=unused-argument
        """Return the wrapped value, ignoring `default`."""
        return self.value


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """The failed outcome of a fallible operation."""

    error: E

    def is_success(self) -> bool:
        """Always False for Failure."""
        return False

    def is_failure(self) -> bool:
        """Always True for Failure."""
        return True

    def map(self, fn: Callable[[object], object]) -> Failure[E]:  # pylint: disable=unused-argument
        """Return self unchanged; the error propagates."""
        return self

    def map_error(self, fn: Callable[[E], F]) -> Failure[F]:
        """Transform the error payload, e.g. to add context for the caller."""
        return Failure(fn(self.error))

    def bind(self, fn: Callable[[object], object]) -> Failure[E]:  # pylint: disable=unused-argument
        """Return self unchanged; the chained operation is skipped."""
        return self

    def unwrap(self) -> NoReturn:
        """Raise, since there is no value to return.

        Raises:
            UnwrapFailureError: Always, carrying this failure's error.
        """
        raise UnwrapFailureError(self.error)

    def unwrap_or(self, default: T) -> T:
        """Return `default` in place of the missing value."""
        return default


Result: TypeAlias = Success[T] | Failure[E]
