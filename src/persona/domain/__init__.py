"""Domain layer for PERSONA.

Contains the business rules: value objects, the Person aggregate and the
result type every fallible factory returns. This package is deliberately
pure: no I/O, no logging and no shared mutable state.

Dependency rule: do not import from `persona.entrypoints`.
"""

from .errors import DirectConstructionError, DomainError, UnwrapFailureError
from .person import Person, try_create_person
from .result import Failure, Result, Success
from .value_objects import FirstName, LastName, UserName

__all__ = [
    "DirectConstructionError",
    "DomainError",
    "Failure",
    "FirstName",
    "LastName",
    "Person",
    "Result",
    "Success",
    "UnwrapFailureError",
    "UserName",
    "try_create_person",
]
