"""Domain-layer error definitions.

Invalid user input is never reported through these exceptions; factories
return a `Failure` for that. The exceptions below signal misuse of the
domain API by calling code.
"""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class UnwrapFailureError(DomainError):
    """Raised when the value of a failed result is requested."""

    def __init__(self, error: object) -> None:
        super().__init__(f"Attempted to unwrap a Failure: {error}")
        self.error = error


# ============================================================================
#                   Value object related errors
# ============================================================================


class DirectConstructionError(DomainError):
    """Raised when a restricted value object is instantiated without its factory."""

    def __init__(self, type_name: str) -> None:
        super().__init__(
            f"{type_name} cannot be constructed directly; use {type_name}.create()."
        )
        self.type_name = type_name
