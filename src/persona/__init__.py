"""PERSONA

Smart-constructor domain values: a `UserName` that cannot exist in an
invalid state, and a `Person` record assembled from it through a single
fallible factory.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
