"""Exception types raised by orrery."""

from typing import Any


class OrreryError(Exception):
    """Base class for errors orrery reports to its callers."""

    pass


class MissingIdentifier(OrreryError, ValueError):
    """Raised when a catalog record has neither a ``key`` nor a ``name``."""

    def __init__(self, record: Any):
        super().__init__(f"Catalog record has no key or name: {record!r}")
        self.record = record


class CatalogUnreadable(OrreryError):
    """Raised when a catalog source cannot be loaded at all."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Cannot read catalog from {source}: {reason}")
        self.source = source
        self.reason = reason


def describe(error: BaseException) -> str:
    """Format an error for a one-line CLI message."""
    return str(error) or error.__class__.__name__
