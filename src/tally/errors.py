"""Domain-specific exceptions for submission ingestion and summaries."""

from __future__ import annotations


class TallyError(Exception):
    """Base class for tally failures."""


class ValidationError(TallyError):
    """Raised when a submission is rejected before aggregation."""


class StorageError(TallyError):
    """Raised when the response store cannot be read or written."""


class NotFoundError(TallyError):
    """Raised when no dominant-value summary exists yet."""


__all__ = [
    "TallyError",
    "ValidationError",
    "StorageError",
    "NotFoundError",
]
