"""Exception hierarchy for filedeck."""

from __future__ import annotations

from typing import Any, Optional


class FileDeckError(Exception):
    """
    Base exception for filedeck.

    Attributes:
        details: Optional structured information (e.g., entity id, parent id).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidArgumentError(FileDeckError):
    """Raised for malformed input (empty folder name, unknown category, etc.)."""


class NotFoundError(FileDeckError):
    """Raised when an entity lookup that must succeed finds nothing."""


class TreeIntegrityError(FileDeckError):
    """Raised when a mutation would break the hierarchy (non-folder parent, cycle)."""
