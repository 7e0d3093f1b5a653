"""Public error exports for filedeck."""

from __future__ import annotations

from .exceptions import (
    FileDeckError,
    InvalidArgumentError,
    NotFoundError,
    TreeIntegrityError,
)

__all__ = [
    "FileDeckError",
    "InvalidArgumentError",
    "NotFoundError",
    "TreeIntegrityError",
]
