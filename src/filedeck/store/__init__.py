"""Public store exports for filedeck."""

from __future__ import annotations

from .entity_store import DEFAULT_DATE_LABEL, EntityStore
from .uploads import (
    DEFAULT_UPLOAD_CANDIDATES,
    FixedUploadSource,
    RandomUploadSource,
    UploadCandidate,
    UploadSource,
)

__all__ = [
    "EntityStore",
    "DEFAULT_DATE_LABEL",
    "UploadCandidate",
    "UploadSource",
    "RandomUploadSource",
    "FixedUploadSource",
    "DEFAULT_UPLOAD_CANDIDATES",
]
