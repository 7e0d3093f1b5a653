"""filedeck public API."""

from __future__ import annotations

from filedeck.errors import (
    FileDeckError,
    InvalidArgumentError,
    NotFoundError,
    TreeIntegrityError,
)
from filedeck.models import (
    BrowserView,
    Category,
    ConfirmDialog,
    Direction,
    Entity,
    EntityKind,
    ViewMode,
)
from filedeck.config import BrowserConfig
from filedeck.store import (
    EntityStore,
    FixedUploadSource,
    RandomUploadSource,
    UploadCandidate,
    UploadSource,
)
from filedeck.navigation import NavigationState, build_breadcrumb
from filedeck.view import filter_entities, quick_access
from filedeck.sample import sample_entities
from filedeck.browser import FileBrowser

__all__ = [
    # High-level
    "FileBrowser",
    "BrowserConfig",
    # Core
    "EntityStore",
    "NavigationState",
    "build_breadcrumb",
    "filter_entities",
    "quick_access",
    "sample_entities",
    # Uploads
    "UploadCandidate",
    "UploadSource",
    "RandomUploadSource",
    "FixedUploadSource",
    # Models
    "Entity",
    "EntityKind",
    "Category",
    "ViewMode",
    "Direction",
    "BrowserView",
    "ConfirmDialog",
    # Errors
    "FileDeckError",
    "InvalidArgumentError",
    "NotFoundError",
    "TreeIntegrityError",
]
