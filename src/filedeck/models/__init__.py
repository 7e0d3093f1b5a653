"""Public model exports for filedeck."""

from __future__ import annotations

from .entity import Entity
from .enums import Category, Direction, EntityKind, ViewMode
from .view import BrowserView, ConfirmDialog

__all__ = [
    "Entity",
    "EntityKind",
    "Category",
    "ViewMode",
    "Direction",
    "BrowserView",
    "ConfirmDialog",
]
