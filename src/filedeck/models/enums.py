"""Enumerations shared across filedeck."""

from __future__ import annotations

from enum import Enum

from filedeck.errors import InvalidArgumentError


class EntityKind(str, Enum):
    """Kinds of entities. Only FOLDER can contain children."""

    FOLDER = "folder"
    IMAGE = "image"
    DOCUMENT = "document"
    PDF = "pdf"
    VIDEO = "video"
    GENERIC = "generic"

    @classmethod
    def parse(cls, value: str | EntityKind) -> EntityKind:
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        key = _KIND_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Unknown entity kind: {value!r}",
                details={"kind": value},
                cause=exc,
            ) from exc


_KIND_ALIASES: dict[str, str] = {"doc": "document"}


class Category(str, Enum):
    """Navigation tabs. Each one is a named view filter."""

    ALL = "all"
    FAVORITES = "favorites"
    RECENTS = "recents"
    CLOUD = "cloud"
    TRASH = "trash"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @classmethod
    def parse(cls, value: str | Category) -> Category:
        """
        Parse a tab id.

        Case-insensitive; accepts "recent" as an alias of "recents".
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key == "recent":
            key = "recents"
        try:
            return cls(key)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Unknown category: {value!r}",
                details={"category": value},
                cause=exc,
            ) from exc


_CATEGORY_LABELS: dict[Category, str] = {
    Category.ALL: "All Files",
    Category.FAVORITES: "Favorites",
    Category.RECENTS: "Recents",
    Category.CLOUD: "iCloud Drive",
    Category.TRASH: "Trash",
}


class ViewMode(str, Enum):
    """Grid or list layout. Presentation only; never affects filtering."""

    GRID = "grid"
    LIST = "list"

    @classmethod
    def parse(cls, value: str | ViewMode) -> ViewMode:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Unknown view mode: {value!r}",
                details={"view_mode": value},
                cause=exc,
            ) from exc


class Direction(str, Enum):
    """Transition direction of the last navigation step."""

    FORWARD = "forward"
    BACKWARD = "backward"
