"""Data model for files and folders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import EntityKind


@dataclass(slots=True)
class Entity:
    """
    A file or folder record.

    Notes:
        - kind may be given as a string ("folder", "doc", ...); it is
          normalized to EntityKind on construction.
        - parent_id is a weak reference: it may point at an id that has since
          been purged (an orphan).
        - size_label is None for folders.
        - date_label is an opaque display string; nothing orders by it.
    """

    id: str
    name: str
    kind: EntityKind
    date_label: str

    size_label: Optional[str] = None
    is_favorite: bool = False
    parent_id: Optional[str] = None
    is_trashed: bool = False

    def __post_init__(self) -> None:
        self.kind = EntityKind.parse(self.kind)

    def clone(self) -> Entity:
        """Return an independent copy (used for read-only snapshots)."""
        return Entity(
            id=self.id,
            name=self.name,
            kind=self.kind,
            date_label=self.date_label,
            size_label=self.size_label,
            is_favorite=self.is_favorite,
            parent_id=self.parent_id,
            is_trashed=self.is_trashed,
        )
