"""Read-only models handed to the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .entity import Entity
from .enums import Category, Direction, ViewMode


@dataclass(slots=True, frozen=True)
class ConfirmDialog:
    """Delete confirmation dialog for the pending trash subject."""

    entity_id: str
    entity_name: str
    permanent: bool

    @property
    def title(self) -> str:
        return "Delete Permanently?" if self.permanent else "Move to Trash?"

    @property
    def message(self) -> str:
        if self.permanent:
            return (
                "This action cannot be undone. Are you sure you want to "
                f'permanently delete "{self.entity_name}"?'
            )
        return (
            f'Are you sure you want to move "{self.entity_name}" to the trash? '
            "You can restore it later."
        )

    @property
    def confirm_label(self) -> str:
        return "Delete Forever" if self.permanent else "Delete"


@dataclass(slots=True, frozen=True)
class BrowserView:
    """Snapshot of everything the presentation layer renders."""

    category: Category
    current_folder_id: Optional[str]
    view_mode: ViewMode
    direction: Direction
    title: str
    entities: tuple[Entity, ...]
    breadcrumb: tuple[Entity, ...]
    quick_access: tuple[Entity, ...]
    dialog: Optional[ConfirmDialog] = None

    @property
    def is_empty(self) -> bool:
        return not self.entities
