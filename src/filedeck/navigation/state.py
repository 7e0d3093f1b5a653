"""Current folder scope and transition direction."""

from __future__ import annotations

from typing import Optional

from filedeck.models import Direction


class NavigationState:
    """
    Tracks the open folder (None = root scope).

    direction only tells the presentation layer which way to animate; it has
    no effect on filtering.
    """

    def __init__(self, current_folder_id: Optional[str] = None) -> None:
        self._current_folder_id = current_folder_id
        self._direction = Direction.FORWARD

    @property
    def current_folder_id(self) -> Optional[str]:
        return self._current_folder_id

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def is_root(self) -> bool:
        return self._current_folder_id is None

    def enter(self, folder_id: str) -> None:
        """Descend into a folder. The caller guarantees folder_id is a folder."""
        self._current_folder_id = folder_id
        self._direction = Direction.FORWARD

    def go_to(self, folder_id: Optional[str]) -> None:
        """Jump to any ancestor (or root) in one step."""
        self._current_folder_id = folder_id
        self._direction = Direction.BACKWARD

    def reset_on_category_change(self) -> None:
        self._current_folder_id = None
