"""Configuration for FileBrowser."""

from __future__ import annotations

from dataclasses import dataclass

from filedeck.models import Category, ViewMode


@dataclass(slots=True, frozen=True)
class BrowserConfig:
    """
    Browser configuration.

    Theme and sidebar state are presentation concerns and are deliberately
    not modelled here.
    """

    initial_category: Category = Category.ALL
    initial_view_mode: ViewMode = ViewMode.GRID
    quick_access_limit: int = 4
    new_entity_date_label: str = "Just now"

    def __post_init__(self) -> None:
        if not isinstance(self.initial_category, Category):
            raise TypeError("BrowserConfig.initial_category must be a Category")
        if not isinstance(self.initial_view_mode, ViewMode):
            raise TypeError("BrowserConfig.initial_view_mode must be a ViewMode")
        if not isinstance(self.quick_access_limit, int) or self.quick_access_limit < 0:
            raise ValueError("BrowserConfig.quick_access_limit must be a non-negative int")
        if not isinstance(self.new_entity_date_label, str) or not self.new_entity_date_label.strip():
            raise ValueError("BrowserConfig.new_entity_date_label must be a non-empty string")
