"""Public view-filter exports for filedeck."""

from __future__ import annotations

from .filters import filter_entities, quick_access, view_title

__all__ = ["filter_entities", "quick_access", "view_title"]
