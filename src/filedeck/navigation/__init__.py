"""Public navigation exports for filedeck."""

from __future__ import annotations

from .breadcrumbs import EntityLookup, build_breadcrumb, parent_of
from .state import NavigationState

__all__ = [
    "NavigationState",
    "EntityLookup",
    "build_breadcrumb",
    "parent_of",
]
