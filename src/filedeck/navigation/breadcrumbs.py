"""Breadcrumb reconstruction by walking parent links."""

from __future__ import annotations

from typing import Optional, Protocol

from filedeck.models import Entity


class EntityLookup(Protocol):
    def find(self, entity_id: Optional[str]) -> Optional[Entity]:
        ...


def build_breadcrumb(lookup: EntityLookup, folder_id: Optional[str]) -> list[Entity]:
    """
    Return the ancestor path root-most first, ending with folder_id itself.

    The walk stops at a null parent or at a missing id (a purged ancestor);
    in the latter case the path is silently truncated. A revisited id also
    stops the walk so a corrupted chain cannot loop forever.
    """
    path: list[Entity] = []
    visited: set[str] = set()
    cur = folder_id

    while cur is not None and cur not in visited:
        visited.add(cur)
        info = lookup.find(cur)
        if info is None:
            break
        path.append(info)
        cur = info.parent_id

    path.reverse()
    return path


def parent_of(lookup: EntityLookup, folder_id: Optional[str]) -> Optional[str]:
    """Target of the "up" control: the parent of folder_id, or None."""
    info = lookup.find(folder_id)
    if info is None or info.parent_id is None:
        return None
    if lookup.find(info.parent_id) is None:
        return None
    return info.parent_id
