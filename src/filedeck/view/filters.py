"""View filter: which entities are visible for a tab and folder scope."""

from __future__ import annotations

from typing import Iterable, Optional

from filedeck.errors import InvalidArgumentError
from filedeck.models import Category, Entity
from filedeck.util.kinds import is_folder


def filter_entities(
    entities: Iterable[Entity],
    category: Category | str,
    current_folder_id: Optional[str],
) -> list[Entity]:
    """
    Compute the visible subset, preserving store order.

    Precedence:
        1. trash: every trashed entity, at any depth, ignoring the folder.
        2. every other tab hides trashed entities.
        3. inside a folder: its direct children, whatever the tab.
        4. at root: the tab's own rule.
    """
    tab = Category.parse(category)

    if tab is Category.TRASH:
        return [e for e in entities if e.is_trashed]

    alive = [e for e in entities if not e.is_trashed]

    if current_folder_id is not None:
        return [e for e in alive if e.parent_id == current_folder_id]

    if tab is Category.ALL:
        return [e for e in alive if e.parent_id is None]
    if tab is Category.FAVORITES:
        return [e for e in alive if e.is_favorite]
    if tab is Category.RECENTS:
        # No recency model exists; recents is every non-trashed entity.
        return alive
    if tab is Category.CLOUD:
        return [e for e in alive if is_folder(e.kind) and e.parent_id is None]

    raise InvalidArgumentError("Unsupported category", details={"category": tab.value})


def quick_access(entities: Iterable[Entity], limit: int = 4) -> list[Entity]:
    """First `limit` non-trashed entities in store order."""
    if limit <= 0:
        return []
    result: list[Entity] = []
    for e in entities:
        if e.is_trashed:
            continue
        result.append(e)
        if len(result) >= limit:
            break
    return result


def view_title(category: Category | str, folder: Optional[Entity] = None) -> str:
    if folder is not None:
        return folder.name
    return Category.parse(category).label
