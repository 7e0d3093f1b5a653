from __future__ import annotations

from filedeck.models import EntityKind


def is_folder(kind: EntityKind | str) -> bool:
    return EntityKind.parse(kind) is EntityKind.FOLDER


def is_openable_container(kind: EntityKind | str) -> bool:
    """
    Returns True if opening an entity of this kind descends into it.

    Opening a file has no defined behavior; only folders navigate.
    """
    return is_folder(kind)
