"""Structural validation helpers for EntityStore."""

from __future__ import annotations

from typing import Mapping, Optional

from filedeck.errors import InvalidArgumentError, TreeIntegrityError
from filedeck.models import Entity
from filedeck.util.kinds import is_folder


def validate_name(name: str, what: str) -> str:
    """Return the trimmed name. Raises InvalidArgumentError if it is empty."""
    if not isinstance(name, str):
        raise InvalidArgumentError(f"{what} name must be a string", details={"name": name})
    trimmed = name.strip()
    if not trimmed:
        raise InvalidArgumentError(f"{what} name must not be empty", details={"name": name})
    return trimmed


def validate_unique_id(
    entities: Mapping[str, Entity],
    retired: set[str],
    entity_id: str,
) -> None:
    if not isinstance(entity_id, str) or not entity_id.strip():
        raise InvalidArgumentError("Entity id must be a non-empty string", details={"id": entity_id})
    if entity_id in entities:
        raise TreeIntegrityError(f"Duplicate entity id: {entity_id}", details={"id": entity_id})
    if entity_id in retired:
        raise TreeIntegrityError(
            f"Entity id was permanently deleted and cannot be reused: {entity_id}",
            details={"id": entity_id},
        )


def validate_parent(
    entities: Mapping[str, Entity],
    parent_id: Optional[str],
    what: str,
) -> None:
    """A non-null parent must exist and be a folder."""
    if parent_id is None:
        return
    parent = entities.get(parent_id)
    if parent is None:
        raise TreeIntegrityError(f"{what} does not exist: {parent_id}", details={"parent_id": parent_id})
    if not is_folder(parent.kind):
        raise TreeIntegrityError(
            f"{what} must be a folder: {parent_id}",
            details={"parent_id": parent_id, "kind": parent.kind.value},
        )


def validate_known_parent_is_folder(entities: Mapping[str, Entity], entity: Entity) -> None:
    """
    Seed-time variant of validate_parent.

    A parent_id pointing at nothing is an orphan and is tolerated.
    """
    if entity.parent_id is None or entity.parent_id not in entities:
        return
    validate_parent(entities, entity.parent_id, "Parent")


def validate_folder_has_no_size(entity: Entity) -> None:
    if is_folder(entity.kind) and entity.size_label is not None:
        raise InvalidArgumentError(
            f"Folder must not carry a size label: {entity.id}",
            details={"id": entity.id, "size_label": entity.size_label},
        )


def validate_move_no_cycle(
    entities: Mapping[str, Entity],
    target_id: str,
    new_parent_id: Optional[str],
) -> None:
    """
    Reject cycles: if target appears on the ancestor chain of new_parent.

    Walk from new_parent towards root (following parent_id); if target is hit,
    the move is cyclic and must be rejected.
    """
    if new_parent_id is None:
        return
    if target_id == new_parent_id:
        raise TreeIntegrityError(
            "Move would create a cycle (target == new parent)",
            details={"id": target_id},
        )

    visited: set[str] = set()
    cur: Optional[str] = new_parent_id
    while cur is not None and cur not in visited:
        if cur == target_id:
            raise TreeIntegrityError(
                "Move would create a cycle",
                details={"id": target_id, "new_parent_id": new_parent_id},
            )
        visited.add(cur)
        info = entities.get(cur)
        if info is None:
            # Broken chain; nothing above it can be the target.
            return
        cur = info.parent_id


def validate_acyclic(entities: Mapping[str, Entity]) -> None:
    """Reject any entity that is (transitively) its own ancestor."""
    settled: set[str] = set()
    for start in entities:
        path: list[str] = []
        on_path: set[str] = set()
        cur: Optional[str] = start
        while cur is not None and cur not in settled:
            if cur in on_path:
                raise TreeIntegrityError(
                    f"Parent cycle detected at: {cur}",
                    details={"id": cur, "path": path},
                )
            info = entities.get(cur)
            if info is None:
                break
            path.append(cur)
            on_path.add(cur)
            cur = info.parent_id
        settled.update(path)
