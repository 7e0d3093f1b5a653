"""EntityStore: the single owner of every file and folder record."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from filedeck.errors import NotFoundError
from filedeck.models import Entity, EntityKind
from filedeck.util.ids import new_entity_id

from .uploads import RandomUploadSource, UploadSource
from .validators import (
    validate_acyclic,
    validate_folder_has_no_size,
    validate_known_parent_is_folder,
    validate_move_no_cycle,
    validate_name,
    validate_parent,
    validate_unique_id,
)

logger = logging.getLogger(__name__)

DEFAULT_DATE_LABEL = "Just now"


class EntityStore:
    """
    Flat, ordered collection of entities keyed by id.

    The tree is never stored; it is rebuilt on demand by following parent_id.
    Collection order is display order: created entities are prepended so the
    most recent comes first.
    """

    def __init__(
        self,
        entities: Optional[Iterable[Entity]] = None,
        *,
        upload_source: Optional[UploadSource] = None,
        date_label: str = DEFAULT_DATE_LABEL,
    ) -> None:
        self._order: list[Entity] = []
        self._by_id: dict[str, Entity] = {}
        self._retired: set[str] = set()
        self._upload_source: UploadSource = upload_source or RandomUploadSource()
        self._date_label = date_label

        for entity in entities or ():
            validate_unique_id(self._by_id, self._retired, entity.id)
            validate_folder_has_no_size(entity)
            self._by_id[entity.id] = entity
            self._order.append(entity)

        for entity in self._order:
            validate_known_parent_is_folder(self._by_id, entity)
        validate_acyclic(self._by_id)

    @classmethod
    def from_entities(
        cls,
        entities: Iterable[Entity],
        upload_source: Optional[UploadSource] = None,
        date_label: str = DEFAULT_DATE_LABEL,
    ) -> EntityStore:
        return cls(entities, upload_source=upload_source, date_label=date_label)

    # ----------------------------
    # Read APIs
    # ----------------------------
    @property
    def date_label(self) -> str:
        """Date label stamped on entities created by this store."""
        return self._date_label

    def get(self, entity_id: str) -> Entity:
        info = self._by_id.get(entity_id)
        if info is None:
            raise NotFoundError(f"Entity does not exist: {entity_id}", details={"id": entity_id})
        return info

    def find(self, entity_id: Optional[str]) -> Optional[Entity]:
        if entity_id is None:
            return None
        return self._by_id.get(entity_id)

    def entities(self) -> list[Entity]:
        return list(self._order)

    def children(self, parent_id: Optional[str]) -> list[Entity]:
        """Direct children of parent_id (None = root level), trashed included."""
        return [e for e in self._order if e.parent_id == parent_id]

    def is_retired(self, entity_id: str) -> bool:
        return entity_id in self._retired

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._by_id

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._order))

    # ----------------------------
    # Creation
    # ----------------------------
    def create_folder(self, name: str, parent_id: Optional[str] = None) -> Entity:
        folder_name = validate_name(name, "Folder")
        validate_parent(self._by_id, parent_id, "Parent")

        info = Entity(
            id=self._allocate_id(),
            name=folder_name,
            kind=EntityKind.FOLDER,
            date_label=self._date_label,
            parent_id=parent_id,
        )
        self._prepend(info)
        logger.info("Created folder %r (%s) under %s", info.name, info.id, parent_id or "root")
        return info

    def create_file(self, parent_id: Optional[str] = None) -> Entity:
        """Simulated upload: no payload is stored, only a placeholder record."""
        validate_parent(self._by_id, parent_id, "Parent")

        candidate = self._upload_source.next_upload()
        info = Entity(
            id=self._allocate_id(),
            name=candidate.name,
            kind=candidate.kind,
            date_label=self._date_label,
            size_label=candidate.size_label,
            parent_id=parent_id,
        )
        self._prepend(info)
        logger.info(
            "Created %s file %r (%s) under %s",
            info.kind.value,
            info.name,
            info.id,
            parent_id or "root",
        )
        return info

    # ----------------------------
    # Lifecycle mutations (missing ids are silent no-ops)
    # ----------------------------
    def trash(self, entity_id: str) -> bool:
        """Soft-delete a single entity. Children are not affected."""
        info = self._by_id.get(entity_id)
        if info is None:
            logger.debug("Trash ignored, entity not found: %s", entity_id)
            return False
        info.is_trashed = True
        logger.info("Moved %r (%s) to trash", info.name, entity_id)
        return True

    def restore(self, entity_id: str) -> bool:
        info = self._by_id.get(entity_id)
        if info is None:
            logger.debug("Restore ignored, entity not found: %s", entity_id)
            return False
        info.is_trashed = False
        logger.info("Restored %r (%s) from trash", info.name, entity_id)
        return True

    def purge(self, entity_id: str) -> bool:
        """
        Permanently remove one entity.

        Accepted whether or not the entity is trashed. Does not cascade:
        children keep their parent_id and become orphans.
        """
        info = self._by_id.pop(entity_id, None)
        if info is None:
            logger.debug("Purge ignored, entity not found: %s", entity_id)
            return False
        self._order.remove(info)
        self._retired.add(entity_id)
        logger.info("Permanently deleted %r (%s)", info.name, entity_id)
        return True

    def set_favorite(self, entity_id: str, value: bool = True) -> bool:
        info = self._by_id.get(entity_id)
        if info is None:
            logger.debug("Favorite ignored, entity not found: %s", entity_id)
            return False
        info.is_favorite = bool(value)
        logger.info("Set favorite=%s on %r (%s)", info.is_favorite, info.name, entity_id)
        return True

    def move(self, entity_id: str, new_parent_id: Optional[str]) -> Entity:
        """Re-parent an entity. Raises on a missing target, non-folder parent, or cycle."""
        info = self.get(entity_id)
        validate_parent(self._by_id, new_parent_id, "New parent")
        validate_move_no_cycle(self._by_id, entity_id, new_parent_id)

        info.parent_id = new_parent_id
        logger.info("Moved %r (%s) under %s", info.name, entity_id, new_parent_id or "root")
        return info

    # ----------------------------
    # Internals
    # ----------------------------
    def _allocate_id(self) -> str:
        new_id = new_entity_id()
        while new_id in self._by_id or new_id in self._retired:
            new_id = new_entity_id()
        return new_id

    def _prepend(self, info: Entity) -> None:
        self._by_id[info.id] = info
        self._order.insert(0, info)
