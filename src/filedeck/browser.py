"""FileBrowser: the contract between the core and the presentation layer."""

from __future__ import annotations

import logging
from typing import Optional

from filedeck.config import BrowserConfig
from filedeck.errors import InvalidArgumentError
from filedeck.models import (
    BrowserView,
    Category,
    ConfirmDialog,
    Direction,
    Entity,
    ViewMode,
)
from filedeck.navigation import NavigationState, build_breadcrumb, parent_of
from filedeck.sample import sample_entities
from filedeck.store import EntityStore, UploadSource
from filedeck.util.kinds import is_openable_container
from filedeck.view import filter_entities, quick_access, view_title

logger = logging.getLogger(__name__)


class FileBrowser:
    """
    Relays user intents into the store and navigation state, and exposes the
    filtered view.

    Every intent runs to completion before returning, so the next
    visible_entities()/render() call always reflects it.
    """

    def __init__(
        self,
        store: Optional[EntityStore] = None,
        *,
        config: Optional[BrowserConfig] = None,
        upload_source: Optional[UploadSource] = None,
    ) -> None:
        self._config = config or BrowserConfig()
        if store is not None:
            # An injected store owns its upload source and date label.
            if upload_source is not None:
                raise InvalidArgumentError(
                    "upload_source cannot be combined with an injected store; "
                    "pass it to EntityStore instead"
                )
            if config is not None and config.new_entity_date_label != store.date_label:
                raise InvalidArgumentError(
                    "config.new_entity_date_label does not match the injected store",
                    details={
                        "config_date_label": config.new_entity_date_label,
                        "store_date_label": store.date_label,
                    },
                )
        else:
            store = EntityStore(
                upload_source=upload_source,
                date_label=self._config.new_entity_date_label,
            )
        self._store = store
        self._nav = NavigationState()
        self._category = self._config.initial_category
        self._view_mode = self._config.initial_view_mode
        self._pending_trash_id: Optional[str] = None

    @classmethod
    def with_sample_data(
        cls,
        *,
        config: Optional[BrowserConfig] = None,
        upload_source: Optional[UploadSource] = None,
    ) -> FileBrowser:
        config = config or BrowserConfig()
        store = EntityStore(
            sample_entities(),
            upload_source=upload_source,
            date_label=config.new_entity_date_label,
        )
        return cls(store, config=config)

    # ----------------------------
    # Outputs
    # ----------------------------
    @property
    def store(self) -> EntityStore:
        return self._store

    @property
    def config(self) -> BrowserConfig:
        return self._config

    @property
    def category(self) -> Category:
        return self._category

    @property
    def current_folder_id(self) -> Optional[str]:
        return self._nav.current_folder_id

    @property
    def direction(self) -> Direction:
        return self._nav.direction

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    @property
    def pending_trash(self) -> Optional[Entity]:
        return self._store.find(self._pending_trash_id)

    def visible_entities(self) -> list[Entity]:
        return filter_entities(self._store.entities(), self._category, self._nav.current_folder_id)

    def breadcrumb(self) -> list[Entity]:
        return build_breadcrumb(self._store, self._nav.current_folder_id)

    def up_target(self) -> Optional[str]:
        return parent_of(self._store, self._nav.current_folder_id)

    def confirm_dialog(self) -> Optional[ConfirmDialog]:
        """Dialog for the pending subject; permanence follows its current trash state."""
        subject = self.pending_trash
        if subject is None:
            return None
        return ConfirmDialog(
            entity_id=subject.id,
            entity_name=subject.name,
            permanent=subject.is_trashed,
        )

    def render(self) -> BrowserView:
        entities = self._store.entities()
        folder = self._store.find(self._nav.current_folder_id)
        return BrowserView(
            category=self._category,
            current_folder_id=self._nav.current_folder_id,
            view_mode=self._view_mode,
            direction=self._nav.direction,
            title=view_title(self._category, folder),
            entities=tuple(e.clone() for e in self.visible_entities()),
            breadcrumb=tuple(e.clone() for e in self.breadcrumb()),
            quick_access=tuple(
                e.clone() for e in quick_access(entities, self._config.quick_access_limit)
            ),
            dialog=self.confirm_dialog(),
        )

    # ----------------------------
    # Inputs
    # ----------------------------
    def select_category(self, tab: Category | str) -> Category:
        """Switch tab. Folder context never survives a switch."""
        self._category = Category.parse(tab)
        self._nav.reset_on_category_change()
        logger.info("Selected category %s", self._category.value)
        return self._category

    def open_entity(self, entity_id: str) -> bool:
        """Descend into a folder. Opening a file (or a missing id) does nothing."""
        info = self._store.find(entity_id)
        if info is None or not is_openable_container(info.kind):
            return False
        self._nav.enter(info.id)
        logger.info("Entered folder %r (%s)", info.name, info.id)
        return True

    def navigate_up(self, target_id: Optional[str] = None) -> None:
        """Jump to target_id (an ancestor from the breadcrumb) or to root."""
        self._nav.go_to(target_id)
        logger.info("Navigated back to %s", target_id or "root")

    def request_trash(self, entity_id: str) -> Optional[ConfirmDialog]:
        self._pending_trash_id = entity_id if entity_id in self._store else None
        return self.confirm_dialog()

    def cancel_trash(self) -> None:
        self._pending_trash_id = None

    def confirm_trash(self, entity_id: Optional[str] = None) -> bool:
        """
        Confirm the delete dialog.

        A live entity goes to trash; an already-trashed one is deleted for
        good. The decision uses the trash state at confirmation time.
        """
        target = entity_id if entity_id is not None else self._pending_trash_id
        self._pending_trash_id = None
        info = self._store.find(target)
        if info is None:
            return False
        if info.is_trashed:
            return self._store.purge(info.id)
        return self._store.trash(info.id)

    def restore(self, entity_id: str) -> bool:
        return self._store.restore(entity_id)

    def toggle_favorite(self, entity_id: str) -> bool:
        info = self._store.find(entity_id)
        if info is None:
            return False
        return self._store.set_favorite(entity_id, not info.is_favorite)

    def create_folder(self, name: str) -> Entity:
        return self._store.create_folder(name, self._nav.current_folder_id)

    def simulate_upload(self) -> Entity:
        return self._store.create_file(self._nav.current_folder_id)

    def set_view_mode(self, mode: ViewMode | str) -> ViewMode:
        self._view_mode = ViewMode.parse(mode)
        return self._view_mode
