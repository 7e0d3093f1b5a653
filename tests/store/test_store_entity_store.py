import random
import unittest
from unittest import mock

from filedeck.errors import InvalidArgumentError, NotFoundError, TreeIntegrityError
from filedeck.models import Entity, EntityKind
from filedeck.store import EntityStore, FixedUploadSource, UploadCandidate


def _folder(entity_id: str, parent_id=None, **kwargs) -> Entity:
    return Entity(
        id=entity_id,
        name=f"Folder {entity_id}",
        kind=EntityKind.FOLDER,
        date_label="Today",
        parent_id=parent_id,
        **kwargs,
    )


def _file(entity_id: str, parent_id=None, **kwargs) -> Entity:
    return Entity(
        id=entity_id,
        name=f"file-{entity_id}.txt",
        kind=EntityKind.DOCUMENT,
        date_label="Today",
        size_label="1 KB",
        parent_id=parent_id,
        **kwargs,
    )


class TestEntityStore(unittest.TestCase):
    def _make_store(self) -> EntityStore:
        # A/ -> B/ -> F ; C at root
        return EntityStore.from_entities(
            [_folder("A"), _folder("B", "A"), _file("F", "B"), _file("C")],
            upload_source=FixedUploadSource(
                [UploadCandidate("photo.png", EntityKind.IMAGE, "2 MB")]
            ),
        )

    def test_seed_order_preserved(self) -> None:
        store = self._make_store()
        self.assertEqual([e.id for e in store.entities()], ["A", "B", "F", "C"])
        self.assertEqual(len(store), 4)
        self.assertIn("F", store)
        self.assertNotIn("Z", store)

    def test_seed_rejects_duplicate_ids(self) -> None:
        with self.assertRaises(TreeIntegrityError):
            EntityStore([_folder("A"), _file("A")])

    def test_seed_rejects_non_folder_parent(self) -> None:
        with self.assertRaises(TreeIntegrityError):
            EntityStore([_file("F"), _file("G", "F")])

    def test_seed_rejects_cycle(self) -> None:
        with self.assertRaises(TreeIntegrityError):
            EntityStore([_folder("A", "B"), _folder("B", "A")])

    def test_seed_tolerates_orphan(self) -> None:
        store = EntityStore([_file("X", "99", is_favorite=True)])
        self.assertEqual(store.get("X").parent_id, "99")

    def test_get_missing_raises_find_returns_none(self) -> None:
        store = self._make_store()
        with self.assertRaises(NotFoundError):
            store.get("NOPE")
        self.assertIsNone(store.find("NOPE"))
        self.assertIsNone(store.find(None))

    def test_children_includes_trashed(self) -> None:
        store = self._make_store()
        store.trash("B")
        self.assertEqual([e.id for e in store.children("A")], ["B"])
        self.assertEqual([e.id for e in store.children(None)], ["A", "C"])

    def test_create_folder_on_empty_store(self) -> None:
        store = EntityStore()
        folder = store.create_folder("Reports", None)
        self.assertEqual(len(store), 1)
        self.assertIs(folder.kind, EntityKind.FOLDER)
        self.assertIsNone(folder.parent_id)
        self.assertFalse(folder.is_trashed)
        self.assertIsNone(folder.size_label)
        self.assertEqual(folder.date_label, "Just now")

    def test_create_folder_trims_and_prepends(self) -> None:
        store = self._make_store()
        folder = store.create_folder("  Drafts  ", "A")
        self.assertEqual(folder.name, "Drafts")
        self.assertEqual(folder.parent_id, "A")
        self.assertEqual(store.entities()[0].id, folder.id)

    def test_create_folder_empty_name_rejected(self) -> None:
        store = self._make_store()
        for bad in ("", "   ", "\t\n"):
            with self.assertRaises(InvalidArgumentError):
                store.create_folder(bad)
        self.assertEqual(len(store), 4)

    def test_create_under_non_folder_rejected(self) -> None:
        store = self._make_store()
        with self.assertRaises(TreeIntegrityError):
            store.create_folder("X", "F")
        with self.assertRaises(TreeIntegrityError):
            store.create_file("F")

    def test_create_under_missing_parent_rejected(self) -> None:
        store = self._make_store()
        with self.assertRaises(TreeIntegrityError):
            store.create_folder("X", "NOPE")

    def test_create_file_uses_upload_source(self) -> None:
        store = self._make_store()
        info = store.create_file("A")
        self.assertEqual(info.name, "photo.png")
        self.assertIs(info.kind, EntityKind.IMAGE)
        self.assertEqual(info.size_label, "2 MB")
        self.assertEqual(info.parent_id, "A")
        self.assertEqual(store.entities()[0].id, info.id)

    def test_create_file_default_source_is_random_candidate(self) -> None:
        store = EntityStore()
        info = store.create_file()
        self.assertIsNot(info.kind, EntityKind.FOLDER)
        self.assertTrue(info.name)

    def test_trash_restore_round_trip(self) -> None:
        store = self._make_store()
        before = store.get("F").clone()
        self.assertTrue(store.trash("F"))
        self.assertTrue(store.get("F").is_trashed)
        self.assertTrue(store.restore("F"))
        self.assertEqual(store.get("F"), before)

    def test_trash_does_not_cascade(self) -> None:
        store = self._make_store()
        store.trash("A")
        self.assertFalse(store.get("B").is_trashed)
        self.assertFalse(store.get("F").is_trashed)
        self.assertEqual(store.get("B").parent_id, "A")

    def test_missing_ids_are_noops(self) -> None:
        store = self._make_store()
        self.assertFalse(store.trash("NOPE"))
        self.assertFalse(store.restore("NOPE"))
        self.assertFalse(store.purge("NOPE"))
        self.assertFalse(store.set_favorite("NOPE"))
        self.assertEqual(len(store), 4)

    def test_purge_leaves_orphans(self) -> None:
        store = self._make_store()
        store.trash("A")
        self.assertTrue(store.purge("A"))
        self.assertNotIn("A", store)
        self.assertEqual(store.get("B").parent_id, "A")
        self.assertTrue(store.is_retired("A"))

    def test_purge_without_trash_is_accepted(self) -> None:
        store = self._make_store()
        self.assertTrue(store.purge("C"))
        self.assertNotIn("C", store)

    def test_purged_id_is_never_reallocated(self) -> None:
        store = self._make_store()
        store.purge("C")
        with mock.patch(
            "filedeck.store.entity_store.new_entity_id",
            side_effect=["C", "A", "Z"],
        ):
            info = store.create_folder("Fresh")
        self.assertEqual(info.id, "Z")

    def test_set_favorite(self) -> None:
        store = self._make_store()
        self.assertTrue(store.set_favorite("F"))
        self.assertTrue(store.get("F").is_favorite)
        store.set_favorite("F", False)
        self.assertFalse(store.get("F").is_favorite)

    def test_move_to_root_and_folder(self) -> None:
        store = self._make_store()
        store.move("F", None)
        self.assertIsNone(store.get("F").parent_id)
        store.move("C", "B")
        self.assertEqual(store.get("C").parent_id, "B")

    def test_cycle_move_rejected(self) -> None:
        store = self._make_store()
        # Attempt to move A under its descendant B
        with self.assertRaises(TreeIntegrityError):
            store.move("A", "B")
        with self.assertRaises(TreeIntegrityError):
            store.move("A", "A")
        self.assertIsNone(store.get("A").parent_id)

    def test_move_missing_target_raises(self) -> None:
        store = self._make_store()
        with self.assertRaises(NotFoundError):
            store.move("NOPE", "A")

    def test_move_under_file_rejected(self) -> None:
        store = self._make_store()
        with self.assertRaises(TreeIntegrityError):
            store.move("C", "F")

    def test_mutations_are_logged(self) -> None:
        store = self._make_store()
        with self.assertLogs("filedeck.store.entity_store", level="INFO") as logs:
            store.trash("F")
            store.create_folder("New")
        self.assertEqual(len(logs.records), 2)

    def test_seeded_random_source_is_deterministic(self) -> None:
        from filedeck.store import RandomUploadSource

        a = EntityStore(upload_source=RandomUploadSource(rng=random.Random(7)))
        b = EntityStore(upload_source=RandomUploadSource(rng=random.Random(7)))
        names_a = [a.create_file().name for _ in range(5)]
        names_b = [b.create_file().name for _ in range(5)]
        self.assertEqual(names_a, names_b)


    def test_seed_normalizes_string_kinds(self) -> None:
        store = EntityStore(
            [
                Entity(id="d", name="Docs", kind="folder", date_label="Today"),  # type: ignore[arg-type]
                Entity(id="p", name="p.png", kind="image", date_label="Today", size_label="1 MB"),  # type: ignore[arg-type]
            ]
        )
        self.assertIs(store.get("d").kind, EntityKind.FOLDER)
        self.assertEqual(store.create_folder("Inner", "d").parent_id, "d")
        with self.assertRaises(TreeIntegrityError) as ctx:
            store.create_folder("X", "p")
        self.assertEqual(ctx.exception.details["kind"], "image")

    def test_seed_rejects_folder_with_size(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            EntityStore([_folder("A", size_label="4 KB")])

    def test_seed_rejects_empty_id(self) -> None:
        for bad in ("", "   "):
            with self.assertRaises(InvalidArgumentError):
                EntityStore([_file(bad)])

    def test_from_entities_accepts_date_label(self) -> None:
        store = EntityStore.from_entities([_folder("A")], date_label="Today")
        self.assertEqual(store.date_label, "Today")
        self.assertEqual(store.create_folder("New", "A").date_label, "Today")


if __name__ == "__main__":
    unittest.main()
