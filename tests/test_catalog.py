"""Unit tests for commodities.services.catalog: bootstrap, CRUD and persistence."""

import json
import unittest

from commodities.core.config import CATALOG_KEY
from commodities.core.errors import NotFound, ValidationError
from commodities.core.storage import MemoryStorage
from commodities.services.catalog import DEFAULT_PRODUCTS, Catalog


def _draft(**overrides: object) -> dict:
    """Build a valid product draft for tests."""
    draft = {"name": "Maize", "category": "Grain", "price": 20, "stock": 50, "unit": "kg"}
    draft.update(overrides)
    return draft


def _stored(storage: MemoryStorage) -> list[dict]:
    return json.loads(storage.read(CATALOG_KEY))


class TestBootstrap(unittest.TestCase):
    """First use seeds defaults exactly once; later starts load the snapshot verbatim."""

    def test_fresh_storage_is_seeded_and_persisted(self) -> None:
        storage = MemoryStorage()
        catalog = Catalog(storage)
        names = [p.name for p in catalog.list()]
        self.assertEqual(names, [d["name"] for d in DEFAULT_PRODUCTS])
        self.assertEqual(len({p.id for p in catalog.list()}), len(DEFAULT_PRODUCTS))
        self.assertEqual(len(_stored(storage)), len(DEFAULT_PRODUCTS))

    def test_second_start_reuses_seeded_ids(self) -> None:
        storage = MemoryStorage()
        first = Catalog(storage).list()
        second = Catalog(storage).list()
        self.assertEqual(first, second)

    def test_empty_snapshot_is_not_reseeded(self) -> None:
        storage = MemoryStorage({CATALOG_KEY: "[]"})
        self.assertEqual(Catalog(storage).list(), ())

    def test_corrupt_snapshot_is_treated_as_absent(self) -> None:
        storage = MemoryStorage({CATALOG_KEY: "not-json"})
        catalog = Catalog(storage)
        self.assertEqual(len(catalog.list()), len(DEFAULT_PRODUCTS))

    def test_invalid_entry_is_treated_as_absent(self) -> None:
        bad = [{"id": "1", "name": "X", "category": "Y", "price": -5, "stock": 1, "unit": "kg"}]
        storage = MemoryStorage({CATALOG_KEY: json.dumps(bad)})
        self.assertEqual(len(Catalog(storage).list()), len(DEFAULT_PRODUCTS))

    def test_round_trip_preserves_order(self) -> None:
        storage = MemoryStorage()
        catalog = Catalog(storage)
        catalog.add(_draft(name="Barley"))
        catalog.add(_draft(name="Sorghum", unit="bag"))
        reloaded = Catalog(storage)
        self.assertEqual(reloaded.list(), catalog.list())


class TestAdd(unittest.TestCase):
    """add() validates, assigns a fresh id, prepends and persists."""

    def setUp(self) -> None:
        self.storage = MemoryStorage()
        self.catalog = Catalog(self.storage)

    def test_valid_draft_is_prepended_with_fresh_id(self) -> None:
        existing_ids = {p.id for p in self.catalog.list()}
        product = self.catalog.add(_draft())
        self.assertNotIn(product.id, existing_ids)
        self.assertEqual(self.catalog.list()[0], product)
        self.assertEqual(product.price, 20.0)
        self.assertEqual(product.stock, 50)
        self.assertEqual(_stored(self.storage)[0]["id"], product.id)

    def test_client_supplied_id_is_ignored(self) -> None:
        product = self.catalog.add(_draft(id="chosen-by-client"))
        self.assertNotEqual(product.id, "chosen-by-client")

    def test_form_strings_are_parsed(self) -> None:
        product = self.catalog.add(_draft(name="  Maize ", price="25.50", stock="100"))
        self.assertEqual(product.name, "Maize")
        self.assertEqual(product.price, 25.5)
        self.assertEqual(product.stock, 100)

    def test_empty_name_fails_without_mutation(self) -> None:
        before = self.catalog.list()
        with self.assertRaises(ValidationError) as ctx:
            self.catalog.add(_draft(name=""))
        self.assertEqual(ctx.exception.field, "name")
        self.assertEqual(self.catalog.list(), before)

    def test_negative_price_fails(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            self.catalog.add({"name": "X", "category": "Y", "price": -1, "stock": 5, "unit": "kg"})
        self.assertEqual(ctx.exception.field, "price")


class TestUpdate(unittest.TestCase):
    """update() merges, validates, replaces in place and persists."""

    def setUp(self) -> None:
        self.storage = MemoryStorage()
        self.catalog = Catalog(self.storage)

    def test_update_keeps_position(self) -> None:
        target = self.catalog.list()[2]
        updated = self.catalog.update(target.id, {"price": 10})
        self.assertEqual(self.catalog.list()[2], updated)
        self.assertEqual(updated.price, 10.0)
        self.assertEqual(updated.name, target.name)
        self.assertEqual(_stored(self.storage)[2]["price"], 10.0)

    def test_unknown_id_raises_not_found(self) -> None:
        with self.assertRaises(NotFound):
            self.catalog.update("missing-id", {"price": 10})

    def test_invalid_merge_leaves_product_unchanged(self) -> None:
        target = self.catalog.list()[0]
        with self.assertRaises(ValidationError) as ctx:
            self.catalog.update(target.id, {"stock": 2.5, "unit": "crate"})
        self.assertEqual(ctx.exception.field, "stock")
        self.assertEqual(self.catalog.get(target.id), target)

    def test_id_in_changes_is_ignored(self) -> None:
        target = self.catalog.list()[0]
        updated = self.catalog.update(target.id, {"id": "other", "name": "Durum"})
        self.assertEqual(updated.id, target.id)
        self.assertEqual(updated.name, "Durum")


class TestDelete(unittest.TestCase):
    """delete() removes by id; unknown ids are a no-op."""

    def test_delete_removes_and_persists(self) -> None:
        storage = MemoryStorage()
        catalog = Catalog(storage)
        target = catalog.list()[1]
        catalog.delete(target.id)
        self.assertNotIn(target.id, [p.id for p in catalog.list()])
        self.assertNotIn(target.id, [p["id"] for p in _stored(storage)])

    def test_delete_unknown_is_noop(self) -> None:
        catalog = Catalog(MemoryStorage())
        before = catalog.list()
        catalog.delete("missing-id")
        self.assertEqual(catalog.list(), before)


class TestListIsReadOnly(unittest.TestCase):
    """list() cannot be used to corrupt internal order."""

    def test_returned_sequence_is_immutable(self) -> None:
        catalog = Catalog(MemoryStorage())
        products = catalog.list()
        self.assertIsInstance(products, tuple)
        reordered = list(products)
        reordered.reverse()
        self.assertEqual(catalog.list(), products)


if __name__ == "__main__":
    unittest.main()
