"""Tests for the SQLite-backed InventoryStore.

These tests verify:
- id assignment on create
- exact, case-sensitive category matching
- strict price filtering
- full overwrite on update and not-found handling for update/delete
- file-backed persistence across reopen
"""

import os
import tempfile

import pytest

from core.errors import ProductNotFoundError
from core.inventory import InventoryStore
from core.models import Product


def _draft(name="Widget", category="Tools", price=9.99, stock=5):
    return Product(name=name, category=category, price=price, stock=stock)


class TestCreate:
    def test_assigns_unique_increasing_ids(self, store):
        first = store.create(_draft(name="A"))
        second = store.create(_draft(name="B"))

        assert first.id is not None
        assert second.id is not None
        assert first.id != second.id
        assert second.id > first.id

    def test_leaves_draft_without_id(self, store):
        draft = _draft()
        stored = store.create(draft)

        assert draft.id is None
        assert not draft.is_stored
        assert stored.is_stored

    def test_round_trips_all_fields(self, store):
        stored = store.create(_draft())

        assert store.find_by_id(stored.id) == Product(
            name="Widget", category="Tools", price=9.99, stock=5, id=stored.id
        )

    def test_ids_not_reused_after_delete(self, store):
        first = store.create(_draft(name="A"))
        store.delete(first)
        second = store.create(_draft(name="B"))

        assert second.id != first.id


class TestReads:
    def test_find_all_ordered_by_id(self, seeded_store):
        products = seeded_store.find_all()

        assert len(products) == 10
        assert [p.id for p in products] == sorted(p.id for p in products)

    def test_find_all_empty(self, store):
        assert store.find_all() == []

    def test_find_by_id_missing_returns_none(self, seeded_store):
        assert seeded_store.find_by_id(999) is None

    @pytest.mark.parametrize("product_id", [2 ** 63, -(2 ** 63) - 1])
    def test_find_by_id_out_of_integer_range_returns_none(self, seeded_store, product_id):
        assert seeded_store.find_by_id(product_id) is None

    def test_find_by_category_exact_match(self, seeded_store):
        books = seeded_store.find_by_category("Books")

        assert {p.name for p in books} == {"Spring in Action", "Clean Code"}
        assert all(p.category == "Books" for p in books)

    @pytest.mark.parametrize("category", ["books", "BOOKS", " Books", "Books ", "Book"])
    def test_find_by_category_is_case_sensitive_and_untrimmed(self, seeded_store, category):
        assert seeded_store.find_by_category(category) == []

    def test_find_by_price_less_than_is_strict(self, seeded_store):
        # Wireless Mouse and Toaster are both exactly 29.99
        under = seeded_store.find_by_price_less_than(29.99)

        assert [p.name for p in under] == ["T-Shirt"]

    def test_find_by_price_less_than_includes_just_above_boundary(self, seeded_store):
        names = {p.name for p in seeded_store.find_by_price_less_than(30.0)}

        assert names == {"Wireless Mouse", "T-Shirt", "Toaster"}

    def test_find_by_price_less_than_none_match(self, seeded_store):
        assert seeded_store.find_by_price_less_than(0) == []

    def test_count(self, seeded_store):
        assert seeded_store.count() == 10


class TestUpdate:
    def test_overwrites_all_fields(self, store):
        stored = store.create(_draft())
        changed = Product(name="NewName", category="NewCat", price=1.0, stock=1, id=stored.id)

        result = store.update(changed)

        assert result == changed
        assert store.find_by_id(stored.id) == changed

    def test_missing_id_raises(self, store):
        with pytest.raises(ProductNotFoundError) as excinfo:
            store.update(_draft().with_id(42))

        assert excinfo.value.product_id == 42
        assert str(excinfo.value) == "Product with ID 42 not found."

    def test_draft_without_id_raises(self, store):
        with pytest.raises(ProductNotFoundError):
            store.update(_draft())


class TestDelete:
    def test_removes_record(self, seeded_store):
        laptop = seeded_store.find_by_id(1)
        seeded_store.delete(laptop)

        assert seeded_store.find_by_id(1) is None
        assert seeded_store.count() == 9

    def test_missing_id_raises_and_leaves_store_unchanged(self, seeded_store):
        before = seeded_store.find_all()

        with pytest.raises(ProductNotFoundError):
            seeded_store.delete(_draft().with_id(999))

        assert seeded_store.find_all() == before

    def test_draft_without_id_raises(self, seeded_store):
        with pytest.raises(ProductNotFoundError):
            seeded_store.delete(_draft())

        assert seeded_store.count() == 10


class TestClear:
    def test_clear_empties_and_restarts_ids(self, seeded_store):
        seeded_store.clear()

        assert seeded_store.count() == 0
        assert seeded_store.create(_draft()).id == 1

    def test_clear_on_fresh_store(self, store):
        store.clear()

        assert store.count() == 0


class TestFileBackedStore:
    @pytest.fixture
    def temp_db_path(self):
        """Create a temporary database file for testing."""
        fd, path = tempfile.mkstemp(suffix=".db")
        os.close(fd)
        yield path
        if os.path.exists(path):
            os.remove(path)

    def test_records_survive_reopen(self, temp_db_path):
        with InventoryStore(temp_db_path) as inventory:
            stored = inventory.create(_draft())

        with InventoryStore(temp_db_path) as reopened:
            assert reopened.find_by_id(stored.id) == stored
