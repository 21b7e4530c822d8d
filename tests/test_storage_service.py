# FoodBazar Tests - Storage adapters

import pytest

from foodbazar.extensions import db
from foodbazar.models import StorageEntry
from foodbazar.services.storage_service import MemoryStorage, SqlKeyValueStorage
from foodbazar.services.store_service import DataStore


class TestMemoryStorage:

    def test_set_get_remove(self):
        storage = MemoryStorage()
        storage.set_item("a", "1")

        assert storage.get_item("a") == "1"
        storage.remove_item("a")
        assert storage.get_item("a") is None
        assert storage.keys() == []

    def test_staged_writes_visible_until_rollback(self):
        storage = MemoryStorage({"a": "1"})
        storage.set_item("a", "2", commit=False)
        storage.remove_item("b", commit=False)

        assert storage.get_item("a") == "2"
        storage.rollback()
        assert storage.get_item("a") == "1"

    def test_commit_applies_staged_writes(self):
        storage = MemoryStorage()
        storage.set_item("a", "1", commit=False)
        storage.set_item("b", "2", commit=False)
        storage.commit()

        assert storage.keys() == ["a", "b"]


class TestSqlKeyValueStorage:

    def test_set_overwrites_single_row(self, app):
        storage = SqlKeyValueStorage()
        storage.set_item("foodbazar_products", "[]")
        storage.set_item("foodbazar_products", '[{"id": "P001"}]')

        assert storage.get_item("foodbazar_products") == '[{"id": "P001"}]'
        assert db.session.query(StorageEntry).count() == 1

    def test_remove_missing_key_is_noop(self, app):
        storage = SqlKeyValueStorage()
        storage.remove_item("nothing")

        assert storage.keys() == []

    def test_rollback_discards_uncommitted_write(self, app):
        storage = SqlKeyValueStorage()
        storage.set_item("k", "old")
        storage.set_item("k", "new", commit=False)
        storage.rollback()

        assert storage.get_item("k") == "old"

    def test_remove_then_set_in_one_commit(self, app):
        storage = SqlKeyValueStorage()
        storage.set_item("k", "old")
        storage.remove_item("k", commit=False)
        storage.set_item("k", "new", commit=False)
        storage.commit()

        assert storage.get_item("k") == "new"

    def test_entries_report_size(self, app):
        storage = SqlKeyValueStorage()
        storage.set_item("k", "12345")

        entries = storage.entries()
        assert entries[0]["key"] == "k"
        assert entries[0]["size"] == 5

    def test_store_round_trip_through_database(self, app):
        store = DataStore(SqlKeyValueStorage())
        store.load()
        store.update_product("P003", {"stock": 5})

        reloaded = DataStore(SqlKeyValueStorage())
        assert reloaded.get_product("P003").stock == 5
        assert [c.to_dict() for c in reloaded.list_customers()] == [c.to_dict() for c in store.list_customers()]

    def test_requires_app_context(self):
        with pytest.raises(RuntimeError):
            SqlKeyValueStorage().get_item("k")
