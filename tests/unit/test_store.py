"""Unit tests for the in-memory record store."""

import pytest
from connection_search.core.store import RecordStore
from connection_search.models.record import SearchableRecord


class TestRecordStore:
    """Test cases for the RecordStore class."""

    @pytest.fixture
    def store(self):
        """Create an empty store for testing."""
        return RecordStore()

    @pytest.fixture
    def records(self):
        """Sample connections."""
        return [
            SearchableRecord(id="c1", name="john smith", tags=["engineer"]),
            SearchableRecord(id="c2", name="jane doe", note="met at pycon"),
        ]

    def test_add_and_get_records(self, store, records):
        """Test records come back in insertion order."""
        total = store.add_records("user-1", records)

        assert total == 2
        assert [r.id for r in store.get_records("user-1")] == ["c1", "c2"]

    def test_unknown_owner(self, store):
        """Test an unknown owner has no records."""
        assert store.get_records("nobody") == []
        assert store.get_record("nobody", "c1") is None

    def test_owners_are_isolated(self, store, records):
        """Test records of one owner are not visible to another."""
        store.add_records("user-1", records)

        assert store.get_records("user-2") == []

    def test_add_overwrites_same_id(self, store, records):
        """Test adding an existing id replaces it in place."""
        store.add_records("user-1", records)
        store.add_records("user-1", [SearchableRecord(id="c1", name="johnny smith")])

        stored = store.get_records("user-1")
        assert [r.id for r in stored] == ["c1", "c2"]
        assert stored[0].name == "johnny smith"

    def test_replace(self, store, records):
        """Test replacing an owner's records."""
        store.add_records("user-1", records)
        total = store.add_records("user-1", [SearchableRecord(id="c3", name="ann lee")], replace=True)

        assert total == 1
        assert [r.id for r in store.get_records("user-1")] == ["c3"]

    def test_remove_record(self, store, records):
        """Test removing records."""
        store.add_records("user-1", records)

        assert store.remove_record("user-1", "c1") is True
        assert store.remove_record("user-1", "c1") is False
        assert store.remove_record("user-9", "c2") is False
        assert [r.id for r in store.get_records("user-1")] == ["c2"]

    def test_stats(self, store, records):
        """Test store statistics."""
        assert store.get_stats()["total_records"] == 0

        store.add_records("user-1", records)
        store.add_records("user-2", records[:1])
        stats = store.get_stats()

        assert stats["total_owners"] == 2
        assert stats["total_records"] == 3
        assert stats["last_updated"] is not None

    def test_replace_with_nothing_drops_owner(self, store, records):
        """Test an owner left without records is no longer counted."""
        store.add_records("user-1", records)
        total = store.add_records("user-1", [], replace=True)

        assert total == 0
        assert store.get_records("user-1") == []
        assert store.get_stats()["total_owners"] == 0

    def test_add_nothing_for_new_owner(self, store):
        """Test adding no records does not create an owner."""
        assert store.add_records("user-1", []) == 0
        assert store.get_stats()["total_owners"] == 0

    def test_clear(self, store, records):
        """Test clearing the store."""
        store.add_records("user-1", records)
        store.clear()

        assert store.get_records("user-1") == []
        assert store.get_stats()["total_owners"] == 0
