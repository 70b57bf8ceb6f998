"""
Tests for key-value storage backends.
"""

import pytest

from dictanote.core.kv_store import InMemoryKeyValueStore, SQLiteKeyValueStore
from dictanote.utils.exceptions import StorageQuotaError, StorageUnavailableError


@pytest.fixture
async def sqlite_store(tmp_path):
    """Create SQLite store in a temporary directory."""
    store = SQLiteKeyValueStore(db_path=str(tmp_path / "data" / "kv.db"))
    await store.initialize()
    yield store
    await store.close()


@pytest.mark.unit
class TestSQLiteKeyValueStore:
    """Test SQLite backend."""

    async def test_set_and_get(self, sqlite_store):
        """Test values round trip."""
        await sqlite_store.set_item("key", '{"a": 1}')

        assert await sqlite_store.get_item("key") == '{"a": 1}'

    async def test_get_missing(self, sqlite_store):
        """Test absent keys return None."""
        assert await sqlite_store.get_item("missing") is None

    async def test_overwrite(self, sqlite_store):
        """Test set replaces previous value."""
        await sqlite_store.set_item("key", "one")
        await sqlite_store.set_item("key", "two")

        assert await sqlite_store.get_item("key") == "two"

    async def test_remove_and_clear(self, sqlite_store):
        """Test remove and clear."""
        await sqlite_store.set_item("a", "1")
        await sqlite_store.set_item("b", "2")

        await sqlite_store.remove_item("a")
        await sqlite_store.remove_item("never-set")
        assert await sqlite_store.get_item("a") is None
        assert await sqlite_store.get_item("b") == "2"

        await sqlite_store.clear()
        assert await sqlite_store.get_item("b") is None

    async def test_usage(self, sqlite_store):
        """Test usage counts key and value lengths."""
        assert await sqlite_store.usage() == 0

        await sqlite_store.set_item("ab", "cde")

        assert await sqlite_store.usage() == 5

    async def test_usage_counts_utf8_bytes(self, sqlite_store):
        """Test multi-byte characters count by their encoded size."""
        await sqlite_store.set_item("k", "Hà Nội")

        assert await sqlite_store.usage() == 1 + len("Hà Nội".encode("utf-8"))

    async def test_is_available(self, sqlite_store):
        """Test probe leaves no residue."""
        assert await sqlite_store.is_available() is True
        assert await sqlite_store.usage() == 0

    async def test_persists_across_connections(self, tmp_path):
        """Test data survives reopening the file."""
        db_path = str(tmp_path / "kv.db")
        first = SQLiteKeyValueStore(db_path=db_path)
        await first.initialize()
        await first.set_item("key", "value")
        await first.close()

        second = SQLiteKeyValueStore(db_path=db_path)
        try:
            assert await second.get_item("key") == "value"
        finally:
            await second.close()

    async def test_unopenable_database(self, tmp_path):
        """Test an unusable path reports unavailable."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = SQLiteKeyValueStore(db_path=str(blocker / "kv.db"))

        with pytest.raises(StorageUnavailableError):
            await store.initialize()
        assert await store.is_available() is False


@pytest.mark.unit
class TestInMemoryKeyValueStore:
    """Test in-memory backend."""

    async def test_set_and_get(self):
        """Test values round trip."""
        store = InMemoryKeyValueStore()
        await store.initialize()
        await store.set_item("key", "value")

        assert await store.get_item("key") == "value"
        assert await store.usage() == len("key") + len("value")

    async def test_quota_exceeded(self):
        """Test writes beyond the quota raise."""
        store = InMemoryKeyValueStore(quota_bytes=10)
        await store.set_item("k", "12345")

        with pytest.raises(StorageQuotaError):
            await store.set_item("other", "123456")

    async def test_quota_counts_utf8_bytes(self):
        """Test Vietnamese diacritics count by encoded size, not characters."""
        text = "Tiếng Việt"
        assert len(text) < len(text.encode("utf-8"))
        store = InMemoryKeyValueStore(quota_bytes=1 + len(text))

        with pytest.raises(StorageQuotaError):
            await store.set_item("k", text)

        await store.set_item("k", "ascii text")
        assert await store.usage() == 1 + len("ascii text")

    async def test_quota_counts_replacement_not_old_value(self):
        """Test overwriting a key only counts the new value."""
        store = InMemoryKeyValueStore(quota_bytes=10)
        await store.set_item("k", "123456789")
        await store.set_item("k", "987654321")

        assert await store.get_item("k") == "987654321"

    async def test_unavailable(self):
        """Test a disabled store raises on every operation."""
        store = InMemoryKeyValueStore(available=False)

        assert await store.is_available() is False
        with pytest.raises(StorageUnavailableError):
            await store.initialize()
        with pytest.raises(StorageUnavailableError):
            await store.get_item("key")
        with pytest.raises(StorageUnavailableError):
            await store.set_item("key", "value")
