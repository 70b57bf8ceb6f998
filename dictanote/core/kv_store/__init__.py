"""
Key-value storage backends for persisted application state.

Supported backends:
- SQLite (aiosqlite)
- In-memory
"""
from dictanote.core.kv_store.base import KeyValueStore
from dictanote.core.kv_store.memory_store import InMemoryKeyValueStore
from dictanote.core.kv_store.sqlite_store import SQLiteKeyValueStore

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SQLiteKeyValueStore",
]
