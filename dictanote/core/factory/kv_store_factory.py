"""
Factory for creating key-value storage backends.
"""

from dictanote.config import StorageConfig
from dictanote.core.kv_store.base import KeyValueStore
from dictanote.core.kv_store.memory_store import InMemoryKeyValueStore
from dictanote.core.kv_store.sqlite_store import SQLiteKeyValueStore
from dictanote.utils.exceptions import ConfigurationError


class KeyValueStoreFactory:
    """Factory for creating key-value backends from configuration."""

    @staticmethod
    def create(config: StorageConfig) -> KeyValueStore:
        """
        Create key-value store from configuration.

        Args:
            config: Storage configuration

        Returns:
            Key-value store instance

        Raises:
            ConfigurationError: If backend is not supported
        """
        if config.backend == "sqlite":
            return SQLiteKeyValueStore(db_path=config.db_path)
        elif config.backend == "memory":
            return InMemoryKeyValueStore(quota_bytes=config.quota_bytes)
        else:
            raise ConfigurationError(f"Unsupported storage backend: {config.backend}")
