"""
In-memory key-value store.

Useful for tests and for sessions that should leave nothing on disk.
A byte quota and an availability switch reproduce the failure modes of
browser-style storage (quota exceeded, storage disabled).
"""

from dictanote.core.kv_store.base import KeyValueStore
from dictanote.utils.exceptions import StorageQuotaError, StorageUnavailableError


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed key-value store; usage and quota count UTF-8 bytes."""

    def __init__(self, quota_bytes: int | None = None, available: bool = True):
        self.quota_bytes = quota_bytes
        self.available = available
        self._data: dict[str, str] = {}

    def _check_available(self) -> None:
        if not self.available:
            raise StorageUnavailableError("In-memory storage is disabled")

    async def initialize(self) -> None:
        self._check_available()

    async def is_available(self) -> bool:
        return self.available

    async def get_item(self, key: str) -> str | None:
        self._check_available()
        return self._data.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._check_available()
        if self.quota_bytes is not None:
            current = self._size(exclude=key)
            if current + _byte_len(key) + _byte_len(value) > self.quota_bytes:
                raise StorageQuotaError(
                    "Storage quota exceeded",
                    context={"key": key, "quota_bytes": self.quota_bytes},
                )
        self._data[key] = value

    async def remove_item(self, key: str) -> None:
        self._check_available()
        self._data.pop(key, None)

    async def clear(self) -> None:
        self._check_available()
        self._data.clear()

    async def usage(self) -> int:
        self._check_available()
        return self._size()

    def _size(self, exclude: str | None = None) -> int:
        return sum(_byte_len(k) + _byte_len(v) for k, v in self._data.items() if k != exclude)
