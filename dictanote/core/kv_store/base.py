"""
Base interface for key-value storage of serialized application state.
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """
    Abstract base class for string key-value backends.

    Backends raise StoreError subclasses; callers that need best-effort
    semantics (the persistence gateway) convert them to booleans.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Open the backend (create tables/files).

        Raises:
            StorageUnavailableError: If the backend cannot be opened
        """
        pass

    @abstractmethod
    async def is_available(self) -> bool:
        """Probe the backend with a write/remove round trip."""
        pass

    @abstractmethod
    async def get_item(self, key: str) -> str | None:
        """
        Retrieve a value.

        Args:
            key: Record key

        Returns:
            Stored string or None if absent
        """
        pass

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """
        Store a value, replacing any previous one.

        Raises:
            StorageQuotaError: If the value does not fit
            StorageUnavailableError: If the backend is disabled
        """
        pass

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """Remove a value; absent keys are ignored."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every value."""
        pass

    @abstractmethod
    async def usage(self) -> int:
        """Approximate bytes used by keys and values."""
        pass

    async def close(self) -> None:
        """Release backend resources."""
        return None
