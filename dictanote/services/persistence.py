"""
Persistence Gateway - mirrors notes and the language preference to storage.

Best-effort: every storage failure becomes a False return or an empty
default, never an exception.
"""

import json

from pydantic import ValidationError as PydanticValidationError

from dictanote.core.kv_store.base import KeyValueStore
from dictanote.models.note import Language
from dictanote.models.state import PersistedState
from dictanote.utils.exceptions import StoreError
from dictanote.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_STORAGE_KEY = "voice-dictation-storage"

# Envelope version of the stored record, kept compatible with records
# written by the browser build ({"state": {...}, "version": 0}).
RECORD_VERSION = 0


class PersistenceGateway:
    """Serializes PersistedState under a single fixed key."""

    def __init__(
        self,
        kv_store: KeyValueStore,
        storage_key: str = DEFAULT_STORAGE_KEY,
        default_language: Language = Language.EN_US,
    ):
        """
        Args:
            kv_store: Key-value backend
            storage_key: Record key
            default_language: Language of the empty state returned when no usable record exists
        """
        self.kv_store = kv_store
        self.storage_key = storage_key
        self.default_language = Language(default_language)

    def default_state(self) -> PersistedState:
        """Empty notes with the configured default language."""
        return PersistedState(current_language=self.default_language)

    def serialize(self, state: PersistedState) -> str:
        """Encode state as the stored JSON record."""
        return json.dumps(
            {
                "state": state.model_dump(mode="json", by_alias=True),
                "version": RECORD_VERSION,
            },
            ensure_ascii=False,
        )

    def deserialize(self, raw: str) -> PersistedState:
        """
        Decode a stored JSON record.

        Raises:
            ValueError: If the record is malformed
        """
        record = json.loads(raw)
        if not isinstance(record, dict) or not isinstance(record.get("state"), dict):
            raise ValueError("Stored record has no state object")
        return PersistedState.model_validate(record["state"])

    async def save(self, state: PersistedState) -> bool:
        """
        Write notes and language preference.

        Args:
            state: Snapshot to persist

        Returns:
            True if the record was written
        """
        try:
            await self.kv_store.set_item(self.storage_key, self.serialize(state))
        except StoreError as e:
            logger.warning("Failed to persist notes: {}", e.message)
            return False
        except Exception:
            logger.exception("Unexpected storage failure while persisting notes")
            return False

        logger.debug("Persisted notes", extra={"notes": len(state.notes)})
        return True

    async def load(self) -> PersistedState:
        """
        Read the last saved snapshot.

        Returns:
            Saved state, or the default state when missing, unavailable or corrupt
        """
        try:
            raw = await self.kv_store.get_item(self.storage_key)
        except StoreError as e:
            logger.warning("Failed to load notes: {}", e.message)
            return self.default_state()
        except Exception:
            logger.exception("Unexpected storage failure while loading notes")
            return self.default_state()

        if raw is None:
            return self.default_state()

        try:
            return self.deserialize(raw)
        except (ValueError, PydanticValidationError) as e:
            logger.warning("Discarding corrupt stored record: {}", e)
            return self.default_state()

    async def clear(self) -> bool:
        """Remove the stored record."""
        try:
            await self.kv_store.remove_item(self.storage_key)
        except StoreError as e:
            logger.warning("Failed to clear stored notes: {}", e.message)
            return False
        except Exception:
            logger.exception("Unexpected storage failure while clearing notes")
            return False
        return True

    async def usage(self) -> int:
        """Approximate bytes used by the backend, 0 if unavailable."""
        try:
            return await self.kv_store.usage()
        except StoreError:
            return 0
        except Exception:
            logger.exception("Unexpected storage failure while measuring usage")
            return 0
