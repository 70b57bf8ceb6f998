"""
Factory modules for creating dictanote components.

Provides factories for the LLM provider and the key-value storage backend.
"""

from dictanote.core.factory.kv_store_factory import KeyValueStoreFactory
from dictanote.core.factory.llm_factory import LLMFactory

__all__ = [
    "LLMFactory",
    "KeyValueStoreFactory",
]
