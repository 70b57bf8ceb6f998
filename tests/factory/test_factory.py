"""
Tests for factory classes.

Tests the creation of components using factories.
"""

import pytest

from dictanote.config import Config, LLMConfig, StorageConfig
from dictanote.core.factory import KeyValueStoreFactory, LLMFactory
from dictanote.core.kv_store import InMemoryKeyValueStore, KeyValueStore, SQLiteKeyValueStore
from dictanote.core.llm.base import LLMProvider
from dictanote.core.llm.ollama import OllamaLLM
from dictanote.core.llm.openai import OpenAILLM
from dictanote.utils.exceptions import ConfigurationError


class TestLLMFactory:
    """Test LLM factory."""

    def test_create_ollama_llm(self):
        """Test creating Ollama LLM provider."""
        config = LLMConfig(
            provider="ollama",
            model="llama3.1:8b",
            base_url="http://localhost:11434",
        )

        llm = LLMFactory.create(config)

        assert isinstance(llm, OllamaLLM)
        assert isinstance(llm, LLMProvider)
        assert llm.model == "llama3.1:8b"
        assert llm.host == "http://localhost:11434"

    def test_create_ollama_default_host(self):
        """Test Ollama falls back to the local host."""
        llm = LLMFactory.create(LLMConfig(provider="ollama", model="mistral"))

        assert llm.host == "http://localhost:11434"

    def test_create_openai_llm(self):
        """Test creating OpenAI LLM provider."""
        config = LLMConfig(
            provider="openai",
            model="gpt-4o-mini",
            api_key="sk-test-key",
        )

        llm = LLMFactory.create(config)

        assert isinstance(llm, OpenAILLM)
        assert isinstance(llm, LLMProvider)
        assert llm.model == "gpt-4o-mini"

    def test_create_openai_without_api_key_raises_error(self):
        """Test that OpenAI without API key raises error."""
        config = LLMConfig(provider="openai", model="gpt-4o", api_key=None)

        with pytest.raises(ConfigurationError, match="OpenAI API key is required"):
            LLMFactory.create(config)

    def test_create_unsupported_provider_raises_error(self):
        """Test that unsupported provider raises error."""
        config = LLMConfig(provider="unsupported", model="some-model")

        with pytest.raises(ConfigurationError, match="Unsupported LLM provider"):
            LLMFactory.create(config)

    def test_create_from_full_config(self):
        """Test creating LLM from full Config object."""
        config = Config()
        config.llm.provider = "ollama"
        config.llm.model = "llama3.2:latest"

        llm = LLMFactory.create(config.llm)

        assert isinstance(llm, OllamaLLM)
        assert llm.model == "llama3.2:latest"


class TestKeyValueStoreFactory:
    """Test key-value store factory."""

    def test_create_sqlite_store(self, tmp_path):
        """Test creating SQLite store."""
        db_path = str(tmp_path / "notes.db")

        store = KeyValueStoreFactory.create(StorageConfig(backend="sqlite", db_path=db_path))

        assert isinstance(store, SQLiteKeyValueStore)
        assert isinstance(store, KeyValueStore)
        assert store.db_path == db_path

    def test_create_memory_store(self):
        """Test creating in-memory store with a quota."""
        store = KeyValueStoreFactory.create(StorageConfig(backend="memory", quota_bytes=100))

        assert isinstance(store, InMemoryKeyValueStore)
        assert store.quota_bytes == 100

    def test_create_unsupported_backend_raises_error(self):
        """Test that unsupported backend raises error."""
        with pytest.raises(ConfigurationError, match="Unsupported storage backend"):
            KeyValueStoreFactory.create(StorageConfig(backend="redis"))
