"""
Shared test fixtures for all test modules.
"""

import asyncio

import pytest

from dictanote.core.capture.base import CaptureDevice
from dictanote.core.kv_store import InMemoryKeyValueStore
from dictanote.core.llm.base import LLMProvider


class MockLLM(LLMProvider):
    """
    Completion service double.

    Records every call. Set `gate` to an asyncio.Event to hold calls in
    flight until it is set; set `error` to make calls fail.
    """

    def __init__(self, response: str = "## Decisions\n- [HIGH] Ship on Friday"):
        self.response = response
        self.error: Exception | None = None
        self.gate: asyncio.Event | None = None
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    async def complete(self, system_prompt, user_message, max_tokens=4000, temperature=0.3, **kwargs):
        self.calls.append((system_prompt, user_message))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self):
        self.closed = True


class FakeCaptureDevice(CaptureDevice):
    """Capture device driven by the test through emit()/fail()/end()."""

    def __init__(self, available: bool = True):
        self.available = available
        self.language: str | None = None
        self.started = False
        self.stopped = False
        self.aborted = False
        self._fragment_cb = None
        self._error_cb = None
        self._stopped_cb = None

    def is_available(self) -> bool:
        return self.available

    def configure_language(self, code: str) -> None:
        self.language = code

    def start(self) -> None:
        self.started = True

    def stop(self) -> None:
        self.stopped = True

    def abort(self) -> None:
        self.aborted = True

    def on_fragment(self, callback) -> None:
        self._fragment_cb = callback

    def on_error(self, callback) -> None:
        self._error_cb = callback

    def on_stopped(self, callback) -> None:
        self._stopped_cb = callback

    def emit(self, text: str, is_interim: bool = False) -> None:
        self._fragment_cb(text, is_interim)

    def fail(self, reason: str) -> None:
        self._error_cb(reason)

    def end(self) -> None:
        self._stopped_cb()


@pytest.fixture
def mock_llm() -> MockLLM:
    """Completion service double returning a fixed analysis."""
    return MockLLM()


@pytest.fixture
def fake_device() -> FakeCaptureDevice:
    """Available capture device."""
    return FakeCaptureDevice()


@pytest.fixture
def unavailable_device() -> FakeCaptureDevice:
    """Capture device reporting no recognition support."""
    return FakeCaptureDevice(available=False)


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    """Fresh in-memory key-value store."""
    return InMemoryKeyValueStore()
