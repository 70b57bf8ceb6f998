"""
Tests for ID and timestamp utilities.

Tests cover:
1. Note ID format
2. Uniqueness guarantees
3. Millisecond timestamps
"""

import time

from dictanote.utils import generate_note_id, now_ms


class TestGenerateNoteId:
    """Tests for Note ID generation."""

    def test_format(self):
        """Test Note ID format: note_xxx (32 hex chars)."""
        note_id = generate_note_id()

        assert note_id.startswith("note_")
        assert len(note_id) == 37  # "note_" (5) + 32 hex chars
        int(note_id[5:], 16)

    def test_uniqueness(self):
        """Test that generated Note IDs are unique."""
        ids = [generate_note_id() for _ in range(1000)]
        assert len(ids) == len(set(ids))


class TestNowMs:
    """Tests for millisecond timestamps."""

    def test_matches_wall_clock(self):
        """Test timestamp is close to time.time() in ms."""
        before = int(time.time() * 1000)
        value = now_ms()
        after = int(time.time() * 1000)

        assert before - 1 <= value <= after + 1

    def test_monotonic_enough(self):
        """Test consecutive calls do not go backwards."""
        first = now_ms()
        second = now_ms()
        assert second >= first
