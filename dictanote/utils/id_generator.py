"""
ID and timestamp utilities for dictanote.

- Notes: note_xxx (32 hex characters)
- Timestamps: integer milliseconds since the Unix epoch
"""

import time
from uuid import uuid4


def generate_note_id() -> str:
    """
    Generate unique Note ID.

    Returns:
        ID in format "note_xxx" where xxx is a full uuid4 hex string
    """
    return f"note_{uuid4().hex}"


def now_ms() -> int:
    """Current wall-clock time in milliseconds since epoch."""
    return time.time_ns() // 1_000_000
