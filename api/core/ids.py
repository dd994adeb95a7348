"""
Entity id generation.

An id is 32 lowercase hex chars: the creation timestamp (ms) as 16 zero-padded
hex digits, followed by a random 64-bit value as 16 zero-padded hex digits.
Uniqueness is probabilistic (birthday bound on the random half).
"""

from __future__ import annotations

import secrets

_U64_MASK = (1 << 64) - 1


def generate_id(now_ms: int) -> str:
    # Same-millisecond ids differ only in the random half.
    return f"{now_ms & _U64_MASK:016x}{secrets.randbits(64):016x}"
