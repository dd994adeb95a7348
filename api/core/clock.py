"""
Time sources. Everything that stamps `created_at` goes through one of these.
"""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now_ms(self) -> int: ...


class SystemClock:
    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


class FixedClock:
    """
    Test double: always returns the value it was built with.
    """

    def __init__(self, value_ms: int) -> None:
        self.value_ms = value_ms

    def now_ms(self) -> int:
        return self.value_ms
