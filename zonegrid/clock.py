from __future__ import annotations
import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int: ...


class SystemClock:
    """Milliseconds since the Unix epoch, from the system clock."""

    def now(self) -> int:
        return time.time_ns() // 1_000_000


class FixedClock:
    def __init__(self, instant: int):
        self.instant = instant

    def now(self) -> int:
        return self.instant
