from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Monotonic clock abstraction.

    Keystroke timing depends on this interface rather than reading real time
    directly, so tests can supply deterministic durations.
    """

    def now(self) -> float:
        """Return monotonic seconds."""


class MonotonicClock:
    """Production clock backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()
