"""Tests for aoeu.core.clock – monotonic clock."""

from __future__ import annotations

from aoeu.core.clock import MonotonicClock


class TestMonotonicClock:
    def test_returns_float(self):
        assert isinstance(MonotonicClock().now(), float)

    def test_never_goes_backwards(self):
        clock = MonotonicClock()
        readings = [clock.now() for _ in range(100)]
        assert readings == sorted(readings)
