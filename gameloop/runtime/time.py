"""Scheduler time sources."""

from __future__ import annotations

from collections.abc import Callable
from time import monotonic


class MonotonicClock:
    """Wall-clock time source backed by a monotonic counter."""

    def __init__(self, *, time_source: Callable[[], float] | None = None) -> None:
        self._time_source = time_source or monotonic

    def now(self) -> float:
        return float(self._time_source())


class ManualClock:
    """Deterministic clock advanced explicitly by the caller."""

    def __init__(self, start_seconds: float = 0.0) -> None:
        self._now_seconds = float(start_seconds)

    def now(self) -> float:
        return self._now_seconds

    def advance(self, delta_seconds: float) -> float:
        """Move the clock forward and return the new timestamp."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        self._now_seconds += delta_seconds
        return self._now_seconds

    def set(self, now_seconds: float) -> None:
        """Jump to an absolute timestamp, including backwards."""
        self._now_seconds = float(now_seconds)
