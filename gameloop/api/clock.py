"""Public clock API contracts."""

from __future__ import annotations

from typing import Protocol


class Clock(Protocol):
    """Monotonic time source in seconds."""

    def now(self) -> float:
        """Return current timestamp."""


def create_monotonic_clock() -> Clock:
    """Create wall-clock backed monotonic time source."""
    from gameloop.runtime.time import MonotonicClock

    return MonotonicClock()


def create_manual_clock(start_seconds: float = 0.0) -> Clock:
    """Create deterministic manually advanced time source."""
    from gameloop.runtime.time import ManualClock

    return ManualClock(start_seconds)
