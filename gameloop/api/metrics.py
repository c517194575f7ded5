"""Public scheduler metrics API contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class LoopMetricsSnapshot:
    """Read-only snapshot of scheduler activity."""

    poll_count: int
    tick_count: int
    overload_count: int
    dropped_seconds_total: float
    last_interpolation: float
    rolling_ticks_per_poll: float


class LoopMetricsCollector(Protocol):
    """Per-poll metrics sink used by the scheduler."""

    def record_poll(self, tick_count: int, interpolation: float, dropped_seconds: float) -> None:
        """Record the outcome of one poll."""

    def snapshot(self) -> LoopMetricsSnapshot:
        """Return current metrics snapshot."""


def create_metrics_collector(*, enabled: bool, window_size: int = 60) -> LoopMetricsCollector:
    """Create a rolling collector, or a no-op one when disabled."""
    from gameloop.runtime.metrics import LoopMetrics, NoopLoopMetrics

    if enabled:
        return LoopMetrics(window_size=window_size)
    return NoopLoopMetrics()
