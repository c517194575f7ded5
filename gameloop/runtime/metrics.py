"""Scheduler metrics collectors."""

from __future__ import annotations

from collections import deque

from gameloop.api.metrics import LoopMetricsSnapshot


class NoopLoopMetrics:
    """No-op collector for zero-impact disabled mode."""

    def record_poll(self, tick_count: int, interpolation: float, dropped_seconds: float) -> None:
        _ = (tick_count, interpolation, dropped_seconds)

    def snapshot(self) -> LoopMetricsSnapshot:
        return LoopMetricsSnapshot(
            poll_count=0,
            tick_count=0,
            overload_count=0,
            dropped_seconds_total=0.0,
            last_interpolation=0.0,
            rolling_ticks_per_poll=0.0,
        )


class LoopMetrics:
    """Small in-memory rolling collector of poll outcomes."""

    def __init__(self, *, window_size: int = 60) -> None:
        self._window_size = max(1, int(window_size))
        self._ticks_window: deque[int] = deque(maxlen=self._window_size)
        self._poll_count = 0
        self._tick_count = 0
        self._overload_count = 0
        self._dropped_seconds_total = 0.0
        self._last_interpolation = 0.0

    def record_poll(self, tick_count: int, interpolation: float, dropped_seconds: float) -> None:
        ticks = int(tick_count)
        self._poll_count += 1
        self._tick_count += ticks
        self._ticks_window.append(ticks)
        self._last_interpolation = float(interpolation)
        if dropped_seconds > 0.0:
            self._overload_count += 1
            self._dropped_seconds_total += float(dropped_seconds)

    def snapshot(self) -> LoopMetricsSnapshot:
        rolling = (
            sum(self._ticks_window) / len(self._ticks_window) if self._ticks_window else 0.0
        )
        return LoopMetricsSnapshot(
            poll_count=self._poll_count,
            tick_count=self._tick_count,
            overload_count=self._overload_count,
            dropped_seconds_total=self._dropped_seconds_total,
            last_interpolation=self._last_interpolation,
            rolling_ticks_per_poll=rolling,
        )
