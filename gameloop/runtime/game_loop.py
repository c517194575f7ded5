"""Fixed-timestep accumulator scheduler."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from numbers import Integral, Number

from gameloop.api.clock import Clock
from gameloop.api.frame import TICK, FrameAction, Render
from gameloop.api.metrics import LoopMetricsCollector
from gameloop.runtime.errors import InvalidFrameSkipError, InvalidRateError
from gameloop.runtime.metrics import NoopLoopMetrics
from gameloop.runtime.time import MonotonicClock

_LOG = logging.getLogger("gameloop.scheduler")

# Relative slack when deciding a whole tick is owed; absorbs subtraction
# error when polls land exactly on tick boundaries.
_TICK_TOLERANCE = 1e-9


class GameLoop:
    """Turns irregular polling into fixed-rate ticks plus one interpolated render.

    Each poll adds the elapsed time since the previous poll to an accumulator,
    emits one `Tick` per whole tick duration held (at most `max_frame_skip`),
    and finishes with a single `Render` whose interpolation is the leftover
    fraction of a tick. When the cap is reached with whole ticks still owed,
    that surplus is dropped so a single stall cannot leave the loop in
    permanent catch-up.
    """

    def __init__(
        self,
        ticks_per_second: float,
        max_frame_skip: int,
        *,
        clock: Clock | None = None,
        metrics: LoopMetricsCollector | None = None,
    ) -> None:
        self._ticks_per_second = _validate_rate(ticks_per_second)
        self._max_frame_skip = _validate_frame_skip(max_frame_skip)
        self._tick_duration = 1.0 / self._ticks_per_second
        if not math.isfinite(self._tick_duration) or self._tick_duration <= 0.0:
            raise InvalidRateError(ticks_per_second)
        self._tick_threshold = self._tick_duration * (1.0 - _TICK_TOLERANCE)
        self._clock = clock or MonotonicClock()
        self._metrics = metrics or NoopLoopMetrics()
        self._accumulator = 0.0
        self._last_poll_time: float | None = None
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug(
                "game_loop_initialized ticks_per_second=%s tick_ms=%.3f max_frame_skip=%d",
                self._ticks_per_second,
                self._tick_duration * 1000.0,
                self._max_frame_skip,
            )

    @property
    def ticks_per_second(self) -> float:
        return self._ticks_per_second

    @property
    def tick_duration(self) -> float:
        return self._tick_duration

    @property
    def max_frame_skip(self) -> int:
        return self._max_frame_skip

    @property
    def accumulator(self) -> float:
        return self._accumulator

    @property
    def last_poll_time(self) -> float | None:
        return self._last_poll_time

    @property
    def is_running(self) -> bool:
        """Return whether the first poll has happened."""
        return self._last_poll_time is not None

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def metrics(self) -> LoopMetricsCollector:
        return self._metrics

    def actions(self) -> Iterator[FrameAction]:
        """Poll at the current clock time.

        Call once per host loop iteration and consume every action in order.
        """
        return iter(self.poll(self._clock.now()))

    def poll(self, now: float) -> tuple[FrameAction, ...]:
        """Advance to `now` and return the ticks owed followed by one render."""
        try:
            now_seconds = float(now)
        except (TypeError, ValueError):
            now_seconds = math.nan
        if self._last_poll_time is None:
            if not math.isfinite(now_seconds):
                _log_ignored_timestamp(now)
                return (Render(0.0),)
            self._last_poll_time = now_seconds
            self._accumulator = 0.0
            self._metrics.record_poll(0, 0.0, 0.0)
            return (Render(0.0),)

        self._accumulator += self._elapsed_since(self._last_poll_time, now_seconds)

        actions: list[FrameAction] = []
        tick_count = 0
        while self._accumulator >= self._tick_threshold and tick_count < self._max_frame_skip:
            actions.append(TICK)
            self._accumulator = max(0.0, self._accumulator - self._tick_duration)
            tick_count += 1

        dropped_seconds = 0.0
        if self._accumulator >= self._tick_threshold:
            remainder = math.fmod(self._accumulator, self._tick_duration)
            if remainder >= self._tick_threshold:
                remainder = 0.0
            dropped_seconds = self._accumulator - remainder
            self._accumulator = remainder
            if _LOG.isEnabledFor(logging.DEBUG):
                _LOG.debug(
                    "frame_skip_cap_reached ticks=%d dropped_seconds=%.6f",
                    tick_count,
                    dropped_seconds,
                )

        interpolation = self._accumulator / self._tick_duration
        actions.append(Render(interpolation))
        self._metrics.record_poll(tick_count, interpolation, dropped_seconds)
        return tuple(actions)

    def _elapsed_since(self, last: float, now_seconds: float) -> float:
        if not math.isfinite(now_seconds):
            _log_ignored_timestamp(now_seconds)
            return 0.0
        self._last_poll_time = now_seconds
        elapsed = now_seconds - last
        if not math.isfinite(elapsed) or elapsed < 0.0:
            return 0.0
        return elapsed


def _log_ignored_timestamp(now: object) -> None:
    if _LOG.isEnabledFor(logging.DEBUG):
        _LOG.debug("poll_ignored_timestamp now=%r", now)


def _validate_rate(ticks_per_second: object) -> float:
    # Any number that converts to float (int, float, Fraction, Decimal); not bool or str.
    if isinstance(ticks_per_second, bool) or not isinstance(ticks_per_second, Number):
        raise InvalidRateError(ticks_per_second)
    try:
        rate = float(ticks_per_second)
    except (TypeError, ValueError, OverflowError):
        raise InvalidRateError(ticks_per_second) from None
    if not math.isfinite(rate) or rate <= 0.0:
        raise InvalidRateError(ticks_per_second)
    return rate


def _validate_frame_skip(max_frame_skip: object) -> int:
    if isinstance(max_frame_skip, bool) or not isinstance(max_frame_skip, Integral):
        raise InvalidFrameSkipError(max_frame_skip)
    value = int(max_frame_skip)
    if value < 1:
        raise InvalidFrameSkipError(max_frame_skip)
    return value
