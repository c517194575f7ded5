"""Dispatches scheduler actions to caller-supplied tick and render callbacks."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from gameloop.api.frame import FrameScheduler, Render, Tick

_LOG = logging.getLogger("gameloop.driver")

TickCallback = Callable[[], None]
RenderCallback = Callable[[float], None]


@dataclass(frozen=True, slots=True)
class FrameReport:
    """Outcome of one driven frame."""

    tick_count: int
    interpolation: float


class FrameDriver:
    """Runs one host loop iteration: every owed tick, then the render."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        *,
        on_tick: TickCallback,
        on_render: RenderCallback,
    ) -> None:
        self._scheduler = scheduler
        self._on_tick = on_tick
        self._on_render = on_render
        self._frame_index = 0

    @property
    def frame_index(self) -> int:
        """Number of frames run so far."""
        return self._frame_index

    def run_frame(self, now: float | None = None) -> FrameReport:
        """Poll the scheduler and dispatch its actions in order.

        Uses the scheduler clock when `now` is omitted. Callback exceptions
        propagate; ticks already dispatched are not replayed.
        """
        actions = self._scheduler.actions() if now is None else iter(self._scheduler.poll(now))
        tick_count = 0
        interpolation = 0.0
        for action in actions:
            match action:
                case Tick():
                    self._on_tick()
                    tick_count += 1
                case Render(interpolation=value):
                    interpolation = value
                    self._on_render(value)
        self._frame_index += 1
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug(
                "frame_driven frame_index=%d tick_count=%d interpolation=%.3f",
                self._frame_index,
                tick_count,
                interpolation,
            )
        return FrameReport(tick_count=tick_count, interpolation=interpolation)
