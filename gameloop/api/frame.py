"""Public frame-scheduling API contracts."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from gameloop.api.clock import Clock
    from gameloop.api.metrics import LoopMetricsCollector


@dataclass(frozen=True, slots=True)
class Tick:
    """The caller should simulate exactly one fixed-size step."""


@dataclass(frozen=True, slots=True)
class Render:
    """The caller should render state blended by `interpolation` toward the next tick."""

    interpolation: float


FrameAction: TypeAlias = Tick | Render

TICK = Tick()


class FrameScheduler(Protocol):
    """Fixed-timestep scheduler contract."""

    @property
    def tick_duration(self) -> float:
        """Seconds simulated by one tick."""

    @property
    def max_frame_skip(self) -> int:
        """Maximum ticks emitted by a single poll."""

    def poll(self, now: float) -> tuple[FrameAction, ...]:
        """Advance to `now` and return ticks followed by one render."""

    def actions(self) -> Iterator[FrameAction]:
        """Poll using the scheduler clock."""


def create_game_loop(
    ticks_per_second: float,
    max_frame_skip: int,
    *,
    clock: Clock | None = None,
    metrics: LoopMetricsCollector | None = None,
) -> FrameScheduler:
    """Create default fixed-timestep scheduler implementation."""
    from gameloop.runtime.game_loop import GameLoop

    return GameLoop(ticks_per_second, max_frame_skip, clock=clock, metrics=metrics)
