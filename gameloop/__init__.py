"""Fixed-timestep frame scheduling for real-time loops.

Typical use::

    loop = GameLoop(20, 5)
    while running:
        handle_window_events()
        for action in loop.actions():
            match action:
                case Tick():
                    simulate_one_tick()
                case Render(interpolation=alpha):
                    render(interpolate_state(previous, current, alpha))
"""

from gameloop.api import (
    TICK,
    Clock,
    FrameAction,
    FrameScheduler,
    LoopMetricsSnapshot,
    Render,
    Tick,
    create_game_loop,
)
from gameloop.runtime import (
    FrameDriver,
    FrameReport,
    GameLoop,
    GameLoopConfig,
    GameLoopConfigError,
    InvalidFrameSkipError,
    InvalidRateError,
    ManualClock,
    MonotonicClock,
    create_game_loop_from_config,
    interpolate_state,
    load_game_loop_config,
)

__all__ = [
    "Clock",
    "FrameAction",
    "FrameDriver",
    "FrameReport",
    "FrameScheduler",
    "GameLoop",
    "GameLoopConfig",
    "GameLoopConfigError",
    "InvalidFrameSkipError",
    "InvalidRateError",
    "LoopMetricsSnapshot",
    "ManualClock",
    "MonotonicClock",
    "Render",
    "TICK",
    "Tick",
    "create_game_loop",
    "create_game_loop_from_config",
    "interpolate_state",
    "load_game_loop_config",
]
