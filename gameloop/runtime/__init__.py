"""Scheduler runtime modules."""

from gameloop.runtime.config import (
    GameLoopConfig,
    create_game_loop_from_config,
    load_game_loop_config,
)
from gameloop.runtime.driver import FrameDriver, FrameReport
from gameloop.runtime.errors import GameLoopConfigError, InvalidFrameSkipError, InvalidRateError
from gameloop.runtime.game_loop import GameLoop
from gameloop.runtime.interpolation import interpolate_state
from gameloop.runtime.logging import setup_logging
from gameloop.runtime.metrics import LoopMetrics, NoopLoopMetrics
from gameloop.runtime.time import ManualClock, MonotonicClock

__all__ = [
    "FrameDriver",
    "FrameReport",
    "GameLoop",
    "GameLoopConfig",
    "GameLoopConfigError",
    "InvalidFrameSkipError",
    "InvalidRateError",
    "LoopMetrics",
    "ManualClock",
    "MonotonicClock",
    "NoopLoopMetrics",
    "create_game_loop_from_config",
    "interpolate_state",
    "load_game_loop_config",
    "setup_logging",
]
