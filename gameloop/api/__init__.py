"""Public gameloop API contracts."""

from gameloop.api.clock import Clock, create_manual_clock, create_monotonic_clock
from gameloop.api.frame import TICK, FrameAction, FrameScheduler, Render, Tick, create_game_loop
from gameloop.api.logging import LoggingConfig, configure_logging
from gameloop.api.metrics import (
    LoopMetricsCollector,
    LoopMetricsSnapshot,
    create_metrics_collector,
)

__all__ = [
    "Clock",
    "FrameAction",
    "FrameScheduler",
    "LoggingConfig",
    "LoopMetricsCollector",
    "LoopMetricsSnapshot",
    "Render",
    "TICK",
    "Tick",
    "configure_logging",
    "create_game_loop",
    "create_manual_clock",
    "create_metrics_collector",
    "create_monotonic_clock",
]
