"""Environment-sourced scheduler configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from gameloop.api.clock import Clock
from gameloop.api.frame import FrameScheduler, create_game_loop
from gameloop.api.metrics import create_metrics_collector

DEFAULT_TICKS_PER_SECOND = 60.0
DEFAULT_MAX_FRAME_SKIP = 5
DEFAULT_METRICS_WINDOW = 60


@dataclass(frozen=True, slots=True)
class GameLoopConfig:
    """Immutable scheduler settings."""

    ticks_per_second: float = DEFAULT_TICKS_PER_SECOND
    max_frame_skip: int = DEFAULT_MAX_FRAME_SKIP
    metrics_enabled: bool = False
    metrics_window: int = DEFAULT_METRICS_WINDOW


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(name: str, default: int, *, env: Mapping[str, str] | None = None) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        return int(default)
    try:
        return int(raw.strip())
    except ValueError:
        return int(default)


def _float(name: str, default: float, *, env: Mapping[str, str] | None = None) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        return float(default)
    try:
        return float(raw.strip())
    except ValueError:
        return float(default)


def load_game_loop_config(*, env: Mapping[str, str] | None = None) -> GameLoopConfig:
    """Load scheduler settings from env vars.

    Unparseable values fall back to defaults. Out-of-range values are kept
    as-is: scheduler construction rejects bad rates and frame skips, and the
    metrics collector raises a window below 1 to 1.
    """
    return GameLoopConfig(
        ticks_per_second=_float(
            "GAMELOOP_TICKS_PER_SECOND", DEFAULT_TICKS_PER_SECOND, env=env
        ),
        max_frame_skip=_int("GAMELOOP_MAX_FRAME_SKIP", DEFAULT_MAX_FRAME_SKIP, env=env),
        metrics_enabled=_flag("GAMELOOP_METRICS_ENABLED", False, env=env),
        metrics_window=_int("GAMELOOP_METRICS_WINDOW", DEFAULT_METRICS_WINDOW, env=env),
    )


def create_game_loop_from_config(
    config: GameLoopConfig,
    *,
    clock: Clock | None = None,
) -> FrameScheduler:
    """Build a scheduler, with a metrics collector when enabled."""
    metrics = create_metrics_collector(
        enabled=config.metrics_enabled,
        window_size=config.metrics_window,
    )
    return create_game_loop(
        config.ticks_per_second,
        config.max_frame_skip,
        clock=clock,
        metrics=metrics,
    )
