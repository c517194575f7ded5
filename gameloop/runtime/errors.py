"""Scheduler configuration errors."""

from __future__ import annotations


class GameLoopConfigError(ValueError):
    """Raised when a scheduler cannot be built from the given settings."""


class InvalidRateError(GameLoopConfigError):
    """Ticks per second is zero, negative, or not a finite number."""

    def __init__(self, ticks_per_second: object) -> None:
        super().__init__(f"ticks_per_second must be a finite number > 0, got {ticks_per_second!r}")
        self.ticks_per_second = ticks_per_second


class InvalidFrameSkipError(GameLoopConfigError):
    """Max frame skip is not a positive integer."""

    def __init__(self, max_frame_skip: object) -> None:
        super().__init__(f"max_frame_skip must be an integer >= 1, got {max_frame_skip!r}")
        self.max_frame_skip = max_frame_skip
