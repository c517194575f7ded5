"""Public logging API."""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Handler settings for the `gameloop` package logger."""

    level_name: str = "INFO"
    log_format: str = "text"  # text|json
    file_path: str | None = None
    propagate: bool = False


def configure_logging(config: LoggingConfig) -> logging.Handler:
    """Attach a handler to the `gameloop` logger."""
    from gameloop.runtime.logging import configure_logging as _configure_logging

    return _configure_logging(config)
