"""Scheduler logging setup.

The scheduler only emits through the `gameloop.*` loggers. Hosts that own
process logging need nothing from this module; `configure_logging` is for
hosts that just want to see scheduler events.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from gameloop.api.logging import LoggingConfig

PACKAGE_LOGGER_NAME = "gameloop"

_HANDLER_MARKER = "_gameloop_handler"


class JsonFormatter(logging.Formatter):
    """One JSON object per record; `event key=value` messages are split into fields."""

    def format(self, record: logging.LogRecord) -> str:
        event, fields = _split_event(record.getMessage())
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": event,
        }
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def configure_logging(config: LoggingConfig) -> logging.Handler:
    """Attach one handler to the package logger, replacing a previous one.

    Root logger handlers are left alone. Returns the installed handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_package_handlers(logger)

    handler: logging.Handler
    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(_resolve_formatter(config.log_format))
    setattr(handler, _HANDLER_MARKER, True)

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))
    logger.propagate = config.propagate
    return handler


def shutdown_logging() -> None:
    """Detach and close the handler installed by `configure_logging`."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_package_handlers(logger)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("GAMELOOP_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def build_logging_config() -> LoggingConfig:
    """Build logging settings from env vars."""
    file_path = os.getenv("GAMELOOP_LOG_FILE", "").strip()
    return LoggingConfig(
        level_name=resolve_log_level_name(),
        log_format=os.getenv("GAMELOOP_LOG_FORMAT", "text").strip().lower() or "text",
        file_path=file_path or None,
    )


def setup_logging() -> None:
    """Configure scheduler logging unless the package logger already has a handler."""
    if logging.getLogger(PACKAGE_LOGGER_NAME).handlers:
        return
    configure_logging(build_logging_config())


def _remove_package_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()


def _split_event(message: str) -> tuple[str, dict[str, str]]:
    event, _, rest = message.partition(" ")
    fields: dict[str, str] = {}
    for token in rest.split():
        key, sep, value = token.partition("=")
        if not sep or not key:
            return message, {}
        fields[key] = value
    return event, fields


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
