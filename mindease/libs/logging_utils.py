"""Logging setup for the MindEase insight service.

Everything is driven by ``MINDEASE_*`` environment variables so the engines
themselves only ever call ``logging.getLogger(__name__)``:

* ``MINDEASE_ENVIRONMENT`` picks the defaults (DEBUG and colored text locally).
* ``MINDEASE_LOG_LEVEL`` overrides the level.
* ``MINDEASE_LOG_FORMAT`` is ``json`` (default) or ``text``.
* ``MINDEASE_LOG_COLOR`` forces ANSI colors on (``1``) or off (``0``).
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.config import dictConfig
from typing import Any, Dict, Optional

_DEV_ENVIRONMENTS = {"local", "dev", "development", "test"}

# LogRecord attributes that are not user-supplied ``extra`` fields.
_RESERVED_ATTRS = {
    "msg", "args", "levelname", "levelno", "pathname", "filename", "module",
    "exc_info", "exc_text", "stack_info", "lineno", "funcName", "created",
    "msecs", "relativeCreated", "thread", "threadName", "processName", "process",
    "taskName", "name", "message",
}

_LEVEL_COLORS = (
    (logging.ERROR, "\033[31m"),
    (logging.WARNING, "\033[33m"),
)
_RESET = "\033[0m"


def _environment() -> str:
    return os.getenv("MINDEASE_ENVIRONMENT", "dev").lower()


def _color_default() -> bool:
    forced = os.getenv("MINDEASE_LOG_COLOR", "")
    if forced:
        return forced == "1"
    return _environment() in _DEV_ENVIRONMENTS


class JsonFormatter(logging.Formatter):
    """One JSON object per line; ``extra=`` fields are carried through."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value) for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # extras may hold datetimes or pydantic models
        return json.dumps(payload, ensure_ascii=False, default=str)


class ColorTextFormatter(logging.Formatter):
    """Plain text for consoles; warnings yellow, errors red."""

    def __init__(self, *args: Any, use_color: Optional[bool] = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.use_color = _color_default() if use_color is None else use_color

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if not self.use_color:
            return formatted
        for threshold, code in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return f"{code}{formatted}{_RESET}"
        return formatted


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Install the root handler; arguments win over the environment."""

    default_level = "DEBUG" if _environment() in _DEV_ENVIRONMENTS else "INFO"
    log_level = (level or os.getenv("MINDEASE_LOG_LEVEL", default_level)).upper()
    formatter_name = "json" if (log_format or os.getenv("MINDEASE_LOG_FORMAT", "json")).lower() == "json" else "text"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": JsonFormatter},
                "text": {
                    "()": ColorTextFormatter,
                    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "level": log_level,
                }
            },
            "root": {"handlers": ["console"], "level": log_level},
        }
    )


__all__ = ["ColorTextFormatter", "JsonFormatter", "configure_logging"]
