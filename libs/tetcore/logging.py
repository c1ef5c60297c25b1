"""Structured logging setup for tetpitch.

Stream constructors log at DEBUG with their parameters attached as record
attributes (``extra=``); ``JsonFormatter`` lifts those into the JSON payload
so a seeded stream can be reproduced from its log line.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional, Tuple

from .config import get_settings


# Record attributes set by tetpitch streams through ``extra=``.
STREAM_FIELDS: Tuple[str, ...] = ("frequency", "tone_count", "dtype", "rotation")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
        }
        for field in STREAM_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: Optional[str] = None) -> None:
    """Send tetpitch records as JSON lines to stdout at TET_LOG_LEVEL."""
    log_level = (level or get_settings().TET_LOG_LEVEL).upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Logger for a tetpitch module; records propagate to the root handler."""
    return logging.getLogger(name)


__all__ = ["STREAM_FIELDS", "setup_logging", "get_logger", "JsonFormatter"]
