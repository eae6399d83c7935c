"""Structured logging helpers."""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict

import orjson

_HANDLER_NAME = "remove_print_cli"


class JsonFormatter(logging.Formatter):
    """Render log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return orjson.dumps(payload, default=str).decode()


def setup_logging(level: str = "WARNING") -> logging.Handler:
    """Install a JSON stderr handler on the root logger.

    Calling this again replaces the handler installed by the previous call
    and leaves any other handlers alone.
    """

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JsonFormatter())
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.addHandler(handler)
    return handler


__all__ = ["JsonFormatter", "setup_logging"]
