"""Logger configuration for command line use.

The library itself only emits DEBUG records through module loggers and
never installs handlers; applications call :func:`configure_logger`.
"""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"
LOGGER_NAME = "sequence_splitter"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.now(timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logger(level: int = logging.INFO, json_mode: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if getattr(logger, "_configured_base_logger", False):
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if json_mode:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.handlers[:] = [handler]
    logger._configured_base_logger = True  # type: ignore[attr-defined]
    return logger


__all__ = [
    "JsonFormatter",
    "configure_logger",
]
