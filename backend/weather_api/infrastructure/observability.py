"""Structured Logging: JSON or text output on the root logger.

Invariants:
    - Every JSON line carries timestamp, level, logger and message
    - weather_id / error_code / path are added only when a log call sets them
    - Non-ASCII text (the Portuguese duplicate message) is written as-is
    - setup_logging owns exactly one root handler; calling it again swaps it

Design Decisions:
    - stdlib logging with a small formatter, no structlog: the log calls stay
      plain logger.info / logger.error with `extra=`
    - Formatter picked by LOG_FORMAT so local runs read as text
"""

import json
import logging
from datetime import datetime, timezone

LOG_EXTRAS = ("weather_id", "error_code", "path")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in LOG_EXTRAS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def build_formatter(fmt: str) -> logging.Formatter:
    if fmt.lower() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the application's root handler."""
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(build_formatter(fmt))
    root.addHandler(_handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
    return _handler
