"""Structured Logging — JSON formatter and one-shot setup for the CLI.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - timestamp is the record's creation time (UTC, millisecond precision),
      so a record formats identically however late it is emitted
    - Extra fields (error_code, key, value_type, command, argument) surfaced when present
    - Values json cannot encode are written as their str(), never dropped
    - setup_logging is idempotent: a second call replaces, never duplicates, its handler

Design Decisions:
    - Library code only calls logging.getLogger(__name__); handlers are attached here,
      by the shell, never at import time
    - The extra-field list is a formatter argument, so callers embedding arrkit
      can surface their own record attributes next to ours
"""

import json
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

ARRKIT_FIELDS = ("error_code", "key", "value_type", "command", "argument")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "arrkit"


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def __init__(self, fields: Iterable[str] = ARRKIT_FIELDS) -> None:
        super().__init__()
        self.fields = tuple(fields)

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self.to_payload(record), ensure_ascii=False, default=str)

    def to_payload(self, record: logging.LogRecord) -> dict[str, Any]:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (name, getattr(record, name)) for name in self.fields
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return payload


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Attach the arrkit stderr handler to the root logger."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    for existing in [h for h in logging.root.handlers if h.get_name() == _HANDLER_NAME]:
        logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
