"""
Purpose: Log setup for the simulation scripts.
What it does:
- ConsoleFormatter: one readable line per record, tracebacks kept.
- JSONFormatter: one JSON object per line; order_id / driver_id passed via
  ``extra=`` are copied into the object.
- setup_logging(): installs a single handler on the root logger. LOG_FORMAT
  picks the formatter, LOG_LEVEL overrides the level argument.

Library modules only ever call logging.getLogger(__name__).
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import IO, Any, Dict, Optional

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
CONSOLE_DATEFMT = "%Y-%m-%dT%H:%M:%S"

# record attributes lifted into the JSON payload when set through extra=
CONTEXT_FIELDS = ("order_id", "driver_id", "restaurant")


class ConsoleFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT)


class JSONFormatter(logging.Formatter):
    """
    Structured output for piping simulation runs into log tooling.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                payload[name] = value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _resolve_level(level: int) -> int:
    override = os.getenv("LOG_LEVEL")
    if not override:
        return level
    resolved = logging.getLevelName(override.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown LOG_LEVEL: {override!r}")
    return resolved


def setup_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> logging.Handler:
    """
    Replaces any existing root handlers, so calling it twice is harmless.
    Returns the installed handler.
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    if os.getenv("LOG_FORMAT", "text").lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ConsoleFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(_resolve_level(level))
    return handler
