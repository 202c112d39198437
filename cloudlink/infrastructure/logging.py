"""
Centralized Logging

Architectural Intent:
- One handler on the `cloudlink` logger; every module logs under it by
  `__name__`, and the replay CLI's faulted messages arrive on
  `cloudlink.dead_letter`
- The level comes from --debug/--verbose or, failing those, from the
  `log_level` config value, so it is accepted either as an int or as a level
  name; an unknown name falls back to WARNING rather than failing startup
- JSON output is one object per record, for shipping dispatch warnings
  (rejected messages, remote failures, invariant violations) to a collector

Records still propagate to the root logger; configure_logging only replaces
the `cloudlink` handler, so calling it twice never duplicates output.
"""

import json
import logging
import sys
from datetime import datetime, UTC
from typing import Union


class JSONFormatter(logging.Formatter):
    """Structured JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    json_format: bool = False,
) -> None:
    """Configure logging for CloudLink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, etc.), as int or name.
        json_format: If True, use JSON structured output. Otherwise human-readable.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger("cloudlink")
    root.setLevel(level)

    # Remove existing handlers
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )

    root.addHandler(handler)
