"""Structured Logging — JSON formatter and root logger setup.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Extra fields (path, rows, line_number, column, token) are surfaced when present
    - JSON format by default, human-readable text on request

Modules log through logging.getLogger(__name__). The digit arithmetic
does not log.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from src.core.config import get_settings

EXTRA_FIELDS = ("path", "rows", "line_number", "column", "token")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
) -> logging.Handler:
    """
    Attach a stream handler to the root logger.

    Args:
        level: Log level name; defaults to Settings.log_level
        fmt: "json" or "text"; defaults to Settings.log_format

    Returns:
        The installed handler (so callers can remove it again)
    """
    settings = get_settings()
    level = (level or settings.log_level).upper()
    fmt = (fmt or settings.log_format).lower()

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level, logging.INFO))
    return handler
