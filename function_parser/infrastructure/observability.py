"""Structured Logging — JSON formatter and setup for registration diagnostics.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (group, function_name, endpoint, file, error_code) surfaced when present
    - setup_logging installs at most one handler, however often it is called

Design Decisions:
    - JSONFormatter over third-party libs: serverless log collectors ingest JSON lines as-is
    - Called by FunctionParser only in verbose mode; otherwise the host app owns logging
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "group", "function_name", "endpoint", "file",
    "error_code", "method", "path",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

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


class _FunctionParserHandler(logging.StreamHandler):
    """Marker type so repeated setup_logging calls can find their own handler."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging once; later calls only adjust level and format."""
    handler = next(
        (h for h in logging.root.handlers if isinstance(h, _FunctionParserHandler)),
        None,
    )
    if handler is None:
        handler = _FunctionParserHandler()
        logging.root.addHandler(handler)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
