"""Structured JSON logging with context-local request IDs.

Every log line is JSON with an optional request_id, so a caller that runs
searches on worker threads or tasks can tie a burst of keystroke lookups
back to one input session.
"""

import json
import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone

# Context-local request ID; propagates through await chains and copied contexts
request_id: ContextVar[str] = ContextVar("request_id", default="")

EXTRA_FIELDS = ("query", "match_count", "city_count", "duration_ms")


def get_request_id() -> str:
    """Return the current request ID, or empty string if not set."""
    return request_id.get()


@contextmanager
def request_scope(rid: str | None = None) -> Iterator[str]:
    """Tag every log line emitted inside the block with one request ID."""
    token = request_id.set(rid or uuid.uuid4().hex[:12])
    try:
        yield request_id.get()
    finally:
        request_id.reset(token)


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        rid = request_id.get()
        if rid:
            log_entry["request_id"] = rid

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key in EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def setup_logging(json_format: bool = True, level: str = "INFO") -> None:
    """Configure root logger with JSON or text format.

    Args:
        json_format: True for JSON (services), False for text (terminal).
        level: Log level string (DEBUG, INFO, WARNING, ERROR).
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    root.handlers.clear()

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    root.addHandler(handler)

    # MLflow is chatty at INFO when tracing is enabled
    logging.getLogger("mlflow").setLevel(logging.WARNING)
