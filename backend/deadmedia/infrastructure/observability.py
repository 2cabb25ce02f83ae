"""Structured Logging — catalog-aware formatters for the service's log stream.

Invariants:
    - Every line names the service, level, logger and message
    - Catalog context (media_id, operation, store_size, target) and error
      context (error_code, category, severity) ride along when the log call
      passes them as extra; unknown extras are never emitted
    - The text format shows the same context as trailing key=value pairs
    - setup_logging is idempotent: calling it twice does not duplicate output

Design Decisions:
    - One CONTEXT_KEYS tuple feeds both formatters so the two formats never drift
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

SERVICE_NAME = "deadmedia"

CONTEXT_KEYS = (
    "media_id", "operation", "store_size", "target",
    "error_code", "category", "severity", "path", "method",
)


def log_context(record: logging.LogRecord) -> dict:
    """Known catalog/error extras present on the record, in CONTEXT_KEYS order."""
    return {
        key: record.__dict__[key]
        for key in CONTEXT_KEYS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": SERVICE_NAME,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **log_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class CatalogTextFormatter(logging.Formatter):
    """Human-readable lines with the catalog context appended."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = log_context(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the service's single root handler, replacing any previous one."""
    global _handler
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else CatalogTextFormatter())
    if _handler is not None:
        logging.root.removeHandler(_handler)
    _handler = handler
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
