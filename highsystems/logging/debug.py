"""Structured JSON debug logging for the High Systems client.

Three channels mirror the life of a call:

- highsystems.main      client construction and reconfiguration
- highsystems.request   outgoing requests, throttling
- highsystems.response  responses and errors

Nothing is emitted until the application configures handlers, either its
own or through setup_logging(), which writes JSON lines to stdout and an
optional file (HS_LOG_FILE).
"""

import json
import logging
import sys
import time
from contextvars import ContextVar
from datetime import datetime, timezone

from highsystems.config.settings import get_settings

ROOT_LOGGER = "highsystems"

# Sequence number of the call currently being dispatched, for correlating log entries
sequence_var: ContextVar[int | None] = ContextVar("sequence", default=None)


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "sequence": sequence_var.get(None),
        }
        # Merge any extra fields passed via `extra={}` kwarg
        if hasattr(record, "debug_data"):
            log_entry.update(record.debug_data)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def setup_logging() -> None:
    """Configure the highsystems logger tree with JSON output."""
    settings = get_settings()

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.WARNING))
    logger.handlers.clear()

    formatter = JSONFormatter()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    logger.addHandler(stdout_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False


def get_logger(channel: str = "main") -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{channel}")


class RequestTimer:
    """Context manager to measure request latency."""

    def __init__(self):
        self.start_time: float = 0
        self.elapsed_ms: float = 0

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed_ms = round((time.perf_counter() - self.start_time) * 1000, 2)
