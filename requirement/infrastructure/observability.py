"""Structured Logging — JSON formatter and setup for the requirement logger tree.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (requirement, error_code, value_type, exception) surfaced when present
    - Only the "requirement" logger is configured; the root logger is left to the host application
    - setup_logging is idempotent: repeated calls replace the handler, never stack them
"""

import logging
import json
from datetime import datetime, timezone

from requirement.config import get_settings

LOGGER_NAME = "requirement"
EXTRA_FIELDS = ("requirement", "error_code", "value_type", "exception")


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
            log["traceback"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


_handler: logging.Handler | None = None


def setup_logging(level: str = "WARNING", fmt: str = "json") -> logging.Logger:
    """Configure the requirement logger. Returns it."""
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    _handler = handler
    return logger


def configure_from_settings() -> logging.Logger:
    settings = get_settings()
    return setup_logging(settings.log_level, settings.log_format)
