"""Structured JSON logger.

Every scanner module logs through here so that scan, provider and
symbol context travel as fields instead of being baked into messages.
"""

import json
import logging
import os
import sys
from typing import Any

# Attributes present on every LogRecord; anything else came from `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured scanner logs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Fields passed via ``extra={...}`` are merged into the top-level
        object, as is an explicit ``record.extra`` mapping.

        Args:
            record: The log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and key != "extra":
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if isinstance(getattr(record, "extra", None), dict):
            log_data.update(record.extra)  # type: ignore[attr-defined]

        return json.dumps(log_data, default=str)


def get_logger(name: str, level: int | str | None = None) -> logging.Logger:
    """Create a JSON-formatted logger.

    Args:
        name: Logger name (typically __name__).
        level: Logging level. Defaults to the LOG_LEVEL environment
            variable, or INFO when unset.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
    logger.setLevel(level)
    return logger
