"""Logging configuration with optional structured JSON output."""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, Dict, Optional, TextIO, Union

# Attributes every LogRecord has; anything else was passed via ``extra``
_STANDARD_ATTRS = set(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Render log records as one JSON object per line.

    Keys: timestamp (ISO 8601 UTC), level, logger, message, plus ``extra``
    for context fields and ``exception`` when exc_info is set.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_fields = {
            k: v for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS
        }
        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, ensure_ascii=False, default=str)


def configure_logging(
    level: Union[str, int] = logging.INFO,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure the root logger with a single stream handler.

    Args:
        level: Logging level name or number (default: INFO)
        json_format: Use JsonFormatter instead of the plain text format
        stream: Output stream (default: sys.stderr, keeping stdout for results)

    Example:
        >>> configure_logging(level="DEBUG", json_format=True)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if json_format:
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.debug(
        f"Logging configured: level={logging.getLevelName(root_logger.level)}, "
        f"json_format={json_format}"
    )
