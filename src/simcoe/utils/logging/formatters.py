"""Log formatters for structured tracking logs.

Classes:
    JSONFormatter: Format logs as one JSON object per line
    ContextFormatter: Format logs as text with context fields appended
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
        "context",
    }
)


class JSONFormatter(logging.Formatter):
    """Format log records as JSON.

    Example output:
        {
            "timestamp": "2026-10-19T09:30:45.123456+00:00",
            "level": "DEBUG",
            "logger": "simcoe.mparticle.handler",
            "message": "Forwarding commerce event",
            "context": {"tracker": "mParticle", "action": "purchase"}
        }
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string
        """
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "context"):
            log_entry["context"] = record.context

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_entry[key] = value

        # Property bags may hold datetimes or enums
        return json.dumps(log_entry, default=str)


class ContextFormatter(logging.Formatter):
    """Format log records with context fields.

    Example output:
        2026-10-19 09:30:45 - WARNING - simcoe.mparticle.handler - Event generation failed [tracker=mParticle, key=eventType]
    """

    def __init__(
        self,
        fmt: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt: str = "%Y-%m-%d %H:%M:%S",
    ) -> None:
        """Initialize the formatter.

        Args:
            fmt: Log format string
            datefmt: Date format string
        """
        super().__init__(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with context.

        Args:
            record: Log record to format

        Returns:
            Formatted log string
        """
        base_message = super().format(record)

        if hasattr(record, "context") and record.context:
            context_str = ", ".join(f"{k}={v}" for k, v in record.context.items())
            return f"{base_message} [{context_str}]"

        return base_message
