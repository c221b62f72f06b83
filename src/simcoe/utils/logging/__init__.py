"""Structured logging for the tracking facade.

Classes:
    StructuredLogger: Main logger with context support
    LogContext: Context manager for adding log context
"""

from simcoe.utils.logging.formatters import ContextFormatter, JSONFormatter
from simcoe.utils.logging.logger import (
    LogContext,
    StructuredLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    "StructuredLogger",
    "LogContext",
    "get_logger",
    "configure_logging",
    "JSONFormatter",
    "ContextFormatter",
]
