"""Structured logging with context support.

Log records emitted through StructuredLogger carry a ``context`` dictionary
built from three layers, lowest priority first:

- fields bound to the logger when it is created (e.g. ``tracker``)
- fields pushed with the LogContext context manager
- the ``extra`` mapping passed to the individual log call

Context is stored in a ContextVar, so nested LogContext blocks in different
threads or async tasks do not interfere with each other.

Classes:
    StructuredLogger: Logger with context support
    LogContext: Context manager for adding temporary context
"""

import logging
from contextvars import ContextVar
from typing import Any, Dict, Literal, Optional, Union

from simcoe.utils.logging.formatters import ContextFormatter, JSONFormatter

_log_context: ContextVar[Dict[str, Any]] = ContextVar("simcoe_log_context", default={})

ROOT_LOGGER_NAME = "simcoe"


class StructuredLogger:
    """Structured logger with context support.

    Wraps a standard library logger and attaches the merged context to every
    record under the ``context`` attribute, where ContextFormatter and
    JSONFormatter pick it up.

    Attributes:
        name: Logger name
        logger: Underlying Python logger
        bound: Context fields attached to every record from this logger

    Example:
        >>> logger = get_logger(__name__, tracker="mParticle")
        >>> logger.debug("Forwarding event", extra={"event": "Button Tapped"})
    """

    def __init__(self, name: str, **bound: Any) -> None:
        """Initialize the structured logger.

        Args:
            name: Logger name (typically __name__)
            **bound: Context fields attached to every record
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self.bound = bound

    def _get_context(self) -> Dict[str, Any]:
        context = dict(self.bound)
        context.update(_log_context.get())
        return context

    def _log(
        self,
        level: int,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = False,
    ) -> None:
        context = self._get_context()
        if extra:
            context.update(extra)

        self.logger.log(level, message, extra={"context": context}, exc_info=exc_info)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log an info message."""
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a warning message."""
        self._log(logging.WARNING, message, extra)

    def error(
        self,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = True,
    ) -> None:
        """Log an error message.

        Args:
            message: Log message
            extra: Optional extra context
            exc_info: Whether to include exception info (default: True)
        """
        self._log(logging.ERROR, message, extra, exc_info)

    def exception(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log an exception with traceback.

        This should be called from an exception handler.
        """
        self._log(logging.ERROR, message, extra, exc_info=True)

    def set_level(self, level: int) -> None:
        """Set the logging level of the underlying logger."""
        self.logger.setLevel(level)


class LogContext:
    """Context manager for adding temporary log context.

    Example:
        >>> logger = get_logger(__name__)
        >>> with LogContext(tracker="mParticle", call="track_event"):
        ...     logger.debug("Building event")
        ...     # Log includes: tracker=mParticle, call=track_event
    """

    def __init__(self, **context: Any) -> None:
        """Initialize the log context.

        Args:
            **context: Context fields as keyword arguments
        """
        self.context = context
        self._previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self) -> "LogContext":
        """Push the context fields."""
        self._previous_context = _log_context.get().copy()

        current_context = _log_context.get().copy()
        current_context.update(self.context)
        _log_context.set(current_context)

        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> Literal[False]:
        """Restore the previous context without suppressing exceptions."""
        if self._previous_context is not None:
            _log_context.set(self._previous_context)
        else:
            _log_context.set({})

        return False


def get_logger(name: str, **bound: Any) -> StructuredLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)
        **bound: Context fields attached to every record

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(name, **bound)


def configure_logging(
    level: Union[int, str] = logging.INFO, json_output: bool = False
) -> logging.Logger:
    """Install a single handler on the package root logger.

    Calling this more than once replaces the previously installed handler,
    so the level and output format can be changed at runtime.

    Args:
        level: Log level for the ``simcoe`` logger hierarchy
        json_output: Emit JSON lines instead of human-readable text

    Returns:
        The configured ``simcoe`` root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, "_simcoe_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if json_output else ContextFormatter())
    handler._simcoe_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    return root
