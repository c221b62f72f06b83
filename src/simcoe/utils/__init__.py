"""Utility helpers shared by the trackers."""

from simcoe.utils.logging import LogContext, configure_logging, get_logger

__all__ = ["LogContext", "configure_logging", "get_logger"]
