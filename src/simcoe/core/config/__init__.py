"""Configuration management for the trackers.

Classes:
    ConfigLoader: Load and merge configurations from multiple sources

Pydantic Models:
    LoggingConfig: Logging configuration
"""

from simcoe.core.config.loader import ConfigLoader, load_dotenv_files
from simcoe.core.config.models import LoggingConfig

__all__ = [
    "ConfigLoader",
    "LoggingConfig",
    "load_dotenv_files",
]
