"""Pydantic models for tracker-independent configuration.

Vendor-specific models live next to their tracker (see
``simcoe.mparticle.config``).

Models:
    LoggingConfig: Log level and output format for the simcoe logger tree
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from simcoe.utils.logging import configure_logging


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        level: Level name for the ``simcoe`` logger hierarchy
        json_output: Emit JSON lines instead of human-readable text
    """

    level: str = Field("INFO", description="Log level name")
    json_output: bool = Field(False, description="Emit JSON formatted logs")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalise the level name.

        Raises:
            ValueError: If the level name is unknown to the logging module
        """
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    def apply(self) -> logging.Logger:
        """Configure the ``simcoe`` logger hierarchy from this model."""
        return configure_logging(self.level, json_output=self.json_output)

    model_config = ConfigDict(extra="forbid")
