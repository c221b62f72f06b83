"""Custom exception hierarchy for the tracking facade.

Exception Hierarchy:
    SimcoeError (base)
    ├── ConfigurationError
    └── TrackingError
        └── EventGenerationError
            ├── MissingEventKeyError
            └── InvalidEventKeyError
"""

from simcoe.core.exceptions.errors import (
    ConfigurationError,
    EventGenerationError,
    InvalidEventKeyError,
    MissingEventKeyError,
    SimcoeError,
    TrackingError,
)

__all__ = [
    # Base
    "SimcoeError",
    # Configuration
    "ConfigurationError",
    # Tracking
    "TrackingError",
    "EventGenerationError",
    "MissingEventKeyError",
    "InvalidEventKeyError",
]
