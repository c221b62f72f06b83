"""Outcome of a single tracking call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TrackingStatus(Enum):
    """Enumeration of tracking call outcomes."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class TrackingResult:
    """Result of a tracking call.

    A result is either a success or an error carrying a human-readable
    message. Results are produced synchronously per call and are not retained
    by the trackers.

    Attributes:
        status: SUCCESS or ERROR
        message: Error description; always None for successes
    """

    status: TrackingStatus
    message: Optional[str] = None

    def __post_init__(self) -> None:
        """Enforce the shape of each variant."""
        if self.status is TrackingStatus.SUCCESS and self.message is not None:
            raise ValueError("A successful tracking result cannot carry a message")
        if self.status is TrackingStatus.ERROR and not self.message:
            raise ValueError("An error tracking result requires a message")

    @classmethod
    def success(cls) -> TrackingResult:
        """Build a success result."""
        return cls(TrackingStatus.SUCCESS)

    @classmethod
    def error(cls, message: str) -> TrackingResult:
        """Build an error result carrying ``message``."""
        return cls(TrackingStatus.ERROR, message)

    @property
    def succeeded(self) -> bool:
        return self.status is TrackingStatus.SUCCESS

    def __bool__(self) -> bool:
        return self.succeeded
