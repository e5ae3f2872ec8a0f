"""Exceptions raised by wheel operations."""
from __future__ import annotations


class WheelError(Exception):
    """Base class for wheel errors."""


class ConfigurationError(WheelError, ValueError):
    """Raised for invalid configuration values or malformed positions."""


class OutOfRangeError(WheelError, IndexError):
    """Raised when a segment position lies outside the wheel."""

    def __init__(self, position: int, num_segments: int, message: str | None = None) -> None:
        self.position = position
        self.num_segments = num_segments
        if message is None:
            message = f"Segment position {position} is out of range 1..{num_segments}"
        super().__init__(message)
