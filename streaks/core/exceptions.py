"""
Exception classes for streaks.
"""

from typing import Optional


class StreaksError(Exception):
    """Base exception for all streaks errors."""
    pass


class ConfigurationError(StreaksError):
    """Raised when configuration is invalid."""
    pass


class StateParseError(StreaksError):
    """Raised when the persisted state text cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"failed to parse streak on line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class StorageError(StreaksError):
    """Raised when the state file cannot be read or written."""
    pass
