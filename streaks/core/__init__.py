"""
Core module for streaks - contains domain models, the store, configuration, and exceptions.
"""

from .models import (
    Streak,
    StreakStatus,
    StreaksConfig
)

from .store import StreakStore

from .exceptions import (
    StreaksError,
    ConfigurationError,
    StateParseError,
    StorageError
)

__all__ = [
    # Models
    'Streak',
    'StreakStatus',
    'StreaksConfig',
    'StreakStore',
    # Exceptions
    'StreaksError',
    'ConfigurationError',
    'StateParseError',
    'StorageError'
]
