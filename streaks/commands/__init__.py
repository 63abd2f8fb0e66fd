"""
Command implementations for streaks.
"""

from .display import DisplayCommand
from .update import UpdateCommand
from .hit import HitCommand
from .add import AddCommand
from .remove import RemoveCommand
from .rename import RenameCommand

__all__ = [
    'DisplayCommand',
    'UpdateCommand',
    'HitCommand',
    'AddCommand',
    'RemoveCommand',
    'RenameCommand',
]
