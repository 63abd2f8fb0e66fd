"""
Utility functions for streaks.
"""

from .io import read_text, atomic_write
from .date import local_now, day_number, days_between, format_timestamp, parse_timestamp
from .text import edit_distance, close_match, find_close_match
from .prompts import is_interactive, yes_or_no, confirm_similar_streak

__all__ = [
    # I/O utilities
    'read_text',
    'atomic_write',
    # Date utilities
    'local_now',
    'day_number',
    'days_between',
    'format_timestamp',
    'parse_timestamp',
    # Text utilities
    'edit_distance',
    'close_match',
    'find_close_match',
    # Prompt utilities
    'is_interactive',
    'yes_or_no',
    'confirm_similar_streak',
]
