"""
streaks - Track daily habit streaks from the command line.
"""

__version__ = "0.3.0"
