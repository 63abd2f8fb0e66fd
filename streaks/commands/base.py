"""
Shared wiring for streak commands.
"""

import logging
from typing import Any, Dict, Optional

from ..core.models import StreaksConfig
from ..core.storage import StateFile
from ..core.store import Clock, Confirm, Notify


def _decline(prompt: str) -> bool:
    return False


class StreakCommand:
    """Base class for commands that operate on the state file."""

    def __init__(
        self,
        config: StreaksConfig,
        state_file: StateFile,
        verbose: bool = False,
        clock: Optional[Clock] = None,
        confirm: Optional[Confirm] = None,
        notify: Optional[Notify] = None,
    ):
        """
        Initialize the command.

        Args:
            config: Loaded configuration
            state_file: Where the streaks are persisted
            verbose: Enable debug logging for this command
            clock, confirm, notify: Store collaborators; defaults are the real
                clock, the interactive prompt and stderr
        """
        self.config = config
        self.state_file = state_file
        self.verbose = verbose
        self.clock = clock
        self.confirm = confirm if config.confirm_similar else _decline
        self.notify = notify
        self.logger = logging.getLogger(self.__class__.__module__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def collaborators(self) -> Dict[str, Any]:
        """Keyword arguments passed to every loaded StreakStore."""
        return {"clock": self.clock, "confirm": self.confirm, "notify": self.notify}
