"""
The streak store: a name-keyed collection of streaks and its text format.

Every persisted line has the form::

    <name>,<current_count>,<max_count>,<last_hit>,<status>

where ``last_hit`` is ISO-8601 with a UTC offset. Names may not contain commas.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .exceptions import StateParseError
from .models import Streak
from ..utils.date import days_between, local_now
from ..utils.prompts import confirm_similar_streak
from ..utils.text import find_close_match

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
Confirm = Callable[[str], bool]
Notify = Callable[[str], None]


def print_to_stderr(message: str) -> None:
    print(message, file=sys.stderr)


class StreakStore:
    """
    Holds all streaks for one invocation.

    Logical problems (unknown names, double hits) never raise; they are
    reported through ``notify`` and the operation yields no update.

    Args:
        streaks: Initial streaks keyed by name
        clock: Returns the current time, used for hits and reconciliation
        confirm: Yes/no decision callback used when a hit names an unknown streak
        notify: Receives user-facing warnings and errors
    """

    def __init__(
        self,
        streaks: Optional[Dict[str, Streak]] = None,
        clock: Optional[Clock] = None,
        confirm: Optional[Confirm] = None,
        notify: Optional[Notify] = None,
    ):
        self.streaks: Dict[str, Streak] = dict(streaks or {})
        self.clock = clock or local_now
        self.confirm = confirm or confirm_similar_streak
        self.notify = notify or print_to_stderr

    # ------------------------------------------------------------------
    # Mapping helpers
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.streaks)

    def __contains__(self, name: object) -> bool:
        return name in self.streaks

    def get(self, name: str) -> Optional[Streak]:
        return self.streaks.get(name)

    def names(self) -> List[str]:
        """Streak names in sorted order."""
        return sorted(self.streaks)

    def items(self) -> Iterator[Tuple[str, Streak]]:
        for name in self.names():
            yield name, self.streaks[name]

    def find_close_match(self, name: str) -> Optional[str]:
        """Return the first stored name (in sorted order) close to ``name``."""
        return find_close_match(self.names(), name)

    def _not_found(self, name: str) -> None:
        alt_name = self.find_close_match(name)
        if alt_name is not None:
            self.notify(f'streak "{name}" not found, maybe you meant "{alt_name}"?')
        else:
            self.notify(f'streak "{name}" not found')

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def reconcile_all(self, now: Optional[datetime] = None) -> None:
        """Move every streak forward to the calendar day of ``now``."""
        now = now or self.clock()
        for name, streak in self.items():
            days = days_between(streak.last_hit, now)
            if days < 0:
                self.notify(f'corrupted time state for streak "{name}"')
            previous = streak.status
            streak.advance_day(days)
            if streak.status != previous:
                logger.debug("Streak %r: %s -> %s after %d day(s)",
                             name, previous.value, streak.status.value, days)

    def add(self, names: Iterable[str]) -> None:
        """Start tracking new streaks, resetting any existing ones of the same name."""
        now = self.clock()
        for name in names:
            if name in self.streaks:
                self.notify(f'warning: reset old version of streak "{name}"')
            self.streaks[name] = Streak.new(now)

    def remove(self, names: Iterable[str]) -> List[str]:
        """
        Stop tracking streaks by exact name.

        Returns:
            Names that were actually removed
        """
        removed = []
        for name in names:
            if self.streaks.pop(name, None) is None:
                self._not_found(name)
            else:
                removed.append(name)
        return removed

    def rename(self, old: str, new: str) -> bool:
        """Move a streak to a new name, overwriting anything stored there."""
        streak = self.streaks.pop(old, None)
        if streak is None:
            self._not_found(old)
            return False
        if new in self.streaks:
            logger.debug("Rename %r -> %r overwrites an existing streak", old, new)
        self.streaks[new] = streak
        return True

    def hit(self, name: str, is_batch: bool = False) -> Optional[int]:
        """
        Hit the named streak, creating it if necessary.

        An unknown name that is close to an existing one asks ``confirm``
        whether to hit that streak instead.

        Args:
            name: Streak to hit
            is_batch: Prefix "already done" messages with the name

        Returns:
            The new count, or None if the streak was already done today
        """
        target = name
        if name not in self.streaks:
            alt_name = self.find_close_match(name)
            if alt_name is not None:
                self.notify(f'streak with a similar name exists: "{alt_name}"')
                if self.confirm("hit this streak?"):
                    target = alt_name
            if target == name:
                self.notify(f'creating new streak "{name}"')
                self.streaks[name] = Streak.new(self.clock())

        count = self.streaks[target].hit(self.clock())
        if count is None:
            prefix = f'"{name}": ' if is_batch else ""
            self.notify(f"{prefix}streak already completed today")
        return count

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def serialize(self) -> str:
        return "\n".join(f"{name},{streak.serialize()}" for name, streak in self.items())

    @classmethod
    def deserialize(cls, text: str, **collaborators) -> StreakStore:
        """
        Parse persisted state.

        Args:
            text: Content previously produced by ``serialize``
            **collaborators: ``clock``, ``confirm`` and ``notify`` for the store

        Raises:
            StateParseError: If any line is malformed; nothing is recovered
        """
        streaks: Dict[str, Streak] = {}
        for line_number, line in enumerate(text.splitlines(), 1):
            name, sep, rest = line.partition(",")
            if not sep:
                raise StateParseError(
                    f'expected name and state for streak: "{line}"', line_number
                )
            try:
                streaks[name] = Streak.deserialize(rest.split(","))
            except StateParseError as exc:
                raise StateParseError(str(exc), line_number) from None
        return cls(streaks, **collaborators)
