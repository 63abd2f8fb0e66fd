"""
Domain models for streaks.

This module contains the streak state machine and the user configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from typing import List, Optional, Sequence
import json
import logging
import os
import re

from .exceptions import ConfigurationError, StateParseError
from ..utils.date import format_timestamp, parse_timestamp
from ..utils.io import atomic_write

logger = logging.getLogger(__name__)

_UNSIGNED = re.compile(r"[0-9]+")


def _parse_count(value: str, field_name: str) -> int:
    if not _UNSIGNED.fullmatch(value):
        raise StateParseError(
            f"expected unsigned integer for {field_name}: {value!r}"
        )
    return int(value)


def _config_flag(data: dict, key: str, default: bool, config_path: str) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"Config key '{key}' must be true or false in {config_path}, got {value!r}"
        )
    return value


class StreakStatus(Enum):
    """Lifecycle status of a streak. Values are the persisted tokens."""

    NEW = "New"
    PENDING = "Pending"
    DONE = "Done"
    EXPIRED = "Expired"

    @classmethod
    def from_token(cls, token: str) -> StreakStatus:
        try:
            return cls(token)
        except ValueError:
            raise StateParseError(f'unknown streak state: "{token}"') from None


@dataclass
class Streak:
    """A tracked daily habit."""

    current_count: int
    max_count: int
    last_hit: datetime
    status: StreakStatus = StreakStatus.NEW

    FIELD_COUNT = 4

    @classmethod
    def new(cls, now: datetime) -> Streak:
        """Create a streak that has never been hit."""
        return cls(current_count=0, max_count=0, last_hit=now, status=StreakStatus.NEW)

    def _set_count(self, count: int) -> None:
        self.current_count = count
        self.max_count = max(self.max_count, self.current_count)

    def hit(self, now: datetime) -> Optional[int]:
        """
        Record today's completion.

        Args:
            now: Moment of the hit, stored as ``last_hit``

        Returns:
            The new count, or None when the streak was already done today
        """
        if self.status == StreakStatus.DONE:
            return None

        if self.status == StreakStatus.PENDING:
            self._set_count(self.current_count + 1)
        else:
            # New and Expired streaks start a fresh chain
            self._set_count(1)

        self.status = StreakStatus.DONE
        self.last_hit = now
        return self.current_count

    def advance_day(self, days_since_last_hit: int) -> StreakStatus:
        """
        Age the streak by the number of calendar days since its last hit.

        Does not touch ``last_hit``, so repeated calls on the same day are stable.
        """
        if days_since_last_hit == 0:
            pass
        elif days_since_last_hit == 1:
            self.status = StreakStatus.PENDING
        elif days_since_last_hit > 1:
            self.status = StreakStatus.EXPIRED
            self._set_count(0)
        else:
            logger.warning(
                "Last hit is %d day(s) in the future; resetting streak to pending",
                -days_since_last_hit,
            )
            self.status = StreakStatus.PENDING
            self._set_count(0)
        return self.status

    def serialize(self) -> str:
        return ",".join([
            str(self.current_count),
            str(self.max_count),
            format_timestamp(self.last_hit),
            self.status.value,
        ])

    @classmethod
    def deserialize(cls, values: Sequence[str]) -> Streak:
        """Build a streak from the comma-separated fields after its name."""
        if len(values) != cls.FIELD_COUNT:
            raise StateParseError(
                f"expected {cls.FIELD_COUNT} comma-separated values for a streak "
                f'description, got {len(values)}: "{",".join(values)}"'
            )

        current_count = _parse_count(values[0], "current_count")
        max_count = _parse_count(values[1], "max_count")
        if current_count > max_count:
            raise StateParseError(
                f"current_count {current_count} exceeds max_count {max_count}"
            )

        try:
            last_hit = parse_timestamp(values[2])
        except ValueError as exc:
            raise StateParseError(f"expected local datetime for last_hit: {exc}") from None

        return cls(
            current_count=current_count,
            max_count=max_count,
            last_hit=last_hit,
            status=StreakStatus.from_token(values[3]),
        )


@dataclass
class StreaksConfig:
    """User configuration for the streaks CLI."""

    # Overrides the default <working dir>/state.txt location
    state_path: Optional[str] = None
    # Save after every name in a batch hit instead of once at the end
    persist_each_hit: bool = True
    # Offer to hit a similarly named streak before creating a new one
    confirm_similar: bool = True
    # Reconcile day changes before display and hit
    auto_update: bool = False

    def __post_init__(self) -> None:
        if self.state_path:
            self.state_path = os.path.abspath(os.path.expanduser(self.state_path))

    @classmethod
    def load_from_file(cls, config_path: str) -> StreaksConfig:
        config_path = os.path.abspath(os.path.expanduser(config_path))
        if not os.path.exists(config_path):
            logger.debug("No config at %s, using defaults", config_path)
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as handle:
                data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid config file {config_path}: {exc}") from exc
        except OSError as exc:
            raise ConfigurationError(f"Cannot read config file {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a JSON object")

        unknown: List[str] = sorted(set(data) - set(cls.__dataclass_fields__))
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))

        state_path = data.get("state_path")
        if state_path is not None and not isinstance(state_path, str):
            raise ConfigurationError(
                f"Config key 'state_path' must be a string or null in {config_path}"
            )

        return cls(
            state_path=state_path,
            persist_each_hit=_config_flag(data, "persist_each_hit", True, config_path),
            confirm_similar=_config_flag(data, "confirm_similar", True, config_path),
            auto_update=_config_flag(data, "auto_update", False, config_path),
        )

    def save_to_file(self, config_path: str) -> bool:
        config_path = os.path.abspath(os.path.expanduser(config_path))
        content = json.dumps(asdict(self), indent=2, sort_keys=True) + "\n"
        return atomic_write(config_path, content)
