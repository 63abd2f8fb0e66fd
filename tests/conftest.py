#!/usr/bin/env python3
"""
Global pytest configuration and fixtures.

This module provides:
- A controllable clock for time-travel tests
- Isolated data directories and state files
- A recorder for user-facing store messages
"""

import os
import shutil
import sys
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Generator, List

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from streaks.core.paths import reset_path_manager
from streaks.core.storage import StateFile
from streaks.core.store import StreakStore

TZ = timezone(timedelta(hours=2))


class FakeClock:
    """Clock whose time only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: int = 0, hours: int = 0) -> datetime:
        self.now = self.now + timedelta(days=days, hours=hours)
        return self.now


class MessageRecorder:
    """Collects messages passed to a store's notify callback."""

    def __init__(self):
        self.messages: List[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = tempfile.mkdtemp(prefix="streaks_test_")
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def clock() -> FakeClock:
    """A clock fixed at 2024-03-10 09:30 in UTC+2."""
    return FakeClock(datetime(2024, 3, 10, 9, 30, tzinfo=TZ))


@pytest.fixture
def messages() -> MessageRecorder:
    return MessageRecorder()


@pytest.fixture
def store(clock, messages) -> StreakStore:
    """An empty store that refuses every similar-name suggestion."""
    return StreakStore(clock=clock, confirm=lambda prompt: False, notify=messages)


@pytest.fixture
def state_file(temp_dir) -> StateFile:
    return StateFile(Path(temp_dir) / "state.txt")


@pytest.fixture
def streaks_home(temp_dir, monkeypatch) -> Generator[Path, None, None]:
    """Point STREAKS_HOME at a temporary directory."""
    home = Path(temp_dir) / "home"
    monkeypatch.setenv("STREAKS_HOME", str(home))
    reset_path_manager()
    try:
        yield home
    finally:
        reset_path_manager()
