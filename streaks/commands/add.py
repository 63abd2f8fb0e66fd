"""Add command - start tracking new streaks."""

from typing import Sequence

from .base import StreakCommand


class AddCommand(StreakCommand):
    """Command for adding streaks."""

    def run(self, names: Sequence[str]) -> bool:
        if not names:
            print("expected an argument")
            return False

        self.state_file.modify(lambda store: store.add(names), **self.collaborators())
        for name in names:
            print(f'added streak "{name}"')
        return True
