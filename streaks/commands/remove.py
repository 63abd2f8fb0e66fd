"""Remove command - stop tracking streaks."""

from typing import Sequence

from .base import StreakCommand


class RemoveCommand(StreakCommand):
    """Command for removing streaks by exact name."""

    def run(self, names: Sequence[str]) -> bool:
        """
        Remove the named streaks.

        Unknown names are reported with a close-match hint and never
        auto-corrected.

        Returns:
            True once the state has been processed
        """
        if not names:
            print("expected an argument")
            return False

        removed = self.state_file.modify(
            lambda store: store.remove(names), **self.collaborators()
        )
        for name in removed:
            print(f'removed streak "{name}"')
        return True
