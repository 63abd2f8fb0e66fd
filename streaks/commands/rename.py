"""Rename command - move a streak to a new name."""

from .base import StreakCommand


class RenameCommand(StreakCommand):
    """Command for renaming a streak while keeping its progress."""

    def run(self, old: str, new: str) -> bool:
        renamed = self.state_file.modify(
            lambda store: store.rename(old, new), **self.collaborators()
        )
        if renamed:
            print(f'renamed streak "{old}" to "{new}"')
        return True
