"""Display command - print every streak with its count and status."""

from .base import StreakCommand
from ..core.store import StreakStore
from ..utils.display import format_streak_table


class DisplayCommand(StreakCommand):
    """Command for listing streaks."""

    def run(self) -> bool:
        if self.config.auto_update:
            store = self.state_file.modify(self._reconciled, **self.collaborators())
        else:
            store = self.state_file.load_store(**self.collaborators())
        print(format_streak_table(store), end="")
        return True

    @staticmethod
    def _reconciled(store: StreakStore) -> StreakStore:
        store.reconcile_all()
        return store
