"""Update command - age streaks to today's date."""

from .base import StreakCommand
from ..core.store import StreakStore


class UpdateCommand(StreakCommand):
    """Command for reconciling pending and expired streaks."""

    def run(self) -> bool:
        """
        Reconcile every streak against the current calendar day and save.

        Returns:
            True once the state has been processed
        """
        def reconcile(store: StreakStore) -> int:
            store.reconcile_all()
            return len(store)

        count = self.state_file.modify(reconcile, **self.collaborators())
        self.logger.debug("Reconciled %d streak(s)", count)
        print("updated streak states")
        return True
