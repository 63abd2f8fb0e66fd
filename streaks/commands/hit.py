"""Hit command - record today's completion for one or more streaks."""

from typing import List, Optional, Sequence

from .base import StreakCommand
from ..core.store import StreakStore


class HitCommand(StreakCommand):
    """Command for hitting streaks by name."""

    def run(self, names: Sequence[str]) -> bool:
        """
        Hit each named streak.

        With ``persist_each_hit`` every name is loaded, hit and saved on its
        own, so a failure partway through keeps the earlier hits. Otherwise
        all hits are applied to one store that is saved once at the end.

        Args:
            names: Streak names in the order given on the command line

        Returns:
            True if every hit was processed
        """
        if not names:
            print("expected an argument")
            return False

        if self.config.persist_each_hit:
            for name in names:
                count = self.state_file.modify(
                    lambda store: self._hit(store, name), **self.collaborators()
                )
                self._report(name, count)
        else:
            def hit_all(store: StreakStore) -> List[Optional[int]]:
                return [self._hit(store, name) for name in names]

            counts = self.state_file.modify(hit_all, **self.collaborators())
            for name, count in zip(names, counts):
                self._report(name, count)
        return True

    def _hit(self, store: StreakStore, name: str) -> Optional[int]:
        if self.config.auto_update:
            store.reconcile_all()
        return store.hit(name, is_batch=True)

    def _report(self, name: str, count: Optional[int]) -> None:
        if count is None:
            self.logger.debug("No update for streak %r", name)
        else:
            print(f'hit streak "{name}": now at {count}')
