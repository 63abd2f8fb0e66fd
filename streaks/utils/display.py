"""Formatting helpers for streak output."""

from typing import List, Sequence

from ..core.store import StreakStore


def format_table(rows: Sequence[Sequence[str]]) -> str:
    """
    Align rows into columns separated by a single space.

    The first column is left-aligned and the rest are right-aligned.
    """
    if not rows:
        return ""

    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    lines: List[str] = []
    for row in rows:
        cells = [row[0].ljust(widths[0])]
        cells.extend(cell.rjust(width) for cell, width in zip(row[1:], widths[1:]))
        lines.append(" ".join(cells))
    return "\n".join(lines) + "\n"


def format_streak_table(store: StreakStore) -> str:
    """Render every streak as ``- name: count (max N) Status``."""
    rows = [
        [
            f"- {name}:",
            str(streak.current_count),
            f"(max {streak.max_count})",
            streak.status.value,
        ]
        for name, streak in store.items()
    ]
    return format_table(rows)
