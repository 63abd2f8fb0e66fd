"""
Fuzzy name matching for streak lookups.
"""

from typing import Iterable, Optional

MAX_EDITS = 3


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings.

    Insertions, deletions and substitutions all cost 1.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            cost = 0 if char_a == char_b else 1
            current.append(min(
                previous[j] + 1,         # deletion
                current[j - 1] + 1,      # insertion
                previous[j - 1] + cost,  # substitution
            ))
        previous = current
    return previous[-1]


def close_match(a: str, b: str) -> bool:
    """
    Return True when ``a`` and ``b`` are probably the same name with a typo.

    The edit budget is half the shorter length (rounded down), capped at
    MAX_EDITS, so a two-letter name tolerates a single edit.
    """
    budget = min(min(len(a), len(b)) // 2, MAX_EDITS)
    return edit_distance(a, b) <= budget


def find_close_match(candidates: Iterable[str], name: str) -> Optional[str]:
    """Return the first candidate that closely matches ``name``, if any."""
    for candidate in candidates:
        if close_match(candidate, name):
            return candidate
    return None
