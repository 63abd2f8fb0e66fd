"""Interactive prompting utilities for the streaks CLI."""

import builtins
import sys


def is_interactive() -> bool:
    """Return True when prompts can safely read from stdin."""
    # If input() has been monkeypatched (e.g. during tests), assume interactivity.
    if input is not builtins.input:  # type: ignore[name-defined]
        return True

    stdin = getattr(sys, "stdin", None)
    if stdin is None:
        return False

    try:
        return stdin.isatty()
    except (AttributeError, ValueError):
        return False


def yes_or_no(prompt: str) -> bool:
    """
    Ask a yes/no question until the answer starts with y or n.

    Any answer beginning with ``y``/``Y`` is a yes and any beginning with
    ``n``/``N`` is a no; anything else re-prompts. End of input is a no.
    """
    while True:
        try:
            answer = input(f"{prompt} [y/n] :")
        except EOFError:
            print()
            return False

        first = answer[:1].lower()
        if first == "y":
            print()
            return True
        if first == "n":
            print()
            return False


def confirm_similar_streak(prompt: str) -> bool:
    """
    Default decision callback used when a hit names an unknown streak.

    Returns:
        True if the user agreed, False otherwise or when no TTY is attached
    """
    if not is_interactive():
        print("ℹ️ Non-interactive environment detected, not guessing a similar streak.",
              file=sys.stderr)
        return False
    return yes_or_no(prompt)
