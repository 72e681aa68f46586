"""Choose a time limit that passes correct solutions and fails wrong ones."""

from __future__ import annotations

from collections.abc import Iterable


def time_limit(correct: Iterable[int], wrong: Iterable[int]) -> int | None:
    """Return the smallest valid time limit, or ``None`` if there is none.

    Every correct solution must pass, at least one with twice its running
    time to spare, and every wrong solution must fail.
    """
    correct = list(correct)
    wrong = list(wrong)
    if not correct or not wrong:
        raise ValueError("need at least one correct and one wrong solution")
    limit = max(2 * min(correct), max(correct))
    return limit if limit < min(wrong) else None