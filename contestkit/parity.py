"""Make both halves of a row of dominoes sum to even numbers."""

from __future__ import annotations

from collections.abc import Iterable


def domino_rotations(pieces: Iterable[tuple[int, int]]) -> int | None:
    """Return the fewest rotations that make both halves' sums even.

    Each piece is an ``(upper, lower)`` pair. Returns ``None`` when no number
    of rotations can do it.
    """
    upper_sum = lower_sum = mixed = 0
    for upper, lower in pieces:
        upper_sum += upper
        lower_sum += lower
        mixed += upper % 2 != lower % 2
    if upper_sum % 2 == 0 and lower_sum % 2 == 0:
        return 0
    if mixed % 2 == 0 and mixed > 0:
        return 1
    return None