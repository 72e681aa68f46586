"""Pick jigsaw puzzles for students so the piece counts differ least."""

from __future__ import annotations

from collections.abc import Iterable


def min_piece_difference(students: int, pieces: Iterable[int]) -> int:
    """Return the least gap between the largest and smallest of ``students`` puzzles."""
    ordered = sorted(pieces)
    if not 1 <= students <= len(ordered):
        raise ValueError("need between one and all of the puzzles")
    return min(
        high - low
        for low, high in zip(ordered, ordered[students - 1:])
    )