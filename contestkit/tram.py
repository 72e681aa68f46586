"""Smallest tram capacity that fits every passenger along the route."""

from __future__ import annotations

from collections.abc import Iterable


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Return the most passengers aboard at once.

    Each stop is an ``(exiting, entering)`` pair; people leave before others
    board.
    """
    aboard = peak = 0
    for exiting, entering in stops:
        aboard += entering - exiting
        peak = max(peak, aboard)
    return peak