"""Shuffle an array so that no two positions share ``index - value``."""

from __future__ import annotations

from collections.abc import Iterable


def make_good(values: Iterable[int]) -> list[int]:
    """Return the values in non-increasing order, which makes the array good."""
    return sorted(values, reverse=True)