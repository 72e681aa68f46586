"""Earn the most at a sale where some television sets have negative prices."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice, takewhile


def max_earnings(prices: Iterable[int], capacity: int) -> int:
    """Return the most money gained by carrying at most ``capacity`` sets.

    Only sets with a negative price pay their buyer, so the cheapest of them
    are taken first.
    """
    if capacity < 0:
        raise ValueError("capacity cannot be negative")
    negatives = takewhile(lambda price: price < 0, sorted(prices))
    return sum(-price for price in islice(negatives, capacity))