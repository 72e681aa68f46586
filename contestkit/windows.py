"""Find the cheapest run of consecutive fence planks."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


def min_fence_window(heights: Iterable[int], k: int) -> int:
    """Return the 1-based start of the first ``k`` planks with the least total height."""
    heights = list(heights)
    if not 1 <= k <= len(heights):
        raise ValueError("the window must hold between one and all planks")
    prefix = [0, *accumulate(heights)]
    sums = [prefix[start + k] - prefix[start] for start in range(len(heights) - k + 1)]
    return min(range(len(sums)), key=sums.__getitem__) + 1