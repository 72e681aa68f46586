"""Fewest litres to brew a potion with an exact share of essence."""

from __future__ import annotations

import math


def min_potion_steps(percent: int) -> int:
    """Return the fewest one-litre pours that give exactly ``percent``% essence."""
    if not 1 <= percent <= 100:
        raise ValueError("the percentage must lie between 1 and 100")
    return 100 // math.gcd(100, percent)