"""Recover a box's edges from the areas of three of its faces."""

from __future__ import annotations

import math


def edge_sum(ab: int, bc: int, ca: int) -> int:
    """Return the total length of all twelve edges of a rectangular box.

    The arguments are the areas of three faces that share a vertex. Their
    product is the square of the volume, so each edge is a face area times
    an adjacent one, divided by the volume.
    """
    if min(ab, bc, ca) < 1:
        raise ValueError("face areas must be positive")
    volume = math.isqrt(ab * bc * ca)
    return 4 * (ab * bc // volume + bc * ca // volume + ca * ab // volume)