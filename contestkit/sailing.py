"""Sail a boat to a target point using a forecast of winds."""

from __future__ import annotations

from collections.abc import Iterable


def earliest_arrival(
    start: tuple[int, int], end: tuple[int, int], winds: Iterable[str]
) -> int | None:
    """Return the first second at which the boat can reach ``end``.

    Each wind is one of ``E``, ``S``, ``W`` or ``N`` and moves the boat one
    step that way if the captain chooses; otherwise the boat stays anchored.
    Returns ``None`` when the target cannot be reached in time.
    """
    x, y = start
    target_x, target_y = end
    if (x, y) == (target_x, target_y):
        return 0
    for second, wind in enumerate(winds, start=1):
        if wind == "E" and x < target_x:
            x += 1
        elif wind == "N" and y < target_y:
            y += 1
        elif wind == "S" and y > target_y:
            y -= 1
        elif wind == "W" and x > target_x:
            x -= 1
        if (x, y) == (target_x, target_y):
            return second
    return None