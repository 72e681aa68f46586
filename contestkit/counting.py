"""Small counting problems: cupboard doors, match reports and drink mixes."""

from __future__ import annotations

from collections.abc import Iterable


def cupboard_moves(doors: Iterable[tuple[int, int]]) -> int:
    """Return the fewest door flips that leave all left and all right doors alike.

    Each cupboard is a ``(left, right)`` pair where 0 means closed and 1 open.
    """
    doors = list(doors)
    total = len(doors)
    closed_left = sum(1 for left, _ in doors if left == 0)
    closed_right = sum(1 for _, right in doors if right == 0)
    return min(closed_left, total - closed_left) + min(closed_right, total - closed_right)


def winning_team(goals: Iterable[str]) -> str:
    """Return the team that scored more goals, given who scored each one."""
    goals = iter(goals)
    try:
        first = next(goals)
    except StopIteration:
        raise ValueError("at least one goal is needed to pick a winner") from None
    first_count, other_count, other = 1, 0, ""
    for team in goals:
        if team == first:
            first_count += 1
        else:
            other_count += 1
            other = team
    return first if first_count > other_count else other


def orange_fraction(percents: Iterable[int]) -> float:
    """Return the orange juice share of a cocktail mixed from equal parts."""
    percents = list(percents)
    if not percents:
        raise ValueError("at least one drink is needed")
    return sum(percents) / len(percents)