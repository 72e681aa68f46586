"""Decide whether a hero can beat every dragon in some order."""

from __future__ import annotations

from collections.abc import Iterable


def can_defeat_all(strength: int, dragons: Iterable[tuple[int, int]]) -> bool:
    """Return whether every ``(dragon_strength, bonus)`` can be beaten.

    A dragon falls only to strictly greater strength, and each victory adds
    the dragon's bonus. Fighting the weakest dragons first is optimal.
    """
    for dragon, bonus in sorted(dragons):
        if strength <= dragon:
            return False
        strength += bonus
    return True