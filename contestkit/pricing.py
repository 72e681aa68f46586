"""Ticket revenue for an airport where a seat costs as much as the seats left."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import NamedTuple


class Revenue(NamedTuple):
    """The best and the worst total the airport can take."""

    maximum: int
    minimum: int


def airport_revenue(passengers: int, seats: Iterable[int]) -> Revenue:
    """Return the largest and smallest revenue for selling ``passengers`` tickets.

    Each plane charges as many units as it has empty seats at the moment a
    ticket is bought; the seat count then drops by one.
    """
    seats = list(seats)
    if passengers < 0:
        raise ValueError("the number of passengers cannot be negative")
    if any(count <= 0 for count in seats):
        raise ValueError("every plane needs at least one empty seat")
    if sum(seats) < passengers:
        raise ValueError("there are fewer seats than passengers")

    heap = [-count for count in seats]
    heapq.heapify(heap)
    maximum = 0
    for _ in range(passengers):
        price = -heap[0]
        maximum += price
        heapq.heapreplace(heap, -(price - 1))

    minimum = 0
    left = passengers
    for price in sorted(seats):
        if not left:
            break
        taken = min(left, price)
        minimum += sum(range(price - taken + 1, price + 1))
        left -= taken

    return Revenue(maximum, minimum)