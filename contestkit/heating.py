"""Cost of heating a room with radiators whose price grows with their sections."""


def min_heating_cost(radiators: int, sections: int) -> int:
    """Return the least cost of ``sections`` spread over at most ``radiators``.

    A radiator with ``k`` sections costs ``k * k``; the sections are spread as
    evenly as possible.
    """
    if radiators < 1:
        raise ValueError("at least one radiator is needed")
    if sections < 0:
        raise ValueError("the number of sections cannot be negative")
    each, extra = divmod(sections, radiators)
    return each * each * radiators + 2 * each * extra + extra