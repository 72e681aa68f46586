import pytest

from contestkit.heating import min_heating_cost

PAIRS = [(1, 10000), (10000, 1), (2, 6), (4, 6), (3, 10), (7, 50)]


def test_single_radiator_takes_everything():
    assert min_heating_cost(1, 10000) == 100000000


def test_even_split_between_two():
    assert min_heating_cost(2, 6) == 18


def test_uneven_split():
    assert min_heating_cost(4, 6) == 10


@pytest.mark.parametrize("radiators, sections", [(10000, 1), (5, 5), (3, 0), (9, 4)])
def test_enough_radiators_cost_one_per_section(radiators, sections):
    assert min_heating_cost(radiators, sections) == sections


@pytest.mark.parametrize("radiators, sections", PAIRS)
def test_cost_respects_even_spread_lower_bound(radiators, sections):
    assert min_heating_cost(radiators, sections) * radiators >= sections * sections


@pytest.mark.parametrize("radiators, sections", PAIRS)
def test_more_radiators_never_cost_more(radiators, sections):
    assert min_heating_cost(radiators + 1, sections) <= min_heating_cost(radiators, sections)


@pytest.mark.parametrize("radiators, sections", PAIRS)
def test_more_sections_cost_more(radiators, sections):
    assert min_heating_cost(radiators, sections + 1) > min_heating_cost(radiators, sections)


def test_no_radiators_is_rejected():
    with pytest.raises(ValueError):
        min_heating_cost(0, 3)


def test_negative_sections_are_rejected():
    with pytest.raises(ValueError):
        min_heating_cost(2, -1)