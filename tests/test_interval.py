import math

import pytest

from crayfish.interval import Interval


def test_default_is_empty():
    assert Interval() == Interval.empty()
    assert Interval().size() == -math.inf
    assert not Interval().contains(0.0)


def test_universe_contains_everything():
    u = Interval.universe()
    assert u.size() == math.inf
    for x in (-1e300, 0.0, 1e300):
        assert u.contains(x)
        assert u.surrounds(x)


def test_size():
    assert Interval(2.0, 5.0).size() == 3.0


def test_contains_includes_endpoints_surrounds_does_not():
    i = Interval(2.0, 5.0)
    assert i.contains(2.0) and i.contains(5.0)
    assert not i.surrounds(2.0) and not i.surrounds(5.0)
    assert i.surrounds(3.5) and i.contains(3.5)
    assert not i.contains(5.5)
    assert not i.surrounds(1.0)


@pytest.mark.parametrize("x, expected", [(-1.0, 0.0), (0.5, 0.5), (2.0, 0.999)])
def test_clamp(x, expected):
    assert Interval(0.0, 0.999).clamp(x) == expected


def test_clamp_nan_goes_to_min():
    assert Interval(0.0, 0.999).clamp(math.nan) == 0.0


def test_clamp_result_lies_inside():
    i = Interval(-3.0, 7.0)
    for x in (-100.0, -3.0, 0.0, 7.0, 100.0):
        assert i.contains(i.clamp(x))


def test_construct_from_pair():
    pair = (0.001, math.inf)
    i = Interval(*pair)
    assert (i.min, i.max) == pair