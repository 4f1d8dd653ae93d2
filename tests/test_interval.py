import math

import pytest

from weekendtracer.interval import EMPTY, UNIVERSE, Interval


def test_default_is_empty():
    iv = Interval()
    assert iv == EMPTY
    assert iv.size() < 0
    assert not iv.contains(0.0)


def test_contains_endpoints():
    iv = Interval(1.0, 3.0)
    assert iv.contains(1.0)
    assert iv.contains(3.0)
    assert not iv.contains(3.5)
    assert not iv.contains(0.5)


def test_surrounds_includes_endpoints():
    iv = Interval(1.0, 3.0)
    assert iv.surrounds(1.0)
    assert iv.surrounds(3.0)
    assert not iv.surrounds(4.0)


def test_clamp():
    iv = Interval(0.0, 0.999)
    assert iv.clamp(2.0) == 0.999
    assert iv.clamp(-1.0) == 0.0
    assert iv.clamp(0.5) == 0.5


def test_expand_grows_size_by_delta():
    iv = Interval(1.0, 3.0)
    grown = iv.expand(2.0)
    assert grown.size() == pytest.approx(iv.size() + 2.0)
    assert grown.min < iv.min
    assert grown.max > iv.max


def test_hull_encloses_both():
    a = Interval(1.0, 3.0)
    b = Interval(2.0, 5.0)
    assert Interval.hull(a, b) == Interval(1.0, 5.0)
    assert Interval.hull(a, b) == Interval.hull(b, a)


def test_hull_with_empty_is_identity():
    a = Interval(-2.0, 4.0)
    assert Interval.hull(a, EMPTY) == a


def test_universe_contains_everything():
    assert UNIVERSE.contains(1e300)
    assert UNIVERSE.contains(-1e300)
    assert math.isinf(UNIVERSE.size())