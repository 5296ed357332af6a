import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.multiset import Multiset


def make_sample():
    ms = Multiset()
    for value in (1, 2, 4, 4, 4):
        ms.add(value)
    return ms


def test_keeps_duplicates_in_order():
    ms = Multiset([3, 1, 3, 2, 3])
    assert list(ms) == [1, 2, 3, 3, 3]
    assert list(reversed(ms)) == [3, 3, 3, 2, 1]


def test_bounds_from_example():
    ms = make_sample()
    assert ms.lower_bound(0) == 1
    assert ms.lower_bound(3) == 4
    assert ms.upper_bound(0) == 1
    assert ms.upper_bound(1) == 2
    assert ms.upper_bound(5) is None


def test_remove_all():
    ms = make_sample()
    assert ms.remove_all(4) == 3
    assert list(ms) == [1, 2]
    assert len(ms) == 2


def test_remove_one():
    ms = make_sample()
    ms.remove_one(4)
    assert list(ms) == [1, 2, 4, 4]
    assert ms.count(4) == 2


def test_remove_one_missing_raises():
    with pytest.raises(KeyError):
        make_sample().remove_one(3)


def test_contains():
    ms = make_sample()
    assert 4 in ms
    assert 3 not in ms


@given(st.lists(st.integers(-10, 10)))
def test_iteration_is_sorted(values):
    ms = Multiset(values)
    assert list(ms) == sorted(values)
    assert len(ms) == len(values)


@given(st.lists(st.integers(-10, 10)), st.integers(-12, 12))
def test_bounds_invariants(values, probe):
    ms = Multiset(values)
    low = ms.lower_bound(probe)
    high = ms.upper_bound(probe)
    if low is None:
        assert all(v < probe for v in values)
    else:
        assert low >= probe and all(v >= low or v < probe for v in values)
    if high is None:
        assert all(v <= probe for v in values)
    else:
        assert high > probe and all(v >= high or v <= probe for v in values)
    assert ms.count(probe) == values.count(probe)