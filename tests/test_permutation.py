from itertools import permutations

from hypothesis import given
from hypothesis import strategies as st

from dsakit.permutation import next_permutation, sorted_permutations


def test_all_permutations_of_three():
    result = list(sorted_permutations([3, 1, 2]))
    assert result == sorted(permutations([1, 2, 3]))
    assert result[0] == (1, 2, 3)
    assert result[-1] == (3, 2, 1)


def test_next_permutation_step():
    assert next_permutation([1, 2, 3]) == [1, 3, 2]


def test_last_permutation_has_no_successor():
    assert next_permutation([3, 2, 1]) is None


def test_input_not_modified():
    items = [1, 2, 3]
    next_permutation(items)
    assert items == [1, 2, 3]


def test_empty_yields_single_empty_arrangement():
    assert list(sorted_permutations([])) == [()]


@given(st.lists(st.integers(0, 3), max_size=6))
def test_matches_distinct_sorted_permutations(values):
    assert list(sorted_permutations(values)) == sorted(set(permutations(values)))