from itertools import permutations

import pytest

from pushswap.simplesort import simple_sort
from pushswap.stacks import Stacks, is_sorted


def _replay(values, moves):
    s = Stacks(values)
    for move in moves:
        getattr(s, move)()
    return s


def test_two_values_swap():
    s = Stacks([2, 1])
    assert simple_sort(s) == ["sa"]
    assert list(s.a) == [1, 2]


def test_three_reversed():
    s = Stacks([3, 2, 1])
    assert simple_sort(s) == ["ra", "sa"]
    assert list(s.a) == [1, 2, 3]


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_every_permutation_is_sorted(size):
    for perm in permutations(range(size)):
        if is_sorted(perm):
            continue
        s = Stacks(perm)
        moves = simple_sort(s)
        assert list(s.a) == sorted(perm), perm
        assert list(s.b) == []
        replayed = _replay(perm, moves)
        assert list(replayed.a) == sorted(perm)


@pytest.mark.parametrize("size", [3, 4, 5])
def test_move_count_is_small(size):
    for perm in permutations(range(size)):
        if is_sorted(perm):
            continue
        s = Stacks(perm)
        assert len(simple_sort(s)) <= 12


def test_sorted_three_makes_no_moves():
    s = Stacks([1, 2, 3])
    assert simple_sort(s) == []
    assert list(s.a) == [1, 2, 3]


def test_negative_values_sorted():
    values = [0, -7, 12, -1, 5]
    s = Stacks(values)
    simple_sort(s)
    assert list(s.a) == sorted(values)