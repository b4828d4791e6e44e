import pytest

from pushswap.stacks import Stacks, is_sorted, max_position, min_position


def test_sa_swaps_top_two():
    s = Stacks([1, 2, 3])
    s.sa()
    assert list(s.a) == [2, 1, 3]
    assert s.moves == ["sa"]


def test_ra_moves_top_to_bottom():
    s = Stacks([1, 2, 3])
    s.ra()
    assert list(s.a) == [2, 3, 1]
    assert s.moves == ["ra"]


def test_rra_moves_bottom_to_top():
    s = Stacks([1, 2, 3])
    s.rra()
    assert list(s.a) == [3, 1, 2]
    assert s.moves == ["rra"]


def test_ra_then_rra_restores():
    s = Stacks([4, 5, 6, 7])
    s.ra()
    s.rra()
    assert list(s.a) == [4, 5, 6, 7]


def test_pb_then_pa_round_trip():
    s = Stacks([1, 2, 3])
    s.pb()
    s.pb()
    assert list(s.a) == [3]
    assert list(s.b) == [2, 1]
    s.pa()
    s.pa()
    assert list(s.a) == [1, 2, 3]
    assert list(s.b) == []
    assert s.moves == ["pb", "pb", "pa", "pa"]


@pytest.mark.parametrize("op", ["sa", "ra", "rra"])
def test_single_element_ops_do_nothing(op):
    s = Stacks([9])
    getattr(s, op)()
    assert list(s.a) == [9]
    assert s.moves == []


def test_push_from_empty_does_nothing():
    s = Stacks([])
    s.pb()
    s.pa()
    assert list(s.a) == [] and list(s.b) == []
    assert s.moves == []


def test_is_sorted():
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([5]) is True
    assert is_sorted([2, 1]) is False
    assert is_sorted([]) is False


def test_min_and_max_positions():
    assert min_position([4, 1, 3, 1]) == 1
    assert max_position([4, 9, 3, 9]) == 1
    assert min_position([-5]) == 0


def test_positions_of_empty_raise():
    with pytest.raises(ValueError):
        min_position([])
    with pytest.raises(ValueError):
        max_position([])