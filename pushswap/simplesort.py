"""Sorting of two to five values with a short fixed sequence of moves."""

from __future__ import annotations

from typing import List

from .stacks import Stacks, is_sorted, max_position, min_position


def _sort_three(stacks: Stacks) -> None:
    if is_sorted(stacks.a):
        return
    largest = stacks.a[max_position(stacks.a)]
    if stacks.a[0] == largest:
        stacks.ra()
    if stacks.a[1] == largest:
        stacks.rra()
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()


def _sort_four(stacks: Stacks) -> None:
    position = min_position(stacks.a)
    if position == 1:
        stacks.sa()
    elif position == 2:
        stacks.rra()
        stacks.rra()
    elif position == 3:
        stacks.rra()
    stacks.pb()
    _sort_three(stacks)
    stacks.pa()


def _sort_five(stacks: Stacks) -> None:
    position = min_position(stacks.a)
    if position == 1:
        stacks.ra()
    elif position == 2:
        stacks.ra()
        stacks.sa()
    elif position == 3:
        stacks.rra()
        stacks.rra()
    elif position == 4:
        stacks.rra()
    stacks.pb()
    _sort_four(stacks)
    stacks.pa()


def simple_sort(stacks: Stacks) -> List[str]:
    """Sort stack a when it holds two to five values; return the moves made so far."""
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        _sort_three(stacks)
    elif size == 4:
        _sort_four(stacks)
    elif size == 5:
        _sort_five(stacks)
    return stacks.moves