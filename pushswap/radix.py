"""Binary radix sort of stack a using stack b as the bucket."""

from __future__ import annotations

from typing import Dict, List, Sequence

from .stacks import Stacks


def assign_ranks(values: Sequence[int]) -> List[int]:
    """Rank of every value from 1 for the smallest, listed in input order."""
    ranks: Dict[int, int] = {}
    for rank, value in enumerate(sorted(values), start=1):
        ranks.setdefault(value, rank)
    return [ranks[value] for value in values]


def radix_sort(stacks: Stacks) -> List[str]:
    """Sort stack a by the bits of each value's rank; return the moves made so far."""
    size = len(stacks.a)
    rank_of = dict(zip(stacks.a, assign_ranks(list(stacks.a))))
    for bit in range(size.bit_length()):
        for _ in range(size):
            if (rank_of[stacks.a[0]] >> bit) & 1 == 0:
                stacks.pb()
            else:
                stacks.ra()
        while stacks.b:
            stacks.pa()
    return stacks.moves