"""The two stacks of the puzzle and the operations allowed on them."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Sequence


class Stacks:
    """Stack a holding the values and an empty stack b, top first.

    Every operation that changes a stack is appended to ``moves`` by name;
    an operation that has nothing to act on is neither done nor recorded.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self.moves: List[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def sa(self) -> None:
        """Swap the two top values of a."""
        if len(self.a) < 2:
            return
        self.a[0], self.a[1] = self.a[1], self.a[0]
        self.moves.append("sa")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        self.moves.append("ra")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        if len(self.a) < 2:
            return
        self.a.rotate(1)
        self.moves.append("rra")

    def pa(self) -> None:
        """Move the top of b onto a."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self.moves.append("pb")


def is_sorted(values: Sequence[int]) -> bool:
    """True if values are in ascending order; an empty sequence is not sorted."""
    items = list(values)
    if not items:
        return False
    return all(x <= y for x, y in zip(items, items[1:]))


def min_position(values: Sequence[int]) -> int:
    """Position of the first smallest value."""
    items = list(values)
    if not items:
        raise ValueError("min_position() of an empty sequence")
    return min(range(len(items)), key=items.__getitem__)


def max_position(values: Sequence[int]) -> int:
    """Position of the first largest value."""
    items = list(values)
    if not items:
        raise ValueError("max_position() of an empty sequence")
    return max(range(len(items)), key=items.__getitem__)