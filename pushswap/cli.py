"""Command line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .parsing import InputError, parse_arguments
from .radix import radix_sort
from .simplesort import simple_sort
from .stacks import Stacks, is_sorted

_SMALL_INPUT = 5


def solve(values: Sequence[int]) -> List[str]:
    """The moves that sort values in stack a; none if already sorted."""
    if is_sorted(values):
        return []
    stacks = Stacks(values)
    if len(stacks.a) <= _SMALL_INPUT:
        return simple_sort(stacks)
    return radix_sort(stacks)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read numbers from the arguments and print one move per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    for move in solve(values):
        sys.stdout.write(move + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())