"""Validation of the numbers given on the command line."""

from __future__ import annotations

from typing import List, Sequence

from .chars import is_digit
from .conversions import atoi
from .strings import split

_MAX_ARGUMENT_LENGTH = 11


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _is_number(text: str) -> bool:
    body = text[1:] if text[:1] in ("-", "+") else text
    return bool(body) and all(is_digit(ch) for ch in body)


def validate(args: Sequence[str]) -> List[int]:
    """Check every argument is a distinct 32-bit integer and return their values.

    Raises InputError for the first argument that is not.
    """
    values = [atoi(arg) for arg in args]
    for position, (arg, value) in enumerate(zip(args, values)):
        if value == 0 and arg[:1] != "0":
            raise InputError(f"not an integer: {arg!r}")
        if len(arg) > _MAX_ARGUMENT_LENGTH:
            raise InputError(f"argument too long: {arg!r}")
        if not _is_number(arg):
            raise InputError(f"not an integer: {arg!r}")
        if value in values[position + 1:]:
            raise InputError(f"duplicate value: {arg!r}")
    return values


def parse_arguments(argv: Sequence[str]) -> List[int]:
    """Turn the program's arguments into values.

    A single argument is split on spaces; several arguments are taken one
    number each. No arguments give an empty list.
    """
    if not argv:
        return []
    if len(argv) == 1:
        text = argv[0]
        if not text or text == " ":
            raise InputError("empty argument")
        return validate(split(text, " "))
    return validate(list(argv))