"""A small printf: %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF


class _MissingArgument(TypeError):
    pass


def _to_signed32(n: int) -> int:
    value = n & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def to_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of n taken as a 32-bit unsigned value."""
    value = _require_int(n, "x") & _UINT_MASK
    return format(value, "X" if upper else "x")


def format_pointer(address: Optional[int]) -> str:
    """An address as 0x-prefixed lower-case hex; a null address gives (nil)."""
    if address is None or address == 0:
        return "(nil)"
    value = _require_int(address, "p")
    if value < 0:
        raise ValueError(f"an address must not be negative, got {value}")
    return "0x" + format(value, "x")


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _signed(value: Any) -> str:
    return str(_to_signed32(_require_int(value, "d")))


def _unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _UINT_MASK)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": lambda value: to_hex(value),
    "X": lambda value: to_hex(value, upper=True),
    "p": format_pointer,
}


def _convert(spec: str, arguments: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _CONVERSIONS.get(spec)
    if handler is None:
        return ""
    try:
        value = next(arguments)
    except StopIteration:
        raise _MissingArgument(f"not enough arguments for %{spec}") from None
    return handler(value)


def format_string(fmt: str, *args: Any) -> str:
    """Render fmt with args.

    An unknown conversion and a lone trailing % produce nothing; surplus
    arguments are ignored and missing ones raise TypeError.
    """
    pieces = []
    arguments = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write fmt rendered with args to stream (stdout by default); return the length written."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)