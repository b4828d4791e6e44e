"""String helpers: splitting, searching, comparing, slicing and bounded copies."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    """Return c as a one-character string; an int is taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: CharLike) -> list[str]:
    """Split text on sep, dropping the empty pieces that runs of sep produce."""
    return [word for word in text.split(_char(sep)) if word]


def find_char(text: str, c: CharLike) -> Optional[int]:
    """Index of the first c in text, or None.

    Searching for NUL finds the terminator, at index len(text).
    """
    ch = _char(c)
    if ch == "\0":
        index = text.find(ch)
        return len(text) if index < 0 else index
    index = text.find(ch)
    return None if index < 0 else index


def rfind_char(text: str, c: CharLike) -> Optional[int]:
    """Index of the last c in text, or None.

    Searching for NUL finds the terminator, at index len(text).
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle in haystack where the match lies within the first length characters.

    An empty needle matches at index 0.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def compare(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the difference of the first mismatch, or 0.

    A shorter string compares as if followed by NUL.
    """
    _check_non_negative("n", n)
    for position in range(min(n, max(len(s1), len(s2)))):
        a = ord(s1[position]) if position < len(s1) else 0
        b = ord(s2[position]) if position < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def substr(text: str, start: int, length: int) -> str:
    """Up to length characters of text beginning at start; empty if start is past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def trim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset) if charset else text


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copy that fits and the full length of src.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting string and the length that was attempted. When size
    does not exceed len(dst), dst is left as it is and size + len(src) is returned.
    """
    _check_non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character of text."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def iter_indexed(
    text: Union[str, MutableSequence[str]],
    func: Callable[[int, str], Optional[str]],
) -> Union[str, MutableSequence[str]]:
    """Call func(index, char) for every character, storing any non-None result back.

    A mutable sequence of characters is updated in place and returned; for a
    str the updated text is returned as a new str.
    """
    chars: MutableSequence[str] = list(text) if isinstance(text, str) else text
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return "".join(chars) if isinstance(text, str) else chars