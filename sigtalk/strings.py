"""String helpers with the bounded-copy and search rules of classic C routines.

Results are plain Python values. A search returns an index or ``None``.
A bounded copy or concatenation returns the new string together with the
length it tried to create.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any, Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Normalise ``c`` to a one-character string.

    An integer is reduced to a byte first, as a C ``char`` conversion does.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def rfind_char(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they match, otherwise the difference between the
    codes of the first differing characters; a string that ends first
    compares as if followed by NUL.
    """
    _check_size("n", n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def find_in_prefix(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0. Returns ``None`` if absent.
    """
    _check_size("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def copy_bounded(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and ``len(src)``; truncation happened when the
    second value is at least ``size``.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def concat_bounded(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. If ``dst`` already fills the buffer it is returned unchanged
    and the length reported is ``size + len(src)``.
    """
    _check_size("size", size)
    dst_len = len(dst)
    src_len = len(src)
    if dst_len >= size:
        return dst, size + src_len
    room = size - dst_len
    if src_len < room:
        return dst + src, dst_len + src_len
    return dst + src[: room - 1], dst_len + src_len


def substring(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end gives an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    if start > len(s):
        return ""
    return s[start : start + length]


def join(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def trim(s: str, charset: str) -> str:
    """Remove every leading and trailing character that occurs in ``charset``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, delimiter: CharLike) -> list[str]:
    """Split ``s`` on ``delimiter``, dropping empty pieces."""
    sep = _char(delimiter)
    return [word for word in s.split(sep) if word]


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def iter_indexed(buf: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` for every item of ``buf``, in order.

    When ``func`` returns something other than ``None`` the item is replaced
    by it, so the buffer can be edited in place.
    """
    for index, item in enumerate(list(buf)):
        result = func(index, item)
        if result is not None:
            buf[index] = result