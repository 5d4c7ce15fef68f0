"""Formatted output and simple writers for text streams.

:func:`render` understands the conversions ``%s %d %i %p %x %X %u %c %%``
with no flags or widths. Integer conversions follow C argument widths:
``%d``/``%i`` are signed 32-bit, ``%u``/``%x``/``%X`` unsigned 32-bit and
``%p`` unsigned 64-bit.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO, Union

from sigtalk.convert import int_to_str

_FORMAT_PIECE = re.compile(r"%(.?)|[^%]+", re.DOTALL)
_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised when a format string or its arguments cannot be rendered."""


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value = _require_int(value) & _U32
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(c: Union[str, int]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c) & 0xFF)


def format_hex(num: int, upper: bool = False) -> str:
    """Return ``num`` in hexadecimal, lower case unless ``upper`` is true."""
    if _require_int(num) < 0:
        raise ValueError(f"cannot format negative number {num} as hexadecimal")
    return format(num, "X" if upper else "x")


def format_number(num: int) -> str:
    """Return ``num`` as a signed 32-bit decimal."""
    return int_to_str(_to_int32(num))


def format_unsigned(num: int) -> str:
    """Return ``num`` as an unsigned 32-bit decimal."""
    return int_to_str(_require_int(num) & _U32)


def format_pointer(ptr: Optional[int]) -> str:
    """Return an address as ``0x`` and lower-case hex, or ``(nil)`` for zero."""
    address = 0 if ptr is None else _require_int(ptr) & _U64
    if not address:
        return "(nil)"
    return "0x" + format_hex(address)


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None


def _conversion(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "sdipxXuc":
        raise FormatError(f"unknown conversion %{spec}")
    value = _next_arg(args, spec)
    try:
        if spec == "s":
            return "(null)" if value is None else str(value)
        if spec in "di":
            return format_number(value)
        if spec == "p":
            return format_pointer(value)
        if spec in "xX":
            return format_hex(_require_int(value) & _U32, spec == "X")
        if spec == "u":
            return format_unsigned(value)
        return _char(value)
    except (TypeError, ValueError) as exc:
        raise FormatError(f"bad argument for %{spec}: {exc}") from exc


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    A ``%`` at the end or followed by a space, an unknown conversion, or a
    missing argument raises :class:`FormatError`. Extra arguments are ignored.
    """
    remaining = iter(args)
    pieces = []
    for match in _FORMAT_PIECE.finditer(fmt):
        spec = match.group(1)
        if spec is None:
            pieces.append(match.group(0))
        elif spec in ("", " "):
            raise FormatError(f"incomplete conversion at index {match.start()}")
        else:
            pieces.append(_conversion(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Render ``fmt`` to standard output and return the number of characters written."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _target(stream).write(_char(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream`` (standard output by default)."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` and a newline to ``stream`` (standard output by default)."""
    _target(stream).write(s + "\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` as a signed 32-bit decimal to ``stream``."""
    _target(stream).write(format_number(n))