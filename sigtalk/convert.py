"""Integer parsing and formatting with C integer semantics."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse(text: str, bits: int) -> int:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    i = 0
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1
    # A '+' is skipped unless a '-' follows it; "+-5" therefore parses as 0.
    if text.startswith("+", i) and not text.startswith("-", i + 1):
        i += 1
    sign = 1
    if text.startswith("-", i):
        sign = -1
        i += 1
    digits = "".join(takewhile(_is_digit, text[i:]))
    value = int(digits) if digits else 0
    return _wrap(sign * value, bits)


def parse_int(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading ASCII whitespace is skipped, an optional sign is honoured and
    parsing stops at the first non-digit. Text with no digits yields 0.
    """
    return _parse(text, 32)


def parse_long(text: str) -> int:
    """Like :func:`parse_int`, but wrapping to a signed 64-bit value."""
    return _parse(text, 64)


def int_to_str(n: int) -> str:
    """Return the decimal representation of ``n``, with a leading ``-`` if negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    magnitude = abs(n)
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
        if magnitude == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))