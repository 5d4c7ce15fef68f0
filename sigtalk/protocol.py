"""Wire format for sending text one bit at a time over two user signals.

Each byte travels most significant bit first. A set bit is carried by
``SIGUSR1`` and a clear bit by ``SIGUSR2``. A message ends with a zero
byte. The receiver answers every bit with ``SIGUSR1``. It answers the
final zero byte with ``SIGUSR1`` as well, which acknowledges the whole
message. It sends ``SIGUSR2`` to a sender whose transfer it abandons.
"""

from __future__ import annotations

import signal
from collections.abc import Iterator
from typing import Union

BITS_PER_BYTE = 8


class TalkError(Exception):
    """Raised when a message cannot be sent or received."""


def encode_byte(byte: int) -> tuple[int, ...]:
    """Return the eight bits of ``byte``, most significant first."""
    if isinstance(byte, bool) or not isinstance(byte, int):
        raise TypeError(f"expected an int, got {type(byte).__name__}")
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return tuple((byte >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def message_bits(message: Union[str, bytes]) -> Iterator[int]:
    """Yield every bit of ``message`` followed by the bits of a terminating zero byte.

    Text is encoded as UTF-8. A message that already holds a zero byte
    cannot be framed and raises :class:`TalkError`.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if b"\0" in data:
        raise TalkError("Message cannot contain a NUL byte")
    for byte in data + b"\0":
        yield from encode_byte(byte)


def signal_for_bit(bit: int) -> signal.Signals:
    """Return the signal that carries ``bit``."""
    if bit == 1:
        return signal.SIGUSR1
    if bit == 0:
        return signal.SIGUSR2
    raise ValueError(f"a bit must be 0 or 1, got {bit!r}")


def bit_for_signal(signum: int) -> int:
    """Return the bit carried by ``signum``."""
    if signum == signal.SIGUSR1:
        return 1
    if signum == signal.SIGUSR2:
        return 0
    raise ValueError(f"signal {signum} carries no bit")