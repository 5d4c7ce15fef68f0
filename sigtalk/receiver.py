"""Reassembly of messages from a stream of bits sent by client processes."""

from __future__ import annotations

import signal
import sys
from collections.abc import Callable
from typing import Optional, TextIO

from sigtalk.output import put_endl


class Receiver:
    """Collects bits from one sender at a time and writes complete messages.

    ``notify(pid, signum)`` delivers a signal to a sender; failures are
    expected as ``OSError``. Completed messages are written to ``output``.
    """

    def __init__(self, notify: Callable[[int, int], None], output: TextIO) -> None:
        self._notify = notify
        self._output = output
        self.current_bit = 0
        self.current_char = 0
        self.buffer = bytearray()
        self.client_pid = 0

    def reset(self) -> None:
        """Drop any partial message and forget the current sender."""
        self.current_bit = 0
        self.current_char = 0
        self.buffer = bytearray()
        self.client_pid = 0

    def receive(self, bit: int, sender: int) -> Optional[str]:
        """Take one bit from ``sender``.

        Returns the message text when this bit completes a message, else ``None``.
        """
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._manage_client(sender)
        self.current_char |= bit
        self.current_bit += 1
        if self.current_bit == 8:
            byte = self.current_char
            self.current_bit = 0
            self.current_char = 0
            if byte == 0:
                return self._complete()
            self.buffer.append(byte)
        else:
            self.current_char <<= 1
        if not self._send(sender, signal.SIGUSR1, "Failed to acknowledge bit reception"):
            self.reset()
        return None

    def _manage_client(self, sender: int) -> None:
        if self.client_pid and self.client_pid != sender:
            self._send(self.client_pid, signal.SIGUSR2, "Failed to notify previous client")
            self.reset()
        if self.client_pid == 0:
            self.client_pid = sender

    def _complete(self) -> str:
        text = bytes(self.buffer).decode("utf-8", errors="replace")
        self._output.write(text + "\n")
        if self._send(self.client_pid, signal.SIGUSR1, "Failed to send acknowledgment to client"):
            self._output.write("Message acknowledged\n")
        self._output.flush()
        self.reset()
        return text

    def _send(self, pid: int, signum: int, failure: str) -> bool:
        try:
            self._notify(pid, signum)
        except OSError:
            put_endl(failure, sys.stderr)
            return False
        return True