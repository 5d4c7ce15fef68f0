import signal

import pytest

from sigtalk.protocol import (
    TalkError,
    bit_for_signal,
    encode_byte,
    message_bits,
    signal_for_bit,
)


def _decode(bits):
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def test_encode_byte_is_msb_first():
    assert encode_byte(ord("A")) == (0, 1, 0, 0, 0, 0, 0, 1)


def test_encode_zero_byte():
    assert encode_byte(0) == (0,) * 8


@pytest.mark.parametrize("value", range(256))
def test_encode_byte_round_trip(value):
    bits = encode_byte(value)
    assert len(bits) == 8
    assert _decode(bits) == value


@pytest.mark.parametrize("value", [-1, 256])
def test_encode_byte_out_of_range(value):
    with pytest.raises(ValueError):
        encode_byte(value)


def test_encode_byte_rejects_non_int():
    with pytest.raises(TypeError):
        encode_byte("a")


def test_message_bits_appends_terminator():
    bits = list(message_bits("hi"))
    assert len(bits) == 8 * 3
    assert bits[-8:] == [0] * 8
    decoded = bytes(_decode(bits[i : i + 8]) for i in range(0, len(bits) - 8, 8))
    assert decoded == b"hi"


def test_message_bits_encodes_text_as_utf8():
    message = "caf\u00e9"
    bits = list(message_bits(message))
    decoded = bytes(_decode(bits[i : i + 8]) for i in range(0, len(bits) - 8, 8))
    assert decoded.decode("utf-8") == message


def test_message_bits_accepts_bytes():
    assert list(message_bits(b"x")) == list(message_bits("x"))


def test_message_bits_rejects_nul():
    with pytest.raises(TalkError):
        list(message_bits("a\0b"))


def test_signal_mapping():
    assert signal_for_bit(1) == signal.SIGUSR1
    assert signal_for_bit(0) == signal.SIGUSR2


@pytest.mark.parametrize("bit", [0, 1])
def test_signal_round_trip(bit):
    assert bit_for_signal(signal_for_bit(bit)) == bit


def test_signal_for_bad_bit():
    with pytest.raises(ValueError):
        signal_for_bit(2)


def test_bit_for_unrelated_signal():
    with pytest.raises(ValueError):
        bit_for_signal(signal.SIGTERM)