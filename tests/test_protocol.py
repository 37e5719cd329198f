import pytest

from minitalk.protocol import (
    MessageDecoder,
    adaptive_delay,
    bits_to_byte,
    encode_message,
)


@pytest.mark.parametrize(
    "length, expected",
    [
        (0, 50),
        (10000, 50),
        (10001, 100),
        (30000, 100),
        (60000, 300),
        (100000, 500),
        (100001, 10000),
    ],
)
def test_adaptive_delay(length, expected):
    assert adaptive_delay(length) == expected


def test_adaptive_delay_never_decreases():
    delays = [adaptive_delay(n) for n in range(0, 120000, 997)]
    assert delays == sorted(delays)


def test_encode_empty_is_terminator_only():
    assert list(encode_message(b"")) == [0] * 8


@pytest.mark.parametrize("data", [b"hello", "héllo wörld", b"\xff\x01"])
def test_encode_length_and_terminator(data):
    payload = data.encode("utf-8") if isinstance(data, str) else data
    bits = list(encode_message(data))
    assert len(bits) == 8 * (len(payload) + 1)
    assert bits[-8:] == [0] * 8
    assert set(bits) <= {0, 1}


def test_encode_bytes_reassemble():
    bits = list(encode_message(b"hi!"))
    rebuilt = bytes(bits_to_byte(bits[i:i + 8]) for i in range(0, len(bits) - 8, 8))
    assert rebuilt == b"hi!"


def test_bits_to_byte_round_trip_all_values():
    for value in range(256):
        assert bits_to_byte(format(value, "08b")) == value


def test_bits_to_byte_high_bit_first():
    assert bits_to_byte([1, 0, 0, 0, 0, 0, 0, 0]) == 0x80
    assert bits_to_byte([0, 0, 0, 0, 0, 0, 0, 1]) == 1


def test_bits_to_byte_wrong_length():
    with pytest.raises(ValueError):
        bits_to_byte([1, 0, 1])


def test_bits_to_byte_invalid_bit():
    with pytest.raises(ValueError):
        bits_to_byte("0101010x")


def _feed_all(decoder, bits):
    return [decoder.feed(bit) for bit in bits]


def test_decoder_round_trip():
    decoder = MessageDecoder()
    results = _feed_all(decoder, encode_message(b"hello"))
    assert results[-1] == b"hello"
    assert all(result is None for result in results[:-1])


def test_decoder_utf8_round_trip():
    text = "olá, mundo ✓"
    decoder = MessageDecoder()
    results = _feed_all(decoder, encode_message(text))
    assert results[-1].decode("utf-8") == text


def test_decoder_empty_message():
    decoder = MessageDecoder()
    results = _feed_all(decoder, encode_message(""))
    assert results[-1] == b""


def test_decoder_consecutive_messages():
    decoder = MessageDecoder()
    first = _feed_all(decoder, encode_message(b"one"))
    second = _feed_all(decoder, encode_message(b"two"))
    assert [r for r in first + second if r is not None] == [b"one", b"two"]


def test_decoder_accepts_bools():
    decoder = MessageDecoder()
    results = [decoder.feed(bool(bit)) for bit in encode_message(b"ok")]
    assert results[-1] == b"ok"


def test_decoder_reset_discards_partial():
    decoder = MessageDecoder()
    bits = list(encode_message(b"garbage"))
    _feed_all(decoder, bits[:13])
    decoder.reset()
    results = _feed_all(decoder, encode_message(b"clean"))
    assert results[-1] == b"clean"