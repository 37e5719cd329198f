"""Bit-level wire format for messages carried by two signals.

A message is sent as its bytes followed by a NUL byte. Each byte is sent
most significant bit first; a 1 bit travels as the first signal and a 0
bit as the second.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional, Union

BITS_PER_BYTE = 8

_DELAY_STEPS = (
    (10000, 50),
    (30000, 100),
    (60000, 300),
    (100000, 500),
)
_LONGEST_DELAY = 10000


def adaptive_delay(length: int) -> int:
    """Pause in microseconds between bits for a message of ``length`` bytes."""
    for limit, delay in _DELAY_STEPS:
        if length <= limit:
            return delay
    return _LONGEST_DELAY


def encode_message(data: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of ``data`` and its NUL terminator, high bit first.

    Text is encoded as UTF-8.
    """
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    for byte in payload + b"\0":
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


def bits_to_byte(bits: Iterable[Union[int, bool, str]]) -> int:
    """Assemble eight bits, high bit first, into a byte value.

    Bits may be ints, bools or the characters "0" and "1".
    """
    values = [_bit(bit) for bit in bits]
    if len(values) != BITS_PER_BYTE:
        raise ValueError(f"expected {BITS_PER_BYTE} bits, got {len(values)}")
    result = 0
    for value in values:
        result = (result << 1) | value
    return result


def _bit(bit: Union[int, bool, str]) -> int:
    if isinstance(bit, str):
        if bit not in ("0", "1"):
            raise ValueError(f"invalid bit character {bit!r}")
        return int(bit)
    if bit in (0, 1):
        return int(bit)
    raise ValueError(f"invalid bit {bit!r}")


class MessageDecoder:
    """Rebuilds messages from a stream of bits."""

    def __init__(self) -> None:
        self._bits: list[int] = []
        self._buffer = bytearray()

    def feed(self, bit: Union[int, bool]) -> Optional[bytes]:
        """Take one bit; return the finished message once its NUL arrives."""
        self._bits.append(1 if bit else 0)
        if len(self._bits) < BITS_PER_BYTE:
            return None
        byte = bits_to_byte(self._bits)
        self._bits.clear()
        if byte == 0:
            message = bytes(self._buffer)
            self._buffer.clear()
            return message
        self._buffer.append(byte)
        return None

    def reset(self) -> None:
        """Discard any partly received byte and message."""
        self._bits.clear()
        self._buffer.clear()