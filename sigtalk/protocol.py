"""Bit-level framing used between the client and the server.

Every byte travels as eight signals, most significant bit first.  A set bit
is carried by SIGUSR1 and a clear bit by SIGUSR2; in this module a bit is
simply ``1`` or ``0``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional, Union

BITS_PER_BYTE = 8


def bits_of(value: int) -> Iterator[int]:
    """Yield the eight bits of one byte, most significant first.

    Values from -128 to 255 are accepted, so a signed character gives the
    same bits as its unsigned counterpart.
    """
    if not -128 <= value <= 255:
        raise ValueError(f"value {value} does not fit in one byte")
    octet = value & 0xFF
    for shift in range(BITS_PER_BYTE - 1, -1, -1):
        yield (octet >> shift) & 1


def encode(data: Union[bytes, bytearray, str]) -> list[int]:
    """Return the bit sequence that carries ``data``.

    Text is encoded as UTF-8 before it is split into bits.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return [bit for octet in data for bit in bits_of(octet)]


class BitDecoder:
    """Rebuilds bytes from a stream of bits, most significant bit first."""

    def __init__(self) -> None:
        self._letter = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, bit: int) -> Optional[int]:
        """Take one bit; return the completed byte, or None if not yet whole."""
        self._letter = ((self._letter << 1) | (1 if bit else 0)) & 0xFF
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        octet = self._letter
        self.reset()
        return octet

    def reset(self) -> None:
        """Drop any partly received byte."""
        self._letter = 0
        self._count = 0

    def feed_all(self, bits: Iterable[int]) -> bytes:
        """Feed many bits and return the bytes they complete."""
        completed = (self.feed(bit) for bit in bits)
        return bytes(octet for octet in completed if octet is not None)