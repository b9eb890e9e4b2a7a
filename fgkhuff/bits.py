"""Bit-level writer and reader used by the FGK coder."""

from __future__ import annotations

from enum import Enum
from typing import BinaryIO

_CHUNK = 1 << 16


class BitOrder(Enum):
    """Order in which the bits of each byte are consumed."""

    MSB_FIRST = "msb"
    LSB_FIRST = "lsb"


class BitWriter:
    """Packs bits most-significant first into bytes written to a stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._out = bytearray()
        self._byte = 0
        self._count = 0

    def write_bit(self, bit: int) -> None:
        self._byte = ((self._byte << 1) | (bit & 1)) & 0xFF
        self._count += 1
        if self._count == 8:
            self._out.append(self._byte)
            self._byte = 0
            self._count = 0
            if len(self._out) >= _CHUNK:
                self._stream.write(bytes(self._out))
                self._out.clear()

    def write_bits(self, value: int, count: int) -> None:
        """Write the low ``count`` bits of ``value``, highest bit first."""
        for shift in reversed(range(count)):
            self.write_bit(value >> shift)

    def flush(self) -> None:
        """Pad a partial byte with zero bits and hand everything to the stream."""
        while self._count:
            self.write_bit(0)
        if self._out:
            self._stream.write(bytes(self._out))
            self._out.clear()


class BitReader:
    """Reads single bits out of a byte string in the given order."""

    def __init__(self, data: bytes, order: BitOrder) -> None:
        self._data = bytes(data)
        self._order = order
        self._pos = 0
        self._byte = 0
        self._left = 0

    def read_bit(self) -> int:
        """Return the next bit; raise EOFError once the data is used up."""
        if self._left == 0:
            if self._pos >= len(self._data):
                raise EOFError("no more bits to read")
            self._byte = self._data[self._pos]
            self._pos += 1
            self._left = 8
        if self._order is BitOrder.MSB_FIRST:
            bit = (self._byte >> 7) & 1
            self._byte = (self._byte << 1) & 0xFF
        else:
            bit = self._byte & 1
            self._byte >>= 1
        self._left -= 1
        return bit

    def read_bits(self, count: int) -> int:
        """Read ``count`` bits and assemble them, first bit highest."""
        value = 0
        for _ in range(count):
            value = (value << 1) | self.read_bit()
        return value