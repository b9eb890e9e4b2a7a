"""FGK adaptive Huffman compression and decompression."""

from __future__ import annotations

import io
import struct
from typing import BinaryIO

from .bits import BitOrder, BitReader, BitWriter
from .tree import FGKTree

_HEADER = struct.Struct("<I")
_PROBE_DEPTH = 20


class FGKError(Exception):
    """Raised when compressed data cannot be decoded."""


def compress_stream(source: BinaryIO, target: BinaryIO) -> None:
    """Compress everything read from ``source`` into ``target``."""
    data = source.read()
    target.write(_HEADER.pack(len(data) & 0xFFFFFFFF))
    tree = FGKTree()
    writer = BitWriter(target)
    for symbol in data:
        leaf = tree.leaf_for(symbol)
        if leaf is None:
            for bit in tree.code_for(tree.nyt):
                writer.write_bit(bit)
            writer.write_bits(symbol, 8)
            leaf = tree.split_nyt(symbol)
        else:
            for bit in tree.code_for(leaf):
                writer.write_bit(bit)
        tree.update(leaf)
    writer.flush()


def _reaches_nyt(payload: bytes, order: BitOrder) -> bool:
    tree = FGKTree()
    reader = BitReader(payload, order)
    node = tree.root
    depth = 0
    while node.left is not None and depth < _PROBE_DEPTH:
        try:
            bit = reader.read_bit()
        except EOFError:
            return False
        node = node.right if bit else node.left
        depth += 1
    return node is tree.nyt


def _detect_order(payload: bytes) -> BitOrder:
    for order in (BitOrder.MSB_FIRST, BitOrder.LSB_FIRST):
        if _reaches_nyt(payload, order):
            return order
    raise FGKError("unrecognised bit order")


def decompress_stream(source: BinaryIO, target: BinaryIO) -> None:
    """Decompress everything read from ``source`` into ``target``."""
    data = source.read()
    if len(data) < _HEADER.size:
        raise FGKError("failed to read header")
    (remaining,) = _HEADER.unpack_from(data)
    payload = data[_HEADER.size:]
    reader = BitReader(payload, _detect_order(payload))
    tree = FGKTree()
    out = bytearray()
    try:
        for _ in range(remaining):
            node = tree.root
            while node.left is not None:
                node = node.right if reader.read_bit() else node.left
            if node is tree.nyt:
                symbol = reader.read_bits(8)
                node = tree.split_nyt(symbol)
            else:
                symbol = node.symbol
            out.append(symbol)
            tree.update(node)
    except EOFError as exc:
        raise FGKError("invalid bit read: compressed data is truncated") from exc
    finally:
        target.write(bytes(out))


def compress(data: bytes) -> bytes:
    """Return the compressed form of ``data``."""
    target = io.BytesIO()
    compress_stream(io.BytesIO(data), target)
    return target.getvalue()


def decompress(data: bytes) -> bytes:
    """Return the original bytes of compressed ``data``."""
    target = io.BytesIO()
    decompress_stream(io.BytesIO(data), target)
    return target.getvalue()