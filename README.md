# fgkhuff

Adaptive Huffman compression using the FGK (Faller–Gallager–Knuth) algorithm.
The code tree is built as the data is coded, so no frequency table is stored
with the compressed data. The decoder rebuilds the same tree as it reads.

## Install

```
pip install .
```

To also install the test tools, run `pip install .[test]`.

## Command line

Compress a file:

```
fgkhuff c input.tar compressed.huff
```

Decompress it again:

```
fgkhuff d compressed.huff output.tar
```

The first argument selects the mode. Only its first character is looked at:
`c` compresses and `d` decompresses. The input path and then the output path
follow it.

If the number of arguments is not three, the command prints
`Usage: fgkhuff c|d input_file output_file` to standard error and exits with
status 1. Both files are opened before the mode is checked, so an unknown mode
also prints the usage line, and the output file will already have been created
or emptied. A file that cannot be opened gives an `open: ...` message. Corrupt
compressed data gives an `ERROR: ...` message. Each of these failures exits
with status 1. On success the exit status is 0.

## Library

```python
from fgkhuff.codec import compress, decompress, FGKError

packed = compress(b"abracadabra")
assert decompress(packed) == b"abracadabra"
```

`compress_stream(source, target)` and `decompress_stream(source, target)` do
the same work on binary file objects.

`decompress` and `decompress_stream` raise `FGKError` in these cases:

- the header is missing;
- the bit order cannot be recognised;
- the data ends before the stated number of bytes has been decoded.

When the data is truncated, `decompress_stream` first writes the bytes it has
decoded so far to `target` and then raises the error.

The lower-level parts are in two modules:

- `fgkhuff.bits` has `BitWriter`, `BitReader` and `BitOrder` (`MSB_FIRST`,
  `LSB_FIRST`).
- `fgkhuff.tree` has `FGKTree` and `Node`. `FGKTree` offers `leaf_for`,
  `split_nyt`, `update`, `code_for` and `nodes`, and exposes `root` and `nyt`.

## Format

A compressed stream begins with the length of the original data, stored as a
32-bit little-endian integer. The code bits follow, most significant bit first,
and the last byte is padded with zero bits.

When a symbol appears for the first time, the encoder writes the path to the
NYT ("not yet transmitted") node, followed by the symbol's 8 raw bits. When it
reads, the decoder checks the first code in the payload to find whether bits are
stored MSB first or LSB first.

## Limitations

- Both the codec functions and the command read the whole input into memory
  before they start. They do not stream large files in pieces.
- The length header holds only 32 bits, so inputs of 4 GiB or more cannot be
  restored correctly.
- There is no checksum. Corruption is detected only when the data cannot be
  decoded, as described under Library.