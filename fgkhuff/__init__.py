"""Adaptive Huffman (FGK) compression: bit I/O, the FGK tree, the codec and a command."""

__version__ = "0.1.0"
__all__ = ["bits", "tree", "codec", "cli"]