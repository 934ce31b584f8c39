"""Word, plain-text image and Huffman compression with a matching expander."""

__version__ = "0.1.0"
__all__ = ["bitstream", "huffman", "words", "numparse", "image", "cli"]