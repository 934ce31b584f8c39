"""Command-line entry points: ``antman`` compresses, ``giantman`` expands."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from antman.huffman import decode, encode
from antman.image import compress_image, uncompress_image
from antman.numparse import getnbr
from antman.words import compress_words, uncompress_words

ERROR = 84
WORDS_LIMIT = 300000
_IMAGE_FIRST_BYTE = 0xF7


def compress(path, data: bytes) -> bytes:
    """Compress ``data`` read from ``path``, choosing the method by name and size."""
    data = bytes(data)
    if not data:
        return b""
    if ".ppm" in os.fsdecode(path):
        return encode(compress_image(data))
    if len(data) < WORDS_LIMIT:
        return encode(compress_words(data))
    return encode(data)


def expand(data: bytes) -> bytes:
    """Expand data produced by :func:`compress`."""
    text = decode(data)
    if text and text[0] >= _IMAGE_FIRST_BYTE:
        return uncompress_image(text)
    return uncompress_words(text)


def _read(path: str) -> bytes | None:
    """Read a file; ``None`` when it cannot be read as a regular file."""
    try:
        return Path(path).read_bytes()
    except IsADirectoryError:
        return b""
    except OSError:
        return None


def _emit(output: bytes) -> None:
    stream = sys.stdout.buffer
    stream.write(output)
    stream.flush()


def antman_main(argv=None) -> int:
    """Run ``antman FILE TYPE``: write the compressed file to standard output."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        return ERROR
    path = args[0]
    try:
        os.stat(path)
    except OSError:
        return ERROR
    data = _read(path)
    if data is None:
        return ERROR
    try:
        output = compress(path, data)
    except ValueError:
        return ERROR
    _emit(output)
    return 0


def giantman_main(argv=None) -> int:
    """Run ``giantman FILE TYPE``: write the expanded file to standard output."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        return ERROR
    path = args[0]
    try:
        os.stat(path)
    except OSError:
        return ERROR
    if not 1 <= getnbr(args[1]) <= 3:
        return ERROR
    data = _read(path)
    if data is None:
        return ERROR
    try:
        output = expand(data)
    except ValueError:
        return ERROR
    _emit(output)
    return 0