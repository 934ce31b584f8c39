"""Compact encoding of plain-text images such as ASCII PPM files.

The header lines are kept verbatim; every following line is reduced to
the single byte value of the number it starts with. The result begins
with one byte holding the negated header line count and ends with a
fixed marker.
"""

from __future__ import annotations

from antman.numparse import getnbr

MARKER = b"@\xff@@\xff"
_HEADER_LIMIT = 10
_DIGITS = frozenset(b"0123456789")


def _c_string(data: bytes) -> bytes:
    return bytes(data).split(b"\0", 1)[0]


def check_line(data: bytes) -> int:
    """Return how many lines form the header of an image.

    Among the first ten complete lines, the last one holding anything
    other than digits ends the header; with no such line the header is
    ten lines long.
    """
    complete = _c_string(data).split(b"\n")[:-1]
    line = _HEADER_LIMIT
    for number, text in enumerate(complete[:_HEADER_LIMIT], start=1):
        if any(byte not in _DIGITS for byte in text):
            line = number
    return line


def _header_end(text: bytes, lines: int) -> int:
    """Index of the newline that closes ``lines`` header lines.

    The first byte is never taken as a line end.
    """
    end = 0
    for _ in range(lines):
        end = text.find(b"\n", end + 1)
        if end < 0:
            raise ValueError("image header is shorter than expected")
    return end


def compress_image(data: bytes) -> bytes:
    """Encode an image's header verbatim and its values as single bytes."""
    text = _c_string(data)
    if not text:
        raise ValueError("cannot compress an empty image")
    line = check_line(text)
    end = _header_end(text, line)
    header = text[: end + 1]
    rows = text[end + 1 :].split(b"\n")[:-1]
    values = bytes(getnbr(row) & 0xFF for row in rows)
    return bytes([(-line) & 0xFF]) + header + values + MARKER


def uncompress_image(data: bytes) -> bytes:
    """Expand an image produced by :func:`compress_image`."""
    data = bytes(data)
    if not data:
        raise ValueError("cannot expand empty image data")
    line = 0x100 - data[0]
    if not 1 <= line <= _HEADER_LIMIT:
        raise ValueError(f"invalid header line count byte {data[0]:#04x}")
    body = data[1:]
    end = _header_end(body, line)
    stop = body.find(MARKER, end + 1)
    if stop < 0:
        raise ValueError("image data has no end marker")
    values = b"".join(b"%d\n" % value for value in body[end + 1 : stop])
    return body[: end + 1] + values