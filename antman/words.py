"""Dictionary compression of repeated words in text.

Words are maximal runs of ASCII letters. The first occurrence of every
word of four or more letters is written out; later occurrences become a
code ``0xFF <index> 0xFF`` where the one-based index takes one byte below
100, or two bytes (hundreds, remainder) from 100 on, a zero remainder
being written as 101. Input is handled up to its first NUL byte.
"""

from __future__ import annotations

import re

_MARK = 0xFF
_ZERO_REMAINDER = 101
_WORD = re.compile(rb"[A-Za-z]+")
_SPLIT = re.compile(rb"([A-Za-z]+)")


def _c_string(data: bytes) -> bytes:
    return bytes(data).split(b"\0", 1)[0]


def split_words(data: bytes) -> list[bytes]:
    """Return the words of ``data`` in order."""
    return _WORD.findall(_c_string(data))


def unique_words(words) -> list[bytes]:
    """Keep the first occurrence of every word of four or more letters."""
    return list(dict.fromkeys(word for word in words if len(word) >= 4))


def _reference(number: int) -> bytes:
    if number < 100:
        body = [number]
    else:
        high, low = divmod(number, 100)
        body = [high & 0xFF, low or _ZERO_REMAINDER]
    return bytes([_MARK, *body, _MARK])


def compress_words(data: bytes) -> bytes:
    """Replace repeated long words in ``data`` by dictionary references."""
    text = _c_string(data)
    numbers = {
        word: index
        for index, word in enumerate(unique_words(split_words(text)), start=1)
    }
    written: set[bytes] = set()
    output = bytearray()
    for piece in _SPLIT.split(text):
        number = numbers.get(piece)
        if number is None:
            output += piece
        elif piece in written:
            output += _reference(number)
        else:
            output += piece
            written.add(piece)
    return bytes(output)


def read_dictionary(data: bytes) -> list[bytes]:
    """Recover the word dictionary from compressed text."""
    return [word for word in split_words(data) if len(word) > 3]


def uncompress_words(data: bytes) -> bytes:
    """Expand text produced by :func:`compress_words`."""
    dictionary = read_dictionary(data)
    output = bytearray()
    stream = iter(bytes(data))
    for byte in stream:
        if byte == 0:
            break
        if byte != _MARK:
            output.append(byte)
            continue
        number = 0
        for digit in stream:
            if digit == _MARK:
                break
            if digit == _ZERO_REMAINDER:
                digit = 0
            elif digit >= 0x80:
                digit -= 0x100
            number = number * 100 + digit
        else:
            raise ValueError("unterminated word reference")
        if not 1 <= number <= len(dictionary):
            raise ValueError(f"word reference {number} out of range")
        output += dictionary[number - 1]
    return bytes(output)