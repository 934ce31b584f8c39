"""Lenient integer parsing of a leading number in text."""

from __future__ import annotations

import re

_LEADING_NUMBER = re.compile(r"([-+]*)([0-9]*)")


def getnbr(text) -> int:
    """Parse the integer at the start of ``text``.

    Any run of leading ``+`` and ``-`` signs is accepted; an odd number of
    ``-`` makes the result negative. Parsing stops at the first character
    that is not a digit, and text that starts with no digits yields 0.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    signs, digits = _LEADING_NUMBER.match(text).groups()
    number = int(digits) if digits else 0
    return -number if signs.count("-") % 2 else number