"""Most-significant-bit-first bit writer and reader."""

from __future__ import annotations


class BitWriter:
    """Packs integers of arbitrary bit width into bytes, MSB first.

    Only whole bytes are ever emitted: bits of a byte that has not been
    filled yet stay pending and are not part of :meth:`getvalue`.
    """

    def __init__(self) -> None:
        self._output = bytearray()
        self._pending = 0
        self._pending_bits = 0

    def write(self, value: int, width: int) -> None:
        """Append the low ``width`` bits of ``value``."""
        if width < 0:
            raise ValueError(f"negative bit width: {width}")
        value &= (1 << width) - 1
        self._pending = (self._pending << width) | value
        self._pending_bits += width
        while self._pending_bits >= 8:
            self._pending_bits -= 8
            self._output.append((self._pending >> self._pending_bits) & 0xFF)
        self._pending &= (1 << self._pending_bits) - 1

    def getvalue(self) -> bytes:
        """Return the bytes completed so far."""
        return bytes(self._output)


class BitReader:
    """Reads integers of arbitrary bit width from bytes, MSB first.

    Reading beyond the end of the data yields zero bits.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._position = 0

    def read(self, width: int) -> int:
        """Consume ``width`` bits and return them as an unsigned integer."""
        if width < 0:
            raise ValueError(f"negative bit width: {width}")
        value = 0
        for _ in range(width):
            index, offset = divmod(self._position, 8)
            byte = self._data[index] if index < len(self._data) else 0
            value = (value << 1) | ((byte >> (7 - offset)) & 1)
            self._position += 1
        return value