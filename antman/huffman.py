"""Huffman coding of byte strings with an embedded code table.

Stream layout, MSB first: 32-bit length of the original data, 8-bit
symbol count minus one, 8-bit width of the code-length fields, then for
every symbol in byte order its code length, its code and the byte
itself, followed by the coded data and eight zero padding bits (only
whole bytes are kept).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Optional

from antman.bitstream import BitReader, BitWriter


@dataclass
class Node:
    """A tree node; leaves carry a byte value, inner nodes carry ``None``."""

    symbol: Optional[int] = None
    zero: Optional[Node] = None
    one: Optional[Node] = None


def _merge_smallest(entries: list[list]) -> None:
    first, second = 1, 0
    for index, (weight, _) in enumerate(entries[2:], start=2):
        if weight == 0:
            continue
        if entries[first][0] > weight or entries[first][0] == 0:
            first = index
        elif entries[second][0] > weight or entries[second][0] == 0:
            second = index
    entries[second][0] += entries[first][0]
    entries[second][1] = Node(zero=entries[first][1], one=entries[second][1])
    entries[first][0] = 0


def build_tree(data: bytes) -> Node:
    """Build the coding tree for ``data``."""
    counts = Counter(data)
    if not counts:
        raise ValueError("cannot build a tree for empty data")
    entries = [[counts[byte], Node(symbol=byte)] for byte in sorted(counts)]
    for _ in range(len(entries) - 1):
        _merge_smallest(entries)
    return entries[0][1]


def code_table(tree: Node) -> dict[int, tuple[int, int]]:
    """Map each byte in ``tree`` to its ``(code, length)`` pair."""
    table: dict[int, tuple[int, int]] = {}
    stack = [(tree, 0, 0)]
    while stack:
        node, code, length = stack.pop()
        if node.symbol is not None:
            table[node.symbol] = (code, length)
            continue
        stack.append((node.one, (code << 1) | 1, length + 1))
        stack.append((node.zero, code << 1, length + 1))
    return table


def encode(data: bytes) -> bytes:
    """Compress ``data`` into a self-describing Huffman stream."""
    writer = BitWriter()
    writer.write(len(data), 32)
    if data:
        table = code_table(build_tree(data))
        prefix_len = max(length for _, length in table.values()).bit_length()
        writer.write(len(table) - 1, 8)
        writer.write(prefix_len, 8)
        for byte in sorted(table):
            code, length = table[byte]
            writer.write(length, prefix_len)
            writer.write(code, length)
            writer.write(byte, 8)
        for byte in data:
            code, length = table[byte]
            writer.write(code, length)
    writer.write(0, 8)
    return writer.getvalue()


def _insert(root: Node, code: int, length: int, symbol: int) -> None:
    node = root
    for shift in range(length - 1, 0, -1):
        if (code >> shift) & 1:
            if node.one is None:
                node.one = Node()
            node = node.one
        else:
            if node.zero is None:
                node.zero = Node()
            node = node.zero
    leaf = Node(symbol=symbol)
    if code & 1:
        node.one = leaf
    else:
        node.zero = leaf


def decode(data: bytes) -> bytes:
    """Expand a stream produced by :func:`encode`."""
    reader = BitReader(data)
    size = reader.read(32)
    if size == 0:
        return b""
    count = reader.read(8) + 1
    prefix_len = reader.read(8)
    root = Node()
    for _ in range(count):
        length = reader.read(prefix_len)
        code = reader.read(length)
        symbol = reader.read(8)
        _insert(root, code, length, symbol)
    output = bytearray()
    for _ in range(size):
        node = root
        while node.symbol is None:
            node = node.one if reader.read(1) else node.zero
            if node is None:
                raise ValueError("stream holds a code missing from its table")
        output.append(node.symbol)
    return bytes(output)