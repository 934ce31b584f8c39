import pytest

from antman.bitstream import BitWriter
from antman.huffman import Node, build_tree, code_table, decode, encode


def _leaves(node):
    if node.symbol is not None:
        return [node.symbol]
    return _leaves(node.zero) + _leaves(node.one)


@pytest.mark.parametrize(
    "data",
    [
        b"aab",
        b"hello world, hello huffman",
        b"a" * 50,
        bytes(range(256)) * 2,
        b"\x00\xff\x00\x10" * 30,
        b"z",
    ],
)
def test_round_trip(data):
    assert decode(encode(data)) == data


def test_header_holds_size_big_endian():
    data = b"the quick brown fox"
    assert encode(data)[:4] == len(data).to_bytes(4, "big")


def test_empty_round_trip():
    assert decode(encode(b"")) == b""


def test_empty_tree_rejected():
    with pytest.raises(ValueError):
        build_tree(b"")


def test_tree_leaves_are_input_symbols():
    data = b"mississippi river"
    assert sorted(_leaves(build_tree(data))) == sorted(set(data))


def test_single_symbol_has_empty_code():
    assert code_table(build_tree(b"qqqq")) == {ord("q"): (0, 0)}


def test_two_symbol_tree_layout():
    table = code_table(build_tree(b"aab"))
    assert table == {ord("a"): (1, 1), ord("b"): (0, 1)}


def test_codes_are_prefix_free_and_complete():
    data = b"abracadabra alakazam"
    table = code_table(build_tree(data))
    words = [format(code, f"0{length}b") for code, length in table.values()]
    for word in words:
        assert not any(other != word and other.startswith(word) for other in words)
    assert sum(2.0 ** -len(word) for word in words) == pytest.approx(1.0)


def test_code_table_on_hand_built_tree():
    tree = Node(zero=Node(symbol=1), one=Node(zero=Node(symbol=2), one=Node(symbol=3)))
    table = code_table(tree)
    assert table[1][1] == 1
    assert table[2][1] == table[3][1] == 2
    assert table[3][0] == table[2][0] + 1


def test_missing_code_raises():
    writer = BitWriter()
    writer.write(1, 32)
    writer.write(0, 8)
    writer.write(1, 8)
    writer.write(1, 1)
    writer.write(0, 1)
    writer.write(ord("a"), 8)
    writer.write(1, 1)
    writer.write(0, 8)
    with pytest.raises(ValueError):
        decode(writer.getvalue())