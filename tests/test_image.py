import pytest

from antman.image import MARKER, check_line, compress_image, uncompress_image

PPM = b"P3\n3 2\n255\n1\n200\n0\n"


def test_check_line_finds_last_non_numeric_header_line():
    assert check_line(PPM) == 2


def test_check_line_defaults_to_ten_for_numeric_lines():
    assert check_line(b"1\n2\n3\n") == 10


def test_check_line_looks_at_ten_lines_only():
    assert check_line(b"1\n" * 10 + b"x\n") == 10


def test_check_line_ignores_unterminated_line():
    assert check_line(b"12\nabc") == 10


def test_compress_layout():
    compressed = compress_image(PPM)
    assert compressed[0] == 0xFE
    assert compressed.endswith(MARKER)
    assert compressed[1:8] == b"P3\n3 2\n"


def test_round_trip():
    assert uncompress_image(compress_image(PPM)) == PPM


def test_round_trip_single_header_line():
    image = b"P2\n10\n20\n30\n"
    assert uncompress_image(compress_image(image)) == image


def test_unterminated_last_line_is_dropped():
    assert compress_image(PPM + b"7") == compress_image(PPM)


def test_compress_stops_at_nul():
    assert compress_image(PPM + b"\0garbage\n") == compress_image(PPM)


def test_compress_short_header_raises():
    with pytest.raises(ValueError):
        compress_image(b"P3 3")


def test_compress_empty_raises():
    with pytest.raises(ValueError):
        compress_image(b"")


def test_uncompress_without_marker_raises():
    compressed = compress_image(PPM)
    with pytest.raises(ValueError):
        uncompress_image(compressed[: -len(MARKER)])


def test_uncompress_bad_first_byte_raises():
    compressed = compress_image(PPM)
    with pytest.raises(ValueError):
        uncompress_image(b"\x00" + compressed[1:])


def test_uncompress_empty_raises():
    with pytest.raises(ValueError):
        uncompress_image(b"")