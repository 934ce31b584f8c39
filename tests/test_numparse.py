import pytest

from antman.numparse import getnbr


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("--5", 5),
        ("+-7", -7),
        ("+8", 8),
        ("12abc", 12),
        ("0", 0),
    ],
)
def test_parses_leading_number(text, expected):
    assert getnbr(text) == expected


@pytest.mark.parametrize("text", ["", "abc", " 5", "-", "+-x9"])
def test_no_leading_digits_gives_zero(text):
    assert getnbr(text) == 0


def test_accepts_bytes():
    assert getnbr(b"-3\n") == -3


def test_stops_at_first_non_digit():
    assert getnbr("255 0 0") == 255