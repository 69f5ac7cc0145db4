import pytest

from cubraycaster.constants import INT_MAX, INT_MIN
from cubraycaster.textutil import (
    atoi,
    in_set,
    index_of_any,
    is_empty,
    is_info_line,
    is_space,
    pad_line,
    split_set,
    trim,
)


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\r", "\f", "\v"])
def test_is_space_accepts_whitespace(char):
    assert is_space(char) is True


@pytest.mark.parametrize("char", ["a", "1", ",", ""])
def test_is_space_rejects_other(char):
    assert is_space(char) is False


def test_is_empty():
    assert is_empty("") is True
    assert is_empty("  \t\n") is True
    assert is_empty(" a ") is False


def test_in_set():
    assert in_set("1", "x1") is True
    assert in_set("0", "x1") is False
    assert in_set("", "x1") is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17", -17),
        ("+8abc", 8),
        ("abc", 0),
        ("255", 255),
        (str(INT_MAX), INT_MAX),
        (str(INT_MIN), INT_MIN),
    ],
)
def test_atoi_values(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", [str(INT_MAX + 1), str(INT_MIN - 1), "99999999999"])
def test_atoi_overflow_is_minus_one(text):
    assert atoi(text) == -1


def test_split_set_color():
    assert split_set("220,100,0", " ,\t\n") == ["220", "100", "0"]


def test_split_set_collapses_separators():
    assert split_set("  a , ,b\t", " ,\t") == ["a", "b"]
    assert split_set(" , ", " ,") == []


def test_split_set_rejoin_roundtrip():
    words = ["NO", "./tex/north.xpm"]
    assert split_set(" ".join(words), " ") == words


def test_trim_both_ends():
    assert trim("  path.xpm \n", " \t\n") == "path.xpm"


def test_trim_all_in_set_and_empty():
    assert trim("   ", " ") == ""
    assert trim("", " ") == ""


def test_trim_leading_single_kept_char_is_dropped():
    assert trim("a  ", " ") == ""


def test_trim_no_set_chars_is_identity():
    assert trim("1,2,3", " \t\n") == "1,2,3"


def test_index_of_any():
    assert index_of_any("NO ./a", " \t") == 2
    assert index_of_any("a\tb c", " \t") == 1
    assert index_of_any("abc", "xyz") == -1


@pytest.mark.parametrize(
    "line", ["NO ./x", "   F 1,2,3", "\n", "", "C 0,0,0", "WE a", "EA b", "SO c"]
)
def test_is_info_line_true(line):
    assert is_info_line(line) is True


@pytest.mark.parametrize("line", ["111", " 10N1", "Z", "  0  1\n"])
def test_is_info_line_false(line):
    assert is_info_line(line) is False


def test_pad_line_none_is_all_x():
    assert pad_line(None, 5) == "x" * 4


def test_pad_line_shifts_tokens_and_masks_spaces():
    assert pad_line("1 0", 6) == "x1x0x"


@pytest.mark.parametrize("source", ["1111", "10N1", " 1 0", "1\t01", ""])
def test_pad_line_invariants(source):
    length = len(source) + 3
    row = pad_line(source, length)
    assert len(row) == length - 1
    assert row[0] == "x"
    assert row[-1] == "x"
    assert set(row) <= set("xNWES01")
    for pos, char in enumerate(source, start=1):
        expected = char if char in "NWES01" else "x"
        assert row[pos] == expected