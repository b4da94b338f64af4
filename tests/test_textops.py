import math

import pytest

from emberkit.textops import (
    bool_to_string,
    common_prefix,
    common_suffix,
    concat,
    float_to_string,
    left_pad,
    list_to_string,
    right_pad,
    split_by_character,
    split_by_character_set,
    split_by_string,
    to_bool,
    to_float,
    to_int,
    trim,
    trim_left,
    trim_right,
)


def test_split_by_character_keeps_empty_pieces():
    assert split_by_character("he", "h") == ["", "e"]


def test_split_by_character_empty_text():
    assert split_by_character("", "/") == []


@pytest.mark.parametrize("text", ["a/b/c", "/root//x/", "plain", "/"])
def test_split_by_character_round_trip(text):
    assert concat(split_by_character(text, "/"), "/") == text


def test_split_by_character_rejects_long_delimiter():
    with pytest.raises(ValueError):
        split_by_character("abc", "ab")


@pytest.mark.parametrize("text", ["one::two::three", "::lead", "trail::", ""])
def test_split_by_string_round_trip(text):
    parts = split_by_string(text, "::")
    assert concat(parts, "::") == text
    assert all("::" not in part for part in parts)


def test_split_by_string_empty_delimiter():
    with pytest.raises(ValueError):
        split_by_string("abc", "")


def test_split_by_character_set_drops_empty():
    assert split_by_character_set("he", "h") == ["e"]


def test_split_by_character_set_all_delimiters():
    assert split_by_character_set(",,;;", ",;") == []


def test_split_by_character_set_pieces_free_of_delimiters():
    pieces = split_by_character_set(" a, b;;c ,d", " ,;")
    assert concat(pieces) == "abcd"
    assert all(piece and not set(piece) & set(" ,;") for piece in pieces)


def test_common_prefix():
    prefix = "abc"
    assert common_prefix(prefix + "def", prefix + "xyz") == prefix
    assert common_prefix(prefix + "DEF", prefix + "def") == prefix


def test_common_prefix_ignore_case():
    first = "HeLLo world"
    second = "hello there"
    result = common_prefix(first, second, icase=True)
    assert first.startswith(result)
    assert len(result) == len("hello ")


def test_common_suffix():
    tail = ".txt"
    assert common_suffix("notes" + tail, "readme" + tail) == tail
    assert common_suffix("", tail) == ""


def test_padding():
    padded = left_pad("7", 3, "0")
    assert len(padded) == 3 and padded.endswith("7") and set(padded[:-1]) == {"0"}
    padded = right_pad("ab", 5, ".")
    assert padded.startswith("ab") and len(padded) == 5
    assert left_pad("long", 2, "x") == "long"
    assert right_pad("long", -1, "x") == "long"


def test_trim_default_whitespace():
    body = "text"
    assert trim(" \t\n" + body + "\r\v\f ") == body
    assert trim_left("  " + body + "  ") == body + "  "
    assert trim_right("  " + body + "  ") == "  " + body


def test_trim_with_charset():
    body = "core"
    assert trim("/.-" + body + "-./", "/.-") == body
    assert trim_left("//" + body, "/") == body
    assert trim_right(body + "//", "/") == body
    assert trim(body, "") == body


def test_to_int():
    value = 42
    assert to_int(f"  {value}abc") == value
    assert to_int(f"-{value}") == -value
    assert to_int("abc") == 0
    assert to_int("") == 0


def test_to_float():
    assert to_float("  2.5e3xyz") == 2.5e3
    assert to_float("-.25") == -0.25
    assert to_float("1e") == 1.0
    assert to_float("junk") == 0.0
    assert to_float("0x1.8p1") == float.fromhex("0x1.8p1")
    assert math.isinf(to_float("inf"))
    assert math.isnan(to_float("nan"))


@pytest.mark.parametrize("text", ["true", "TRUE", "Yes", "1", "-3", "12abc"])
def test_to_bool_true(text):
    assert to_bool(text) is True


@pytest.mark.parametrize("text", ["false", "no", "0", "", " true", "yeah"])
def test_to_bool_false(text):
    assert to_bool(text) is False


def test_bool_to_string():
    assert bool_to_string(True) == "TRUE"
    assert bool_to_string(False) == "FALSE"
    assert bool_to_string(True, uppercase=False) == "true"
    assert bool_to_string(False, uppercase=False) == "false"


def test_bool_round_trip():
    for value in (True, False):
        for uppercase in (True, False):
            assert to_bool(bool_to_string(value, uppercase)) is value


@pytest.mark.parametrize("value", [3.14159, -2.71828, 0.0, 1234.5])
@pytest.mark.parametrize("ndigit", [0, 2, 5])
def test_float_to_string_precision(value, ndigit):
    rendered = float_to_string(value, ndigit)
    fraction = rendered.partition(".")[2]
    assert len(fraction) == ndigit
    assert abs(float(rendered) - value) <= 0.5 * 10 ** -ndigit + 1e-12


def test_float_to_string_general_round_trip():
    assert to_float(float_to_string(0.5)) == 0.5


def test_float_to_string_negative_digits():
    with pytest.raises(ValueError):
        float_to_string(1.0, -1)


def test_list_to_string():
    items = ["alpha", "beta"]
    rendered = list_to_string(items)
    assert rendered.startswith("[") and rendered.endswith("]")
    assert split_by_string(rendered[1:-1], ", ") == items
    assert list_to_string([]) == "[]"