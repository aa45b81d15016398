import pytest

from infixcalc.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strjoin,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    striteri,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("\t\n+17", 17),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("- 5", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("value", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_itoa_round_trip(value):
    text = itoa(value)
    assert atoi(text) == value
    assert text.startswith("-") == (value < 0)


def test_itoa_zero():
    assert itoa(0) == "0"


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_expression_tokens():
    assert split("( 1 + 2 ) * 3", " ") == ["(", "1", "+", "2", ")", "*", "3"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strchr_finds_first():
    text = "banana"
    index = strchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[:index]
    assert strchr(text, "z") is None


def test_strchr_nul_gives_end():
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", 0) == len("abc")


def test_strrchr_finds_last():
    text = "banana"
    index = strrchr(text, ord("n"))
    assert text[index] == "n"
    assert "n" not in text[index + 1:]
    assert strrchr(text, "q") is None
    assert strrchr(text, "\0") == len(text)


def test_strnstr():
    big = "Foo Bar Baz"
    assert big[strnstr(big, "Bar", len(big)):].startswith("Bar")
    assert strnstr(big, "Bar", 4) is None
    assert strnstr(big, "", 0) == 0
    assert strnstr("", "x", 5) is None
    assert strnstr(big, "Baz", 100) == big.index("Baz")


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strncmp():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("abc", "ab", 3) > 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_is_antisymmetric():
    assert strncmp("hello", "help", 5) == -strncmp("help", "hello", 5)


def test_substr():
    assert substr("hello world", 6, 5) == "world"
    assert substr("hello", 1, 100) == "ello"
    assert substr("hello", 10, 2) == ""
    assert substr("hello", 5, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


def test_strtrim():
    assert strtrim("  xx hi xx  ", " x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim(" a ", "") == " a "


def test_strmapi_passes_indices():
    seen = []

    def upper_even(index, ch):
        seen.append(index)
        return ch.upper() if index % 2 == 0 else ch

    assert strmapi("abcd", upper_even) == "AbCd"
    assert seen == [0, 1, 2, 3]


def test_striteri_modifies_in_place():
    chars = list("abc")
    striteri(chars, lambda index, ch: ch.upper() if index == 1 else None)
    assert chars == ["a", "B", "c"]


def test_striteri_ignores_missing_function():
    chars = list("abc")
    striteri(chars, None)
    assert chars == ["a", "b", "c"]