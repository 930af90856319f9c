import pytest

from ftkit.strings import (
    NumericError,
    itoa,
    parse_long,
    split,
    strchr,
    striteri,
    strjoin,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  -17", -17), ("+5", 5), ("\t\n 0", 0), ("", 0), ("-", 0)],
)
def test_parse_long_values(text, expected):
    assert parse_long(text) == expected


def test_parse_long_limits():
    assert parse_long("9223372036854775807") == 9223372036854775807
    with pytest.raises(NumericError):
        parse_long("9223372036854775808")
    with pytest.raises(NumericError):
        parse_long("-9223372036854775808")


@pytest.mark.parametrize("text", ["12a", "abc", "4 ", "--3", "1.5"])
def test_parse_long_rejects_non_digits(text):
    with pytest.raises(NumericError):
        parse_long(text)


def test_numeric_error_is_value_error():
    with pytest.raises(ValueError):
        parse_long("x")


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trip(n):
    assert parse_long(itoa(n)) == n


def test_itoa_values():
    assert itoa(-42) == "-42"
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")


def test_split_skips_empty_pieces():
    assert split("  a b  c ", " ") == ["a", "b", "c"]
    assert split("", " ") == []
    assert split(":::", ":") == []


def test_split_join_round_trip():
    words = ["usr", "local", "bin"]
    assert split(":".join(words), ":") == words


def test_split_requires_one_char():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strchr_and_strrchr():
    text = "hello"
    assert text[strchr(text, "l")] == "l"
    assert strchr(text, "l") < strrchr(text, "l")
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None
    assert strchr(text, "\0") == len(text)
    assert strrchr(text, "\0") == len(text)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"
    assert strjoin(None, None) is None


def test_strmapi_uses_index():
    result = strmapi("abc", lambda i, c: c * (i + 1))
    assert result == "a" + "bb" + "ccc"


def test_striteri_modifies_in_place():
    chars = list("abc")
    seen = []

    def visit(index, ch):
        seen.append(index)
        return ch.upper()

    assert striteri(chars, visit) is None
    assert chars == ["A", "B", "C"]
    assert seen == [0, 1, 2]


def test_strncmp():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("x", "y", 0) == 0


def test_strncmp_sign_is_antisymmetric():
    assert strncmp("apple", "apricot", 5) == -strncmp("apricot", "apple", 5)


def test_strnstr():
    hay = "foo bar baz"
    assert strnstr(hay, "", 0) == 0
    index = strnstr(hay, "bar", len(hay))
    assert hay[index : index + 3] == "bar"
    assert strnstr(hay, "bar", index + 2) is None
    assert strnstr(hay, "bar", index + 3) == index
    assert strnstr(hay, "qux", len(hay)) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strtrim():
    assert strtrim("  xx hi xx  ", " x") == "hi"
    assert strtrim("aaa", "a") == ""
    assert strtrim(" keep ", "") == " keep "


def test_substr():
    text = "minishell"
    assert substr(text, 4, 5) == "shell"
    assert substr(text, 4, 100) == "shell"
    assert substr(text, len(text), 3) == ""
    assert substr(text, 0, 0) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)