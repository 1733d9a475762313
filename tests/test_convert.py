import pytest

from pushswap.convert import atoi, itoa, split, striteri, strmapi


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12345", 12345),
        ("-12345", -12345),
        ("   +6789", 6789),
        ("   -6789", -6789),
        ("   42", 42),
        ("123abc45", 123),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("\t\n\v\f\r 7", 7),
    ],
)
def test_atoi_plain_values(text, expected):
    assert atoi(text) == expected


def test_atoi_without_digits_is_zero():
    for text in ("", "+-123", "--123", "++123", "abc"):
        assert atoi(text) == 0


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648


def test_atoi_long_overflow():
    assert atoi("999999999999999999999") == -1
    assert atoi("-999999999999999999999") == 0


@pytest.mark.parametrize("n", [123, -123, 0, 2147483647, -2147483648])
def test_itoa_matches_source_examples(n):
    assert itoa(n) == str(n)


@pytest.mark.parametrize("n", [0, 9, -9, 10, -10, 99999, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")
    with pytest.raises(TypeError):
        itoa(True)


def test_split_drops_empty_words():
    assert split("  tripouille  42  ", " ") == ["tripouille", "42"]


def test_split_other_separator():
    assert split("a,b,,c,", ",") == ["a", "b", "c"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_words_contain_no_separator():
    words = split("1 2  3   4", " ")
    assert all(" " not in word and word for word in words)
    assert " ".join(words) == "1 2 3 4"


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strmapi_upper():
    assert strmapi("hello", lambda i, c: c.upper()) == "HELLO"


def test_strmapi_receives_indexes():
    seen = []
    result = strmapi("abc", lambda i, c: seen.append(i) or c)
    assert result == "abc"
    assert seen == [0, 1, 2]


def test_strmapi_empty():
    assert strmapi("", lambda i, c: "x") == ""


def test_striteri_modifies_in_place():
    chars = list("hello")
    assert striteri(chars, lambda i, c: c.upper()) is None
    assert "".join(chars) == "HELLO"


def test_striteri_uses_index():
    chars = list("aaaa")
    striteri(chars, lambda i, c: c if i % 2 else c.upper())
    assert chars == ["A", "a", "A", "a"]