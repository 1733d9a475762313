import pytest

from pushswap.parsing import (
    ParseError,
    compress,
    has_duplicates,
    parse_arguments,
    parse_int,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("+7", 7),
        ("-15", -15),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_int_valid(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    "text",
    ["2147483648", "-2147483649", "999999999999999999999", "12a", " 5", "--1", "+-3", "4 "],
)
def test_parse_int_rejects(text):
    with pytest.raises(ParseError):
        parse_int(text)


def test_parse_int_sign_without_digits_is_zero():
    assert parse_int("-") == 0
    assert parse_int("") == 0


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


def test_compress_is_rank_permutation():
    values = [30, -5, 12, 1000, 7]
    ranks = compress(values)
    assert sorted(ranks) == list(range(1, len(values) + 1))
    by_value = [rank for _, rank in sorted(zip(values, ranks))]
    assert by_value == sorted(ranks)


def test_compress_keeps_ranks_of_ranks():
    ranks = [3, 1, 2, 5, 4]
    assert compress(ranks) == ranks


def test_compress_equal_values_share_rank():
    ranks = compress([5, 5, 1])
    assert ranks[0] == ranks[1]
    assert has_duplicates(ranks)


def test_has_duplicates():
    assert has_duplicates([1, 2, 1])
    assert not has_duplicates([1, 2, 3])
    assert not has_duplicates([])


def test_single_argument_is_split_on_spaces():
    assert parse_arguments(["3 1 2"]) == [3, 1, 2]
    assert parse_arguments(["  3   1 2  "]) == parse_arguments(["3", "1", "2"])


def test_arguments_are_compressed():
    assert parse_arguments(["-10", "200", "0"]) == compress([-10, 200, 0])


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["1 1"], ["1 2", "3"], [""], ["   "], [], ["1", "x"], ["2147483648"]],
)
def test_parse_arguments_rejects(args):
    with pytest.raises(ParseError):
        parse_arguments(args)