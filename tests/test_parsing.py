import pytest

from pushswap.parsing import (
    InputError,
    has_duplicates,
    is_valid_number,
    parse_arguments,
    parse_long,
    split_words,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("-17", -17), ("+8", 8), ("\t\n +17xyz", 17), ("  -42abc", -42)],
)
def test_parse_long_reads_leading_integer(text, expected):
    assert parse_long(text) == expected


def test_parse_long_without_digits_is_zero():
    assert parse_long("abc") == 0
    assert parse_long("--5") == 0


def test_split_words_on_blank_characters():
    assert split_words("  a\tb\nc  ") == ["a", "b", "c"]
    assert split_words("12 -3   +4") == ["12", "-3", "+4"]


def test_split_words_empty_and_blank():
    assert split_words("") == []
    assert split_words(" \t\n ") == []


def test_split_words_keeps_other_whitespace():
    assert split_words("a\vb") == ["a\vb"]


@pytest.mark.parametrize(
    "text", ["0", "-0", "+15", "2147483647", "-2147483648", "007"]
)
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize(
    "text",
    ["", "-", "+", "2147483648", "-2147483649", " 1", "1 ", "1a", "--1", "+-1", "1.5", "\u0661"],
)
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


def test_has_duplicates_compares_values():
    assert has_duplicates(["1", "2", "3"]) is False
    assert has_duplicates(["1", "2", "1"]) is True
    assert has_duplicates(["+5", "5"]) is True
    assert has_duplicates(["-0", "0"]) is True
    assert has_duplicates(["07", "7"]) is True


def test_parse_single_argument_is_split():
    assert parse_arguments(["3 1 2"]) == [3, 1, 2]
    assert parse_arguments(["  -5\t+9\n0 "]) == [-5, 9, 0]


def test_parse_several_arguments():
    assert parse_arguments(["3", "1", "2"]) == [3, 1, 2]
    assert parse_arguments(["-2147483648", "2147483647"]) == [-2147483648, 2147483647]


def test_parse_no_input_gives_empty_list():
    assert parse_arguments([]) == []
    assert parse_arguments([""]) == []


@pytest.mark.parametrize(
    "args",
    [
        ["   "],
        ["1", "1"],
        ["+1", "1"],
        ["4 2 4"],
        ["1", "a"],
        ["1 2", "3"],
        ["1", ""],
        ["2147483648"],
        ["5 -2147483649"],
        ["1 x 2"],
    ],
)
def test_parse_rejects_bad_input(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_input_error_message_and_type():
    with pytest.raises(ValueError, match="^Error$"):
        parse_arguments(["z"])