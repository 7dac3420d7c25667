"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_LEADING_SPACE = " \t\n\v\f\r"
_WORD_SEPARATORS = re.compile(r"[ \t\n]+")
_NUMBER = re.compile(r"[+-]?[0-9]+")
_PREFIX = re.compile(r"[+-]?[0-9]*")


class InputError(ValueError):
    """The arguments do not form a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_long(text: str) -> int:
    """Read a leading integer the lenient way: skip whitespace, take an optional
    sign and as many digits as follow. Without digits the value is 0."""
    prefix = _PREFIX.match(text.lstrip(_LEADING_SPACE)).group()
    digits = prefix.lstrip("+-")
    if not digits:
        return 0
    value = int(digits)
    return -value if prefix.startswith("-") else value


def split_words(text: str) -> list[str]:
    """Split on spaces, tabs and newlines, dropping empty pieces."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def is_valid_number(text: str) -> bool:
    """True for an optional sign followed by digits only, within 32-bit range."""
    if not _NUMBER.fullmatch(text):
        return False
    return INT_MIN <= parse_long(text) <= INT_MAX


def has_duplicates(words: Iterable[str]) -> bool:
    """True if two of the words denote the same integer."""
    seen: set[int] = set()
    for word in words:
        value = parse_long(word)
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the numbers to sort.

    A single argument is split into words; several are taken one number each.
    No arguments, or one empty argument, give an empty list. Anything invalid
    or repeated raises InputError.
    """
    if not args or (len(args) == 1 and args[0] == ""):
        return []
    words = split_words(args[0]) if len(args) == 1 else list(args)
    if not words:
        raise InputError()
    if not all(is_valid_number(word) for word in words):
        raise InputError()
    if has_duplicates(words):
        raise InputError()
    return [parse_long(word) for word in words]