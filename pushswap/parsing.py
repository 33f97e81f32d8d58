"""Turning command-line words into the list of integers to be sorted."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")
_WHITESPACE = " \t\n\r\v\f"


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def _is_digit(char: str) -> bool:
    return char in _DIGITS


def _is_sign(char: str) -> bool:
    return char in _SIGNS


def split_words(text: str, separator: str = " ") -> list[str]:
    """Split ``text`` on ``separator``, dropping the empty pieces."""
    return [word for word in text.split(separator) if word]


def remove_zeros(text: str) -> Optional[str]:
    """Drop a leading '+' and leading zeros, keeping a leading '-'.

    A lone zero is kept, so ``"000"`` becomes ``"0"``. An empty string
    gives ``None``.
    """
    if not text:
        return None
    negative = text.startswith("-")
    rest = text[1:] if negative else text
    if rest.startswith("+"):
        rest = rest[1:]
    stripped = rest.lstrip("0")
    if not stripped and rest:
        stripped = "0"
    if stripped and negative:
        stripped = "-" + stripped
    return stripped


def atoi_long(text: str) -> int:
    """Read an integer the way the command line expects it.

    Leading whitespace and one sign are accepted; reading stops at the
    first character that is not a digit.
    """
    cleaned = remove_zeros(text)
    if cleaned is None:
        raise InputError("empty number")
    rest = cleaned.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        rest = rest[1:]
    result = 0
    for char in rest:
        if not _is_digit(char):
            break
        result = result * 10 + int(char)
    return result * sign


def _word_is_invalid(word: str) -> bool:
    for position, char in enumerate(word):
        if not _is_digit(char) and not _is_sign(char):
            return True
        if _is_sign(char):
            following = word[position + 1 : position + 2]
            if not (following and _is_digit(following)):
                return True
            if position != 0 and _is_digit(word[position - 1]):
                return True
    return False


def has_invalid_chars(words: Iterable[str]) -> bool:
    """Tell whether any word holds something other than a signed number.

    A sign must be followed by a digit and must not follow one.
    """
    return any(_word_is_invalid(word) for word in words)


def exceeds_int_width(words: Sequence[str]) -> bool:
    """Tell whether the numbers are too long to be an int.

    Only the first word is measured: it is too long when, after its
    leading zeros and minus signs, more than eleven characters remain.
    """
    if not words:
        return False
    first = words[0]
    leading = len(first) - len(first.lstrip("0-"))
    return len(first) > leading + 11


def out_of_int_range(values: Iterable[int]) -> bool:
    """Tell whether any value falls outside the 32-bit signed range."""
    return any(value > INT_MAX or value < INT_MIN for value in values)


def has_duplicates(values: Sequence[int]) -> bool:
    """Tell whether any value appears more than once."""
    return len(set(values)) != len(values)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate the command-line arguments and return the numbers, top first.

    A single argument is split on spaces; several arguments are taken one
    number each. Raises :class:`InputError` on any invalid input.
    """
    if not args:
        return []
    if len(args) == 1:
        if not args[0]:
            raise InputError("empty argument")
        words = split_words(args[0], " ")
    else:
        words = list(args)
    if has_invalid_chars(words):
        raise InputError("invalid character")
    if exceeds_int_width(words):
        raise InputError("number too long")
    if any(not word for word in words):
        raise InputError("empty argument")
    values = [atoi_long(word) for word in words]
    if has_duplicates(values):
        raise InputError("duplicate number")
    if out_of_int_range(values):
        raise InputError("number out of range")
    return values