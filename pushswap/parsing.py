"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

import re
from collections.abc import Iterable

from pushswap.strings import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = "\t\n\v\f\r "
_WORD = re.compile(r"[^\t\n\v\f\r ]+")
_NUMBER = re.compile(r"([+-]?)([0-9]+)")


class InputError(ValueError):
    """The arguments do not form a list of distinct 32-bit integers."""


def count_numbers(args: Iterable[str]) -> int:
    """Count whitespace-separated words across all arguments."""
    return sum(len(_WORD.findall(arg)) for arg in args)


def parse_number(text: str) -> int:
    """Parse one word as a signed 32-bit integer.

    Leading whitespace and one sign are allowed; anything after the digits,
    a missing digit or a value out of range raises InputError.
    """
    match = _NUMBER.fullmatch(text.lstrip(_WHITESPACE))
    if match is None:
        raise InputError(f"not a number: {text!r}")
    sign, digits = match.groups()
    value = -int(digits) if sign == "-" else int(digits)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"number out of range: {text!r}")
    return value


def parse_input(args: Iterable[str]) -> list[int]:
    """Parse every space-separated number of every argument, in order.

    An argument without numbers, an invalid number or a repeated value
    raises InputError.
    """
    numbers: list[int] = []
    seen: set[int] = set()
    for arg in args:
        words = split(arg, " ")
        if not words:
            raise InputError(f"argument holds no number: {arg!r}")
        for word in words:
            value = parse_number(word)
            if value in seen:
                raise InputError(f"duplicate number: {value}")
            seen.add(value)
            numbers.append(value)
    return numbers