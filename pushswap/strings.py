"""String helpers: number conversion, splitting, searching and trimming."""

from __future__ import annotations

from itertools import takewhile, zip_longest

_WHITESPACE = "\t\n\v\f\r "
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(_is_ascii_digit, rest))
    return _wrap_int32(sign * int(digits or "0"))


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def split(text: str, delimiter: str) -> list[str]:
    """Split on a single delimiter character, dropping empty pieces."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return [part for part in text.split(delimiter) if part]


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError("expected a single character")


def find_char(text: str, char: str) -> int | None:
    """Index of the first occurrence of char, or None.

    Searching for NUL yields the position just past the text.
    """
    _check_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == "\0" else None


def rfind_char(text: str, char: str) -> int | None:
    """Index of the last occurrence of char, or None.

    Searching for NUL yields the position just past the text.
    """
    _check_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most n bytes; return the difference at the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    left = _as_bytes(s1)[:n]
    right = _as_bytes(s2)[:n]
    for x, y in zip_longest(left, right, fillvalue=0):
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Index of needle found entirely within the first n characters, or None."""
    if n < 0:
        raise ValueError("n must not be negative")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return index if index >= 0 else None


def substr(text: str, start: int, length: int) -> str:
    """Up to length characters from start; empty when start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of charset from both ends of text."""
    return text.strip(charset) if charset else text