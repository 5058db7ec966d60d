"""Writing characters, strings and numbers, and a small printf."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_CONVERSIONS = frozenset("csdiupxX")
_MISSING = object()


def _target(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def put_char(c: str | int, file: TextIO | None = None) -> None:
    """Write one character to file (standard output by default)."""
    _target(file).write(_as_char(c))


def put_str(text: str | None, file: TextIO | None = None) -> None:
    """Write text to file; None writes nothing."""
    if text is None:
        return
    _target(file).write(text)


def put_endl(text: str | None, file: TextIO | None = None) -> None:
    """Write text followed by a newline; None writes just the newline."""
    out = _target(file)
    put_str(text, out)
    out.write("\n")


def put_nbr(n: int, file: TextIO | None = None) -> None:
    """Write the decimal representation of n."""
    _target(file).write(str(int(n)))


def _as_char(c: str | int) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _as_int32(value: int) -> int:
    return ((int(value) + 0x80000000) & _UINT32_MASK) - 0x80000000


def _render(spec: str, arg: Any) -> str:
    if spec == "c":
        return _as_char(arg)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec in ("d", "i"):
        return str(_as_int32(arg))
    if spec == "u":
        return str(int(arg) & _UINT32_MASK)
    if spec == "x":
        return format(int(arg) & _UINT32_MASK, "x")
    if spec == "X":
        return format(int(arg) & _UINT32_MASK, "X")
    # spec == "p"
    if not arg:
        return "(nil)"
    return "0x" + format(int(arg) & _POINTER_MASK, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _CONVERSIONS:
        return ""
    arg = next(args, _MISSING)
    if arg is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    return _render(spec, arg)


def format_printf(fmt: str, *args: Any) -> str:
    """Format fmt with the conversions %c %s %d %i %u %p %x %X and %%.

    Unknown conversions produce nothing and consume no argument; a lone
    trailing '%' is dropped.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text and return the number of characters written."""
    text = format_printf(fmt, *args)
    _target(file).write(text)
    return len(text)