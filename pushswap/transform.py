"""String copying, joining and per-character mapping helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def strdup(text: str) -> str:
    """Return a copy of text."""
    if text is None:
        raise TypeError("text must not be None")
    return str(text)


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings; neither may be None."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return f"{s1}{s2}"


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a destination of the given size.

    Returns the copied text, holding at most size - 1 characters, and the
    full length of src, which tells whether truncation happened.
    """
    if src is None:
        raise TypeError("src must not be None")
    _check_size(size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a destination of the given size.

    Returns the resulting text and the length it tried to create. When size
    does not exceed the length of dest, dest is left unchanged and the
    reported length is len(src) + size.
    """
    _check_size(size)
    dest_len = len(dest)
    if size <= dest_len:
        return dest, len(src) + size
    room = size - dest_len - 1
    return dest + src[:room], dest_len + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character."""
    if text is None or func is None:
        raise TypeError("text and func are required")
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: str | MutableSequence[str],
    func: Callable[[int, MutableSequence[str]], None],
) -> str | MutableSequence[str]:
    """Call func(index, chars) for every position so it can edit chars[index].

    A mutable sequence is edited in place and returned; a string is edited
    through a character list and the resulting string is returned.
    """
    if isinstance(text, str):
        chars = list(text)
        for index in range(len(chars)):
            func(index, chars)
        return "".join(chars)
    for index in range(len(text)):
        func(index, text)
    return text