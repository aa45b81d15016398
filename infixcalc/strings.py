"""String helpers: number parsing and formatting, splitting, searching,
comparing, slicing, joining, trimming and per-character mapping.

Searches return indices rather than pointers: ``None`` stands for "not
found". Where a function follows NUL-terminated semantics, a Python string
is taken to end at its first ``"\\0"`` character, or at its real end.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from .memory import strlen

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _char(c: str | int) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _terminated(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text[:strlen(text)]


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is read, and digits are
    consumed until the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + int(ch)
    return sign * value


def itoa(value: int) -> str:
    """Format an integer in decimal, with a leading '-' when negative."""
    return str(int(value))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    sep = _char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for NUL gives the index of the terminator.
    """
    ch = _char(c)
    body = _terminated(text)
    if ch == "\0":
        return len(body)
    index = body.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for NUL gives the index of the terminator.
    """
    ch = _char(c)
    body = _terminated(text)
    if ch == "\0":
        return len(body)
    index = body.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index where ``little`` first occurs wholly inside the
    first ``length`` characters of ``big``, or None.

    An empty ``little`` is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    window = _terminated(big)[:length]
    index = window.find(little)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the
    first differing pair of codes, or 0 when they agree."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    a = _terminated(first) + "\0"
    b = _terminated(second) + "\0"
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return ord(x) - ord(y)
        if x == "\0":
            break
    return 0


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start beyond the end of ``text`` gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str] | None,
    func: Callable[[int, str], str | None] | None,
) -> None:
    """Call ``func(index, char)`` for each element of ``chars`` in order.

    A non-None result replaces that element in place. Nothing happens when
    either argument is None.
    """
    if chars is None or func is None:
        return
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement