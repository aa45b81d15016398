"""Classification and case conversion of single ASCII characters.

Every function accepts either a one-character string or an integer
character code. The case converters return the same kind they were given.
"""

from __future__ import annotations

_LOWER_TO_UPPER = ord("A") - ord("a")


def _code(c: str | int) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """Return True for the decimal digits '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_alpha(c: str | int) -> bool:
    """Return True for the ASCII letters."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def is_alnum(c: str | int) -> bool:
    """Return True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """Return True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """Return True for printable ASCII, from space to tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def to_upper(c: str | int) -> str | int:
    """Map a lower-case ASCII letter to upper case; leave anything else."""
    code = _code(c)
    if _is_lower(code):
        code += _LOWER_TO_UPPER
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Map an upper-case ASCII letter to lower case; leave anything else."""
    code = _code(c)
    if _is_upper(code):
        code -= _LOWER_TO_UPPER
    return chr(code) if isinstance(c, str) else code