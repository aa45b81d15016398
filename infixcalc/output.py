"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default)."""
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline."""
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of ``n``, with a leading '-' when negative."""
    _target(stream).write(str(int(n)))