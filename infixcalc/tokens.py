"""Token classification for space-separated infix expressions."""

from __future__ import annotations

from enum import IntEnum

from .strings import split

_OPERATORS = "+-*/"


class TokenType(IntEnum):
    """Kinds of token, decided by a token's first character."""

    OPERAND = 0
    LEFT_PAREN = 1
    RIGHT_PAREN = 2
    OPERATOR = 3


def _first(token: str) -> str:
    if not token:
        raise ValueError("a token must not be empty")
    return token[0]


def token_type(token: str) -> TokenType:
    """Classify ``token`` by its first character."""
    first = _first(token)
    if first == "(":
        return TokenType.LEFT_PAREN
    if first == ")":
        return TokenType.RIGHT_PAREN
    if first in _OPERATORS:
        return TokenType.OPERATOR
    return TokenType.OPERAND


def precedence(token: str) -> int:
    """Return the binding strength of an operator token.

    '+' and '-' give 1, '*' and '/' give 2, anything else gives 0.
    """
    first = _first(token)
    if first in "+-":
        return 1
    if first in "*/":
        return 2
    return 0


def tokenize(text: str) -> list[str]:
    """Split ``text`` on spaces into tokens, dropping empty ones."""
    return split(text, " ")