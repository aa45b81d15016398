"""Precedence-climbing evaluation of integer infix expressions."""

from __future__ import annotations

from collections.abc import Sequence

from .strings import atoi, itoa
from .tokens import TokenType, precedence, token_type, tokenize


class ExpressionError(ValueError):
    """Raised when an expression is malformed."""


def apply_operator(operator: str, left: int, right: int) -> int:
    """Apply the operator named by the first character of ``operator``.

    Division truncates towards zero; dividing by zero raises
    ``ZeroDivisionError``.
    """
    symbol = operator[:1]
    if symbol == "+":
        return left + right
    if symbol == "-":
        return left - right
    if symbol == "*":
        return left * right
    if symbol == "/":
        if right == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(left) // abs(right)
        return -quotient if (left < 0) != (right < 0) else quotient
    raise ExpressionError(f"unknown operator: {operator}")


class Evaluator:
    """Walks a token sequence, computing values as it goes."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens = list(tokens)
        self.position = 0

    def _current(self) -> str | None:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def atom(self) -> str:
        """Consume one operand or parenthesised expression; return its text."""
        token = self._current()
        if token is None:
            raise ExpressionError("source ended unexpectedly!")
        kind = token_type(token)
        if kind is TokenType.LEFT_PAREN:
            self.position += 1
            value = self.expression(0)
            closing = self._current()
            if closing is None or token_type(closing) is not TokenType.RIGHT_PAREN:
                raise ExpressionError("expected closing parenthesis")
            self.position += 1
            return itoa(value)
        if kind in (TokenType.OPERATOR, TokenType.RIGHT_PAREN):
            raise ExpressionError(
                f'expected an atom, not an operator : "{token}"'
            )
        self.position += 1
        return token

    def expression(self, min_prec: int = 0) -> int:
        """Evaluate operators binding at least as tightly as ``min_prec``."""
        left = atoi(self.atom())
        while True:
            token = self._current()
            if token is None or token_type(token) is not TokenType.OPERATOR:
                break
            prec = precedence(token)
            if prec < min_prec:
                break
            self.position += 1
            right = self.expression(prec + 1)
            left = apply_operator(token, left, right)
        return left


def evaluate(tokens: Sequence[str]) -> int:
    """Evaluate a token sequence; tokens after a complete expression are ignored."""
    return Evaluator(tokens).expression(0)


def evaluate_text(text: str) -> int:
    """Evaluate an expression whose tokens are separated by spaces."""
    return evaluate(tokenize(text))