"""Integer infix expression evaluator, with small C-style character, buffer, string, list and output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "linkedlist", "output", "tokens", "evaluator", "cli"]