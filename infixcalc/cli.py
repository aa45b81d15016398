"""Command-line entry point: evaluate one expression argument."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .evaluator import ExpressionError, evaluate_text


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate the single expression argument and print the result.

    With any other number of arguments nothing is done.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 0
    try:
        result = evaluate_text(args[0])
    except (ExpressionError, ZeroDivisionError) as error:
        print(error, file=sys.stderr)
        return 1
    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())