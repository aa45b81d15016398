# infixcalc

`infixcalc` evaluates integer arithmetic expressions written in infix
notation. It supports `+`, `-`, `*`, `/` and parentheses. Multiplication
and division bind tighter than addition and subtraction, and operators of
equal precedence group from left to right. Division truncates towards zero.

## Writing expressions

Tokens are separated by spaces; runs of spaces are allowed. Every operator
and parenthesis must be its own token, because a token is classified by its
first character alone:

- a token starting with `(` or `)` is a parenthesis,
- a token starting with `+`, `-`, `*` or `/` is an operator,
- anything else is an operand, read as a leading decimal integer
  (`"12abc"` reads as 12, `"abc"` as 0).

So `2+3` is a single operand worth 2, and a negative literal such as `-3`
cannot be written directly; use `0 - 3`. Tokens left over after a complete
expression are ignored.

## Installation

```
pip install .
```

## Command line

Give the whole expression as one argument:

```
infixcalc "2 + 3 * 4"
Result: 14

infixcalc "( 2 + 3 ) * 4"
Result: 20
```

The same command is available as `python -m infixcalc.cli`.

If the number of arguments is not exactly one, the command prints nothing
and exits with status 0. A malformed expression or a division by zero
prints the error message to standard error and exits with status 1.

## Library use

```python
from infixcalc.evaluator import evaluate, evaluate_text, ExpressionError
from infixcalc.tokens import tokenize

evaluate_text("10 - 4 - 3")          # 3
evaluate_text("7 / 0 - 2")           # raises ZeroDivisionError
evaluate(tokenize("( 1 + 2 ) * 3"))  # 9

try:
    evaluate_text("( 1 + 2")
except ExpressionError as exc:
    print(exc)                       # expected closing parenthesis
```

`ExpressionError` is a subclass of `ValueError`. Its messages are
`source ended unexpectedly!`, `expected closing parenthesis` and
`expected an atom, not an operator : "<token>"`.

For finer control, use `Evaluator` directly. `Evaluator.expression(min_prec)`
evaluates from the current `position`, and `Evaluator.atom()` consumes a
single operand or parenthesised group and returns its text.
`apply_operator(operator, left, right)` applies one operator to two
integers.

`infixcalc.tokens` provides `tokenize`, `token_type` (returning a
`TokenType`: `OPERAND`, `LEFT_PAREN`, `RIGHT_PAREN` or `OPERATOR`) and
`precedence` (1 for `+` and `-`, 2 for `*` and `/`, 0 otherwise).

## Helper modules

The package also includes small utilities modelled on the classic C
library routines:

- `infixcalc.chars`: character classification and case mapping
  (`is_digit`, `is_alpha`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`), taking a one-character string or an integer code.
- `infixcalc.memory`: operations on `bytearray` buffers (`bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`, `strlen`, `strlcpy`,
  `strlcat`). Searches return an index or `None`; `memmove` copies between
  two offsets of one buffer. Out-of-range operations raise `ValueError`.
- `infixcalc.strings`: string routines (`atoi`, `itoa`, `split`, `strchr`,
  `strrchr`, `strnstr`, `strncmp`, `substr`, `strjoin`, `strtrim`,
  `strmapi`, `striteri`). Searches return an index or `None`.
- `infixcalc.linkedlist`: a singly linked `LinkedList` of `Node`s with
  `add_front`, `add_back`, `last`, `clear`, `for_each`, `map`, `len()` and
  iteration, plus `delete_node`.
- `infixcalc.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`,
  which write to a text stream (standard output by default).

## What it does not do

The calculator works on integers only. It has no interactive prompt, no
variables or functions, and no unary minus; it evaluates one expression per
call or per command run.

## Running the tests

```
pip install .[test]
pytest
```