"""Evaluation of postfix and infix integer expressions."""

from __future__ import annotations

from collections.abc import Callable, Iterable


def _truncating_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer tokens in reverse Polish notation.

    Division truncates toward zero. The value on top of the stack at the end
    is returned.

    Raises ValueError for an operator that lacks operands, a token that is not
    an integer, or an empty expression; ZeroDivisionError on division by zero.
    """
    stack: list[int] = []
    for token in tokens:
        operator = _OPERATORS.get(token)
        if operator is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        b = stack.pop()
        a = stack.pop()
        stack.append(operator(a, b))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def calculate(s: str) -> int:
    """Evaluate an expression of integers, ``+``, ``-``, parentheses and spaces.

    Raises ValueError on an unexpected character or an unmatched ``)``.
    """
    number = 0
    result = 0
    sign = 1
    saved: list[tuple[int, int]] = []
    for ch in s:
        if ch == " ":
            continue
        if ch in "+-":
            result += sign * number
            number = 0
            sign = -1 if ch == "-" else 1
        elif ch == "(":
            saved.append((result, sign))
            number = 0
            result = 0
            sign = 1
        elif ch == ")":
            if not saved:
                raise ValueError("unmatched ')' in expression")
            result += sign * number
            number = 0
            outer_result, outer_sign = saved.pop()
            result = outer_result + outer_sign * result
        elif ch.isascii() and ch.isdigit():
            number = number * 10 + int(ch)
        else:
            raise ValueError(f"unexpected character {ch!r} in expression")
    return result + sign * number