"""Integer arithmetic selected by an operator character."""

from __future__ import annotations

import sys


def add(a: int, b: int) -> int:
    """Return a + b."""
    return a + b


def subtract(a: int, b: int) -> int:
    """Return a - b."""
    return a - b


def multiply(a: int, b: int) -> int:
    """Return a * b."""
    return a * b


def divide(a: int, b: int) -> int:
    """Return a / b truncated toward zero; division by zero reports and gives 0."""
    if b == 0:
        print("错误：除数不能为零", file=sys.stderr)
        return 0
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


_OPERATIONS = {"+": add, "-": subtract, "*": multiply, "/": divide}


def calculate(a: int, b: int, op: str) -> int:
    """Apply the operator ``op`` (one of ``+-*/``) to a and b."""
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise ValueError(f"无效的运算符: {op!r}") from None
    return operation(a, b)