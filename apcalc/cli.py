"""Command line front end: apcalc <number1> <operator> <number2>."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from apcalc.arith import (
    Digits,
    add,
    compare_numbers,
    divide,
    format_digits,
    multiply,
    parse_digits,
    subtract,
)

_OPERATORS = "+, -, x, or /"


def _split_sign(text: str) -> tuple[int, Digits]:
    if text.startswith("-"):
        return -1, parse_digits(text[1:])
    return 1, parse_digits(text)


def _render(sign: int, digits: Digits) -> str:
    body = format_digits(digits)
    if sign < 0 and body != "0":
        return "-" + body
    return body


def _signed_sum(sign1: int, a: Digits, sign2: int, b: Digits) -> str:
    if sign1 == sign2:
        return _render(sign1, add(a, b))
    order = compare_numbers(a, b)
    if order == 0:
        return "0"
    if order > 0:
        return _render(sign1, subtract(a, b))
    return _render(sign2, subtract(b, a))


def evaluate(num1: str, operator: str, num2: str) -> str:
    """Apply operator ('+', '-', 'x' or '/') to two signed decimal strings."""
    sign1, a = _split_sign(num1)
    sign2, b = _split_sign(num2)
    op = operator[:1]
    if op == "+":
        return _signed_sum(sign1, a, sign2, b)
    if op == "-":
        return _signed_sum(sign1, a, -sign2, b)
    if op == "x":
        return _render(sign1 * sign2, multiply(a, b))
    if op == "/":
        return _render(sign1 * sign2, divide(a, b))
    raise ValueError(f"Unsupported operator. Use {_OPERATORS}.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("Usage: apcalc <number1> <operator> <number2>")
        return 1
    try:
        result = evaluate(*args)
    except (ValueError, ZeroDivisionError) as exc:
        print(exc)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())