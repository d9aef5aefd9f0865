"""Arbitrary-precision arithmetic on sequences of decimal digits.

Numbers are non-negative and held as tuples of ints, most significant
digit first. Results never carry redundant leading zeros.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import zip_longest

Digits = tuple[int, ...]

_DECIMAL = frozenset("0123456789")


def parse_digits(text: str) -> Digits:
    """Turn a string of decimal digits into a digit tuple."""
    if not text:
        raise ValueError("empty number")
    bad = set(text) - _DECIMAL
    if bad:
        raise ValueError(f"invalid digit(s) in {text!r}: {''.join(sorted(bad))}")
    return tuple(int(ch) for ch in text)


def format_digits(digits: Iterable[int]) -> str:
    """Render a digit sequence as a string; an empty sequence renders as '0'."""
    return "".join(str(d) for d in digits) or "0"


def strip_leading_zeros(digits: Iterable[int]) -> Digits:
    """Drop leading zeros, keeping a single zero for the value zero."""
    digits = tuple(digits)
    for position, digit in enumerate(digits):
        if digit:
            return digits[position:]
    return (0,)


def compare_numbers(num1: Sequence[int], num2: Sequence[int]) -> int:
    """Return 1, 0 or -1 as num1 is greater than, equal to or less than num2."""
    a = strip_leading_zeros(num1)
    b = strip_leading_zeros(num2)
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    return (a > b) - (a < b)


def add(a: Sequence[int], b: Sequence[int]) -> Digits:
    """Sum of two digit sequences."""
    result: list[int] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return strip_leading_zeros(reversed(result))


def subtract(a: Sequence[int], b: Sequence[int]) -> Digits:
    """Difference a - b; a must not be smaller than b."""
    if compare_numbers(a, b) < 0:
        raise ValueError("subtrahend is larger than minuend")
    result: list[int] = []
    borrow = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        value = x - borrow - y
        borrow = 1 if value < 0 else 0
        result.append(value + 10 * borrow)
    return strip_leading_zeros(reversed(result))


def multiply(a: Sequence[int], b: Sequence[int]) -> Digits:
    """Product of two digit sequences, by long multiplication."""
    # Little-endian accumulator, one slot per possible result digit.
    acc = [0] * (len(a) + len(b) + 1)
    for shift_b, y in enumerate(reversed(b)):
        carry = 0
        for shift_a, x in enumerate(reversed(a)):
            slot = shift_a + shift_b
            carry, acc[slot] = divmod(acc[slot] + x * y + carry, 10)
        slot = len(a) + shift_b
        while carry:
            carry, acc[slot] = divmod(acc[slot] + carry, 10)
            slot += 1
    return strip_leading_zeros(reversed(acc))


def divide(a: Sequence[int], b: Sequence[int]) -> Digits:
    """Integer quotient a // b, by long division with repeated subtraction."""
    divisor = strip_leading_zeros(b)
    if divisor == (0,):
        raise ZeroDivisionError("division by zero")
    quotient: list[int] = []
    remainder: Digits = (0,)
    for digit in a:
        remainder = strip_leading_zeros(remainder + (digit,))
        count = 0
        while compare_numbers(remainder, divisor) >= 0:
            remainder = subtract(remainder, divisor)
            count += 1
        quotient.append(count)
    return strip_leading_zeros(quotient)