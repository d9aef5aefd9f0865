# apcalc

A small calculator for integers of any length. It works one decimal digit at a
time, the way you would on paper.

## Installation

```
pip install .
```

## Command line

```
apcalc <number1> <operator> <number2>
```

The operator is one of `+`, `-`, `x` (multiply) or `/` (whole-number
division). Only the first character of the operator argument is looked at.
Either number may have a single leading `-`. Apart from that sign, a number
may contain only the digits `0` to `9`.

```
$ apcalc 99999999999999999999 + 1
100000000000000000000
$ apcalc 123456789 x 987654321
121932631112635269
$ apcalc -100 / 7
-14
```

Division truncates toward zero, and its result takes the sign of the product of
the two signs. A result of zero is always printed as `0`, with no minus sign.

The command exits with status 0 when it succeeds. It exits with status 1 in
these cases:

- It is not given exactly three arguments. It prints a usage line.
- The operator is not one it knows.
- A number is empty or has a character that is not a digit.
- The divisor is zero.

In every error case other than the usage line, the command prints a short
message.

## Library

The functions in `apcalc.arith` work on unsigned numbers. They take any
sequence of decimal digits, most significant digit first. They return tuples
of ints without redundant leading zeros.

```python
from apcalc.arith import parse_digits, format_digits, add, multiply

a = parse_digits("12345678901234567890")
b = parse_digits("98765432109876543210")
print(format_digits(add(a, b)))
print(format_digits(multiply(a, b)))
```

The module provides:

- `parse_digits(text)` turns a string of digits into a tuple. It raises
  `ValueError` if the string is empty or holds anything but `0`–`9`.
- `format_digits(digits)` renders digits as a string. An empty sequence becomes
  `"0"`.
- `strip_leading_zeros(digits)` removes leading zeros and keeps `(0,)` for
  zero.
- `compare_numbers(num1, num2)` returns `1`, `0` or `-1`. Leading zeros are
  ignored.
- `add(a, b)` returns the sum.
- `subtract(a, b)` returns `a - b`. It raises `ValueError` if `b` is larger
  than `a`.
- `multiply(a, b)` returns the product, by long multiplication.
- `divide(a, b)` returns the integer quotient, by long division. It raises
  `ZeroDivisionError` when `b` is zero.

`apcalc.cli.evaluate(num1, operator, num2)` takes signed number strings and
returns the result as a string. It raises `ValueError` or `ZeroDivisionError`
for the error cases listed above. `apcalc.cli.main(argv=None)` is the entry
point of the command. It returns the exit status.

## Limits

Only whole numbers are handled. There are no decimals. Division gives the
quotient only; there is no remainder or modulo operation.

## Tests

```
pip install .[test]
pytest
```