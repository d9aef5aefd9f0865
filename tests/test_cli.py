import pytest

from apcalc.cli import evaluate, main

CASES = [
    ("5", "3"),
    ("-5", "3"),
    ("5", "-3"),
    ("-5", "-3"),
    ("3", "-5"),
    ("-3", "5"),
    ("7", "-7"),
    ("123456789123456789", "-987654321"),
]


def trunc_div(x, y):
    q = abs(x) // abs(y)
    return -q if (x < 0) != (y < 0) else q


@pytest.mark.parametrize("x, y", CASES)
def test_addition(x, y):
    assert evaluate(x, "+", y) == str(int(x) + int(y))


@pytest.mark.parametrize("x, y", CASES)
def test_subtraction(x, y):
    assert evaluate(x, "-", y) == str(int(x) - int(y))


@pytest.mark.parametrize("x, y", CASES)
def test_multiplication(x, y):
    assert evaluate(x, "x", y) == str(int(x) * int(y))


@pytest.mark.parametrize("x, y", CASES)
def test_division_truncates_toward_zero(x, y):
    assert evaluate(x, "/", y) == str(trunc_div(int(x), int(y)))


def test_zero_result_has_no_sign():
    assert evaluate("-0", "x", "5") == "0"
    assert evaluate("-2", "/", "9") == "0"


def test_unsupported_operator():
    with pytest.raises(ValueError, match="Unsupported operator"):
        evaluate("1", "%", "2")


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate("1", "/", "0")


def test_main_prints_result(capsys):
    assert main(["12", "x", "3"]) == 0
    assert capsys.readouterr().out == str(12 * 3) + "\n"


def test_main_usage_on_wrong_arg_count(capsys):
    assert main(["1", "+"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_reports_bad_operator(capsys):
    assert main(["1", "?", "2"]) == 1
    assert "Unsupported operator" in capsys.readouterr().out


def test_main_reports_bad_number(capsys):
    assert main(["1x", "+", "2"]) == 1
    assert "invalid digit" in capsys.readouterr().out