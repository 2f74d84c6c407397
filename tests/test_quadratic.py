import io
import math

import pytest

from consoletoys.quadratic import format_number, main, roots


@pytest.mark.parametrize("a,b,c", [(1, -3, 2), (2, 5, -3), (1, 0, -4), (-1, 2, 8)])
def test_roots_satisfy_equation(a, b, c):
    for x in roots(a, b, c):
        assert a * x * x + b * x + c == pytest.approx(0, abs=1e-9)


@pytest.mark.parametrize("a,b,c", [(1, -3, 2), (3, 7, 1)])
def test_vieta(a, b, c):
    first, second = roots(a, b, c)
    assert first + second == pytest.approx(-b / a)
    assert first * second == pytest.approx(c / a)


def test_first_root_is_larger_for_positive_a():
    first, second = roots(1, -3, 2)
    assert first > second


def test_known_roots():
    first, second = roots(1, -3, 2)
    assert first == pytest.approx(2.0)
    assert second == pytest.approx(1.0)


def test_negative_discriminant_gives_nan():
    result = roots(1, 0, 1)
    assert len(result) == 2
    first, second = result
    assert math.isnan(first)
    assert math.isnan(second)


def test_zero_a_follows_float_division():
    first, second = roots(0, 1, 1)
    assert math.isnan(first)
    assert second == -math.inf


def test_format_number():
    assert format_number(2.0) == "2"
    assert format_number(math.inf) == "inf"
    assert format_number(1 / 3) == "0.333333"


def test_format_number_nan():
    assert format_number(math.nan) == format_number(roots(1, 0, 1)[0])


def test_main_prints_roots(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n-3\n2\n"))
    assert main([]) == 0
    first, second = roots(1, -3, 2)
    out = capsys.readouterr().out
    assert f"Root 1 is {format_number(first)}\n" in out
    assert out.endswith(f"Root 2 is {format_number(second)}\n")


def test_main_rejects_bad_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n1\n1\n"))
    assert main([]) == 1