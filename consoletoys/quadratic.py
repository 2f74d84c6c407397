"""Roots of a quadratic equation, following IEEE float rules."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _sqrt(value: float) -> float:
    return math.nan if value < 0 or math.isnan(value) else math.sqrt(value)


def roots(a: float, b: float, c: float) -> tuple[float, float]:
    """Return both roots of a*x**2 + b*x + c; complex cases give NaN."""
    root = _sqrt(b * b - 4 * a * c)
    return _divide(-b + root, 2 * a), _divide(-b - root, 2 * a)


def format_number(value: float) -> str:
    """Format a number with six significant digits, like a default stream."""
    return f"{value:g}"


def _read(prompt: str) -> float:
    words = input(prompt).split()
    if not words:
        raise ValueError("no number given")
    return float(words[0])


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for the coefficients and print the two roots."""
    try:
        a = _read("Enter a: ")
        b = _read("Enter b: ")
        c = _read("Enter c: ")
    except (ValueError, EOFError):
        print("\nInvalid number.", file=sys.stderr)
        return 1
    first, second = roots(a, b, c)
    print(f"Root 1 is {format_number(first)}")
    print(f"Root 2 is {format_number(second)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())