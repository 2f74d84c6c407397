"""Tell whether a four-digit year is a leap year."""

from __future__ import annotations

from collections.abc import Sequence

INVALID_MESSAGE = "Invalid input. Please enter a four-digit year."
_DIGITS = frozenset("0123456789")


def parse_year(text: str) -> int:
    """Parse exactly four ASCII digits as a year; raise ValueError otherwise."""
    if len(text) != 4 or not set(text) <= _DIGITS:
        raise ValueError(INVALID_MESSAGE)
    return int(text)


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def describe(year: int) -> str:
    """Return a sentence stating whether the year is a leap year."""
    if is_leap_year(year):
        return f"{year} is a leap year."
    return f"{year} is not a leap year."


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a year and report whether it is a leap year."""
    try:
        words = input("Enter a year: ").split()
    except EOFError:
        words = []
    try:
        year = parse_year(words[0] if words else "")
    except ValueError as exc:
        print(exc)
        return 1
    print(describe(year))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())