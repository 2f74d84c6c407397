"""Convert Central American currencies to US dollars."""

from __future__ import annotations

import sys
from collections.abc import Sequence

PESO_RATE = 0.049
QUETZAL_RATE = 0.1305
COLON_RATE = 0.1144


def to_usd(pesos: float, quetzals: float, colons: float) -> float:
    """Return the total value in US dollars."""
    return PESO_RATE * pesos + QUETZAL_RATE * quetzals + COLON_RATE * colons


def _read_amount(prompt: str) -> float:
    words = input(prompt).split()
    if not words:
        raise ValueError("no amount given")
    return float(words[0])


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for three amounts and print their total in dollars."""
    try:
        pesos = _read_amount("🇲🇽 Enter number of Pesos: ")
        quetzals = _read_amount("🇬🇹 Enter number of Guatemalan Quetzals: ")
        colons = _read_amount("🇸🇻 Enter number of Salvadoran Colons: ")
    except (ValueError, EOFError):
        print("\nInvalid amount.", file=sys.stderr)
        return 1
    print(f"Total USD = ${to_usd(pesos, quetzals, colons):g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())