"""Translate text into whale talk: vowels only, with e and u doubled."""

from __future__ import annotations

from collections.abc import Sequence

VOWELS = "aeiou"
DOUBLED = "eu"
DEFAULT_TEXT = "Turpentine and turtles."


def whale_talk(text: str) -> str:
    """Keep the lower-case vowels of the text, doubling each e and u."""
    return "".join(ch * 2 if ch in DOUBLED else ch for ch in text if ch in VOWELS)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the whale talk for the given words, or for the default phrase."""
    text = " ".join(argv) if argv else DEFAULT_TEXT
    print(whale_talk(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())