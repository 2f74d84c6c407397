"""Magic 8-ball: answer a question with one of twenty fixed replies."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence

ANSWERS: tuple[str, ...] = (
    "It is certain.",
    "It is decidedly so.",
    "Without a doubt.",
    "Yes - definitely.",
    "You may rely on it.",
    "As I see it, yes.",
    "Most likely.",
    "Outlook good.",
    "Yes.",
    "Signs point to yes.",
    "Reply hazy, try again.",
    "Ask again later.",
    "Better not tell you now.",
    "Cannot predict now.",
    "Concentrate and ask again.",
    "Don't count on it.",
    "My reply is no.",
    "My sources say no.",
    "Outlook not so good.",
    "Very doubtful.",
)

HEADER = "MAGIC 🎱 SAYS: \n\n"


def answer(rng: random.Random | None = None) -> str:
    """Pick one of the twenty answers at random."""
    rng = rng if rng is not None else random.Random()
    return ANSWERS[rng.randrange(len(ANSWERS))]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the 8-ball's header and a random answer."""
    rng = random.Random()
    reply = answer(rng)
    sys.stdout.write(f"{HEADER}{reply}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())