"""Rock, paper, scissors against the computer."""

from __future__ import annotations

import random
from collections.abc import Sequence
from enum import Enum


class Move(Enum):
    """A hand shape, numbered as on the menu."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def beats(self) -> Move:
        return _BEATS[self]


_SYMBOLS = {Move.ROCK: "✊", Move.PAPER: "✋", Move.SCISSORS: "✌️"}
_BEATS = {Move.ROCK: Move.SCISSORS, Move.PAPER: Move.ROCK, Move.SCISSORS: Move.PAPER}


class Outcome(Enum):
    """The result of a round from the player's side."""

    TIE = "it's a tie!"
    WIN = "you won! woohoo!"
    LOSE = "you lost! booooo!"


def move_from_choice(choice: int) -> Move | None:
    """Return the move for a menu number, or None if it is not on the menu."""
    try:
        return Move(choice)
    except ValueError:
        return None


def decide(user: Move, computer: Move) -> Outcome:
    """Decide the round for the user."""
    if user is computer:
        return Outcome.TIE
    return Outcome.WIN if user.beats is computer else Outcome.LOSE


def play(user: int, computer: Move) -> str:
    """Return the text of one round; an off-menu choice shows as scissors and has no result."""
    move = move_from_choice(user)
    shown = move if move is not None else Move.SCISSORS
    lines = [f"you choose: {shown.symbol}", f"cpu choose: {computer.symbol}"]
    if move is not None:
        outcome = decide(move, computer)
        if outcome is Outcome.LOSE and move is Move.PAPER:
            lines.append("you lost! boo!")
        else:
            lines.append(outcome.value)
    return "".join(line + "\n" for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Play one round against a random computer move."""
    computer = Move(random.Random().randint(1, 3))
    print("====================")
    print("rock paper scissors!")
    print("====================")
    for move in Move:
        print(f"{move.value}) {move.symbol}")
    try:
        words = input("shoot! ").split()
    except EOFError:
        words = []
    try:
        user = int(words[0]) if words else 0
    except ValueError:
        user = 0
    print(play(user, computer), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())