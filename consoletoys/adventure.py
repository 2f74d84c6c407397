"""A short branching text adventure in a magical forest."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Sequence
from enum import Enum

RIDDLE_ANSWERS = frozenset({"piano", "a piano"})
RIDDLE_ATTEMPTS = 3


class Ending(Enum):
    """The ways the adventure can end."""

    STAYED_HOME = "stayed home"
    POTION = "drank the potion"
    DECLINED_POTION = "declined the potion"
    RIDDLE_SOLVED = "solved the riddle"
    LEFT_FOREST = "left the forest"
    RESTART = "restart"


def is_riddle_answer(answer: str) -> bool:
    """Return True if the answer solves the troll's riddle."""
    return answer in RIDDLE_ANSWERS


class _Words:
    """Yields whitespace-separated words from successive lines."""

    def __init__(self, read: Callable[[], str]) -> None:
        self._read = read
        self._pending: deque[str] = deque()

    def next(self) -> str:
        while not self._pending:
            self._pending.extend(self._read().split())
        return self._pending.popleft()


def _ask(words: _Words, write: Callable[[str], object],
         allowed: tuple[str, ...], retry: str) -> str:
    choice = words.next()
    while choice not in allowed:
        write(retry)
        choice = words.next()
    return choice


def run(read: Callable[[], str], write: Callable[[str], object]) -> Ending:
    """Play the adventure; raises EOFError if input runs out before an ending."""
    words = _Words(read)
    yes_no = ("yes", "no")
    yes_no_retry = "Please enter 'yes' or 'no': "

    write("Welcome to the Magical Forest Adventure!\n")
    write("You find yourself at the edge of a mysterious forest.\n")
    write("Do you want to enter the forest? (yes/no): ")
    if _ask(words, write, yes_no, yes_no_retry) == "no":
        write("You decide to stay home. Maybe next time!\n")
        return Ending.STAYED_HOME

    write("\nYou step into the forest and see two paths.\n")
    write("Do you want to go left towards the glowing light "
          "or right towards the dark shadows?\n")
    write("Enter 'left' or 'right': ")
    path = _ask(words, write, ("left", "right"),
                "Invalid choice. Please enter 'left' or 'right': ")

    if path == "left":
        write("\nYou walk towards the glowing light and find a friendly fairy.\n")
        write("She offers you a magic potion.\n")
        write("Do you accept the potion? (yes/no): ")
        if _ask(words, write, yes_no, yes_no_retry) == "yes":
            write("\nYou drink the potion and feel empowered! "
                  "You safely exit the forest. The End.\n")
            return Ending.POTION
        write("\nYou politely decline and continue your journey "
              "safely out of the forest. The End.\n")
        return Ending.DECLINED_POTION

    write("\nYou venture into the shadows and encounter a mischievous troll.\n")
    write("He asks for a riddle to pass.\n")
    attempts = RIDDLE_ATTEMPTS
    while attempts > 0:
        write("Here's the riddle: What has keys but can't open locks? ")
        if is_riddle_answer(words.next()):
            write("Correct! The troll lets you pass. "
                  "You exit the forest safely. The End.\n")
            return Ending.RIDDLE_SOLVED
        attempts -= 1
        if attempts > 0:
            write(f"Wrong answer. Try again ({attempts} attempts left): ")

    write("\nYou failed the riddle. The troll blocks your way, and you have to go back.\n")
    write("Would you like to try the other path? (yes/no): ")
    if words.next() == "yes":
        write("\nRestarting your adventure...\n")
        return Ending.RESTART
    write("You decide to leave the forest. Safe travels!\n")
    return Ending.LEFT_FOREST


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Play the adventure on the console."""
    try:
        run(input, _write)
    except EOFError:
        _write("\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())