"""The Sorting Hat quiz: four questions place the player in a house."""

from __future__ import annotations

import re
import sys
from collections import deque
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

_INT = re.compile(r"[+-]?\d+")

BANNER = "===============\nThe Sorting Hat\n===============\n\n"


class House(Enum):
    """The four houses, in the order they are weighed when sorting."""

    GRYFFINDOR = "Gryffindor"
    HUFFLEPUFF = "Hufflepuff"
    RAVENCLAW = "Ravenclaw"
    SLYTHERIN = "Slytherin"


@dataclass(frozen=True)
class Question:
    """A quiz question; each option awards a point to the listed houses."""

    text: str
    options: tuple[str, ...]
    awards: tuple[tuple[House, ...], ...]
    reports_invalid: bool = False


QUESTIONS: tuple[Question, ...] = (
    Question(
        "When I'm dead, I want people to remember me as:",
        ("The Good", "The Great", "The Wise", "The Bold"),
        (
            (House.HUFFLEPUFF,),
            (House.SLYTHERIN,),
            (House.RAVENCLAW,),
            (House.GRYFFINDOR,),
        ),
    ),
    Question(
        "Dawn or Dusk?",
        ("Dawn", "Dusk"),
        (
            (House.GRYFFINDOR, House.RAVENCLAW),
            (House.HUFFLEPUFF, House.SLYTHERIN),
        ),
        reports_invalid=True,
    ),
    Question(
        "Which kind of instrument most pleases your ear?",
        ("The violin", "The trumpet", "The piano", "The drum"),
        (
            (House.SLYTHERIN,),
            (House.HUFFLEPUFF,),
            (House.RAVENCLAW,),
            (House.GRYFFINDOR,),
        ),
    ),
    Question(
        "Which road tempts you the most?",
        (
            "The wide, sunny grassy lane",
            "The narrow, dark, lantern-lit alley",
            "The twisting, leaf-strewn path through woods",
            "The cobbled street lined (ancient buildings)",
        ),
        (
            (House.HUFFLEPUFF,),
            (House.SLYTHERIN,),
            (House.GRYFFINDOR,),
            (House.RAVENCLAW,),
        ),
    ),
)


def _awards(question: Question, answer: int) -> tuple[House, ...]:
    if 1 <= answer <= len(question.awards):
        return question.awards[answer - 1]
    return ()


def tally(answers: Iterable[int]) -> dict[House, int]:
    """Count each house's points for one answer per question."""
    given = list(answers)
    if len(given) != len(QUESTIONS):
        raise ValueError(f"expected {len(QUESTIONS)} answers, got {len(given)}")
    scores = dict.fromkeys(House, 0)
    for question, answer in zip(QUESTIONS, given):
        for house in _awards(question, answer):
            scores[house] += 1
    return scores


def choose_house(scores: Mapping[House, int]) -> House | None:
    """Return the highest-scoring house; ties go to the earlier house, no points to None."""
    best: House | None = None
    best_score = 0
    for house in House:
        score = scores.get(house, 0)
        if score > best_score:
            best, best_score = house, score
    return best


def sort(answers: Iterable[int]) -> House | None:
    """Sort a player into a house from their answers."""
    return choose_house(tally(answers))


class _IntReader:
    """Reads whitespace-separated integers; after one bad read every read gives 0."""

    def __init__(self, read: Callable[[], str]) -> None:
        self._read = read
        self._pending: deque[str] = deque()
        self._failed = False

    def _token(self) -> str | None:
        while not self._pending:
            try:
                line = self._read()
            except EOFError:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()

    def next_int(self) -> int:
        if self._failed:
            return 0
        token = self._token()
        match = _INT.match(token) if token is not None else None
        if match is None:
            self._failed = True
            return 0
        rest = token[match.end():]
        if rest:
            self._pending.appendleft(rest)
        return int(match.group())


def _render(number: int, question: Question) -> str:
    lead = "" if number == 1 else "\n"
    options = "".join(f"  {i}) {text}\n" for i, text in enumerate(question.options, 1))
    return (
        f"{lead}Q{number}) {question.text}\n\n{options}\n"
        f"Enter your answer (1-{len(question.options)}): "
    )


def run(read: Callable[[], str], write: Callable[[str], object]) -> House | None:
    """Run the quiz, reading lines with read and printing with write."""
    reader = _IntReader(read)
    write(BANNER)
    answers = []
    for number, question in enumerate(QUESTIONS, 1):
        write(_render(number, question))
        answer = reader.next_int()
        answers.append(answer)
        if question.reports_invalid and not _awards(question, answer):
            write("Invalid input\n")
    house = sort(answers)
    write("\nCongrats on being sorted into... ")
    write(f"{house.value if house is not None else ''}!\n")
    return house


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the quiz on the console."""
    run(input, _write)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())