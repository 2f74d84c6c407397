# consoletoys

Small games and calculators that you play or use from a terminal.

## Installation

```
pip install .
```

## Commands

| Command               | What it does                                                                 |
|-----------------------|------------------------------------------------------------------------------|
| `magic-ball`          | Shakes a Magic 8 Ball and prints one of its twenty answers.                  |
| `currency`            | Asks for pesos, quetzals and colons, then prints the total in USD.           |
| `leapyear`            | Asks for a four-digit year and says whether it is a leap year.               |
| `quadratic`           | Asks for `a`, `b` and `c` and prints both roots of `ax² + bx + c`.           |
| `rock-paper-scissors` | Plays one round of rock, paper, scissors against the computer.               |
| `whale`               | Prints the whale talk for the phrase "Turpentine and turtles.".              |
| `sorting-hat`         | Asks four questions and sorts you into a Hogwarts house.                     |
| `adventure`           | A short choose-your-path story set in a magical forest.                      |

Notes on behaviour:

- `currency` and `quadratic` print an error to standard error and exit with
  status 1 if an entry is not a number.
- `leapyear` accepts exactly four digits; anything else prints
  "Invalid input. Please enter a four-digit year." and exits with status 1.
- `quadratic` prints `nan` for roots that are not real, and `inf`/`-inf` or
  `nan` when `a` is zero.
- `adventure` exits with status 1 if input ends before the story does.

## Using the functions directly

Each game also exposes its logic as plain functions:

```python
import random

from consoletoys.currency import to_usd
from consoletoys.leapyear import describe, is_leap_year, parse_year
from consoletoys.magic_ball import answer
from consoletoys.quadratic import format_number, roots
from consoletoys.rock_paper_scissors import Move, Outcome, decide, play
from consoletoys.sorting_hat import House, sort
from consoletoys.whale import whale_talk
from consoletoys.adventure import is_riddle_answer

whale_talk("turpentine and turtles")   # 'uueeieeauuee'
is_leap_year(2000)                     # True
describe(parse_year("1900"))           # '1900 is not a leap year.'
roots(1, -3, 2)                        # (2.0, 1.0)
format_number(1 / 3)                   # '0.333333'
to_usd(100, 0, 0)                      # about 4.9
answer(random.Random(7))               # one of the twenty Magic 8 Ball replies
decide(Move.ROCK, Move.SCISSORS)       # Outcome.WIN
sort([1, 2, 2, 1])                     # House.HUFFLEPUFF
is_riddle_answer("a piano")            # True
```

`consoletoys.sorting_hat.run(read, write)` and `consoletoys.adventure.run(read, write)`
play the interactive games with any line-reading and text-writing callables, which
makes them easy to drive from a script. The sorting hat returns the chosen
`House` (or `None` if no house scored), the adventure returns an `Ending`.

`consoletoys.whale.main` takes a list of words and prints their whale talk,
for example `main(["hi,", "human"])` prints `iuua`.

## What it does not do

- The `whale` command does not read a phrase from the command line or from
  input; it always translates its built-in phrase. Use `whale_talk` for other text.
- When the riddle is failed in `adventure` and you choose to try the other path,
  the game prints "Restarting your adventure..." and ends; it does not start over.
- Each command plays a single round and exits; there are no scores kept between runs.

## Running the tests

```
pip install .[test]
pytest
```