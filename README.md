# practicebox

Beginner number and text exercises, and four small games played in the terminal.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Games

Each game has its own command:

```
practicebox-hangman      # player 1 types a word, player 2 guesses letters; six wrong guesses allowed
practicebox-adventure    # move between three rooms with north, south, east, west; quit to leave
practicebox-snake        # w/a/s/d to steer, x to stop; each fruit scores 10
practicebox-tictactoe    # players 1 (X) and 2 (O) enter a row and a column, each from 1 to 3
```

The hangman word must be non-empty, hold no whitespace and be shorter than 20
characters. The snake game runs on a 20 by 20 field and needs a terminal that
the standard `curses` module can drive.

The games can also be driven from Python:

```python
from practicebox.hangman import HangmanGame, GuessResult, gallows
from practicebox.tictactoe import Board, CellOccupiedError

game = HangmanGame("python")
result = game.guess("p")          # GuessResult.CORRECT
print(game.masked_word())         # p _ _ _ _ _
print(game.tries_left())          # 6
print(gallows(game.tries))

board = Board()                   # rows and columns numbered from 0
board.place(1, 1, "X")
print(board.render())
print(board.has_winner(), board.is_full())
```

`HangmanGame.guess` returns a `GuessResult` (`INVALID`, `ALREADY_GUESSED`,
`CORRECT` or `INCORRECT`) and raises `RuntimeError` once the game is won or lost.
`Board.place` raises `CellOccupiedError` for a taken cell and `IndexError` for a
cell off the board.

`practicebox.adventure` offers `Room`, `build_world`, `describe` and `Adventure`,
whose `handle` method takes a command and returns a message, or `None` after a
move. `practicebox.snake` offers `SnakeGame` with `press`, `step` and `render`,
and the `Direction` enum; pass a `random.Random` as `rng` for repeatable fruit
placement.

## Number and text helpers

`practicebox.numbers` has `add_numbers`, `binary_digits`, `binary_as_decimal`,
`octal_as_decimal`, `factorial`, `fibonacci`, `is_leap_year`, `can_vote`,
`describe_sign`, `is_prime`, `internet_bill`, `sum_natural` and `recursive_sum`.

`practicebox.textstats` has `count_consecutive_vowels`, `count_lowercase_vowels`,
`count_characters` (returning a `CharacterCounts`), `suffix_from`, `is_vowel` and
`classify_letter`.

```python
from practicebox.numbers import binary_as_decimal, fibonacci, is_prime
from practicebox.textstats import count_characters

print(binary_as_decimal(5))           # 101
print(fibonacci(7))                   # [0, 1, 1, 2, 3, 5, 8]
print(is_prime(13))                   # True
print(count_characters("Hello World"))
# CharacterCounts(spaces=1, uppercase=2, lowercase=8)
```

Some helpers follow simple rules rather than the textbook ones:

- `is_leap_year` only checks divisibility by four.
- `is_prime` reports 0 and 1 as prime, since no divisor from 2 to n // 2 exists.
- `fibonacci` always returns at least `[0, 1]`.
- `can_vote` requires an age over 18.
- `internet_bill` charges 20 rupees per hour.
- `recursive_sum` raises `ValueError` for negative numbers.

## What it does not do

The games keep nothing between runs: there are no saved scores, no computer
opponent for tic-tac-toe or hangman, and the number and text helpers have no
command of their own.