"""A two-player game of hangman played at the terminal."""

from __future__ import annotations

import enum

MAX_TRIES = 6
MAX_WORD_LENGTH = 20

_GALLOWS = (
    ("   +---+", "   |   |", "       |", "       |", "       |", "       |", "========="),
    ("   +---+", "   |   |", "   O   |", "       |", "       |", "       |", "========="),
    ("   +---+", "   |   |", "   O   |", "   |   |", "       |", "       |", "========="),
    ("   +---+", "   |   |", "   O   |", "  /|   |", "       |", "       |", "========="),
    ("   +---+", "   |   |", "   O   |", "  /|\\  |", "       |", "       |", "========="),
    ("   +---+", "   |   |", "   O   |", "  /|\\  |", "  /    |", "       |", "========="),
    ("   +---+", "   |   |", "   O   |", "  /|\\  |", "  / \\  |", "       |", "========="),
)


class GuessResult(enum.Enum):
    """What became of a single guess."""

    INVALID = "invalid"
    ALREADY_GUESSED = "already guessed"
    CORRECT = "correct"
    INCORRECT = "incorrect"


def gallows(tries: int) -> str:
    """Return the drawing of the gallows after ``tries`` wrong guesses."""
    if not 0 <= tries <= MAX_TRIES:
        raise ValueError(f"tries must be between 0 and {MAX_TRIES}, got {tries}")
    return "\n".join(_GALLOWS[tries])


class HangmanGame:
    """The state of one round: the secret word, the guesses and the misses."""

    def __init__(self, word: str) -> None:
        if not word or any(ch.isspace() for ch in word):
            raise ValueError("the word must be non-empty and contain no whitespace")
        if len(word) >= MAX_WORD_LENGTH:
            raise ValueError(f"the word must be shorter than {MAX_WORD_LENGTH} characters")
        self.word = word
        self.tries = 0
        # The guess buffer starts filled with blanks, so a blank counts as guessed.
        self.guessed: set[str] = {"_"}

    def guess(self, letter: str) -> GuessResult:
        """Record a guess of ``letter`` and report how it went."""
        if self.is_lost() or self.is_won():
            raise RuntimeError("the game is already over")
        if len(letter) != 1:
            raise ValueError(f"expected a single character, got {letter!r}")
        if not (letter.isascii() and letter.isalpha()):
            return GuessResult.INVALID
        if letter in self.guessed:
            return GuessResult.ALREADY_GUESSED
        self.guessed.add(letter)
        if letter in self.word:
            return GuessResult.CORRECT
        self.tries += 1
        return GuessResult.INCORRECT

    def masked_word(self) -> str:
        """Return the word with letters not yet guessed shown as ``_``."""
        return " ".join(ch if ch in self.guessed else "_" for ch in self.word)

    def tries_left(self) -> int:
        """Return how many wrong guesses remain."""
        return MAX_TRIES - self.tries

    def is_won(self) -> bool:
        """Return whether every letter of the word has been guessed."""
        return all(ch in self.guessed for ch in self.word)

    def is_lost(self) -> bool:
        """Return whether all tries are used up."""
        return self.tries >= MAX_TRIES


def main(argv: list[str] | None = None) -> int:
    """Play hangman on standard input and output."""
    try:
        tokens = input("Player 1, enter a word: ").split()
    except EOFError:
        return 1
    if not tokens:
        print("No word given.")
        return 1
    try:
        game = HangmanGame(tokens[0])
    except ValueError as exc:
        print(exc)
        return 1

    print("Welcome to Hangman!")
    print("Try to guess the word.")

    while not game.is_lost():
        print()
        print(gallows(game.tries))
        print(f"Word: {game.masked_word()}")
        try:
            line = input("Enter a letter: ").strip()
        except EOFError:
            return 1
        if not line:
            continue
        result = game.guess(line[0])
        if result is GuessResult.INVALID:
            print("Invalid input. Please enter a letter.")
            continue
        if result is GuessResult.ALREADY_GUESSED:
            print("You've already guessed that letter.")
            continue
        if result is GuessResult.INCORRECT:
            print(f"Incorrect guess! You have {game.tries_left()} tries left.")
        if game.is_won():
            print(f"Congratulations! You guessed the word: {game.word}")
            return 0

    print()
    print(gallows(MAX_TRIES))
    print(f"Sorry, you've run out of tries. The word was: {game.word}")
    return 0