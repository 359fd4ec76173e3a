"""Two-player tic-tac-toe on a 3 by 3 board."""

from __future__ import annotations

SIZE = 3
EMPTY = " "
SYMBOLS = {1: "X", 2: "O"}


class CellOccupiedError(ValueError):
    """Raised when a move targets a cell that already holds a symbol."""


class Board:
    """A tic-tac-toe board with rows and columns numbered from 0."""

    def __init__(self) -> None:
        self.cells = [[EMPTY] * SIZE for _ in range(SIZE)]

    def place(self, row: int, col: int, symbol: str) -> None:
        """Put ``symbol`` at (row, col)."""
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"cell ({row}, {col}) is off the board")
        if self.cells[row][col] != EMPTY:
            raise CellOccupiedError(f"cell ({row}, {col}) is already occupied")
        self.cells[row][col] = symbol

    def _lines(self):
        yield from self.cells
        yield from (list(column) for column in zip(*self.cells))
        yield [self.cells[i][i] for i in range(SIZE)]
        yield [self.cells[i][SIZE - 1 - i] for i in range(SIZE)]

    def has_winner(self) -> bool:
        """Return whether any row, column or diagonal is filled by one symbol."""
        return any(line[0] != EMPTY and len(set(line)) == 1 for line in self._lines())

    def is_full(self) -> bool:
        """Return whether no empty cell remains."""
        return all(cell != EMPTY for row in self.cells for cell in row)

    def render(self) -> str:
        """Return the board as text."""
        return "\n---|---|---\n".join(
            " " + " | ".join(row) + " " for row in self.cells
        )


def _read_move() -> tuple[int, int] | None:
    parts = input().split()
    if len(parts) < 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Play tic-tac-toe on standard input and output."""
    board = Board()
    player = 1
    print("Welcome to Tic Tac Toe!")
    while True:
        print()
        print(board.render())
        print(
            f"Player {player}'s turn. Enter row and column numbers (1-3): ",
            end="",
        )
        try:
            move = _read_move()
        except EOFError:
            return 1
        if move is None:
            print("Please enter two numbers.")
            continue
        row, col = move
        try:
            board.place(row - 1, col - 1, SYMBOLS[player])
        except CellOccupiedError:
            print("This cell is already occupied. Try again.")
            continue
        except IndexError:
            print("Row and column must be between 1 and 3.")
            continue
        if board.has_winner():
            print(f"Congratulations! Player {player} wins!")
            print()
            print(board.render())
            return 0
        if board.is_full():
            print("It's a draw!")
            print()
            print(board.render())
            return 0
        player = 2 if player == 1 else 1