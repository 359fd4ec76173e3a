"""The snake game: state, rules and a curses front end."""

from __future__ import annotations

import enum
import random
import time

WIDTH = 20
HEIGHT = 20
MAX_TAIL = 100
POINTS_PER_FRUIT = 10


class Direction(enum.Enum):
    """Where the snake's head is heading."""

    STOP = 0
    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4


_KEYS = {"a": Direction.LEFT, "d": Direction.RIGHT, "w": Direction.UP, "s": Direction.DOWN}
_MOVES = {
    Direction.STOP: (0, 0),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


class SnakeGame:
    """One game of snake on a ``width`` by ``height`` field."""

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.game_over = False
        self.direction = Direction.STOP
        self.head = (width // 2, height // 2)
        self.fruit = self._random_cell()
        self.score = 0
        self.tail_length = 0
        self._trail: list[tuple[int, int]] = []

    def _random_cell(self) -> tuple[int, int]:
        return self.rng.randrange(self.width), self.rng.randrange(self.height)

    @property
    def tail(self) -> list[tuple[int, int]]:
        """The tail segments, nearest the head first."""
        return self._trail[: self.tail_length]

    def press(self, key: str) -> None:
        """React to a key: w/a/s/d steer, x ends the game, others do nothing."""
        if key in _KEYS:
            self.direction = _KEYS[key]
        elif key == "x":
            self.game_over = True

    def step(self) -> None:
        """Advance the game by one tick."""
        self._trail = [self.head, *self._trail][: max(self.tail_length, 1)]
        dx, dy = _MOVES[self.direction]
        x, y = self.head[0] + dx, self.head[1] + dy
        self.head = (x, y)
        if not (0 <= x < self.width and 0 <= y < self.height):
            self.game_over = True
        if self.head in self.tail:
            self.game_over = True
        if self.head == self.fruit:
            self.score += POINTS_PER_FRUIT
            self.fruit = self._random_cell()
            self.tail_length = min(self.tail_length + 1, MAX_TAIL)

    def render(self) -> str:
        """Return the current screen as text."""
        border = "#" * (self.width + 2)
        tail = set(self.tail)
        rows = [border]
        for y in range(self.height):
            cells = []
            for x in range(self.width):
                if x in (0, self.width - 1):
                    cells.append("#")
                elif (x, y) == self.head:
                    cells.append("O")
                elif (x, y) == self.fruit:
                    cells.append("F")
                elif (x, y) in tail:
                    cells.append("o")
                else:
                    cells.append(" ")
            rows.append("".join(cells))
        rows.append(border)
        rows.append(f"Score: {self.score}")
        return "\n".join(rows)


def _play(stdscr) -> None:
    import curses

    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.halfdelay(1)
    game = SnakeGame()
    while not game.game_over:
        stdscr.erase()
        for row, line in enumerate(game.render().splitlines()):
            try:
                stdscr.addstr(row, 0, line)
            except curses.error:
                pass
        stdscr.refresh()
        key = stdscr.getch()
        if 0 <= key < 256:
            game.press(chr(key))
        game.step()
        time.sleep(0.1)


def main(argv: list[str] | None = None) -> int:
    """Play snake in the terminal."""
    import curses

    curses.wrapper(_play)
    return 0