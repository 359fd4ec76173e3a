"""A tiny text adventure of rooms joined by doors."""

from __future__ import annotations

from dataclasses import dataclass

MAX_DESCRIPTION_LENGTH = 999
DIRECTIONS = ("north", "south", "east", "west")
INVALID_MESSAGE = "Invalid command. Try 'north', 'south', 'east', 'west', or 'quit'."
RULE = "------------------------------"


@dataclass(eq=False)
class Room:
    """A room with a description and optional neighbours in four directions."""

    description: str
    north: Room | None = None
    south: Room | None = None
    east: Room | None = None
    west: Room | None = None

    def __post_init__(self) -> None:
        self.description = self.description[:MAX_DESCRIPTION_LENGTH]


def build_world() -> Room:
    """Create the three connected rooms and return the starting one."""
    start = Room("You are in a dark room. You can see a faint light to the north.")
    north = Room("You are in a brightly lit room. There is a door to the south.")
    south = Room("You are in a dimly lit room. There is a door to the north.")
    start.north = north
    north.south = start
    north.north = south
    south.north = north
    return start


def describe(room: Room) -> str:
    """Return the framed description of ``room``."""
    return f"{RULE}\n{room.description}\n{RULE}"


class Adventure:
    """Tracks the player's room and reacts to typed commands."""

    def __init__(self, start: Room) -> None:
        self.current = start
        self.finished = False

    def handle(self, command: str) -> str | None:
        """Apply ``command``; return a message to show, or None after a move."""
        command = command.split("\n", 1)[0]
        if command == "quit":
            self.finished = True
            return "Goodbye!"
        if command in DIRECTIONS:
            target = getattr(self.current, command)
            if target is not None:
                self.current = target
                return None
        return INVALID_MESSAGE


def main(argv: list[str] | None = None) -> int:
    """Run the adventure on standard input and output."""
    game = Adventure(build_world())
    while not game.finished:
        print(describe(game.current))
        try:
            command = input("Enter a command: ")
        except EOFError:
            break
        message = game.handle(command)
        if message is not None:
            print(message)
    return 0