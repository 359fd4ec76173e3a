import io

from practicebox.adventure import (
    INVALID_MESSAGE,
    Adventure,
    Room,
    build_world,
    describe,
    main,
)

START = "You are in a dark room. You can see a faint light to the north."
BRIGHT = "You are in a brightly lit room. There is a door to the south."
DIM = "You are in a dimly lit room. There is a door to the north."


def test_world_layout():
    start = build_world()
    assert start.description == START
    assert start.north.description == BRIGHT
    assert start.north.south is start
    assert start.north.north.description == DIM
    assert start.north.north.north is start.north
    assert start.south is None


def test_describe_frames_description():
    lines = describe(Room("A hall.")).splitlines()
    assert lines[1] == "A hall."
    assert lines[0] == lines[2] == "-" * 30


def test_move_north_and_back():
    start = build_world()
    game = Adventure(start)
    assert game.handle("north") is None
    assert game.current.description == BRIGHT
    assert game.handle("south\n") is None
    assert game.current is start


def test_blocked_direction_is_invalid():
    start = build_world()
    game = Adventure(start)
    assert game.handle("east") == INVALID_MESSAGE
    assert game.current is start


def test_unknown_command_is_invalid():
    game = Adventure(build_world())
    assert game.handle("dance") == INVALID_MESSAGE
    assert not game.finished


def test_quit_finishes():
    game = Adventure(build_world())
    assert game.handle("quit") == "Goodbye!"
    assert game.finished


def test_long_description_truncated():
    room = Room("x" * 2000)
    assert len(room.description) == 999


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("north\nquit\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert BRIGHT in out
    assert "Goodbye!" in out