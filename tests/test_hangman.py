import io

import pytest

from practicebox.hangman import MAX_TRIES, GuessResult, HangmanGame, gallows, main


def test_gallows_empty_matches_drawing():
    expected = "\n".join(
        ["   +---+", "   |   |", "       |", "       |", "       |", "       |", "========="]
    )
    assert gallows(0) == expected


def test_gallows_full_has_legs():
    assert "  / \\  |" in gallows(MAX_TRIES).splitlines()


def test_gallows_out_of_range():
    with pytest.raises(ValueError):
        gallows(MAX_TRIES + 1)
    with pytest.raises(ValueError):
        gallows(-1)


def test_correct_guess_keeps_tries():
    game = HangmanGame("cat")
    assert game.guess("a") is GuessResult.CORRECT
    assert game.tries_left() == MAX_TRIES


def test_incorrect_guess_costs_a_try():
    game = HangmanGame("cat")
    assert game.guess("z") is GuessResult.INCORRECT
    assert game.tries_left() == MAX_TRIES - 1


def test_non_letter_is_invalid():
    game = HangmanGame("cat")
    assert game.guess("1") is GuessResult.INVALID
    assert game.tries_left() == MAX_TRIES


def test_repeat_guess_reported():
    game = HangmanGame("cat")
    game.guess("z")
    assert game.guess("z") is GuessResult.ALREADY_GUESSED
    assert game.tries_left() == MAX_TRIES - 1


def test_masked_word_reveals_guessed():
    game = HangmanGame("cat")
    game.guess("a")
    assert game.masked_word() == "_ a _"


def test_win_when_all_letters_found():
    game = HangmanGame("cat")
    for letter in "cat":
        game.guess(letter)
    assert game.is_won()
    assert not game.is_lost()


def test_loss_after_max_wrong_guesses():
    game = HangmanGame("cat")
    for letter in "zyxwvu"[:MAX_TRIES]:
        game.guess(letter)
    assert game.is_lost()
    with pytest.raises(RuntimeError):
        game.guess("c")


def test_empty_word_rejected():
    with pytest.raises(ValueError):
        HangmanGame("")


def test_main_winning_round(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("cat\nc\na\nt\n"))
    assert main([]) == 0
    assert "Congratulations! You guessed the word: cat" in capsys.readouterr().out


def test_main_losing_round(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("cat\nz\ny\nx\nw\nv\nu\n"))
    assert main([]) == 0
    assert "Sorry, you've run out of tries. The word was: cat" in capsys.readouterr().out