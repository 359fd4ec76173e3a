"""Beginner number and text exercises with hangman, adventure, snake and tic-tac-toe games."""

__version__ = "0.1.0"