"""Character counts and vowel checks on text."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise

VOWELS = frozenset("aeiouAEIOU")
LOWERCASE_VOWELS = frozenset("aeiou")


@dataclass(frozen=True)
class CharacterCounts:
    """How many spaces, capital letters and small letters a text holds."""

    spaces: int
    uppercase: int
    lowercase: int


def _require_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def is_vowel(char: str) -> bool:
    """Return whether ``char`` is one of a, e, i, o, u in either case."""
    _require_char(char)
    return char in VOWELS


def classify_letter(char: str) -> str:
    """Return ``"vowel"`` for a vowel and ``"consonant"`` for anything else."""
    _require_char(char)
    lower = char in LOWERCASE_VOWELS
    upper = char in VOWELS and not lower
    if lower or upper:
        return "vowel"
    return "consonant"


def count_consecutive_vowels(text: str) -> int:
    """Count the adjacent pairs of vowels in ``text``; pairs may overlap."""
    return sum(1 for a, b in pairwise(text) if a in VOWELS and b in VOWELS)


def count_lowercase_vowels(text: str) -> int:
    """Count the lower-case vowels in ``text``."""
    return sum(1 for ch in text if ch in LOWERCASE_VOWELS)


def count_characters(text: str) -> CharacterCounts:
    """Count spaces, ASCII capital letters and ASCII small letters."""
    spaces = uppercase = lowercase = 0
    for ch in text:
        if ch == " ":
            spaces += 1
        elif "A" <= ch <= "Z":
            uppercase += 1
        elif "a" <= ch <= "z":
            lowercase += 1
    return CharacterCounts(spaces=spaces, uppercase=uppercase, lowercase=lowercase)


def suffix_from(text: str, char: str) -> str | None:
    """Return the part of ``text`` from the first ``char`` on, or None."""
    _require_char(char)
    index = text.find(char)
    return None if index < 0 else text[index:]