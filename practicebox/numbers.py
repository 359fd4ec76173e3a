"""Small integer exercises: sums, factorials, base conversion and checks."""

from __future__ import annotations

import math

RUPEES_PER_HOUR = 20
VOTING_AGE = 18


def add_numbers(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def binary_digits(number: int) -> list[int]:
    """Return the binary digits of ``number``, most significant first.

    Numbers that are zero or negative have no digits to produce.
    """
    digits: list[int] = []
    while number > 0:
        number, remainder = divmod(number, 2)
        digits.append(remainder)
    digits.reverse()
    return digits


def _digits_as_decimal(number: int, base: int) -> int:
    sign = -1 if number < 0 else 1
    magnitude = abs(number)
    result = 0
    place = 1
    while magnitude:
        magnitude, remainder = divmod(magnitude, base)
        result += remainder * place
        place *= 10
    return sign * result


def binary_as_decimal(number: int) -> int:
    """Return the binary form of ``number`` read as a decimal integer.

    For example 5 becomes 101. The sign of a negative number is kept.
    """
    return _digits_as_decimal(number, 2)


def octal_as_decimal(number: int) -> int:
    """Return the octal form of ``number`` read as a decimal integer."""
    return _digits_as_decimal(number, 8)


def factorial(number: int) -> int:
    """Return the product 1 * 2 * ... * number; 1 when number is below 1."""
    return math.prod(range(1, number + 1))


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers starting 0, 1.

    The first two terms are always produced, so a count below 2 still
    gives ``[0, 1]``.
    """
    terms = [0, 1]
    while len(terms) < count:
        terms.append(terms[-2] + terms[-1])
    return terms


def is_leap_year(year: int) -> bool:
    """Return whether ``year`` is a leap year, taken as divisible by four."""
    return year % 4 == 0


def can_vote(age: int) -> bool:
    """Return whether someone of ``age`` is old enough to vote (over 18)."""
    return age > VOTING_AGE


def describe_sign(number: int) -> str:
    """Return ``"positive"``, ``"negative"`` or ``"zero"`` for ``number``."""
    if number > 0:
        return "positive"
    if number < 0:
        return "negative"
    return "zero"


def is_prime(number: int) -> bool:
    """Return whether no integer from 2 to number // 2 divides ``number``.

    Values with no candidate divisor, such as 0 and 1, are reported as prime.
    """
    return not any(number % divisor == 0 for divisor in range(2, number // 2 + 1))


def internet_bill(hours: int) -> int:
    """Return the charge in rupees for ``hours`` of browsing."""
    return RUPEES_PER_HOUR * hours


def sum_natural(number: int) -> int:
    """Return 1 + 2 + ... + number; 0 when number is below 1."""
    return sum(range(1, number + 1))


def recursive_sum(number: int) -> int:
    """Return 1 + 2 + ... + number computed by recursion.

    Raises ValueError for negative numbers, where the recursion never ends.
    """
    if number < 0:
        raise ValueError("number must not be negative")
    if number == 0:
        return 0
    return number + recursive_sum(number - 1)