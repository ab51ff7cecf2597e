"""Pure functions for classifying candidates by trial division."""

from __future__ import annotations

from . import constants


def count_divisors(candidate: int) -> int:
    """Return how many integers in ``[1, candidate]`` divide *candidate* evenly.

    Every divisor from 1 through the candidate itself is tried; the search
    does not stop at the square root.

    Args:
        candidate: The integer under test.

    Returns:
        The divisor count. Zero for ``candidate <= 0``.
    """
    return sum(1 for i in range(1, candidate + 1) if candidate % i == 0)


def is_prime(candidate: int) -> bool:
    """True when *candidate* has exactly two divisors (1 and itself)."""
    return count_divisors(candidate) == constants.PRIME_DIVISOR_COUNT
