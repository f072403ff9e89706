"""Small numeric helpers."""

from __future__ import annotations

from math import isqrt


def is_prime(number: int) -> bool:
    """Return True if ``number`` is prime, by trial division up to isqrt(n).

    0, 1 and negative numbers are not prime.
    """
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, isqrt(number) + 1))
