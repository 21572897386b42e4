"""Prime helpers used to size the probing hash tables."""

from __future__ import annotations


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n in (2, 3):
        return True
    if n < 2 or n % 2 == 0:
        return False
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def next_prime(n: int) -> int:
    """Return the smallest odd prime that is at least ``n``.

    An even ``n`` is first bumped to the next odd number, so the result
    is never 2.
    """
    if n % 2 == 0:
        n += 1
    while not is_prime(n):
        n += 2
    return n