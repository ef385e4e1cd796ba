"""Prime numbers: counting, listing and testing."""

from __future__ import annotations


def count_primes(n: int) -> int:
    """Return how many primes are less than n."""
    if n < 2:
        return 0
    is_prime = [True] * n
    is_prime[0] = is_prime[1] = False
    p = 2
    while p * p <= n:
        for multiple in range(p * p, n, p):
            is_prime[multiple] = False
        p += 1
    return sum(is_prime)


def make_sieve(n: int) -> list[int]:
    """Return the primes less than n in ascending order."""
    if n < 2:
        return []
    composite = [False] * n
    for p in range(2, n):
        if composite[p]:
            continue
        for multiple in range(2 * p, n, p):
            composite[multiple] = True
    return [p for p in range(2, n) if not composite[p]]


def is_prime(n: int) -> bool:
    """Return whether n is prime, by trial division."""
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True