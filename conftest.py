"""
Pytest configuration and shared fixtures for the modulo_tools tests.

Primality testing lives here because only the tests need primes.
"""

import random

import pytest


def is_prime(n, k=10, rng=random):
    """Miller-Rabin primality test"""
    if n == 2 or n == 3:
        return True
    if n < 2 or n % 2 == 0:
        return False

    r = 0
    d = n - 1
    while d % 2 == 0:
        r += 1
        d //= 2

    for _ in range(k):
        a = rng.randrange(2, n - 1)
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


@pytest.fixture
def rng():
    """Seeded random source so every run sees the same moduli."""
    return random.Random(42)


@pytest.fixture
def random_prime(rng):
    """Factory returning an odd prime of exactly `bits` bits."""

    def generate(bits):
        while True:
            candidate = rng.getrandbits(bits)
            candidate |= (1 << bits - 1) | 1  # Set MSB and LSB
            if is_prime(candidate, rng=rng):
                return candidate

    return generate


@pytest.fixture
def prime_between(rng):
    """Factory returning an odd prime p with lo <= p < hi."""

    def generate(lo, hi):
        while True:
            candidate = rng.randrange(lo, hi) | 1
            if candidate < hi and is_prime(candidate, rng=rng):
                return candidate

    return generate
