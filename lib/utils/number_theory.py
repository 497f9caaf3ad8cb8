"""Integer helpers backing the ``/bfhl`` operations."""

from functools import reduce
from typing import Iterable, List


def fibonacci(n: int) -> List[int]:
    """Return the first ``n`` Fibonacci numbers starting from ``0, 1``."""

    if n <= 0:
        return []
    seq = [0, 1]
    for i in range(2, n):
        seq.append(seq[i - 1] + seq[i - 2])
    return seq[:n]


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm.  The result is never negative."""

    while b:
        a, b = b, a % b
    return abs(a)


def _lcm_pair(a: int, b: int) -> int:
    d = gcd(a, b)
    if d == 0:
        return 0
    return abs(a * b) // d


def hcf(values: Iterable[int]) -> int:
    items = list(values)
    if not items:
        raise ValueError("hcf() requires at least one value")
    # a single value still goes through gcd so the sign is normalised
    return reduce(gcd, items[1:], abs(items[0]))


def lcm(values: Iterable[int]) -> int:
    items = list(values)
    if not items:
        raise ValueError("lcm() requires at least one value")
    return reduce(_lcm_pair, items[1:], abs(items[0]))


__all__ = ["fibonacci", "is_prime", "gcd", "hcf", "lcm"]
