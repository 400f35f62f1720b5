"""Integer sequences and bit counting."""

from __future__ import annotations

TRIBONACCI_LIMIT = 37
FIB_LIMIT = 32
STAIRS_LIMIT = 100_000
WORD_BITS = 32
_WORD_MASK = (1 << WORD_BITS) - 1


def _check_range(n: int, low: int, high: int) -> None:
    if not low <= n <= high:
        raise ValueError(f"n must be between {low} and {high}, got {n}")


def tribonacci(n: int) -> int:
    """The n-th tribonacci number, with T0 = 0 and T1 = T2 = 1, for 0 <= n <= 37."""
    _check_range(n, 0, TRIBONACCI_LIMIT)
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a


def hamming_distance(x: int, y: int) -> int:
    """Number of differing bits among the low 32 bits of x and y."""
    return bin((x ^ y) & _WORD_MASK).count("1")


def fib(n: int) -> int:
    """The n-th Fibonacci number, with F0 = 0 and F1 = 1, for 0 <= n <= 32."""
    _check_range(n, 0, FIB_LIMIT)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def climb_stairs(n: int) -> int:
    """Ways to climb n stairs taking one or two steps at a time, for 1 <= n <= 100000."""
    _check_range(n, 1, STAIRS_LIMIT)
    a, b = 1, 2
    for _ in range(n - 1):
        a, b = b, a + b
    return a