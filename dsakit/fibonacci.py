"""Three ways to compute Fibonacci numbers."""

from __future__ import annotations

from functools import cache


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("Fibonacci index must be non-negative")


def fib_iterative(n: int) -> int:
    """Return the ``n``-th Fibonacci number by walking the sequence."""
    _check(n)
    previous, current = 0, 1
    if n == 0:
        return previous
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


@cache
def _fib(n: int) -> int:
    if n <= 1:
        return n
    return _fib(n - 1) + _fib(n - 2)


def fib_recursive(n: int) -> int:
    """Return the ``n``-th Fibonacci number by memoised recursion."""
    _check(n)
    return _fib(n)


def fib_table(n: int) -> int:
    """Return the ``n``-th Fibonacci number by filling a table bottom-up."""
    _check(n)
    table = [0, 1]
    for _ in range(2, n + 1):
        table.append(table[-1] + table[-2])
    return table[n]