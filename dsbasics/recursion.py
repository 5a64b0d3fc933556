"""Factorials and Fibonacci numbers."""


def factorial(n: int) -> int:
    """Return ``n!``; raise ValueError for negative ``n``."""
    if n < 0:
        raise ValueError("Factorial is not defined for negative numbers.")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting from ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("Fibonacci numbers are not defined for negative indices.")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers (empty if ``count <= 0``)."""
    series = []
    current, following = 0, 1
    for _ in range(max(count, 0)):
        series.append(current)
        current, following = following, current + following
    return series