"""Small numeric helpers used by the classifier and solver."""

from __future__ import annotations

from typing import Iterable

from .config import SQRT_EPSILON, SQRT_MAX_ITERATIONS
from .logging_config import get_logger
from .types import DomainError

logger = get_logger("numeric")


def absolute(x: float) -> float:
    return -x if x < 0 else x


def max_in(values: Iterable[float]) -> float:
    """Return the largest value; raises ValueError on an empty iterable."""
    iterator = iter(values)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("max_in() arg is an empty iterable") from None
    for value in iterator:
        if value > best:
            best = value
    return best


def sqrt_newton(n: float) -> float:
    """Square root by Newton's (Heron's) method.

    Starts from ``x = n`` and iterates ``x = (x + n / x) / 2`` until two
    successive iterates differ by less than ``SQRT_EPSILON``.

    Args:
        n: Non-negative number

    Returns:
        Approximation of the square root of n

    Raises:
        DomainError: If n is negative
    """
    if n < 0:
        raise DomainError(f"Cannot compute square root of negative number: {n}")
    if n == 0:
        return 0.0
    if n == float("inf"):
        return n

    x = float(n)
    for _ in range(SQRT_MAX_ITERATIONS):
        last = x
        x = (x + n / x) / 2
        if absolute(x - last) < SQRT_EPSILON:
            return x
    # Large inputs can oscillate between two neighbouring floats
    logger.warning(
        "sqrt_newton(%r) stopped after %d iterations", n, SQRT_MAX_ITERATIONS
    )
    return x
