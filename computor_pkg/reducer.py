"""Reduction of both equation sides into one canonical polynomial.

Provides the reduced coefficient mapping (left minus right), its display
string and the degree classifier.
"""

from __future__ import annotations

from .config import ZERO_TOLERANCE
from .logging_config import get_logger
from .numeric import absolute, max_in
from .parser import coefficient, format_coefficient

logger = get_logger("reducer")


def reduce_sides(
    left: dict[int, float], right: dict[int, float]
) -> dict[int, float]:
    """Move every term to the left side.

    Every exponent present on either side gets an entry, even when the
    difference is exactly zero.

    Args:
        left: Coefficients parsed from the left side
        right: Coefficients parsed from the right side

    Returns:
        Mapping of exponent to ``left[exp] - right[exp]``
    """
    reduced = {
        exp: coefficient(left, exp) - coefficient(right, exp)
        for exp in sorted(set(left) | set(right))
    }
    logger.debug("Reduced %r - %r -> %r", left, right, reduced)
    return reduced


def render_reduced(reduced: dict[int, float]) -> str:
    """Render a reduced mapping by increasing exponent (e.g. "4 * X^0 - 2 * X^1").

    Zero terms are hidden unless the mapping holds a single entry. An empty
    rendering is "0".
    """
    exponents = sorted(reduced)
    terms: list[str] = []
    for exp in exponents:
        coef = reduced[exp]
        if coef == 0 and len(exponents) > 1:
            continue
        if not terms:
            sign = "-" if coef < 0 else ""
        else:
            sign = " - " if coef < 0 else " + "
        terms.append(f"{sign}{format_coefficient(absolute(coef))} * X^{exp}")
    return "".join(terms) or "0"


def polynomial_degree(reduced: dict[int, float]) -> int:
    """Highest exponent whose coefficient is not numerically zero, else 0."""
    significant = [exp for exp, coef in reduced.items() if absolute(coef) > ZERO_TOLERANCE]
    if not significant:
        return 0
    return int(max_in(significant))
