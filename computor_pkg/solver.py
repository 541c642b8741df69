"""Core polynomial solving module.

This module provides:
- Dispatch on the degree of a reduced polynomial
- Dedicated handlers for constant, linear and quadratic equations
- Closed-form (exact) roots through SymPy for display

The approximate solver works on floats and uses the Newton square root from
numeric.py for the discriminant. Discriminants within ZERO_TOLERANCE of zero
count as zero.
"""

from __future__ import annotations

import sympy as sp

from .config import MAX_DEGREE, ZERO_TOLERANCE
from .logging_config import get_logger
from .numeric import absolute, sqrt_newton
from .parser import coefficient
from .types import (
    ALL_REALS,
    LINEAR_NONE,
    NO_SOLUTION,
    ONE_REAL,
    QUADRATIC_ONE_REAL,
    QUADRATIC_TWO_COMPLEX,
    QUADRATIC_TWO_REAL,
    DegreeTooHighError,
    SolutionResult,
)

logger = get_logger("solver")

X = sp.Symbol("X")


def solve_constant(c: float) -> SolutionResult:
    """Solve ``c = 0``: every real is a solution when c is zero, none otherwise."""
    if absolute(c) < ZERO_TOLERANCE:
        return SolutionResult(ALL_REALS)
    return SolutionResult(NO_SOLUTION)


def solve_linear(a: float, b: float) -> SolutionResult:
    """Solve a linear equation of the form a*X + b = 0.

    Args:
        a: Coefficient of X
        b: Constant term

    Returns:
        SolutionResult holding ``-b / a``, or LINEAR_NONE when a is zero
    """
    if absolute(a) < ZERO_TOLERANCE:
        return SolutionResult(LINEAR_NONE)
    return SolutionResult(ONE_REAL, roots=(-b / a,))


def solve_quadratic(a: float, b: float, c: float) -> SolutionResult:
    """Solve a quadratic equation a*X^2 + b*X + c = 0 with a != 0.

    Args:
        a: Coefficient of X^2
        b: Coefficient of X
        c: Constant term

    Returns:
        SolutionResult with two real roots, one real root, or a complex pair
        depending on the sign of the discriminant
    """
    discriminant = b * b - 4 * a * c
    logger.debug("Discriminant of (%r, %r, %r) = %r", a, b, c, discriminant)
    if discriminant > ZERO_TOLERANCE:
        sqrt_d = sqrt_newton(discriminant)
        x1 = (-b + sqrt_d) / (2 * a)
        x2 = (-b - sqrt_d) / (2 * a)
        return SolutionResult(
            QUADRATIC_TWO_REAL, roots=(x1, x2), discriminant=discriminant
        )
    if absolute(discriminant) <= ZERO_TOLERANCE:
        return SolutionResult(
            QUADRATIC_ONE_REAL, roots=(-b / (2 * a),), discriminant=discriminant
        )
    sqrt_d = sqrt_newton(-discriminant)
    return SolutionResult(
        QUADRATIC_TWO_COMPLEX,
        discriminant=discriminant,
        real=-b / (2 * a),
        imag=absolute(sqrt_d / (2 * a)),
    )


def solve(reduced: dict[int, float], degree: int) -> SolutionResult:
    """Solve a reduced polynomial given its degree.

    Args:
        reduced: Mapping of exponent to coefficient, equal to zero
        degree: Degree from polynomial_degree()

    Returns:
        SolutionResult describing the solutions

    Raises:
        DegreeTooHighError: If degree is above 2
    """
    if degree == 0:
        result = solve_constant(coefficient(reduced, 0))
    elif degree == 1:
        result = solve_linear(coefficient(reduced, 1), coefficient(reduced, 0))
    elif degree == 2:
        result = solve_quadratic(
            coefficient(reduced, 2), coefficient(reduced, 1), coefficient(reduced, 0)
        )
    else:
        raise DegreeTooHighError(degree)
    logger.debug("Degree %d solution: %r", degree, result)
    return result


def _to_rational(value: float) -> sp.Rational:
    # Shortest repr keeps decimal input such as 9.3 as 93/10
    return sp.Rational(repr(value))


def exact_roots(reduced: dict[int, float], degree: int) -> list[str]:
    """Closed-form roots of the reduced polynomial, computed with SymPy.

    Coefficients above ``degree`` are ignored, as they are numerically zero.
    Constant equations have no roots to list.

    Args:
        reduced: Mapping of exponent to coefficient
        degree: Degree from polynomial_degree()

    Returns:
        Root strings such as ["-5/4"] or ["-I", "I"], repeated by multiplicity

    Raises:
        DegreeTooHighError: If degree exceeds MAX_DEGREE
    """
    if degree > MAX_DEGREE:
        raise DegreeTooHighError(degree)
    if degree == 0:
        return []
    expr = sum(
        _to_rational(coefficient(reduced, exp)) * X**exp for exp in range(degree + 1)
    )
    poly = sp.Poly(expr, X)
    roots = sp.roots(poly, multiple=True)
    # Real roots ascending; a conjugate pair lists the negative imaginary part first
    ordered = sorted(roots, key=lambda r: (complex(r).imag, complex(r).real))
    return [str(root) for root in ordered]
