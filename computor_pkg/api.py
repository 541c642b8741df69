"""Public API for Computor - returns structured objects without side effects."""

from __future__ import annotations

from .logging_config import get_logger
from .parser import parse_side, split_equation
from .reducer import polynomial_degree, reduce_sides, render_reduced
from .solver import exact_roots, solve
from .types import (
    DegreeTooHighError,
    FormatError,
    SolveResult,
    ValidationError,
)

logger = get_logger("api")


def solve_equation(equation: str, exact: bool = False) -> SolveResult:
    """Solve a polynomial equation of degree at most 2.

    Args:
        equation: Equation string (e.g., "5 * X^0 + 4 * X^1 = 1 * X^0")
        exact: Also compute closed-form roots with SymPy

    Returns:
        SolveResult with the reduced form, degree and solution

    Example:
        >>> from computor_pkg.api import solve_equation
        >>> result = solve_equation("5 * X^0 + 4 * X^1 = 1 * X^0")
        >>> print(result.reduced_form)
        4 * X^0 + 4 * X^1 = 0
        >>> print(result.solution.roots)
        (-1.0,)
    """
    try:
        left_text, right_text = split_equation(equation)
    except (FormatError, ValidationError) as e:
        logger.info("Rejected equation %r: %s", equation, e)
        return SolveResult(ok=False, result_type="error", error=str(e), code=e.code)

    reduced = reduce_sides(parse_side(left_text), parse_side(right_text))
    reduced_form = f"{render_reduced(reduced)} = 0"
    degree = polynomial_degree(reduced)

    try:
        solution = solve(reduced, degree)
    except DegreeTooHighError as e:
        return SolveResult(
            ok=False,
            result_type="degree_too_high",
            reduced_form=reduced_form,
            degree=degree,
            reduced=reduced,
            error=str(e),
            code=e.code,
        )

    exact_list = None
    if exact:
        try:
            exact_list = exact_roots(reduced, degree)
        except (TypeError, ValueError) as e:
            # Non-finite coefficients have no rational form
            logger.warning("Exact roots unavailable for %r: %s", reduced, e)

    return SolveResult(
        ok=True,
        result_type="equation",
        reduced_form=reduced_form,
        degree=degree,
        reduced=reduced,
        solution=solution,
        exact=exact_list,
    )
