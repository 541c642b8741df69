"""Input parsing module.

This module handles:
- Input validation (length limit, single '=' sign)
- Splitting an equation into its two sides
- Scanning one side for ``c*X^e`` terms into a coefficient mapping
- Number formatting for display
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from . import config
from .config import MAX_INPUT_LENGTH, TERM_REGEX, WHITESPACE_RE
from .logging_config import get_logger
from .types import FormatError, ValidationError

logger = get_logger("parser")


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value with specified precision.

    Integral values print without a fractional part and negative zero
    prints as ``0``.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: config.OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    try:
        number = float(val) + 0.0
    except (ValueError, TypeError):
        return str(val)
    fmt = "{:." + str(int(precision)) + "g}"
    return fmt.format(number)


def format_coefficient(val: float) -> str:
    """Format a coefficient without losing digits or using exponent notation.

    The shortest repr of the float is expanded to plain decimal, so the
    output reads back through parse_side() as the same value
    (e.g. 1e-05 -> "0.00001", 4.0 -> "4").
    """
    number = float(val) + 0.0
    if number != number or number in (float("inf"), float("-inf")):
        return str(number)
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def coefficient(mapping: dict[int, float], exponent: int) -> float:
    """Coefficient of ``X^exponent``; a missing exponent means zero."""
    return mapping.get(exponent, 0.0)


def split_equation(equation: str) -> tuple[str, str]:
    """Split an equation into its left and right sides.

    Raises:
        ValidationError: If the input exceeds MAX_INPUT_LENGTH
        FormatError: If the equation does not contain exactly one '='
    """
    if len(equation) > MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (>{MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    sides = equation.split("=")
    if len(sides) != 2:
        raise FormatError("Invalid equation format. Must contain one '=' sign.")
    return sides[0], sides[1]


def parse_side(side: str) -> dict[int, float]:
    """Collect the ``c*X^e`` terms of one side of an equation.

    Whitespace is removed first. Text that does not form a term is skipped,
    so a side without any terms yields an empty mapping. Coefficients of a
    repeated exponent are summed.

    Args:
        side: Text on one side of the '=' sign (e.g., "5 * X^0 + 4 * X^1")

    Returns:
        Mapping of exponent to coefficient (e.g., {0: 5.0, 1: 4.0})
    """
    clean = WHITESPACE_RE.sub("", side)
    coeffs: dict[int, float] = {}
    for match in TERM_REGEX.finditer(clean):
        coef = float(match.group(1))
        exp = int(match.group(2))
        coeffs[exp] = coeffs.get(exp, 0.0) + coef
    logger.debug("Parsed side %r -> %r", side, coeffs)
    return coeffs
