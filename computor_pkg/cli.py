from __future__ import annotations

import argparse
import json
import sys

from . import config
from .api import solve_equation
from .config import VERSION
from .logging_config import get_logger, setup_logging
from .parser import format_number
from .types import QUADRATIC_TWO_COMPLEX, SolveResult

logger = get_logger("cli")


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Computor health check...")
    print("-" * 50)

    # Check SymPy import
    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    # Check linear solving
    result = solve_equation("5 * X^0 + 4 * X^1 = 1 * X^0")
    if result.ok and result.solution is not None and result.solution.roots == (-1.0,):
        print("[OK] Linear solving works")
        checks_passed += 1
    else:
        print(f"[FAIL] Linear solving check failed: {result}")
        checks_failed += 1

    # Check quadratic solving against the exact roots
    result = solve_equation("1 * X^2 - 4 * X^0 = 0 * X^0", exact=True)
    if (
        result.ok
        and result.solution is not None
        and all(
            abs(root - expected) < 1e-9
            for root, expected in zip(sorted(result.solution.roots), (-2.0, 2.0))
        )
        and result.exact == ["-2", "2"]
    ):
        print("[OK] Quadratic solving works")
        checks_passed += 1
    else:
        print(f"[FAIL] Quadratic solving check failed: {result}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def format_roots(res: SolveResult) -> list[str]:
    """One display line per root; complex pairs print as "a + bi" and "a - bi"."""
    solution = res.solution
    if solution is None:
        return []
    if solution.kind == QUADRATIC_TWO_COMPLEX:
        real = format_number(solution.real)
        imag = format_number(solution.imag)
        return [f"{real} + {imag}i", f"{real} - {imag}i"]
    return [format_number(root) for root in solution.roots]


def print_result_pretty(res: SolveResult, output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Result of solve_equation()
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if res.result_type == "error":
        print("Error:", res.error, file=sys.stderr)
        return
    print("Reduced form:", res.reduced_form)
    print("Polynomial degree:", res.degree)
    if res.result_type == "degree_too_high":
        print(res.error)
        return
    print(res.solution.message)
    for line in format_roots(res):
        print(line)
    if res.exact:
        print("Exact:", ", ".join(res.exact))


def _exit_code(res: SolveResult) -> int:
    # Degree above 2 is a reported limitation, not a failure
    return 1 if res.result_type == "error" else 0


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Computor CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="computor",
        description="Solve polynomial equations of degree 2 or lower.",
    )
    parser.add_argument(
        "equation",
        nargs="?",
        help='Equation to solve, e.g. "5 * X^0 + 4 * X^1 = 1 * X^0"',
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Emit JSON for machine parsing (same as --format json)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Significant digits when printing roots"
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Also show closed-form roots (computed with SymPy)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    output_format = "json" if args.json else args.format

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.equation is None:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: missing equation argument", file=sys.stderr)
        return 1

    logger.debug("Solving %r", args.equation)
    res = solve_equation(args.equation, exact=args.exact)
    print_result_pretty(res, output_format)
    return _exit_code(res)


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m computor_pkg.cli"""
    sys.exit(main_entry())
