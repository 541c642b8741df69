#!/usr/bin/env python3
"""
Computor - Polynomial Equation Solver

Main entry point for the Computor solver. This file serves as a thin
wrapper that delegates all functionality to the computor_pkg package.

Usage:
    python computor.py "5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0"
    python computor.py --format json "1 * X^2 + 1 * X^0 = 0 * X^0"
    python computor.py --help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Computor.

    Delegates to the computor_pkg.cli module, which handles argument
    parsing, solving and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from computor_pkg.cli import main_entry

    return main_entry()


if __name__ == "__main__":
    sys.exit(main())
