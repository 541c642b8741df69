"""Main entry point for running computor_pkg as a module.

This allows running Computor with:
    python -m computor_pkg "5 * X^0 + 4 * X^1 = 1 * X^0"
    python -m computor_pkg --health-check

This is equivalent to running:
    python -m computor_pkg.cli
    python computor.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
