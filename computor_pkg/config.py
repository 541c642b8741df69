"""Centralized configuration for Computor.

This module defines:
- Numeric tolerances used by the degree classifier and solver
- Square root iteration limits
- Input validation limits
- Output formatting precision
- Regex patterns for parsing

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with COMPUTOR_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("computor")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout without installation
    VERSION = "1.0.0"

# Coefficients (and discriminants) whose magnitude is at or below this are zero
ZERO_TOLERANCE = float(os.getenv("COMPUTOR_ZERO_TOLERANCE", "1e-8"))

# Newton square root: stop when successive iterates differ by less than this
SQRT_EPSILON = float(os.getenv("COMPUTOR_SQRT_EPSILON", "1e-10"))
SQRT_MAX_ITERATIONS = int(os.getenv("COMPUTOR_SQRT_MAX_ITERATIONS", "10000"))

# Highest degree the solver accepts; the solver has no cubic branch
MAX_DEGREE = 2

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("COMPUTOR_MAX_INPUT_LENGTH", "10000"))  # characters

# Significant digits when printing roots
OUTPUT_PRECISION = int(os.getenv("COMPUTOR_OUTPUT_PRECISION", "10"))

# One term: optional sign, number with at most one decimal point, "*X^", exponent
TERM_REGEX = re.compile(r"([+-]?(?:\d+(?:\.\d*)?|\.\d+))\*X\^(\d+)")
WHITESPACE_RE = re.compile(r"\s+")
