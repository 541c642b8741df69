"""Type definitions, result dataclasses and errors for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# SolutionResult kinds
NO_SOLUTION = "no_solution"
ALL_REALS = "all_reals"
ONE_REAL = "one_real"
LINEAR_NONE = "linear_none"
QUADRATIC_TWO_REAL = "quadratic_two_real"
QUADRATIC_ONE_REAL = "quadratic_one_real"
QUADRATIC_TWO_COMPLEX = "quadratic_two_complex"

MESSAGES = {
    NO_SOLUTION: "No solution.",
    ALL_REALS: "All real numbers are solutions.",
    ONE_REAL: "The solution is:",
    LINEAR_NONE: "No solution.",
    QUADRATIC_TWO_REAL: "Discriminant is strictly positive, the two solutions are:",
    QUADRATIC_ONE_REAL: "Discriminant is zero, the solution is:",
    QUADRATIC_TWO_COMPLEX: (
        "Discriminant is strictly negative, the two complex solutions are:"
    ),
}

DEGREE_TOO_HIGH_MESSAGE = (
    "The polynomial degree is strictly greater than 2, I can't solve."
)


@dataclass(frozen=True)
class SolutionResult:
    """Outcome of solving a reduced polynomial.

    For ``quadratic_two_complex`` the pair is ``real + imag*i`` and
    ``real - imag*i`` with ``imag > 0``; ``roots`` is empty.
    """

    kind: str
    roots: tuple[float, ...] = ()
    discriminant: float | None = None
    real: float | None = None
    imag: float | None = None

    @property
    def message(self) -> str:
        return MESSAGES[self.kind]

    @property
    def complex_pair(self) -> tuple[complex, complex] | None:
        if self.kind != QUADRATIC_TWO_COMPLEX:
            return None
        return complex(self.real, self.imag), complex(self.real, -self.imag)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"kind": self.kind, "message": self.message}
        if self.roots:
            result_dict["roots"] = list(self.roots)
        if self.discriminant is not None:
            result_dict["discriminant"] = self.discriminant
        if self.kind == QUADRATIC_TWO_COMPLEX:
            result_dict["real"] = self.real
            result_dict["imag"] = self.imag
        return result_dict


@dataclass
class SolveResult:
    """Result of running an equation through the whole pipeline."""

    ok: bool
    result_type: str  # "equation", "degree_too_high", "error"
    reduced_form: str | None = None
    degree: int | None = None
    reduced: dict[int, float] | None = None
    solution: SolutionResult | None = None
    exact: list[str] | None = None
    error: str | None = None
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok, "type": self.result_type}
        if self.error is not None:
            result_dict["error"] = self.error
            result_dict["code"] = self.code
        if self.reduced_form is not None:
            result_dict["reduced_form"] = self.reduced_form
        if self.degree is not None:
            result_dict["degree"] = self.degree
        if self.reduced is not None:
            # JSON object keys must be strings
            result_dict["coefficients"] = {
                str(exp): coef for exp, coef in sorted(self.reduced.items())
            }
        if self.solution is not None:
            result_dict["solution"] = self.solution.to_dict()
        if self.exact is not None:
            result_dict["exact"] = self.exact
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok and self.result_type == "error":
            return f"SolveResult(ok=False, result_type='error', error={self.error!r})"
        parts = [f"ok={self.ok}", f"result_type={self.result_type!r}"]
        if self.reduced_form is not None:
            parts.append(f"reduced_form={self.reduced_form!r}")
        if self.degree is not None:
            parts.append(f"degree={self.degree!r}")
        if self.solution is not None:
            parts.append(f"solution={self.solution!r}")
        if self.exact is not None:
            parts.append(f"exact={self.exact!r}")
        if self.error is not None:
            parts.append(f"error={self.error!r}")
        return f"SolveResult({', '.join(parts)})"


class ComputorError(Exception):
    """Base class for errors raised by the solving pipeline."""

    def __init__(self, message: str, code: str = "COMPUTOR_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(ComputorError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code)


class FormatError(ComputorError):
    """Raised when an equation does not contain exactly one '=' sign."""

    def __init__(self, message: str, code: str = "INVALID_FORMAT"):
        super().__init__(message, code)


class DegreeTooHighError(ComputorError):
    """Raised when the reduced polynomial is beyond the solver's reach."""

    def __init__(self, degree: int, message: str = DEGREE_TOO_HIGH_MESSAGE):
        self.degree = degree
        super().__init__(message, "DEGREE_TOO_HIGH")


class DomainError(ComputorError):
    """Raised on arithmetic outside a function's real domain."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        super().__init__(message, code)
