"""Test error codes returned by various functions."""

import unittest

from computor_pkg.api import solve_equation
from computor_pkg.numeric import sqrt_newton
from computor_pkg.parser import split_equation
from computor_pkg.solver import solve
from computor_pkg.types import (
    ComputorError,
    DegreeTooHighError,
    DomainError,
    FormatError,
    ValidationError,
)


class TestErrorCodes(unittest.TestCase):
    """Test that functions return appropriate error codes."""

    def test_invalid_equation_format_error(self):
        """Multiple '=' signs are rejected with INVALID_FORMAT."""
        result = solve_equation("1*X^0 = 1*X^0 = 1*X^0")
        self.assertFalse(result.ok)
        self.assertEqual(result.code, "INVALID_FORMAT")
        error_msg = result.error.lower()
        self.assertTrue(
            "invalid" in error_msg or "format" in error_msg,
            f"Error message should mention invalid/format: {error_msg}",
        )

    def test_missing_equals_error(self):
        result = solve_equation("5 * X^0 + 4 * X^1")
        self.assertFalse(result.ok)
        self.assertEqual(result.result_type, "error")
        self.assertEqual(result.code, "INVALID_FORMAT")
        self.assertIsNone(result.degree)

    def test_too_long_error_code(self):
        """Overly long input returns TOO_LONG error code."""
        result = solve_equation("1*X^0 = " + "1" * 10001)
        self.assertFalse(result.ok)
        self.assertEqual(result.code, "TOO_LONG")
        self.assertIn("too long", result.error.lower())

    def test_degree_too_high_error_code(self):
        result = solve_equation("1 * X^4 = 0 * X^0")
        self.assertEqual(result.code, "DEGREE_TOO_HIGH")
        self.assertIn("greater than 2", result.error)

    def test_domain_error_is_loud(self):
        with self.assertRaises(DomainError):
            sqrt_newton(-4.0)

    def test_error_hierarchy(self):
        for exc_type in (FormatError, ValidationError, DomainError):
            self.assertTrue(issubclass(exc_type, ComputorError))
        self.assertTrue(issubclass(DegreeTooHighError, ComputorError))

    def test_exceptions_carry_message_and_code(self):
        try:
            split_equation("no equals here")
            self.fail("Should have raised FormatError")
        except FormatError as e:
            self.assertEqual(e.code, "INVALID_FORMAT")
            self.assertEqual(str(e), e.message)

        try:
            solve({5: 2.0}, 5)
            self.fail("Should have raised DegreeTooHighError")
        except DegreeTooHighError as e:
            self.assertEqual(e.degree, 5)
            self.assertEqual(e.code, "DEGREE_TOO_HIGH")

    def test_unparseable_terms_are_not_errors(self):
        result = solve_equation("hello * Y^2 = world")
        self.assertTrue(result.ok)
        self.assertEqual(result.reduced_form, "0 = 0")


if __name__ == "__main__":
    unittest.main()
