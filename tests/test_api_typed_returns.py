"""Test that the API returns typed dataclasses."""

import json

from computor_pkg.api import solve_equation
from computor_pkg.types import (
    ALL_REALS,
    NO_SOLUTION,
    ONE_REAL,
    QUADRATIC_TWO_COMPLEX,
    QUADRATIC_TWO_REAL,
    SolutionResult,
    SolveResult,
)


class TestAPITypedReturns:
    """Test solve_equation() results for the documented scenarios."""

    def test_returns_solve_result(self):
        result = solve_equation("5 * X^0 + 4 * X^1 = 1 * X^0")
        assert isinstance(result, SolveResult)
        assert isinstance(result.solution, SolutionResult)
        assert result.ok is True
        assert result.result_type == "equation"

    def test_linear_scenario(self):
        result = solve_equation("5 * X^0 + 4 * X^1 = 1 * X^0")
        assert result.reduced_form == "4 * X^0 + 4 * X^1 = 0"
        assert result.degree == 1
        assert result.solution.kind == ONE_REAL
        assert result.solution.roots == (-1.0,)

    def test_cancelled_square_term(self):
        result = solve_equation("5*X^0 + 4*X^1 + 1*X^2 = 1*X^2")
        assert result.reduced_form == "5 * X^0 + 4 * X^1 = 0"
        assert result.degree == 1
        assert result.solution.roots == (-1.25,)

    def test_no_solution_scenario(self):
        result = solve_equation("1*X^0 + 0*X^1 = 0*X^0")
        assert result.reduced_form == "1 * X^0 = 0"
        assert result.degree == 0
        assert result.solution.kind == NO_SOLUTION

    def test_all_reals_scenario(self):
        result = solve_equation("0*X^0 = 0*X^0")
        assert result.reduced_form == "0 * X^0 = 0"
        assert result.degree == 0
        assert result.solution.kind == ALL_REALS

    def test_no_terms_at_all(self):
        result = solve_equation("foo = bar")
        assert result.ok is True
        assert result.reduced_form == "0 = 0"
        assert result.solution.kind == ALL_REALS

    def test_complex_scenario(self):
        result = solve_equation("1 * X^0 + 1 * X^2 = 0 * X^0")
        assert result.degree == 2
        assert result.solution.kind == QUADRATIC_TWO_COMPLEX
        assert result.solution.real == 0
        assert abs(result.solution.imag - 1.0) < 1e-10

    def test_quadratic_from_header_example(self):
        result = solve_equation("5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0")
        assert result.reduced_form == "4 * X^0 + 4 * X^1 - 9.3 * X^2 = 0"
        assert result.degree == 2
        assert result.solution.kind == QUADRATIC_TWO_REAL
        for x in result.solution.roots:
            assert abs(-9.3 * x * x + 4 * x + 4) < 1e-4

    def test_degree_too_high_keeps_reduced_form(self):
        result = solve_equation("1 * X^3 + 2 * X^1 = 0 * X^0")
        assert result.ok is False
        assert result.result_type == "degree_too_high"
        assert result.reduced_form == "2 * X^1 + 1 * X^3 = 0"
        assert result.degree == 3
        assert result.solution is None
        assert result.code == "DEGREE_TOO_HIGH"

    def test_exact_roots_on_request(self):
        assert solve_equation("5*X^0 + 4*X^1 = 0*X^0").exact is None
        result = solve_equation("5*X^0 + 4*X^1 = 0*X^0", exact=True)
        assert result.exact == ["-5/4"]

    def test_to_dict_is_json_serializable(self):
        result = solve_equation("1 * X^2 - 4 * X^0 = 0 * X^0", exact=True)
        data = json.loads(json.dumps(result.to_dict()))
        assert data["ok"] is True
        assert data["type"] == "equation"
        assert data["degree"] == 2
        assert data["coefficients"] == {"0": -4.0, "2": 1.0}
        assert data["solution"]["kind"] == QUADRATIC_TWO_REAL
        assert data["exact"] == ["-2", "2"]

    def test_error_result(self):
        result = solve_equation("1 * X^0")
        assert isinstance(result, SolveResult)
        assert result.ok is False
        assert result.result_type == "error"
        assert result.reduced_form is None
        assert "ok=False" in repr(result)
