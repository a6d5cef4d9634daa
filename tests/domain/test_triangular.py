"""Tests for the reference and closed-form triangular-number functions.

``gauss_recursive`` is kept as a faithful port: its step adds ``1``, so
it returns ``n``. The divergence tests below guard against a silent fix.
"""

import sys

import pytest

from gaussref.domain.int32 import INT32_MAX, INT32_MIN, OverflowMode
from gaussref.domain.triangular import (
    MAX_RECURSION_DEPTH,
    Method,
    gauss_closed_form,
    gauss_iterative,
    gauss_recursive,
    gauss_summation,
    resolve,
)
from gaussref.exceptions import (
    ArithmeticOverflowError,
    InvalidArgumentError,
    RecursionDepthError,
)


class TestClosedForm:
    def test_matches_formula_up_to_1000(self) -> None:
        for n in range(1, 1001):
            assert gauss_closed_form(n) == n * (n + 1) // 2, n

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(1, 1), (2, 3), (5, 15), (10, 55), (0, 0)],
    )
    def test_literal_cases(self, n: int, expected: int) -> None:
        assert gauss_closed_form(n) == expected

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(-1, 0), (-2, 1), (-5, 10)],
    )
    def test_negative_inputs_use_same_formula(self, n: int, expected: int) -> None:
        assert gauss_closed_form(n) == expected

    def test_rejects_out_of_range_input(self) -> None:
        with pytest.raises(InvalidArgumentError):
            gauss_closed_form(INT32_MAX + 1)

    def test_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            gauss_closed_form(2.5)  # type: ignore[arg-type]

    def test_unknown_overflow_mode(self) -> None:
        with pytest.raises(ValueError):
            gauss_closed_form(3, overflow="saturate")


class TestClosedFormOverflow:
    def test_widened_boundary(self) -> None:
        assert gauss_closed_form(65536) == 2147516416

    def test_widened_is_default(self) -> None:
        assert gauss_closed_form(65536) == gauss_closed_form(65536, overflow=OverflowMode.WIDEN)

    def test_widened_extremes(self) -> None:
        assert gauss_closed_form(INT32_MAX) == 2305843008139952128
        assert gauss_closed_form(INT32_MIN) == 2305843008139952128

    def test_wrapped_boundary(self) -> None:
        assert gauss_closed_form(65536, overflow="wrap") == 32768

    def test_wrapped_first_product_overflow(self) -> None:
        assert gauss_closed_form(46341, overflow=OverflowMode.WRAP) == -1073716337

    def test_wrapped_successor_overflow(self) -> None:
        # n + 1 wraps to INT32_MIN before the multiply.
        assert gauss_closed_form(INT32_MAX, overflow="wrap") == -1073741824

    def test_wrapped_agrees_below_overflow(self) -> None:
        for n in (0, 1, 100, 46340, -46341):
            assert gauss_closed_form(n, overflow="wrap") == gauss_closed_form(n)

    def test_checked_last_safe_input(self) -> None:
        assert gauss_closed_form(46340, overflow="checked") == 1073720970

    def test_checked_first_unsafe_input(self) -> None:
        with pytest.raises(ArithmeticOverflowError, match=r"n \* \(n \+ 1\)"):
            gauss_closed_form(46341, overflow="checked")

    def test_checked_raises_at_65536(self) -> None:
        with pytest.raises(OverflowError):
            gauss_closed_form(65536, overflow=OverflowMode.CHECKED)

    def test_checked_successor(self) -> None:
        with pytest.raises(ArithmeticOverflowError) as excinfo:
            gauss_closed_form(INT32_MAX, overflow="checked")
        assert excinfo.value.operation == "n + 1"


class TestRecursive:
    def test_base_case(self) -> None:
        assert gauss_recursive(1) == 1

    def test_returns_n_not_triangular_number(self) -> None:
        """Faithful port: the step adds 1, so the result is n, not 15."""
        assert gauss_recursive(5) == 5

    def test_returns_n_across_range(self) -> None:
        for n in range(1, 200):
            assert gauss_recursive(n) == n

    def test_diverges_from_closed_form_above_one(self) -> None:
        """Regression guard: fixing the step would make these equal."""
        assert gauss_recursive(1) == gauss_closed_form(1)
        for n in range(2, 200):
            assert gauss_recursive(n) != gauss_closed_form(n), n

    @pytest.mark.parametrize("n", [0, -1, INT32_MIN])
    def test_rejects_non_positive(self, n: int) -> None:
        with pytest.raises(InvalidArgumentError, match="n must be >= 1"):
            gauss_recursive(n)

    def test_reaches_default_ceiling(self) -> None:
        assert gauss_recursive(MAX_RECURSION_DEPTH) == MAX_RECURSION_DEPTH

    def test_default_ceiling_within_interpreter_limit(self) -> None:
        assert MAX_RECURSION_DEPTH < sys.getrecursionlimit()

    def test_rejects_beyond_ceiling(self) -> None:
        with pytest.raises(RecursionDepthError):
            gauss_recursive(MAX_RECURSION_DEPTH + 1)

    def test_depth_error_is_recursion_error(self) -> None:
        with pytest.raises(RecursionError):
            gauss_recursive(11, max_depth=10)

    def test_custom_ceiling(self) -> None:
        assert gauss_recursive(10, max_depth=10) == 10

    def test_invalid_ceiling(self) -> None:
        with pytest.raises(InvalidArgumentError, match="max_depth"):
            gauss_recursive(1, max_depth=0)


class TestIterative:
    def test_matches_recursive(self) -> None:
        for n in range(1, MAX_RECURSION_DEPTH + 1):
            assert gauss_iterative(n) == gauss_recursive(n)

    def test_no_depth_limit(self) -> None:
        assert gauss_iterative(100_000) == 100_000

    def test_rejects_non_positive(self) -> None:
        with pytest.raises(InvalidArgumentError):
            gauss_iterative(0)


class TestSummation:
    def test_agrees_with_closed_form(self) -> None:
        for n in range(1, 1001):
            assert gauss_summation(n) == gauss_closed_form(n)

    def test_literal(self) -> None:
        assert gauss_summation(5) == 15

    def test_rejects_non_positive(self) -> None:
        with pytest.raises(InvalidArgumentError):
            gauss_summation(-3)


class TestResolve:
    def test_recursive_binds_ceiling(self) -> None:
        fn = resolve(Method.RECURSIVE, max_depth=3)
        assert fn(3) == 3
        with pytest.raises(RecursionDepthError):
            fn(4)

    def test_closed_form_binds_overflow(self) -> None:
        fn = resolve("closed_form", overflow="wrap")
        assert fn(65536) == 32768

    def test_iterative_and_summation(self) -> None:
        assert resolve("iterative")(7) == 7
        assert resolve("summation")(7) == 28

    def test_unknown_method(self) -> None:
        with pytest.raises(ValueError):
            resolve("memoized")


class TestLinearCostDocumented:
    @pytest.mark.parametrize("fn", [gauss_iterative, gauss_summation])
    def test_docstring_states_cost(self, fn) -> None:
        assert "O(n)" in (fn.__doc__ or "")
