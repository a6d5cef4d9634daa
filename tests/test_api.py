"""Tests for the names exported from the top-level package."""

import gaussref


class TestPublicApi:
    def test_exports(self) -> None:
        for name in gaussref.__all__:
            assert hasattr(gaussref, name), name

    def test_two_functions_side_by_side(self) -> None:
        assert gaussref.gauss_recursive(5) == 5
        assert gaussref.gauss_closed_form(5) == 15

    def test_errors_catchable_as_builtins(self) -> None:
        assert issubclass(gaussref.InvalidArgumentError, ValueError)
        assert issubclass(gaussref.RecursionDepthError, RecursionError)
        assert issubclass(gaussref.ArithmeticOverflowError, OverflowError)
        assert issubclass(gaussref.ConfigError, gaussref.Error)
