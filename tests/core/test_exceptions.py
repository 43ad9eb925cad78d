"""
Tests for PyDescriptive exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyDescriptiveError)
    - Diagnostic attributes on the parameterized exceptions
    - Default attribute values (None for optional attributes)
"""

import pytest

from pydescriptive.core.exceptions import (
    DifferentLengthError,
    DimensionError,
    EmptyDataError,
    InvalidLogBaseError,
    InvalidPercentileError,
    InvalidQuantileError,
    NullScaleFactorError,
    NullStdDeviationError,
    NumericalError,
    PyDescriptiveError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyDescriptiveError."""

    @pytest.mark.parametrize("exc_type", [
        ValidationError,
        DimensionError,
        DifferentLengthError,
        EmptyDataError,
        InvalidPercentileError,
        InvalidQuantileError,
        InvalidLogBaseError,
        NullScaleFactorError,
        NumericalError,
        NullStdDeviationError,
    ])
    def test_is_pydescriptive_error(self, exc_type):
        with pytest.raises(PyDescriptiveError):
            raise exc_type("failure")

    def test_different_length_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise DifferentLengthError("lengths differ")

    def test_argument_errors_are_validation_errors(self):
        for exc_type in (EmptyDataError, InvalidPercentileError,
                         InvalidQuantileError, InvalidLogBaseError,
                         NullScaleFactorError):
            assert issubclass(exc_type, ValidationError)

    def test_null_std_deviation_is_numerical_not_validation(self):
        err = NullStdDeviationError("sd is 0")
        assert isinstance(err, NumericalError)
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:
    """Parameterized exceptions keep the offending values."""

    def test_different_length_attributes(self):
        err = DifferentLengthError("w: 2 vs 3", expected=3, actual=2)
        assert str(err) == "w: 2 vs 3"
        assert err.expected == 3
        assert err.actual == 2

    def test_different_length_defaults(self):
        err = DifferentLengthError("lengths differ")
        assert err.expected is None
        assert err.actual is None

    def test_empty_data_name(self):
        err = EmptyDataError("data: empty", name="data")
        assert err.name == "data"
        assert EmptyDataError("empty").name is None

    def test_invalid_percentile_value(self):
        assert InvalidPercentileError("bad", value=101.0).value == 101.0

    def test_invalid_quantile_k_m(self):
        err = InvalidQuantileError("bad", k=5, m=4)
        assert (err.k, err.m) == (5, 4)

    def test_invalid_log_base(self):
        assert InvalidLogBaseError("bad", log_base=1.0).log_base == 1.0

    def test_null_std_deviation_n(self):
        assert NullStdDeviationError("sd 0", n=1).n == 1
        assert NullStdDeviationError("sd 0").n is None
