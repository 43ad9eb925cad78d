"""
Tests for central tendency, dispersion and shape statistics.

Hand-derived expected values use the population convention (divide by n)
and excess kurtosis. Random-sample cases are cross-checked against
scipy.stats.skew / kurtosis with bias=True, which use the same formulas.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pydescriptive.core.compute.tolerances import CPU_FP64, CPU_FP64_CROSSCHECK
from pydescriptive.core.exceptions import (
    DifferentLengthError,
    EmptyDataError,
    NullStdDeviationError,
)
from pydescriptive.descriptive import (
    Dataset,
    covariance,
    kurtosis,
    mean,
    median,
    mode,
    skewness,
    standard_deviation,
    variance,
)


class TestMean:

    def test_arithmetic_average(self, textbook_sample):
        assert mean(textbook_sample) == pytest.approx(5.0, rel=CPU_FP64.rtol)

    def test_accepts_dataset(self):
        assert mean(Dataset.from_array([1.0, 2.0, 3.0])) == 2.0

    def test_matches_numpy(self, skewed_sample):
        np.testing.assert_allclose(mean(skewed_sample), np.mean(skewed_sample), rtol=CPU_FP64.rtol)

    def test_empty(self):
        with pytest.raises(EmptyDataError):
            mean([])

    def test_returns_python_float(self):
        assert type(mean([1, 2])) is float


class TestMedian:

    def test_even_length(self):
        assert median([1, 2, 3, 4]) == 2.5

    def test_odd_length_order_independent(self):
        assert median([3, 1, 2]) == 2.0

    def test_does_not_reorder_input(self):
        raw = np.array([3.0, 1.0, 2.0])
        median(raw)
        np.testing.assert_array_equal(raw, [3.0, 1.0, 2.0])

    def test_single(self):
        assert median([7.5]) == 7.5

    def test_empty(self):
        with pytest.raises(EmptyDataError):
            median([])


class TestMode:

    def test_single_winner(self):
        assert mode([1, 2, 2, 3]) == 2.0

    def test_tie_first_occurrence_wins(self):
        assert mode([1, 2, 2, 3, 3]) == 2.0
        assert mode([3, 3, 2, 2]) == 3.0

    def test_all_distinct_returns_first(self):
        assert mode([5.5, 1.5, 9.0]) == 5.5

    def test_tie_first_seen_not_smallest(self):
        assert mode([9, 1, 1, 9]) == 9.0

    def test_empty(self):
        with pytest.raises(EmptyDataError):
            mode([])


class TestVariance:

    def test_population_variance(self):
        assert variance([4, 2, 1, 3]) == pytest.approx(1.25, rel=CPU_FP64.rtol)

    def test_textbook(self, textbook_sample):
        assert variance(textbook_sample) == pytest.approx(4.0, rel=CPU_FP64.rtol)
        assert standard_deviation(textbook_sample) == pytest.approx(2.0, rel=CPU_FP64.rtol)

    def test_matches_numpy_ddof0(self, skewed_sample):
        np.testing.assert_allclose(
            variance(skewed_sample), np.var(skewed_sample, ddof=0), rtol=CPU_FP64.rtol
        )

    def test_single_element_zero(self):
        assert variance([3.0]) == 0.0

    def test_empty(self):
        with pytest.raises(EmptyDataError):
            variance([])
        with pytest.raises(EmptyDataError):
            standard_deviation([])


class TestCovariance:

    def test_with_itself_is_variance(self, skewed_sample):
        np.testing.assert_allclose(
            covariance(skewed_sample, skewed_sample),
            variance(skewed_sample),
            rtol=CPU_FP64.rtol,
        )

    def test_negative_relation(self):
        assert covariance([1, 2, 3], [3, 2, 1]) == pytest.approx(-2.0 / 3.0, rel=CPU_FP64.rtol)

    def test_matches_numpy_bias(self, rng):
        a = rng.standard_normal(50)
        b = 0.5 * a + rng.standard_normal(50)
        np.testing.assert_allclose(
            covariance(a, b), np.cov(a, b, bias=True)[0, 1], rtol=CPU_FP64_CROSSCHECK.rtol
        )

    def test_different_length(self):
        with pytest.raises(DifferentLengthError):
            covariance([1, 2, 3], [1, 2])

    def test_both_empty(self):
        with pytest.raises(EmptyDataError):
            covariance([], [])


class TestSkewness:

    def test_textbook(self, textbook_sample):
        # sum of cubed deviations 42, n=8, sd=2
        assert skewness(textbook_sample) == pytest.approx(0.65625, rel=CPU_FP64.rtol)

    def test_symmetric_zero(self):
        assert skewness([1, 2, 3, 4, 5]) == pytest.approx(0.0, abs=CPU_FP64.atol)

    def test_matches_scipy(self, skewed_sample):
        np.testing.assert_allclose(
            skewness(skewed_sample),
            sp_stats.skew(skewed_sample, bias=True),
            rtol=CPU_FP64_CROSSCHECK.rtol,
        )

    def test_single_element(self):
        with pytest.raises(NullStdDeviationError):
            skewness([2.0])

    def test_constant(self):
        with pytest.raises(NullStdDeviationError):
            skewness([5, 5, 5, 5])

    def test_empty(self):
        with pytest.raises(EmptyDataError):
            skewness([])


class TestKurtosis:

    def test_textbook_excess(self, textbook_sample):
        # sum of fourth-power deviations 356, n=8, sd=2: 2.78125 - 3
        assert kurtosis(textbook_sample) == pytest.approx(-0.21875, rel=CPU_FP64.rtol)

    def test_two_point_distribution(self):
        # Symmetric two-point mass has raw kurtosis 1
        assert kurtosis([0, 1, 0, 1]) == pytest.approx(-2.0, rel=CPU_FP64.rtol)

    def test_matches_scipy_fisher(self, skewed_sample):
        np.testing.assert_allclose(
            kurtosis(skewed_sample),
            sp_stats.kurtosis(skewed_sample, fisher=True, bias=True),
            rtol=CPU_FP64_CROSSCHECK.rtol,
        )

    def test_single_element(self):
        with pytest.raises(NullStdDeviationError):
            kurtosis([2.0])

    def test_empty(self):
        with pytest.raises(EmptyDataError):
            kurtosis([])


class TestZeroSpread:
    """Constant samples whose mean is not exactly representable."""

    @pytest.mark.parametrize("data", [[0.1] * 3, [1.1] * 5, [0.3] * 7])
    def test_variance_exactly_zero(self, data):
        assert variance(data) == 0.0
        assert standard_deviation(data) == 0.0

    @pytest.mark.parametrize("data", [[0.1] * 3, [1.1] * 5, [0.3] * 7])
    def test_shape_raises(self, data):
        with pytest.raises(NullStdDeviationError) as exc_info:
            skewness(data)
        assert exc_info.value.n == len(data)
        with pytest.raises(NullStdDeviationError):
            kurtosis(data)
