"""
Descriptive statistics over a single numeric sample.

Every function accepts a Dataset or any 1D array-like, works on a
read-only view or a private copy, and returns a Python float. Failures
are raised as pydescriptive exceptions; no function falls back to a
default value.

Conventions:
    - variance and standard deviation are population moments (divide by n)
    - skewness and kurtosis are the standardized third and fourth central
      moments; kurtosis is reported as excess kurtosis (minus 3)
    - percentiles use the (n + 1) rank position, see _rank.py
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from pydescriptive.core.compute.tolerances import FREQUENCY_EPSILON
from pydescriptive.core.exceptions import (
    InvalidLogBaseError,
    InvalidPercentileError,
    InvalidQuantileError,
    NullStdDeviationError,
)
from pydescriptive.core.validation import check_consistent_length, check_not_empty
from pydescriptive.descriptive.design import Dataset
from pydescriptive.descriptive._elementary import frequency, is_constant
from pydescriptive.descriptive._rank import interpolate_rank, rank_position, rank_quantile


def _ensure_dataset(data: ArrayLike | Dataset, name: str = 'data') -> Dataset:
    """Convert raw array to Dataset if needed."""
    return Dataset.from_array(data, name=name)


def _nonempty(data: ArrayLike | Dataset, name: str = 'data') -> NDArray[np.floating[Any]]:
    x = _ensure_dataset(data, name).view()
    check_not_empty(x, name)
    return x


def central_moment(x: NDArray, center: float, k: int) -> float:
    """
    k-th moment of ``x`` about ``center``, divided by n.

    Takes the center explicitly so callers that already hold the mean
    do not recompute it. ``x`` must be non-empty.
    """
    return float(np.sum((x - center) ** k) / len(x))


def _standardized_moment(x: NDArray, k: int, label: str) -> float:
    if is_constant(x):
        raise NullStdDeviationError(
            f"{label}: standard deviation is 0 for n={len(x)}", n=len(x)
        )
    mean = float(np.mean(x))
    sd = math.sqrt(central_moment(x, mean, 2))
    return central_moment(x, mean, k) / sd ** k


# --- Central tendency ---

def mean(data: ArrayLike | Dataset) -> float:
    """
    Arithmetic mean.

    Raises:
        EmptyDataError: If data is empty
    """
    return float(np.mean(_nonempty(data)))


def median(data: ArrayLike | Dataset) -> float:
    """
    Middle value of the sorted sample; average of the two middle values
    when n is even. Input order is irrelevant.

    Raises:
        EmptyDataError: If data is empty
    """
    x = np.sort(_nonempty(data))
    n = len(x)
    if n % 2 == 1:
        return float(x[n // 2])
    return float((x[n // 2 - 1] + x[n // 2]) / 2)


def mode(data: ArrayLike | Dataset) -> float:
    """
    Most frequent value.

    When several values share the highest count, the one that appears
    first in the input wins.

    Raises:
        EmptyDataError: If data is empty
    """
    x = _nonempty(data)
    values, first_index, counts = np.unique(x, return_index=True, return_counts=True)
    tied = np.flatnonzero(counts == counts.max())
    winner = tied[np.argmin(first_index[tied])]
    return float(values[winner])


# --- Dispersion ---

def variance(data: ArrayLike | Dataset) -> float:
    """
    Population variance, sum((x - mean)^2) / n.

    Exactly 0.0 when all values are equal.

    Raises:
        EmptyDataError: If data is empty
    """
    x = _nonempty(data)
    if is_constant(x):
        return 0.0
    return central_moment(x, float(np.mean(x)), 2)


def standard_deviation(data: ArrayLike | Dataset) -> float:
    """Square root of the population variance."""
    return math.sqrt(variance(data))


def covariance(a: ArrayLike | Dataset, b: ArrayLike | Dataset) -> float:
    """
    Population covariance, sum((a - mean_a)(b - mean_b)) / n.

    Raises:
        DifferentLengthError: If a and b have different lengths
        EmptyDataError: If both are empty
    """
    x = _ensure_dataset(a, 'a').view()
    y = _ensure_dataset(b, 'b').view()
    check_consistent_length(x, y, names=('a', 'b'))
    check_not_empty(x, 'a')
    return float(np.sum((x - np.mean(x)) * (y - np.mean(y))) / len(x))


# --- Shape ---

def skewness(data: ArrayLike | Dataset) -> float:
    """
    Third standardized central moment, sum((x - mean)^3) / (n * sd^3).

    Raises:
        EmptyDataError: If data is empty
        NullStdDeviationError: If the standard deviation is 0
    """
    return _standardized_moment(_nonempty(data), 3, 'skewness')


def kurtosis(data: ArrayLike | Dataset) -> float:
    """
    Excess kurtosis, sum((x - mean)^4) / (n * sd^4) - 3.

    A normal distribution scores 0.

    Raises:
        EmptyDataError: If data is empty
        NullStdDeviationError: If the standard deviation is 0
    """
    return _standardized_moment(_nonempty(data), 4, 'kurtosis') - 3.0


# --- Order statistics ---

def percentile(data: ArrayLike | Dataset, p: float) -> float:
    """
    The p-th percentile by (n + 1) rank interpolation.

    Parameters
    ----------
    data : array-like or Dataset
    p : float
        Percentile in [0, 100].

    Raises
    ------
    EmptyDataError
        If data is empty.
    InvalidPercentileError
        If p is outside [0, 100].

    Examples
    --------
    >>> percentile([50, 55, 60, 62, 65, 70, 72, 75, 80, 85], 25)
    58.75
    """
    x = _nonempty(data)
    if not 0 <= p <= 100:
        raise InvalidPercentileError(
            f"p: percentile must be in [0, 100], got {p}", value=p
        )
    return interpolate_rank(np.sort(x), rank_position(p, len(x)))


def quantile(data: ArrayLike | Dataset, k: float, m: int) -> float:
    """
    The k-th of m quantiles, i.e. percentile(data, 100 * k / m).

    Parameters
    ----------
    data : array-like or Dataset
    k : float
        Quantile index in [0, m].
    m : int
        Number of quantiles (4 for quartiles, 10 for deciles, ...).

    Raises
    ------
    EmptyDataError
        If data is empty.
    InvalidQuantileError
        If m is not a positive integer or k is outside [0, m].
    """
    x = _nonempty(data)
    if isinstance(m, bool) or not isinstance(m, (int, np.integer)) or m < 1:
        raise InvalidQuantileError(
            f"m: number of quantiles must be a positive integer, got {m!r}", k=k, m=m
        )
    if not 0 <= k <= m:
        raise InvalidQuantileError(
            f"k: quantile index must be in [0, {m}], got {k}", k=k, m=m
        )
    p = 100 * k / m
    return interpolate_rank(np.sort(x), rank_position(p, len(x)))


def iqr(data: ArrayLike | Dataset) -> float:
    """
    Interquartile range, percentile 75 minus percentile 25.

    Raises:
        EmptyDataError: If data is empty
    """
    x = _nonempty(data)
    q1, q3 = rank_quantile(np.sort(x), np.array([25.0, 75.0]))
    return float(q3 - q1)


# --- Information ---

def entropy(data: ArrayLike | Dataset, log_base: float = 0.0) -> float:
    """
    Shannon entropy of the empirical distribution of values.

    Values closer than 1e-8 are counted as the same outcome.

    Parameters
    ----------
    data : array-like or Dataset
    log_base : float
        Logarithm base. 0 selects the natural logarithm.

    Raises
    ------
    EmptyDataError
        If data is empty.
    InvalidLogBaseError
        If log_base is 1, negative or not finite.
    """
    x = _nonempty(data)
    if not math.isfinite(log_base) or log_base == 1 or log_base < 0:
        raise InvalidLogBaseError(
            f"log_base: must be 0 (natural) or a positive base other than 1, got {log_base}",
            log_base=log_base,
        )
    counts = np.array([c for _, c in frequency(x, FREQUENCY_EPSILON)], dtype=np.float64)
    base = None if log_base == 0 else float(log_base)
    return float(stats.entropy(counts, base=base))

