"""
Order-statistic rank interpolation.

Percentiles and quantiles are read off the sorted sample at the rank
position

    pos = p * (n + 1) / 100

with p in [0, 100] and ranks counted from 1. This is the Weibull plotting
position (Hyndman & Fan type 6). Positions at or below rank 1 clamp to
the minimum, positions at or above rank n clamp to the maximum, integral
positions select that order statistic directly, and anything else is a
linear interpolation between the two bracketing order statistics.

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray


def rank_position(percent: float, n: int) -> float:
    """1-based rank position of the ``percent``-th percentile in a sample of size ``n``."""
    return percent * (n + 1) / 100


def interpolate_rank(x: NDArray, pos: float) -> float:
    """
    Value of the sorted sample ``x`` at 1-based rank position ``pos``.

    Parameters
    ----------
    x : NDArray
        1D sorted array with no NaN values, length >= 1.
    pos : float
        Rank position, typically from rank_position().

    Returns
    -------
    float
    """
    n = len(x)

    if pos <= 1.0:
        return float(x[0])

    if pos >= n:
        return float(x[n - 1])

    lower_rank = math.floor(pos)
    h = pos - lower_rank

    if h == 0.0:
        return float(x[lower_rank - 1])

    lower = x[lower_rank - 1]
    upper = x[lower_rank]
    return float(lower + (upper - lower) * h)


def rank_quantile(x: NDArray, percents: NDArray) -> NDArray:
    """
    Vector form of interpolate_rank().

    Parameters
    ----------
    x : NDArray
        1D sorted array with no NaN values, length >= 1.
    percents : NDArray
        1D array of percentiles in [0, 100].

    Returns
    -------
    NDArray
        Quantile values, one per percentile.
    """
    percents = np.asarray(percents, dtype=np.float64)
    n = len(x)
    result = np.empty(len(percents), dtype=np.float64)
    for i, p in enumerate(percents):
        result[i] = interpolate_rank(x, rank_position(p, n))
    return result
