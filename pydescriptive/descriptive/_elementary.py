"""
Elementary single-pass reductions and tolerance-based set operations.

Stateless helpers with no interpolation or caching. The statistics in
solvers.py and the cached random variable build on these.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescriptive.core.exceptions import NullScaleFactorError, NullStdDeviationError
from pydescriptive.core.validation import check_not_empty
from pydescriptive.descriptive.design import Dataset


def _values(data: ArrayLike | Dataset, name: str = 'data') -> NDArray[np.floating[Any]]:
    return Dataset.from_array(data, name=name).view()


def is_constant(x: NDArray) -> bool:
    """True when every element of the non-empty array ``x`` is equal."""
    return bool(np.ptp(x) == 0)


def total(data: ArrayLike | Dataset) -> float:
    """Sum of all elements. 0.0 for empty input."""
    return float(np.sum(_values(data)))


def minimum(data: ArrayLike | Dataset) -> float:
    """Smallest element. Raises EmptyDataError for empty input."""
    x = _values(data)
    check_not_empty(x, 'data')
    return float(np.min(x))


def maximum(data: ArrayLike | Dataset) -> float:
    """Largest element. Raises EmptyDataError for empty input."""
    x = _values(data)
    check_not_empty(x, 'data')
    return float(np.max(x))


def value_range(data: ArrayLike | Dataset) -> float:
    """Difference between maximum and minimum."""
    x = _values(data)
    check_not_empty(x, 'data')
    return float(np.max(x) - np.min(x))


def sort(data: ArrayLike | Dataset) -> NDArray[np.floating[Any]]:
    """Ascending sorted copy. Empty input gives an empty array."""
    return np.sort(_values(data))


def reverse_sort(data: ArrayLike | Dataset) -> NDArray[np.floating[Any]]:
    """Descending sorted copy. Empty input gives an empty array."""
    return sort(data)[::-1].copy()


def scale(data: ArrayLike | Dataset, factor: float) -> NDArray[np.floating[Any]]:
    """
    Multiply every element by ``factor``.

    Raises:
        EmptyDataError: If data is empty
        NullScaleFactorError: If factor is 0
    """
    x = _values(data)
    check_not_empty(x, 'data')
    if factor == 0:
        raise NullScaleFactorError("factor: scaling by 0 is not allowed")
    return x * float(factor)


def normalize(data: ArrayLike | Dataset) -> NDArray[np.floating[Any]]:
    """
    Z-scores ``(x - mean) / sd`` using the population standard deviation.

    Raises:
        EmptyDataError: If data is empty
        NullStdDeviationError: If all values are equal
    """
    x = _values(data)
    check_not_empty(x, 'data')
    if is_constant(x):
        raise NullStdDeviationError(
            f"data: standard deviation is 0 for n={len(x)}, cannot normalize",
            n=len(x),
        )
    mean = np.mean(x)
    sd = np.sqrt(np.mean((x - mean) ** 2))
    return (x - mean) / sd


def equals(a: ArrayLike | Dataset, b: ArrayLike | Dataset, epsilon: float = 0.0) -> bool:
    """
    Element-wise equality within ``epsilon``.

    Sequences of different lengths are never equal. Use epsilon=0 for
    exact comparison.
    """
    x = _values(a, 'a')
    y = _values(b, 'b')
    if len(x) != len(y):
        return False
    return bool(np.all(np.abs(x - y) <= epsilon))


def intersection(
    a: ArrayLike | Dataset,
    b: ArrayLike | Dataset,
    epsilon: float = 0.0,
) -> NDArray[np.floating[Any]]:
    """
    Elements of ``a`` that are within ``epsilon`` of some element of ``b``.

    Order and multiplicity follow ``a``.
    """
    x = _values(a, 'a')
    y = _values(b, 'b')
    if len(x) == 0 or len(y) == 0:
        return np.empty(0, dtype=np.float64)
    close = np.abs(x[:, None] - y[None, :]) <= epsilon
    return x[np.any(close, axis=1)].copy()


def union(
    a: ArrayLike | Dataset,
    b: ArrayLike | Dataset,
    epsilon: float = 0.0,
) -> NDArray[np.floating[Any]]:
    """
    Elements of ``a`` followed by those of ``b``, keeping only the first of
    any group of values within ``epsilon`` of an already kept value.
    """
    x = _values(a, 'a')
    y = _values(b, 'b')
    kept: list[float] = []
    for v in np.concatenate([x, y]):
        if not any(abs(k - v) <= epsilon for k in kept):
            kept.append(float(v))
    return np.asarray(kept, dtype=np.float64)


def frequency(data: ArrayLike | Dataset, epsilon: float = 0.0) -> list[tuple[float, int]]:
    """
    Occurrence counts with values within ``epsilon`` sharing a bucket.

    Each bucket is keyed by the first value that opened it; buckets are
    returned in first-seen order.

    Raises:
        EmptyDataError: If data is empty
    """
    x = _values(data)
    check_not_empty(x, 'data')

    keys: list[float] = []
    counts: list[int] = []
    for v in x:
        for i, k in enumerate(keys):
            if abs(k - v) <= epsilon:
                counts[i] += 1
                break
        else:
            keys.append(float(v))
            counts.append(1)

    return list(zip(keys, counts))
