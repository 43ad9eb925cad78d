"""
Exclusion-aware Fisher-Yates shuffle.

Walks the sequence from the last position down to position 1. Excluded
positions are skipped, and since the pool of swap partners is built once
from the non-excluded positions, an excluded position is never chosen as
a partner either. The result is a permutation of the input in which every
excluded position keeps its value.
"""

from __future__ import annotations

from typing import Any, MutableSequence

import numpy as np

from pydescriptive.core.exceptions import DimensionError, ValidationError
from pydescriptive.shuffle.design import ShuffleConfig


def valid_indices(n: int, excluded: frozenset[int]) -> list[int]:
    """Positions 0..n-1 that may move, in ascending order."""
    return [i for i in range(n) if i not in excluded]


def fisher_yates_shuffle(
    seq: MutableSequence[Any] | np.ndarray,
    config: ShuffleConfig,
) -> None:
    """
    Shuffle ``seq`` in place, keeping ``config.excluded_indices`` fixed.

    Parameters
    ----------
    seq : mutable sequence or 1D numpy array
        Modified in place.
    config : ShuffleConfig
        Seed and positions to keep fixed.

    Raises
    ------
    ValidationError
        If an excluded index is outside [0, len(seq)).
    DimensionError
        If seq is a numpy array with more than one dimension.

    Examples
    --------
    >>> data = list(range(10))
    >>> fisher_yates_shuffle(data, ShuffleConfig(seed=3, excluded_indices={1, 2, 7}))
    >>> data[1], data[2], data[7]
    (1, 2, 7)
    """
    if isinstance(seq, np.ndarray) and seq.ndim != 1:
        raise DimensionError(
            f"seq: expected 1D array, got {seq.ndim}D with shape {seq.shape}"
        )

    n = len(seq)
    excluded = config.excluded_indices
    out_of_range = sorted(i for i in excluded if i >= n)
    if out_of_range:
        raise ValidationError(
            f"excluded_indices: {out_of_range} out of range for length {n}"
        )

    pool = valid_indices(n, excluded)
    if not pool:
        return

    rng = config.make_rng()

    for i in range(n - 1, 0, -1):
        if i in excluded:
            continue
        j = pool[int(rng.integers(len(pool)))]
        seq[i], seq[j] = seq[j], seq[i]
