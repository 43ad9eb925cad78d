"""
Dataset: immutable snapshot of a numeric sample.

Wraps a 1-D float64 array and guarantees that nothing the caller holds
can change it afterwards. Follows the pydescriptive Design pattern:
validated once at construction, read-only thereafter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescriptive.core.validation import check_array, check_1d, check_finite


@dataclass(frozen=True)
class Dataset:
    """
    Immutable ordered sample of real numbers, length n >= 0.

    The backing array is a private copy flagged read-only. ``values``
    hands out a fresh copy; ``view()`` hands out a read-only view for
    callers that only need to read.

    Construction:
        Dataset.from_array([1.0, 2.0, 3.0])
        Dataset.from_array(np.arange(10), name='counts')
    """
    _data: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_array(cls, data: ArrayLike | Dataset, *, name: str = 'data') -> Dataset:
        """
        Build Dataset from array-like data.

        Parameters
        ----------
        data : array-like or Dataset
            1D numeric sequence. A Dataset is returned unchanged, since it
            is already an immutable snapshot. Objects exposing ``.values``
            (pandas Series) are unwrapped first.
        name : str
            Parameter name used in validation messages.
        """
        if isinstance(data, Dataset):
            return data

        if hasattr(data, 'values') and not isinstance(data, np.ndarray):
            data = data.values

        arr = check_array(data, name)
        check_1d(arr, name)
        check_finite(arr, name)

        # np.array always copies, so later writes by the caller never reach us
        owned = np.array(arr, dtype=np.float64, copy=True)
        owned.setflags(write=False)
        return cls(_data=owned, _n=int(owned.shape[0]))

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Writable copy of the sample."""
        return self._data.copy()

    def view(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the sample (no copy)."""
        v = self._data.view()
        v.setflags(write=False)
        return v

    def sorted(self) -> NDArray[np.floating[Any]]:
        """Ascending sorted copy of the sample."""
        return np.sort(self._data)

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def is_empty(self) -> bool:
        return self._n == 0

    def __len__(self) -> int:
        return self._n

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return self._n == other._n and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((self._n, self._data.tobytes()))

    def __repr__(self) -> str:
        return f"Dataset(n={self._n})"
