"""
CachedRandomVariable: a sample with a cache of derived statistics.

Dependent statistics are computed once, in dependency order, each reusing
what came before it: the mean feeds the variance, the standard deviation
feeds skewness and kurtosis, max and min feed the range. Reads come from
the cache and never trigger a computation; callers pull fresh values by
calling update() after changing weights.

Not safe for concurrent mutation. update(), set_weight() and
define_meta() replace internal state and must be serialized by the
caller; reads must not overlap an in-flight update().
"""

from __future__ import annotations

import math
import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescriptive.core.result import Result
from pydescriptive.core.compute.timing import Timer
from pydescriptive.core.validation import check_array, check_1d, check_finite
from pydescriptive.core.exceptions import DifferentLengthError
from pydescriptive.descriptive.design import Dataset
from pydescriptive.descriptive import solvers
from pydescriptive.descriptive import _elementary as elementary
from pydescriptive.randvar.design import Metadata, MetadataUpdate, UpdateExclusions
from pydescriptive.randvar.solution import FIELD_ORDER, RandomVariableParams


class CachedRandomVariable:
    """
    Random variable backed by an immutable Dataset.

    Holds optional per-observation weights, optional descriptive metadata,
    and the statistics computed by the last update().

    Usage:
        rv = CachedRandomVariable([1.0, 3.5, 2.2])
        rv.set_weight([0.5, 1.2, 0.75])
        result = rv.update()
        rv.mean, rv.weighted_mean
        result.info['outcomes']['weighted_mean']   # 'ok'
    """

    def __init__(self, data: ArrayLike | Dataset):
        self._dataset = Dataset.from_array(data)
        self._weights: NDArray[np.floating[Any]] | None = None
        self._meta: Metadata | None = None
        self._params = RandomVariableParams()
        self._last_result: Result[RandomVariableParams] | None = None
        self._stale = True

    @property
    def name(self) -> str:
        return 'cpu_randvar'

    # --- Mutation ---

    def set_weight(self, w: ArrayLike) -> None:
        """
        Attach one weight per observation.

        The weights are copied. On failure the previous weights, if any,
        are kept.

        Raises:
            DifferentLengthError: If len(w) != number of observations
            ValidationError: If w is not a finite numeric sequence
        """
        arr = check_array(w, 'w')
        check_1d(arr, 'w')
        if arr.shape[0] != self._dataset.n:
            raise DifferentLengthError(
                f"w: length of weights and data differ: "
                f"weights={arr.shape[0]}, data={self._dataset.n}",
                expected=self._dataset.n,
                actual=arr.shape[0],
            )
        check_finite(arr, 'w')

        owned = np.array(arr, dtype=np.float64, copy=True)
        owned.setflags(write=False)
        self._weights = owned
        self._stale = True

    def define_meta(self, update: MetadataUpdate | None = None, **fields: Any) -> Metadata:
        """
        Apply a partial metadata change and return the resulting record.

        Either pass a MetadataUpdate or the fields as keywords:

            rv.define_meta(name='temperature', units='K')
            rv.define_meta(MetadataUpdate(source='sensor-3'))

        Fields not supplied keep their current value.
        """
        if update is None:
            update = MetadataUpdate(**fields)
        elif fields:
            raise TypeError("define_meta() takes a MetadataUpdate or keywords, not both")

        self._meta = update.apply(self._meta or Metadata())
        return self._meta

    def update(
        self,
        exclusions: UpdateExclusions | None = None,
        *,
        warn: bool = False,
    ) -> Result[RandomVariableParams]:
        """
        Recompute the cache.

        Order: mean, median, variance, standard deviation, then skewness,
        kurtosis, max, min, range and weighted mean. Each of the last six
        can be excluded; excluded fields are reset to 0.0.

        Never raises for field-level problems. A sample of size 0 leaves
        every field at 0.0; zero spread leaves skewness and kurtosis at
        0.0; a weighted mean without weights is 0.0 and adds a warning.

        Parameters
        ----------
        exclusions : UpdateExclusions, optional
            Fields to skip. Default computes everything.
        warn : bool
            Also emit the collected warnings as a RuntimeWarning.

        Returns
        -------
        Result[RandomVariableParams]
            ``info['outcomes']`` maps every field to 'ok', 'skipped',
            'zeroed' or 'warning'.
        """
        excl = exclusions if exclusions is not None else UpdateExclusions()

        timer = Timer()
        timer.start()

        x = self._dataset.view()
        n = self._dataset.n
        outcomes: dict[str, str] = {}
        warnings_list: list[str] = []
        values: dict[str, float] = {}

        if n == 0:
            for field in FIELD_ORDER:
                values[field] = 0.0
                outcomes[field] = 'skipped' if getattr(excl, field, False) else 'zeroed'
            warnings_list.append("data: empty sample, statistics set to 0")
        else:
            with timer.section('mean'):
                mean = float(np.mean(x))
            values['mean'] = mean
            outcomes['mean'] = 'ok'

            with timer.section('median'):
                values['median'] = solvers.median(self._dataset)
            outcomes['median'] = 'ok'

            constant = elementary.is_constant(x)
            with timer.section('variance'):
                var = 0.0 if constant else solvers.central_moment(x, mean, 2)
            values['variance'] = var
            outcomes['variance'] = 'ok'

            sd = math.sqrt(var)
            values['std_dev'] = sd
            outcomes['std_dev'] = 'ok'

            for field, k, offset in (('skewness', 3, 0.0), ('kurtosis', 4, 3.0)):
                if getattr(excl, field):
                    values[field], outcomes[field] = 0.0, 'skipped'
                elif constant:
                    values[field], outcomes[field] = 0.0, 'zeroed'
                else:
                    with timer.section(field):
                        values[field] = solvers.central_moment(x, mean, k) / sd ** k - offset
                    outcomes[field] = 'ok'

            for field, reduce in (('max', elementary.maximum), ('min', elementary.minimum)):
                if getattr(excl, field):
                    values[field], outcomes[field] = 0.0, 'skipped'
                else:
                    values[field], outcomes[field] = reduce(self._dataset), 'ok'

            if excl.range:
                values['range'], outcomes['range'] = 0.0, 'skipped'
            elif outcomes['max'] == 'ok' and outcomes['min'] == 'ok':
                values['range'], outcomes['range'] = values['max'] - values['min'], 'ok'
            else:
                values['range'], outcomes['range'] = elementary.value_range(self._dataset), 'ok'

            if excl.weighted_mean:
                values['weighted_mean'], outcomes['weighted_mean'] = 0.0, 'skipped'
            else:
                with timer.section('weighted_mean'):
                    wm, message = self._weighted_mean(x)
                values['weighted_mean'] = wm
                if message is None:
                    outcomes['weighted_mean'] = 'ok'
                else:
                    outcomes['weighted_mean'] = 'warning'
                    warnings_list.append(message)

        timer.stop()

        self._params = RandomVariableParams(**values)
        self._stale = False
        self._last_result = Result(
            params=self._params,
            info={
                'n': n,
                'outcomes': outcomes,
                'excluded': excl.excluded(),
                'has_weights': self._weights is not None,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

        if warn and warnings_list:
            warnings.warn(
                "CachedRandomVariable.update(): " + "; ".join(warnings_list),
                RuntimeWarning,
                stacklevel=2,
            )

        return self._last_result

    def _weighted_mean(self, x: NDArray) -> tuple[float, str | None]:
        """sum(x * w) / sum(w), or (0.0, reason) when undefined."""
        if self._weights is None:
            return 0.0, "weighted_mean: weights not defined, set with set_weight()"
        w_sum = float(np.sum(self._weights))
        if w_sum == 0:
            return 0.0, "weighted_mean: weights sum to 0"
        return float(np.sum(x * self._weights) / w_sum), None

    # --- Cached statistics (never recomputed on read) ---

    @property
    def mean(self) -> float:
        return self._params.mean

    @property
    def median(self) -> float:
        return self._params.median

    @property
    def variance(self) -> float:
        """Population variance."""
        return self._params.variance

    @property
    def std_dev(self) -> float:
        return self._params.std_dev

    @property
    def skewness(self) -> float:
        return self._params.skewness

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis."""
        return self._params.kurtosis

    @property
    def max(self) -> float:
        return self._params.max

    @property
    def min(self) -> float:
        return self._params.min

    @property
    def range(self) -> float:
        return self._params.range

    @property
    def weighted_mean(self) -> float:
        return self._params.weighted_mean

    @property
    def params(self) -> RandomVariableParams:
        """Snapshot of the whole cache."""
        return self._params

    @property
    def last_result(self) -> Result[RandomVariableParams] | None:
        """Result of the most recent update(), or None."""
        return self._last_result

    @property
    def stale(self) -> bool:
        """True until update() runs, and again after the weights change."""
        return self._stale

    # --- Data access ---

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Copy of the observations."""
        return self._dataset.values

    @property
    def weights(self) -> NDArray[np.floating[Any]] | None:
        """Copy of the weights, or None if not set."""
        return None if self._weights is None else self._weights.copy()

    @property
    def meta(self) -> Metadata | None:
        return self._meta

    @property
    def n(self) -> int:
        return self._dataset.n

    def __len__(self) -> int:
        return self._dataset.n

    def __repr__(self) -> str:
        state = "stale" if self._stale else "current"
        weighted = ", weighted" if self._weights is not None else ""
        label = f", name={self._meta.name!r}" if self._meta and self._meta.name else ""
        return f"CachedRandomVariable(n={self.n}{weighted}{label}, cache={state})"
