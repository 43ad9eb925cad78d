"""
CachedRandomVariable result types.

RandomVariableParams is the snapshot of the cache produced by update();
it is the payload of the Result[P] envelope returned to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Literal


# Per-field outcome recorded in Result.info['outcomes']:
#   ok       computed from the data
#   skipped  excluded by the caller, reset to 0.0
#   zeroed   undefined for this sample (n = 0, or sd = 0 for shape), set to 0.0
#   warning  could not be computed (e.g. no weights), set to 0.0, see warnings
FieldOutcome = Literal['ok', 'skipped', 'zeroed', 'warning']


@dataclass(frozen=True)
class RandomVariableParams:
    """
    Cached statistics of a random variable.

    All fields are 0.0 until update() has run. Variance and standard
    deviation are population moments; kurtosis is excess kurtosis;
    weighted_mean is normalized by the sum of weights.
    """
    mean: float = 0.0
    median: float = 0.0
    variance: float = 0.0
    std_dev: float = 0.0
    skewness: float = 0.0
    kurtosis: float = 0.0
    max: float = 0.0
    min: float = 0.0
    range: float = 0.0
    weighted_mean: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Order in which update() fills the cache
FIELD_ORDER: tuple[str, ...] = tuple(f.name for f in fields(RandomVariableParams))
