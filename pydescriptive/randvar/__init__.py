"""
Cached random variable.

A sample plus optional weights and metadata, with a cache of derived
statistics recomputed on demand in dependency order.

Example:
    from pydescriptive.randvar import CachedRandomVariable, UpdateExclusions

    rv = CachedRandomVariable(data)
    result = rv.update(UpdateExclusions(kurtosis=True))
    rv.variance, rv.skewness
    result.warnings
"""

from pydescriptive.randvar.design import (
    UNSET,
    Metadata,
    MetadataUpdate,
    UpdateExclusions,
)
from pydescriptive.randvar.solution import (
    FIELD_ORDER,
    FieldOutcome,
    RandomVariableParams,
)
from pydescriptive.randvar.variable import CachedRandomVariable

__all__ = [
    "CachedRandomVariable",
    "UpdateExclusions",
    "Metadata",
    "MetadataUpdate",
    "UNSET",
    "RandomVariableParams",
    "FieldOutcome",
    "FIELD_ORDER",
]
