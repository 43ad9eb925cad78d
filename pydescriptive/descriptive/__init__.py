"""
Descriptive statistics module.

One-shot statistics over a single numeric sample. Nothing is cached; for
repeated, dependent queries use pydescriptive.randvar.CachedRandomVariable.

Public API:
    Dataset                 - Immutable sample snapshot
    mean, median, mode      - Central tendency
    variance, standard_deviation, covariance
                            - Population dispersion (divide by n)
    skewness, kurtosis      - Shape (kurtosis is excess kurtosis)
    percentile, quantile, iqr
                            - Order statistics, (n + 1) rank interpolation
    entropy                 - Shannon entropy of the value distribution

Elementary helpers:
    total, minimum, maximum, value_range, sort, reverse_sort, scale,
    normalize, equals, intersection, union, frequency
"""

from pydescriptive.descriptive.design import Dataset
from pydescriptive.descriptive.solvers import (
    mean,
    median,
    mode,
    variance,
    standard_deviation,
    covariance,
    central_moment,
    skewness,
    kurtosis,
    percentile,
    quantile,
    iqr,
    entropy,
)
from pydescriptive.descriptive._elementary import (
    total,
    minimum,
    maximum,
    value_range,
    sort,
    reverse_sort,
    scale,
    normalize,
    equals,
    intersection,
    union,
    frequency,
)

__all__ = [
    "Dataset",
    "mean",
    "median",
    "mode",
    "variance",
    "standard_deviation",
    "covariance",
    "central_moment",
    "skewness",
    "kurtosis",
    "percentile",
    "quantile",
    "iqr",
    "entropy",
    "total",
    "minimum",
    "maximum",
    "value_range",
    "sort",
    "reverse_sort",
    "scale",
    "normalize",
    "equals",
    "intersection",
    "union",
    "frequency",
]
