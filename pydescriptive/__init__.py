"""
PyDescriptive: descriptive statistics primitives for Python.

Correct, reusable building blocks for analytics and data preparation:
central tendency, dispersion, shape, rank-interpolated order statistics,
tolerance-based comparisons, a cached random variable and an
exclusion-aware shuffle.

Submodules:
    descriptive: One-shot statistics over a sample
    randvar: Random variable with a cache of dependent statistics
    shuffle: Seeded Fisher-Yates shuffle with fixed positions
"""

__version__ = "0.1.0"

from pydescriptive import descriptive
from pydescriptive import randvar
from pydescriptive import shuffle
from pydescriptive.descriptive import Dataset
from pydescriptive.randvar import CachedRandomVariable, UpdateExclusions
from pydescriptive.shuffle import ShuffleConfig, fisher_yates_shuffle

__all__ = [
    "__version__",
    "descriptive",
    "randvar",
    "shuffle",
    "Dataset",
    "CachedRandomVariable",
    "UpdateExclusions",
    "ShuffleConfig",
    "fisher_yates_shuffle",
]
