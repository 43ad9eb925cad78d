"""
Seeded in-place permutation with fixed positions.

Example:
    from pydescriptive.shuffle import ShuffleConfig, fisher_yates_shuffle

    fisher_yates_shuffle(values, ShuffleConfig(seed=3, excluded_indices={1, 2, 7}))
"""

from pydescriptive.shuffle.design import ENTROPY_SEED, ShuffleConfig
from pydescriptive.shuffle.fisher_yates import fisher_yates_shuffle, valid_indices

__all__ = [
    "ENTROPY_SEED",
    "ShuffleConfig",
    "fisher_yates_shuffle",
    "valid_indices",
]
