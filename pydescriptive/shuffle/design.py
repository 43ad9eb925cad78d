"""
ShuffleConfig: inputs for the exclusion-aware Fisher-Yates shuffle.

Immutable and validated at construction. The seed is always explicit;
ENTROPY_SEED is the documented opt-in for non-reproducible shuffles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from pydescriptive.core.exceptions import ValidationError


# Seed value that draws fresh entropy from the operating system
ENTROPY_SEED = 0


@dataclass(frozen=True)
class ShuffleConfig:
    """
    Frozen configuration for fisher_yates_shuffle().

    Attributes:
        seed: Non-negative integer seed. The same seed and exclusion set
            always produce the same permutation. ENTROPY_SEED (0) selects
            a fresh, non-reproducible generator.
        excluded_indices: Positions that keep their value.
    """
    seed: int
    excluded_indices: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self):
        if isinstance(self.seed, bool) or not isinstance(self.seed, (int, np.integer)):
            raise ValidationError(f"seed: must be an integer, got {self.seed!r}")
        if self.seed < 0:
            raise ValidationError(f"seed: must be >= 0, got {self.seed}")

        indices = frozenset(self.excluded_indices)
        for i in indices:
            if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
                raise ValidationError(f"excluded_indices: must be integers, got {i!r}")
            if i < 0:
                raise ValidationError(f"excluded_indices: must be >= 0, got {i}")

        object.__setattr__(self, 'seed', int(self.seed))
        object.__setattr__(self, 'excluded_indices', frozenset(int(i) for i in indices))

    @classmethod
    def nondeterministic(cls, excluded_indices: Iterable[int] = ()) -> ShuffleConfig:
        """Configuration seeded from OS entropy. Not reproducible."""
        return cls(seed=ENTROPY_SEED, excluded_indices=frozenset(excluded_indices))

    @property
    def is_deterministic(self) -> bool:
        return self.seed != ENTROPY_SEED

    def make_rng(self) -> np.random.Generator:
        """A new generator for one shuffle; never shared global state."""
        if self.seed == ENTROPY_SEED:
            return np.random.default_rng()
        return np.random.default_rng(self.seed)
