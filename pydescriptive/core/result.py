"""
Generic result container for PyDescriptive aggregate computations.

The Result class provides a standardized envelope for computations that
produce several values at once and may hit recoverable conditions along
the way (for example a weighted mean requested without weights). Rather
than logging and moving on, such conditions are recorded on the result
so callers can inspect them.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (per-field outcomes, exclusions)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific values (cached moments, order statistics, etc.)
        info: Structured metadata (per-field outcomes, exclusions applied)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the component that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=RandomVariableParams(mean=2.0, median=2.0),
        ...     info={'outcomes': {'mean': 'ok', 'weighted_mean': 'warning'}},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_randvar',
        ...     warnings=('weighted_mean: weights not defined',),
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
