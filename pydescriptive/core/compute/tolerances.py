"""
Numerical tolerances.

Defines the fixed epsilon used to bucket values for frequency and
entropy computations, and the precision expectations used by the test
suite when comparing against closed-form references.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Direct float64 computation compared with hand-derived values
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, closed-form reference',
)

# Comparison against an independent implementation (scipy, numpy)
CPU_FP64_CROSSCHECK = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='cpu_fp64_crosscheck',
    description='CPU double precision, independent implementation',
)

# Values closer than this fall in the same frequency bucket
FREQUENCY_EPSILON = 1e-8

# Exact comparison for epsilon-tolerant helpers
EXACT = 0.0
