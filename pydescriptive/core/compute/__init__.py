"""
Shared compute infrastructure for PyDescriptive.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance constants
"""

from pydescriptive.core.compute.timing import Timer
from pydescriptive.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_CROSSCHECK,
    FREQUENCY_EPSILON,
    EXACT,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_CROSSCHECK",
    "FREQUENCY_EPSILON",
    "EXACT",
]
