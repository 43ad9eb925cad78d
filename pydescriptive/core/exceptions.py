"""
Exception hierarchy for PyDescriptive.

All exceptions inherit from PyDescriptiveError to allow catching any
library-specific error. Domain-specific exceptions inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDescriptiveError(Exception):
    """Base exception for all PyDescriptive errors."""
    pass


class ValidationError(PyDescriptiveError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class DifferentLengthError(DimensionError):
    """
    Two sequences that must align have different lengths.

    Attributes:
        expected: Length required (usually the length of the data)
        actual: Length received
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class EmptyDataError(ValidationError):
    """
    Operation is undefined on a zero-length sample.

    Attributes:
        name: Parameter name of the empty input, if known
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class InvalidPercentileError(ValidationError):
    """
    Percentile outside [0, 100].

    Attributes:
        value: The rejected percentile
    """

    def __init__(self, message: str, value: float | None = None):
        super().__init__(message)
        self.value = value


class InvalidQuantileError(ValidationError):
    """
    Quantile index outside [0, m], or m is not a positive integer.

    Attributes:
        k: Requested quantile index
        m: Total number of quantiles
    """

    def __init__(
        self,
        message: str,
        k: float | None = None,
        m: int | None = None
    ):
        super().__init__(message)
        self.k = k
        self.m = m


class InvalidLogBaseError(ValidationError):
    """
    Logarithm base is 1 or negative.

    Attributes:
        log_base: The rejected base
    """

    def __init__(self, message: str, log_base: float | None = None):
        super().__init__(message)
        self.log_base = log_base


class NullScaleFactorError(ValidationError):
    """Scaling by a zero factor was requested."""
    pass


class NumericalError(PyDescriptiveError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class NullStdDeviationError(NumericalError):
    """
    Standard deviation is zero.

    Shape statistics (skewness, kurtosis) and z-score normalization divide
    by a power of the standard deviation and are undefined for constant or
    single-element data.

    Attributes:
        n: Number of observations in the sample
    """

    def __init__(self, message: str, n: int | None = None):
        super().__init__(message)
        self.n = n
