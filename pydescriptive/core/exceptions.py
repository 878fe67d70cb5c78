"""
Exception hierarchy for PyDescriptive.

All exceptions inherit from PyDescriptiveError to allow catching any
library-specific error.

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

    Raised when user-provided inputs fail validation checks: empty input
    where a middle element is needed, too few observations for a
    Bessel-corrected estimate, non-numeric or non-finite elements.

    Attributes:
        name: Parameter name the check was applied to, if known
        n_observed: Number of observations received, if relevant
        n_required: Minimum number of observations required, if relevant
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        n_observed: int | None = None,
        n_required: int | None = None
    ):
        super().__init__(message)
        self.name = name
        self.n_observed = n_observed
        self.n_required = n_required


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when an array input is not one-dimensional.
    """
    pass


class NumericalError(PyDescriptiveError):
    """
    Numerical computation failed.

    Raised when the floating-point path produces a non-finite value
    (overflow of a sum or of squared deviations).

    Attributes:
        statistic: Name of the statistic being computed
        value: The offending value
    """

    def __init__(
        self,
        message: str,
        statistic: str | None = None,
        value: float | None = None
    ):
        super().__init__(message)
        self.statistic = statistic
        self.value = value
