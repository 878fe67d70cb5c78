"""
PyDescriptive: descriptive statistics for Python collections.

Mean, median, mode and standard deviation over finite collections, with
exact rational results for rational input.

Submodules:
    descriptive: mean, median, mode, variance, standard_deviation, describe
    core: exceptions, validation, result envelope, timing
"""

__version__ = "0.1.0"

from pydescriptive import descriptive
from pydescriptive.descriptive import (
    mean,
    median,
    mode,
    variance,
    standard_deviation,
    describe,
)

__all__ = [
    "__version__",
    "descriptive",
    "mean",
    "median",
    "mode",
    "variance",
    "standard_deviation",
    "describe",
]
