"""
Descriptive statistics module.

Public API:
    mean(x)                - Arithmetic mean (0 for empty input)
    median(x)              - Middle value, or mean of the two central values
    mode(x)                - Most frequent value(s), ties included
    variance(x)            - Variance (Bessel-corrected)
    standard_deviation(x)  - Sample standard deviation
    describe(x)            - All statistics at once
"""

from pydescriptive.descriptive.design import DescriptiveDesign
from pydescriptive.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pydescriptive.descriptive.solvers import (
    mean,
    median,
    mode,
    variance,
    standard_deviation,
    describe,
)

__all__ = [
    "mean",
    "median",
    "mode",
    "variance",
    "standard_deviation",
    "describe",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
