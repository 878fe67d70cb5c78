"""
Solver dispatch for descriptive statistics.

Provides the scalar functions mean(), median(), mode(), variance() and
standard_deviation(), plus describe() as the all-at-once entry point.

Numeric result policy: when every element is rational (int, bool,
Fraction, numpy integer) mean, variance and the even-length median are
exact fractions.Fraction values. Otherwise they are float64 computations
returned as Python floats. standard_deviation is always a float.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Literal

from pydescriptive.core.exceptions import ValidationError
from pydescriptive.core.validation import check_min_samples
from pydescriptive.descriptive.design import DescriptiveDesign
from pydescriptive.descriptive.solution import DescriptiveSolution
from pydescriptive.descriptive.backends.cpu import CPUDescriptiveBackend
from pydescriptive.descriptive._numeric import (
    Number, mean_of, median_of, mode_of, variance_of, sd_of,
)


BackendChoice = Literal['auto', 'cpu']


def _ensure_design(data: Any, *, numeric: bool = True) -> DescriptiveDesign:
    """Convert raw collection to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        if numeric and not data.is_numeric:
            raise ValidationError(
                "x: design was built with numeric=False; numeric statistics "
                "need DescriptiveDesign.from_array(data)",
                name='x',
            )
        return data
    return DescriptiveDesign.from_array(data, numeric=numeric)


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUDescriptiveBackend()

    raise ValidationError(f"Unknown backend: {backend!r}")


def mean(x: Any) -> Number:
    """
    Arithmetic mean: sum of the elements divided by their count.

    Parameters
    ----------
    x : iterable of real numbers or DescriptiveDesign
        May be empty.

    Returns
    -------
    Fraction for exact input, float otherwise. Empty input returns 0.

    Examples
    --------
    >>> mean([1, 2, 3, 4])
    Fraction(5, 2)
    >>> mean([1, 1.6, 7.4, 10])
    5.0
    >>> mean([])
    0
    """
    design = _ensure_design(x)
    return mean_of(design.values, design.is_exact)


def median(x: Any) -> Number:
    """
    Middle value of the sorted collection.

    For an odd count the middle element itself is returned. For an even
    count the result is the mean of the two central elements. The input
    is not reordered.

    Parameters
    ----------
    x : non-empty iterable of real numbers or DescriptiveDesign

    Raises
    ------
    ValidationError
        If x is empty.
    """
    design = _ensure_design(x)
    check_min_samples(design.values, 1, 'x')
    return median_of(design.values)


def mode(x: Any) -> list[Hashable]:
    """
    Most frequently occurring value(s).

    Every value tied for the highest count is returned, in order of first
    occurrence in x. Elements only need to be hashable. Empty input
    returns an empty list. Float NaNs are counted as one value.

    Examples
    --------
    >>> mode(['alan', 'bob', 'alan', 'greg'])
    ['alan']
    >>> mode(['smith', 'carpenter', 'doe', 'smith', 'doe'])
    ['smith', 'doe']
    """
    design = _ensure_design(x, numeric=False)
    return mode_of(design.values)


def variance(x: Any, *, population: bool = False) -> Number:
    """
    Variance, Bessel-corrected (n - 1) by default.

    Parameters
    ----------
    x : iterable of real numbers or DescriptiveDesign
        At least 2 elements (at least 1 with population=True).
    population : bool
        Divide by n instead of n - 1.

    Returns
    -------
    Fraction for exact input, float otherwise.

    Raises
    ------
    ValidationError
        If x has too few elements.
    """
    design = _ensure_design(x)
    ddof = 0 if population else 1
    check_min_samples(design.values, ddof + 1, 'x')
    return variance_of(design.values, design.is_exact, ddof=ddof)


def standard_deviation(x: Any, *, population: bool = False) -> float:
    """
    Sample standard deviation: sqrt(sum((x - mean)^2) / (n - 1)).

    With population=True the divisor is n, giving the population standard
    deviation. The sample variant is the default.

    Raises
    ------
    ValidationError
        If x has fewer than 2 elements (fewer than 1 with population=True).

    Examples
    --------
    >>> standard_deviation([4, 5, 2, 9, 5, 7, 4, 5, 4])
    2.0
    """
    design = _ensure_design(x)
    ddof = 0 if population else 1
    check_min_samples(design.values, ddof + 1, 'x')
    return sd_of(design.values, design.is_exact, ddof=ddof)


def describe(
    x: Any,
    *,
    population: bool = False,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Compute all descriptive statistics at once.

    Computes: n, mean, median, mode, variance, standard deviation,
    minimum and maximum. Statistics the data cannot support (median of an
    empty collection, variance of a single observation) are None and
    reported in the solution warnings.

    Parameters
    ----------
    x : iterable of real numbers or DescriptiveDesign
    population : bool
        Use divisor n for variance and standard deviation.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    DescriptiveSolution with all statistics populated.
    """
    design = _ensure_design(x)
    be = _get_backend(backend)

    result = be.solve(
        design,
        compute={'mean', 'median', 'mode', 'var', 'sd', 'range'},
        population=population,
    )

    return DescriptiveSolution(_result=result, _design=design)
