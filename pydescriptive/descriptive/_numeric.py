"""
Numeric kernels and result policy for descriptive statistics.

Inputs are plain Python lists that have already been validated. Each
kernel takes an ``exact`` flag:

- exact=True: every element is rational. Arithmetic is carried out with
  fractions.Fraction and the result is exact.
- exact=False: at least one element is a float. Arithmetic is carried out
  in float64 with numpy and the result is a Python float.

The float path divides the data by a power of two close to its largest
magnitude before summing, so sums and squared deviations cannot overflow
while the final result still fits in float64. Power-of-two scaling is
exact, so ordinary data gives the same bits as the unscaled formulas.

Square roots are always floating point.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence
from fractions import Fraction
from numbers import Integral, Rational
from typing import Any, Union

import numpy as np

from pydescriptive.core.exceptions import NumericalError


Number = Union[int, float, Fraction]

# Fractions whose magnitude exceeds 2**_MAX_FLOAT_BITS are reduced by a
# power of four before conversion to float.
_MAX_FLOAT_BITS = 1000


def is_exact(values: Sequence[Any]) -> bool:
    """True if every element is rational."""
    return all(isinstance(v, Rational) for v in values)


def to_fraction(value: Rational) -> Fraction:
    """Convert any rational (int, bool, Fraction, numpy integer) to Fraction."""
    if isinstance(value, Integral):
        return Fraction(int(value))
    return Fraction(int(value.numerator), int(value.denominator))


def _as_float_array(values: Sequence[Any], statistic: str) -> np.ndarray:
    try:
        return np.asarray([float(v) for v in values], dtype=np.float64)
    except OverflowError as e:
        raise NumericalError(
            f"{statistic}: an integer element is too large for float64",
            statistic=statistic,
        ) from e


def _scaled(values: Sequence[Any], statistic: str) -> tuple[np.ndarray, int]:
    """
    Data divided by 2**exponent, with every magnitude below 2.

    Returns the scaled array and the exponent to undo the scaling with.
    """
    arr = _as_float_array(values, statistic)
    max_abs = float(np.max(np.abs(arr))) if arr.size else 0.0
    _, e = np.frexp(max_abs)
    exponent = int(e) - 1
    return np.ldexp(arr, -exponent), exponent


def _unscale(value: float, exponent: int, statistic: str) -> float:
    with np.errstate(over='ignore'):
        result = float(np.ldexp(value, exponent))
    return _check_finite_result(result, statistic)


def _check_finite_result(value: float, statistic: str) -> float:
    if not np.isfinite(value):
        raise NumericalError(
            f"{statistic}: result is not finite ({value}); "
            f"it is outside the float64 range",
            statistic=statistic,
            value=value,
        )
    return value


def _is_nan(value: Any) -> bool:
    return isinstance(value, (float, np.floating)) and value != value


# --- Central tendency ---

def mean_of(values: Sequence[Any], exact: bool) -> Number:
    """
    Arithmetic mean. Empty input returns 0.

    Exact input returns a Fraction; otherwise a float.
    """
    n = len(values)
    if n == 0:
        return 0

    if exact:
        return sum((to_fraction(v) for v in values), Fraction(0)) / n

    scaled, exponent = _scaled(values, 'mean')
    return _unscale(float(np.mean(scaled)), exponent, 'mean')


def median_of(values: Sequence[Any]) -> Number:
    """
    Median of a non-empty collection.

    Odd length returns the middle element itself. Even length returns the
    mean of the two central elements, exact when both are rational.
    """
    ordered = sorted(values)
    n = len(ordered)
    half = n // 2
    if n % 2 == 1:
        return ordered[half]

    pair = ordered[half - 1:half + 1]
    return mean_of(pair, is_exact(pair))


def mode_of(values: Sequence[Hashable]) -> list[Hashable]:
    """
    All values sharing the highest occurrence count.

    Values are returned in order of first occurrence in the input. Values
    that compare and hash equal (1, 1.0, True) share one table entry keyed
    by the first of them seen. All float NaNs share one entry keyed by the
    first NaN seen.
    """
    first_nan = None
    keys = []
    for v in values:
        if _is_nan(v):
            if first_nan is None:
                first_nan = v
            # dict lookup matches on identity before equality
            v = first_nan
        keys.append(v)

    counts = Counter(keys)

    by_count: dict[int, list[Hashable]] = {}
    for value, count in counts.items():
        by_count.setdefault(count, []).append(value)

    if not by_count:
        return []

    return list(by_count[max(by_count)])


# --- Dispersion ---

def _scaled_variance(values: Sequence[Any], ddof: int, statistic: str) -> tuple[float, int]:
    """Variance of the scaled data and the scaling exponent."""
    n = len(values)
    scaled, exponent = _scaled(values, statistic)
    avg = np.mean(scaled)
    ss = float(np.sum((scaled - avg) ** 2))
    return ss / (n - ddof), exponent


def variance_of(values: Sequence[Any], exact: bool, ddof: int = 1) -> Number:
    """
    Sum of squared deviations from the mean divided by (n - ddof).

    ddof=1 gives the sample (Bessel-corrected) variance, ddof=0 the
    population variance. Caller guarantees n - ddof > 0.
    """
    if exact:
        n = len(values)
        avg = mean_of(values, exact)
        ss = sum(((to_fraction(v) - avg) ** 2 for v in values), Fraction(0))
        return ss / (n - ddof)

    var, exponent = _scaled_variance(values, ddof, 'variance')
    return _unscale(var, 2 * exponent, 'variance')


def sd_of(values: Sequence[Any], exact: bool, ddof: int = 1) -> float:
    """
    Square root of variance_of().

    The float path takes the root before undoing the scaling, so a
    standard deviation is returned whenever it fits in float64, even if
    the variance does not.
    """
    if exact:
        return sqrt_of(variance_of(values, exact, ddof=ddof), 'standard_deviation')

    var, exponent = _scaled_variance(values, ddof, 'standard_deviation')
    return _unscale(float(np.sqrt(var)), exponent, 'standard_deviation')


def sqrt_of(value: Number, statistic: str) -> float:
    """Floating-point square root of a non-negative variance."""
    if not isinstance(value, Rational):
        return _check_finite_result(float(np.sqrt(float(value))), statistic)

    frac = to_fraction(value)
    excess = frac.numerator.bit_length() - frac.denominator.bit_length() - _MAX_FLOAT_BITS
    shift = max(0, excess) // 2
    reduced = frac / 4 ** shift
    return _unscale(float(np.sqrt(float(reduced))), shift, statistic)
