"""
Input validation utilities for PyDescriptive.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (numpy scalars become Python scalars, nothing else)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Iterable, Mapping, Sequence
from numbers import Rational, Real
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pydescriptive.core.exceptions import ValidationError, DimensionError


def check_sequence(data: Any, name: str) -> list[Any]:
    """
    Validate a one-dimensional collection and copy it into a list.

    Accepts lists, tuples, ranges, generators, 1D numpy arrays and
    anything with a ``to_numpy()`` method (pandas Series). Array input is
    converted with ``tolist()`` and numpy scalars in other collections with
    ``item()``, so elements are plain Python scalars.

    Args:
        data: Input collection
        name: Parameter name for error messages

    Returns:
        New list holding the elements in input order

    Raises:
        ValidationError: If data is a string, a mapping, or not iterable
        DimensionError: If array input is not 1D
    """
    if hasattr(data, 'to_numpy'):
        data = data.to_numpy()

    if isinstance(data, np.ndarray):
        check_1d(data, name)
        return data.tolist()

    if isinstance(data, (str, bytes, bytearray)):
        raise ValidationError(
            f"{name}: expected a collection of values, got {type(data).__name__}",
            name=name,
        )

    if isinstance(data, Mapping):
        raise ValidationError(
            f"{name}: expected a sequence of values, got mapping {type(data).__name__}",
            name=name,
        )

    if not isinstance(data, Iterable):
        raise ValidationError(
            f"{name}: expected a collection of values, got {type(data).__name__}",
            name=name,
        )

    return [v.item() if isinstance(v, np.generic) else v for v in data]


def check_real(values: list[Any], name: str) -> bool:
    """
    Verify every element is a real number.

    Args:
        values: Elements to check
        name: Parameter name for error messages

    Returns:
        True if every element is rational (exact arithmetic applies),
        False if at least one element is a float

    Raises:
        ValidationError: If any element is not a real number
    """
    exact = True
    for i, v in enumerate(values):
        if not isinstance(v, Real):
            raise ValidationError(
                f"{name}: element {i} is {type(v).__name__} ({v!r}), expected a real number",
                name=name,
            )
        if not isinstance(v, Rational):
            exact = False
    return exact


def check_finite(values: list[Any], name: str) -> None:
    """
    Verify no element is NaN or infinite.

    Rational elements are finite by construction and are not converted.

    Args:
        values: Real-valued elements to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If any element is non-finite
    """
    inexact = np.asarray(
        [v for v in values if not isinstance(v, Rational)], dtype=np.float64
    )
    if not np.all(np.isfinite(inexact)):
        n_nan = int(np.sum(np.isnan(inexact)))
        n_inf = int(np.sum(np.isinf(inexact)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            name=name,
        )


def check_hashable(values: list[Any], name: str) -> None:
    """
    Verify every element can be used as a frequency-table key.

    Args:
        values: Elements to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If any element is unhashable
    """
    for i, v in enumerate(values):
        try:
            hash(v)
        except TypeError as e:
            raise ValidationError(
                f"{name}: element {i} of type {type(v).__name__} is not hashable",
                name=name,
            ) from e


def check_1d(array: NDArray, name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}",
            name=name,
        )


def check_min_samples(values: Sequence[Any], min_samples: int, name: str) -> None:
    """
    Verify the collection has at least the minimum number of elements.

    Args:
        values: Elements to check
        min_samples: Minimum required count
        name: Parameter name for error messages

    Raises:
        ValidationError: If there are fewer than min_samples elements
    """
    n = len(values)
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            name=name,
            n_observed=n,
            n_required=min_samples,
        )
