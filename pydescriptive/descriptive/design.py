"""
DescriptiveDesign: data wrapper for descriptive statistics.

Wraps a one-dimensional collection and records the validation outcome
(numeric or not, exact or floating) the solvers need. Empty collections
are valid designs; the statistics decide for themselves whether they
need observations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydescriptive.core.validation import (
    check_sequence, check_real, check_finite, check_hashable,
)


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Holds the input elements as an immutable tuple in input order.
    Immutable after construction.

    Construction:
        DescriptiveDesign.from_array(data)                  # real numbers
        DescriptiveDesign.from_array(data, numeric=False)   # any hashables
    """
    _values: tuple[Any, ...]
    _n: int
    _numeric: bool
    _exact: bool

    @classmethod
    def from_array(cls, data, *, numeric: bool = True, name: str = 'x') -> DescriptiveDesign:
        """
        Build DescriptiveDesign from a collection.

        Parameters
        ----------
        data : iterable
            List, tuple, range, generator, 1D numpy array or pandas Series.
            The input itself is never modified.
        numeric : bool
            If True, every element must be a finite real number. If False,
            elements only need to be hashable (as required by mode).
        name : str
            Parameter name used in error messages.
        """
        values = check_sequence(data, name)

        if numeric:
            exact = check_real(values, name)
            check_finite(values, name)
        else:
            check_hashable(values, name)
            exact = False

        return cls(_values=tuple(values), _n=len(values), _numeric=numeric, _exact=exact)

    @property
    def values(self) -> tuple[Any, ...]:
        """Elements in input order."""
        return self._values

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def is_numeric(self) -> bool:
        """Whether elements were validated as finite real numbers."""
        return self._numeric

    @property
    def is_exact(self) -> bool:
        """Whether every element is rational, so exact arithmetic applies."""
        return self._exact

    def __repr__(self) -> str:
        kind = ("exact" if self._exact else "float") if self._numeric else "hashable"
        return f"DescriptiveDesign(n={self._n}, kind={kind})"
