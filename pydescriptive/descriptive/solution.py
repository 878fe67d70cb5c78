"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, TYPE_CHECKING

from pydescriptive.core.result import Result
from pydescriptive.descriptive._numeric import Number

if TYPE_CHECKING:
    from pydescriptive.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    Statistics whose precondition is not met by the data (median of an
    empty collection, variance of fewer than two observations) are None.
    """
    n: int
    mean: Number | None = None
    median: Number | None = None
    mode: tuple[Any, ...] | None = None
    variance: Number | None = None
    sd: float | None = None
    minimum: Number | None = None
    maximum: Number | None = None
    population: bool = False


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    # --- Statistics ---

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._result.params.n

    @property
    def mean(self) -> Number | None:
        """Arithmetic mean (Fraction for exact input, else float)."""
        return self._result.params.mean

    @property
    def median(self) -> Number | None:
        """Median, or None for empty input."""
        return self._result.params.median

    @property
    def mode(self) -> list[Any] | None:
        """Most frequent value(s) in first-occurrence order."""
        m = self._result.params.mode
        return list(m) if m is not None else None

    @property
    def variance(self) -> Number | None:
        """Variance (Bessel-corrected unless population=True)."""
        return self._result.params.variance

    @property
    def sd(self) -> float | None:
        """Standard deviation."""
        return self._result.params.sd

    @property
    def minimum(self) -> Number | None:
        return self._result.params.minimum

    @property
    def maximum(self) -> Number | None:
        return self._result.params.maximum

    @property
    def population(self) -> bool:
        """True if variance and sd use divisor n instead of n - 1."""
        return self._result.params.population

    # --- Metadata ---

    @property
    def is_exact(self) -> bool:
        """Whether exact rational arithmetic was used."""
        return self._design.is_exact

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def summary(self) -> str:
        """Plain-text summary, one statistic per line."""
        sd_label = "SD (population)" if self.population else "SD"
        var_label = "Variance (population)" if self.population else "Variance"
        rows = [
            ("N", self.n),
            ("Min.", self.minimum),
            ("Median", self.median),
            ("Mean", self.mean),
            ("Max.", self.maximum),
            (var_label, self.variance),
            (sd_label, self.sd),
            ("Mode", self.mode),
        ]

        label_width = max(len(label) for label, _ in rows)
        lines = ["Descriptive Statistics:"]
        for label, value in rows:
            lines.append(f"  {label.ljust(label_width)}  {_format_value(value)}")

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        params = self._result.params
        computed = [
            name for name in ("mean", "median", "mode", "variance", "sd")
            if getattr(params, name) is not None
        ]
        stats_str = ", ".join(computed) if computed else "none"
        return f"DescriptiveSolution(n={params.n}, computed=[{stats_str}])"


def _format_value(value: Any) -> str:
    if value is None:
        return "NA"
    if isinstance(value, list):
        return ", ".join(_format_value(v) for v in value) if value else "NA"
    if isinstance(value, float):
        return f"{value:.6f}"
    if isinstance(value, Fraction) and value.denominator != 1:
        return f"{float(value):.6f} ({value})"
    return str(value)
