"""
Generic result container for PyDescriptive computations.

The Result class provides a standardized envelope around a parameter
payload. It carries timing, warnings and provenance alongside the
statistics so that callers can inspect how a value was produced.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (computed statistics, exactness)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata recorded on every result."""
    from pydescriptive import __version__

    return {
        'pydescriptive_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (mean, median, ...)
        info: Structured metadata (computed statistics, exactness)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used to produce the result

    Examples:
        >>> Result(
        ...     params=DescriptiveParams(n=3, mean=Fraction(2)),
        ...     info={'computed': ['mean'], 'exact': True},
        ...     timing={'total_seconds': 0.0001, 'mean': 0.00002},
        ...     backend_name='cpu_descriptive'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
