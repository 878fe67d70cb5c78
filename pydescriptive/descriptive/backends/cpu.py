"""
CPU reference backend for descriptive statistics.

Exact input is computed with fractions.Fraction, floating input with
numpy float64.
"""

from __future__ import annotations

from pydescriptive.core.exceptions import NumericalError, ValidationError
from pydescriptive.core.result import Result
from pydescriptive.core.compute.timing import Timer
from pydescriptive.descriptive.design import DescriptiveDesign
from pydescriptive.descriptive.solution import DescriptiveParams
from pydescriptive.descriptive._numeric import (
    mean_of, median_of, mode_of, variance_of, sd_of,
)


VALID_STATISTICS = frozenset({'mean', 'median', 'mode', 'var', 'sd', 'range'})


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(
        self,
        design: DescriptiveDesign,
        *,
        compute: set[str],
        population: bool = False,
    ) -> Result[DescriptiveParams]:
        """
        Compute requested descriptive statistics.

        Statistics the data cannot support are left as None and reported
        in the result warnings instead of raising.

        Parameters
        ----------
        design : DescriptiveDesign
            Numeric design.
        compute : set of str
            Which statistics to compute. Valid entries:
            'mean', 'median', 'mode', 'var', 'sd', 'range'
        population : bool
            Use divisor n instead of n - 1 for 'var' and 'sd'.
        """
        unknown = set(compute) - VALID_STATISTICS
        if unknown:
            raise ValidationError(f"Unknown statistics requested: {sorted(unknown)}")

        timer = Timer()
        timer.start()

        values = design.values
        n = design.n
        exact = design.is_exact
        ddof = 0 if population else 1
        warnings_list: list[str] = []

        mean = None
        median = None
        mode = None
        variance = None
        sd = None
        minimum = None
        maximum = None

        if 'mean' in compute:
            with timer.section('mean'):
                mean = mean_of(values, exact)

        if 'median' in compute:
            if n == 0:
                warnings_list.append("median undefined for empty input")
            else:
                with timer.section('median'):
                    median = median_of(values)

        if 'mode' in compute:
            with timer.section('mode'):
                mode = tuple(mode_of(values))

        if 'var' in compute or 'sd' in compute:
            if n - ddof < 1:
                kind = "population" if population else "sample"
                warnings_list.append(
                    f"{kind} variance requires at least {ddof + 1} "
                    f"observations, got {n}"
                )
            else:
                if 'var' in compute:
                    with timer.section('variance'):
                        try:
                            variance = variance_of(values, exact, ddof=ddof)
                        except NumericalError as e:
                            # variance may exceed float64 while sd does not
                            warnings_list.append(str(e))
                if 'sd' in compute:
                    with timer.section('sd'):
                        sd = sd_of(values, exact, ddof=ddof)

        if 'range' in compute:
            if n == 0:
                warnings_list.append("minimum and maximum undefined for empty input")
            else:
                with timer.section('range'):
                    minimum = min(values)
                    maximum = max(values)

        timer.stop()

        params = DescriptiveParams(
            n=n,
            mean=mean,
            median=median,
            mode=mode,
            variance=variance,
            sd=sd,
            minimum=minimum,
            maximum=maximum,
            population=population,
        )

        return Result(
            params=params,
            info={'computed': sorted(compute), 'exact': exact, 'ddof': ddof},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
