"""
Tests for mean().

Exact (rational) input gives fractions.Fraction results; any float in the
input switches to float64 arithmetic.
"""

from fractions import Fraction

import numpy as np
import pytest

from pydescriptive import mean
from pydescriptive.core.exceptions import (
    DimensionError, NumericalError, ValidationError,
)


class TestMeanValues:

    def test_integers_exact(self):
        result = mean([1, 2, 3, 4])
        assert result == Fraction(5, 2)
        assert result == 2.5
        assert isinstance(result, Fraction)

    def test_mixed_floats(self):
        result = mean([1, 1.6, 7.4, 10])
        assert result == 5.0
        assert isinstance(result, float)

    def test_empty_returns_zero(self):
        assert mean([]) == 0

    def test_single_element(self):
        assert mean([42]) == 42

    def test_negative_and_mixed_sign(self):
        assert mean([-1, -2, -3]) == -2
        assert mean([-5, 5]) == 0

    def test_fractions(self):
        assert mean([Fraction(1, 3), Fraction(2, 3)]) == Fraction(1, 2)

    def test_bools_count_as_integers(self):
        assert mean([True, False, True, True]) == Fraction(3, 4)

    def test_exact_avoids_float_rounding(self):
        """0.1-style artefacts do not appear on the exact path."""
        assert mean([1, 2]) == Fraction(3, 2)
        assert mean([1, 1, 2]) == Fraction(4, 3)


class TestMeanInputs:

    def test_range(self):
        assert mean(range(1, 101)) == Fraction(101, 2)

    def test_generator(self):
        assert mean(x * x for x in range(4)) == Fraction(14, 4)

    def test_numpy_int_array_exact(self):
        result = mean(np.array([1, 2, 3, 4], dtype=np.int64))
        assert isinstance(result, Fraction)
        assert result == Fraction(5, 2)

    def test_numpy_float_array(self):
        result = mean(np.array([1.0, 2.0]))
        assert isinstance(result, float)
        assert result == 1.5

    def test_input_not_mutated(self):
        data = [3, 1, 2]
        mean(data)
        assert data == [3, 1, 2]

    def test_numpy_bools_in_list(self):
        assert mean([np.bool_(True), np.bool_(False)]) == Fraction(1, 2)

    def test_numpy_scalars_in_list(self):
        result = mean([np.int64(1), np.float32(2.5)])
        assert isinstance(result, float)
        assert result == 1.75


class TestMeanProperties:

    def test_float_sum_over_length(self, float_sample):
        np.testing.assert_allclose(
            mean(float_sample), sum(float_sample) / len(float_sample), rtol=1e-12
        )

    def test_int_sum_over_length_exact(self, int_sample):
        assert mean(int_sample) == Fraction(sum(int_sample), len(int_sample))

    def test_matches_numpy(self, float_sample):
        np.testing.assert_allclose(mean(float_sample), np.mean(float_sample), rtol=1e-12)

    def test_near_float_max_does_not_overflow(self):
        assert mean([1e308, 1e308]) == 1e308
        assert mean([1.7e308, 1.5e308, -1e308]) == pytest.approx(7.333333333333333e307)

    def test_tiny_values(self):
        assert mean([5e-324, 5e-324]) == 5e-324


class TestMeanErrors:

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            mean([1.0, float("nan")])

    def test_string_element_rejected(self):
        with pytest.raises(ValidationError, match="expected a real number"):
            mean([1, "2"])

    def test_string_input_rejected(self):
        with pytest.raises(ValidationError):
            mean("1234")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            mean(np.ones((2, 3)))

    def test_int_too_large_for_float_raises(self):
        with pytest.raises(NumericalError) as exc_info:
            mean([10 ** 400, 0.5])
        assert exc_info.value.statistic == "mean"
