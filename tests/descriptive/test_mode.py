"""
Tests for mode().

Output order is first occurrence in the input; tests that only care about
membership compare sets.
"""

import math

import numpy as np
import pytest

from pydescriptive import mode
from pydescriptive.core.exceptions import DimensionError, ValidationError


class TestModeValues:

    def test_single_mode(self):
        assert mode(["alan", "bob", "alan", "greg"]) == ["alan"]

    def test_tied_modes(self):
        result = mode(["smith", "carpenter", "doe", "smith", "doe"])
        assert set(result) == {"smith", "doe"}
        assert len(result) == 2

    def test_tie_order_is_first_occurrence(self):
        assert mode(["doe", "smith", "smith", "doe"]) == ["doe", "smith"]

    def test_empty_returns_empty_list(self):
        assert mode([]) == []

    def test_single_element(self):
        assert mode([5]) == [5]

    def test_all_unique_returns_everything(self):
        assert mode([3, 1, 2]) == [3, 1, 2]

    def test_all_same(self):
        assert mode([4, 4, 4]) == [4]

    def test_numbers(self):
        assert mode([1, 2, 2, 3]) == [2]

    def test_mixed_hashable_types(self):
        assert mode([(1, 2), None, (1, 2), "x"]) == [(1, 2)]

    def test_equal_numbers_share_an_entry(self):
        """1 and 1.0 hash equal, so they are counted together."""
        assert mode([1, 1.0, 2]) == [1]

    def test_nans_share_an_entry(self):
        result = mode([float("nan"), 1.0, float("nan")])
        assert len(result) == 1
        assert math.isnan(result[0])

    def test_nans_from_array_share_an_entry(self):
        result = mode(np.array([np.nan, 2.0, np.nan, 3.0]))
        assert len(result) == 1
        assert math.isnan(result[0])


class TestModeInputs:

    def test_numpy_array(self):
        assert mode(np.array([1, 3, 3, 2])) == [3]

    def test_generator(self):
        assert mode(c for c in "abracadabra") == ["a"]

    def test_input_not_mutated(self):
        data = ["b", "a", "b"]
        mode(data)
        assert data == ["b", "a", "b"]

    def test_returns_new_list_each_call(self):
        data = [1, 1, 2]
        first = mode(data)
        first.append(99)
        assert mode(data) == [1]


class TestModeProperties:

    def test_every_mode_has_max_count(self, int_sample):
        result = mode(int_sample)
        top = max(int_sample.count(v) for v in set(int_sample))
        assert result
        assert all(int_sample.count(v) == top for v in result)
        assert {v for v in set(int_sample) if int_sample.count(v) == top} == set(result)


class TestModeErrors:

    def test_unhashable_element(self):
        with pytest.raises(ValidationError, match="not hashable"):
            mode([[1], [1]])

    def test_string_input_rejected(self):
        with pytest.raises(ValidationError):
            mode("aab")

    def test_2d_array_rejected(self):
        with pytest.raises(DimensionError):
            mode(np.zeros((2, 2)))
