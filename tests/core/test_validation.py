"""
Tests for input validation utilities.
"""

import numpy as np
import pytest

from regbench.core.exceptions import DimensionError, ValidationError
from regbench.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_count,
    check_min_samples,
)


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float64_array_is_not_copied(self):
        arr = np.array([1.0, 2.0])
        assert check_array(arr, "x") is arr

    def test_read_only_array_stays_read_only(self):
        arr = np.array([1.0, 2.0])
        arr.setflags(write=False)
        assert not check_array(arr, "x").flags.writeable

    def test_float32_upcast(self):
        result = check_array(np.array([1.5], dtype=np.float32), "x")
        assert result.dtype == np.float64

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="x: non-numeric"):
            check_array(["a", "b"], "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "a", None], "y")


class TestCheckDimensions:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D array, got 2D"):
            check_1d(np.zeros((3, 2)), "x")

    def test_consistent_lengths(self):
        check_consistent_length(np.zeros(3), np.zeros(3), names=("x", "y"))

    def test_inconsistent_lengths_named(self):
        with pytest.raises(DimensionError, match="x=3, y=4"):
            check_consistent_length(np.zeros(3), np.zeros(4), names=("x", "y"))

    def test_names_must_match(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("x",))

    def test_min_samples(self):
        with pytest.raises(DimensionError, match="at least 1 samples, got 0"):
            check_min_samples(np.zeros(0), 1, "x")


class TestCheckCount:

    def test_accepts_int(self):
        assert check_count(5, 0, "n") == 5

    def test_accepts_numpy_int(self):
        assert check_count(np.int64(3), 1, "n") == 3

    def test_rejects_below_minimum(self):
        with pytest.raises(ValidationError, match="n: must be >= 0, got -1"):
            check_count(-1, 0, "n")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_count(True, 0, "n")

    def test_rejects_float(self):
        with pytest.raises(ValidationError):
            check_count(2.0, 0, "n")
