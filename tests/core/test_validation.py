"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_vector: missing values mapped to NaN, non-numeric rejection
    - check_ndim / check_2d: dimensionality checks
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum sample count
"""

import numpy as np
import pytest

from stattests.core.exceptions import (
    DegenerateInputError, DimensionError, ValidationError,
)
from stattests.core.validation import (
    check_2d,
    check_array,
    check_consistent_length,
    check_min_samples,
    check_ndim,
    check_vector,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted(self):
        result = check_array(np.array([1, 2], dtype=np.int32), "X")
        assert result.dtype == np.float64

    def test_nested_list_to_2d(self):
        assert check_array([[1, 2], [3, 4]], "X").shape == (2, 2)

    def test_rejects_none(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError):
            check_array([1 + 2j, 3], "X")

    def test_error_names_parameter(self):
        with pytest.raises(ValidationError, match="^design:"):
            check_array(["a"], "design")


# ═══════════════════════════════════════════════════════════════════════
# check_vector
# ═══════════════════════════════════════════════════════════════════════


class TestCheckVector:
    """check_vector keeps length and turns every missing entry into NaN."""

    def test_numeric_list(self):
        out = check_vector([1, 2, 3], "x")
        assert out.dtype == np.float64
        np.testing.assert_array_equal(out, [1.0, 2.0, 3.0])

    def test_none_becomes_nan(self):
        out = check_vector([1, None, 3], "x")
        assert len(out) == 3
        assert np.isnan(out[1])
        assert out[0] == 1.0 and out[2] == 3.0

    def test_nan_kept(self):
        out = check_vector([1.0, np.nan], "x")
        assert np.isnan(out[1])

    def test_masked_entries_become_nan(self):
        values = np.ma.array([1.0, 2.0, 3.0], mask=[False, True, False])
        out = check_vector(values, "x")
        np.testing.assert_array_equal(np.isnan(out), [False, True, False])

    def test_flattens(self):
        assert check_vector(np.ones((2, 3)), "x").shape == (6,)

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="^x:"):
            check_vector(["a", "b"], "x")

    def test_rejects_string_mixed_with_none(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_vector([1, None, "a"], "x")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_vector([1 + 1j, 2], "x")


# ═══════════════════════════════════════════════════════════════════════
# Dimensionality and lengths
# ═══════════════════════════════════════════════════════════════════════


class TestDimensions:

    def test_check_ndim_passes(self):
        check_ndim(np.zeros(3), 1, "x")

    def test_check_ndim_fails(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_ndim(np.zeros((3, 1)), 1, "x")

    def test_check_2d_fails_on_vector(self):
        with pytest.raises(DimensionError, match="X: expected 2D"):
            check_2d(np.zeros(3), "X")

    def test_consistent_length(self):
        check_consistent_length(np.zeros((4, 2)), np.zeros(4), names=("X", "y"))

    def test_inconsistent_length(self):
        with pytest.raises(DimensionError, match="X=4, y=3"):
            check_consistent_length(np.zeros((4, 2)), np.zeros(3), names=("X", "y"))

    def test_names_must_match(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(2), np.zeros(2), names=("X",))

    def test_single_array_ok(self):
        check_consistent_length(np.zeros(5), names=("x",))


# ═══════════════════════════════════════════════════════════════════════
# check_min_samples
# ═══════════════════════════════════════════════════════════════════════


class TestCheckMinSamples:

    def test_enough(self):
        check_min_samples(np.zeros(2), 2, "x")

    def test_too_few(self):
        with pytest.raises(DegenerateInputError) as exc_info:
            check_min_samples(np.zeros(1), 2, "y")
        err = exc_info.value
        assert err.group == "y"
        assert err.n_observations == 1
        assert err.required == 2

    def test_is_validation_error(self):
        with pytest.raises(ValidationError):
            check_min_samples(np.zeros(0), 1, "x")
