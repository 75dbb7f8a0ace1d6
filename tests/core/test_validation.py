"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_integer_array: conversion, dtype checks, overflow rejection
    - check_1d: dimensionality
    - check_nonempty: minimum sample count
"""

import numpy as np
import pytest

from pyfreqstats.core.exceptions import ValidationError
from pyfreqstats.core.validation import (
    check_1d,
    check_integer_array,
    check_nonempty,
)


# ═══════════════════════════════════════════════════════════════════════
# check_integer_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIntegerArray:

    def test_list_to_int64(self):
        result = check_integer_array([1, -2, 3], "values")
        assert result.dtype == np.int64
        np.testing.assert_array_equal(result, [1, -2, 3])

    def test_int32_promoted(self):
        result = check_integer_array(np.array([1, 2], dtype=np.int32), "values")
        assert result.dtype == np.int64

    def test_rejects_float(self):
        with pytest.raises(ValidationError, match="non-integer dtype"):
            check_integer_array([1.0, 2.0], "values")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-integer dtype"):
            check_integer_array([True, False], "values")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="values"):
            check_integer_array(["1", "2"], "values")

    def test_rejects_mixed_objects(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_integer_array([1, None], "values")

    def test_rejects_huge_python_int(self):
        with pytest.raises(ValidationError):
            check_integer_array([1, 2 ** 70], "values")

    def test_rejects_uint64_overflow(self):
        arr = np.array([2 ** 63], dtype=np.uint64)
        with pytest.raises(ValidationError, match="64-bit"):
            check_integer_array(arr, "values")

    def test_empty_list_is_empty_int64(self):
        result = check_integer_array([], "values")
        assert result.dtype == np.int64
        assert result.shape == (0,)

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="my_param"):
            check_integer_array([0.5], "my_param")


# ═══════════════════════════════════════════════════════════════════════
# check_1d / check_nonempty
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_1d_passes(self):
        check_1d(np.array([1, 2, 3]), "values")

    def test_2d_fails(self):
        with pytest.raises(ValidationError, match="expected 1D"):
            check_1d(np.array([[1, 2], [3, 4]]), "values")

    def test_nonempty_passes(self):
        check_nonempty(np.array([7]), "values")

    def test_empty_fails(self):
        with pytest.raises(ValidationError, match="at least 1"):
            check_nonempty(np.array([], dtype=np.int64), "values")
