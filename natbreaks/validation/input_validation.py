"""
Sorted-Sample Preparation

Every classifier runs on the same prepared sample:
    1. copy the caller's values into a float64 array
    2. drop the no-data sentinel (a number, or NaN)
    3. reject an empty result
    4. reject NaN / +-inf
    5. stable ascending sort

The caller's sequence is never modified.

Usage:
    from natbreaks.validation import prepare_sample, check_class_count

    sorted_values = prepare_sample(raw, nodata=-9999)
    check_class_count(k, len(sorted_values))
"""

import numbers
from typing import Optional

import numpy as np

from natbreaks.validation.errors import (
    EmptyInputError,
    InvalidClassCountError,
    InvalidInputError,
    NonFiniteValueError,
)


def _is_nan(value) -> bool:
    return isinstance(value, numbers.Real) and value != value


def as_float_array(values) -> np.ndarray:
    """Copy any 1-D sequence (list, ndarray, polars Series) into a float64 array."""
    if hasattr(values, "to_numpy") and not isinstance(values, np.ndarray):
        values = values.to_numpy()
    arr = np.array(values, dtype=np.float64, copy=True)
    return arr.ravel()


def usable_mask(values: np.ndarray, nodata=None) -> np.ndarray:
    """True where a value is not the sentinel. ``nodata=nan`` marks NaNs."""
    if nodata is None:
        return np.ones(values.shape, dtype=bool)
    if _is_nan(nodata):
        return ~np.isnan(values)
    return values != nodata


def prepare_sample(values, nodata=None) -> np.ndarray:
    """
    Validate a raw sample and return a new ascending-sorted float64 array.

    Args:
        values: Raw observations (any 1-D sequence of numbers)
        nodata: Optional "not applicable" sentinel removed before validation

    Returns:
        Sorted copy of the usable values (never empty)

    Raises:
        EmptyInputError: nothing is left after sentinel removal
        NonFiniteValueError: a remaining value is NaN or infinite; positions
            index the caller's sequence
    """
    raw = as_float_array(values)
    keep = usable_mask(raw, nodata)
    arr = raw[keep]

    if arr.size == 0:
        raise EmptyInputError()

    bad = keep & ~np.isfinite(raw)
    if bad.any():
        raise NonFiniteValueError(np.flatnonzero(bad).tolist())

    return np.sort(arr, kind="stable")


def check_class_count(k, n: int) -> int:
    """Return k as an int, or raise InvalidClassCountError unless 1 <= k <= n."""
    if k is None or isinstance(k, bool):
        raise InvalidClassCountError(k, n)
    if isinstance(k, numbers.Integral):
        k = int(k)
    elif isinstance(k, numbers.Real) and float(k).is_integer():
        k = int(k)
    else:
        raise InvalidClassCountError(k, n)
    if k < 1 or k > n:
        raise InvalidClassCountError(k, n)
    return k


def check_breaks(sorted_values: np.ndarray, breaks) -> np.ndarray:
    """
    Validate that a break sequence describes a partition of the sample.

    Breaks must be non-empty, finite, non-decreasing, and the last one must
    reach the sample maximum.
    """
    b = as_float_array(breaks)
    if b.size == 0:
        raise InvalidInputError("breaks are empty")
    if not np.isfinite(b).all():
        raise InvalidInputError("breaks contain non-finite values")
    if b.size > 1 and np.any(np.diff(b) < 0):
        raise InvalidInputError("breaks must be in ascending order")
    if b[-1] < sorted_values[-1]:
        raise InvalidInputError(
            f"last break {b[-1]!r} is below the sample maximum {sorted_values[-1]!r}"
        )
    return b


def count_distinct(sorted_values: np.ndarray) -> int:
    """Number of distinct values in an already sorted array."""
    if sorted_values.size == 0:
        return 0
    return int(np.count_nonzero(np.diff(sorted_values)) + 1)
