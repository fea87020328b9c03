"""
Simple Classifiers
==================

Closed-form break computations over the sorted sample.

Methods:
- equal_interval: k classes of identical width
- quantiles: k classes holding (about) the same number of values
- arithmetic: class widths growing linearly (d, 2d, ..., kd)

All three return k upper bounds, the last one equal to the sample maximum,
and raise InvalidClassCountError unless 1 <= k <= n.
"""

import numpy as np

from natbreaks.validation.input_validation import check_class_count, prepare_sample


def equal_interval_breaks(values, k: int, nodata=None) -> np.ndarray:
    """
    Equal interval breaks: min + i * (max - min) / k, for i = 1..k.

    When min == max every break equals max (valid, not an error).

    Args:
        values: Raw sample
        k: Number of classes
        nodata: Optional sentinel removed before classification

    Returns:
        k upper bounds
    """
    y = prepare_sample(values, nodata)
    k = check_class_count(k, y.size)

    lo, hi = y[0], y[-1]
    width = (hi - lo) / k
    breaks = lo + np.arange(1, k + 1, dtype=np.float64) * width
    breaks[-1] = hi
    return breaks


def quantile_breaks(values, k: int, nodata=None) -> np.ndarray:
    """
    Quantile breaks at probabilities i / k, for i = 1..k.

    Rank r = i * (n - 1) / k; the value is interpolated linearly between
    sorted[floor(r)] and sorted[ceil(r)].

    Args:
        values: Raw sample
        k: Number of classes
        nodata: Optional sentinel removed before classification

    Returns:
        k upper bounds
    """
    y = prepare_sample(values, nodata)
    k = check_class_count(k, y.size)

    ranks = np.arange(1, k + 1, dtype=np.float64) * (y.size - 1) / k
    lower = np.floor(ranks).astype(np.intp)
    upper = np.ceil(ranks).astype(np.intp)
    frac = ranks - lower

    breaks = y[lower] + frac * (y[upper] - y[lower])
    breaks[-1] = y[-1]
    return breaks


def arithmetic_breaks(values, k: int, nodata=None) -> np.ndarray:
    """
    Arithmetic progression breaks.

    Class i has width w_i = w1 + (i - 1) * d with w1 = d, so the widths are
    d, 2d, ..., kd and sum to the range: d = 2 * (max - min) / (k * (k + 1)).

    Args:
        values: Raw sample
        k: Number of classes
        nodata: Optional sentinel removed before classification

    Returns:
        k upper bounds
    """
    y = prepare_sample(values, nodata)
    k = check_class_count(k, y.size)

    lo, hi = y[0], y[-1]
    d = 2.0 * (hi - lo) / (k * (k + 1))
    widths = np.arange(1, k + 1, dtype=np.float64) * d
    breaks = lo + np.cumsum(widths)
    breaks[-1] = hi
    return breaks
