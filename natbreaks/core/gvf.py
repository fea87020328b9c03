"""
Goodness of Variance Fit.

    GVF = 1 - (sum of within-class SSD) / (SSD of the whole sample)

1.0 means every class is perfectly homogeneous, 0.0 means the partition
explains nothing beyond a single class. Diagnostic only; no classifier
reads it.
"""

import numpy as np

from natbreaks.validation.input_validation import check_breaks, prepare_sample


def _run_ssd(run: np.ndarray) -> float:
    # Constant run: exactly zero, whatever the rounding of its mean
    if run.size < 2 or run[0] == run[-1]:
        return 0.0
    return float(np.sum((run - np.mean(run)) ** 2))


def _within_ssd(y: np.ndarray, b: np.ndarray) -> float:
    # Classes are contiguous runs of the sorted sample
    edges = np.searchsorted(y, b, side='right')
    start = 0
    ssd = 0.0
    for stop in edges:
        ssd += _run_ssd(y[start:stop])
        start = max(start, int(stop))
    return ssd


def within_class_ssd(values, breaks, nodata=None) -> float:
    """
    Total within-class sum of squared deviations for a partition.

    Args:
        values: Raw sample
        breaks: Ascending class upper bounds, last >= sample maximum
        nodata: Optional sentinel removed before evaluation
    """
    y = prepare_sample(values, nodata)
    return _within_ssd(y, check_breaks(y, breaks))


def goodness_of_variance_fit(values, breaks, nodata=None) -> float:
    """
    GVF of a partition, in [0, 1].

    A sample with no variance at all is perfectly fit by any partition (1.0).

    Args:
        values: Raw sample
        breaks: Ascending class upper bounds, last >= sample maximum
        nodata: Optional sentinel removed before evaluation

    Raises:
        EmptyInputError: no usable values
        InvalidInputError: breaks do not describe a partition of the sample
    """
    y = prepare_sample(values, nodata)
    b = check_breaks(y, breaks)

    total_ssd = _run_ssd(y)
    within = _within_ssd(y, b)

    if total_ssd == 0.0 or within == 0.0:
        return 1.0
    return float(np.clip(1.0 - within / total_ssd, 0.0, 1.0))


gvf = goodness_of_variance_fit
