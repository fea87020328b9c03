"""
Head/Tail Breaks Engine

Self-determining classification for heavy-tailed distributions.

Head-Tail: split the current subset at its mean, keep the values strictly
above it (the tail) and repeat on them. Each mean is a class upper bound;
the global maximum closes the last class.

Tail-Head: the mirror image, recursing on the values strictly below the mean.

The recursion continues while the retained part stays a minority of its
subset (share <= threshold, 40% by default). It stops when the share grows
beyond the threshold, when nothing is left to retain, or when the retained
part does not shrink. threshold=1.0 runs until a single distinct value is
left.
"""

import logging
import operator
from typing import Callable, List

import numpy as np

from natbreaks.validation.errors import InvalidInputError
from natbreaks.validation.input_validation import prepare_sample

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.4


def _check_threshold(threshold) -> float:
    try:
        threshold = float(threshold)
    except (TypeError, ValueError):
        raise InvalidInputError(f"threshold must be a number, got {threshold!r}")
    if not 0.0 < threshold <= 1.0:
        raise InvalidInputError(f"threshold must be in (0, 1], got {threshold}")
    return threshold


def _split_means(
    y: np.ndarray,
    keep: Callable[[np.ndarray, float], np.ndarray],
    threshold: float,
) -> List[float]:
    """Means found by repeatedly splitting y and keeping one side."""
    means = []
    subset = y
    while True:
        m = float(np.mean(subset))
        retained = subset[keep(subset, m)]
        # Nothing beyond the mean (constant subset) or no shrinkage: stop
        if retained.size == 0 or retained.size >= subset.size:
            break
        means.append(m)
        share = retained.size / subset.size
        if share > threshold:
            break
        subset = retained
    logger.debug("head/tail split produced %d means over %d values", len(means), y.size)
    return means


def head_tail_breaks(values, nodata=None, threshold: float = DEFAULT_THRESHOLD) -> np.ndarray:
    """
    Head-Tail breaks.

    The recursion goes on while the tail holds at most `threshold` of its
    subset, and stops at the first split whose tail is larger. A minority
    tail is the heavy-tail signal that justifies another level; it is not a
    stopping condition. threshold=1.0 never stops on share.

    Args:
        values: Raw sample
        nodata: Optional sentinel removed before classification
        threshold: Largest tail share (of its subset) that keeps the recursion going

    Returns:
        Ascending upper bounds: the discovered means, then the maximum
    """
    threshold = _check_threshold(threshold)
    y = prepare_sample(values, nodata)

    means = _split_means(y, operator.gt, threshold)
    return np.array(means + [y[-1]], dtype=np.float64)


def tail_head_breaks(values, nodata=None, threshold: float = DEFAULT_THRESHOLD) -> np.ndarray:
    """
    Tail-Head breaks (recursion on the values below the mean).

    Args:
        values: Raw sample
        nodata: Optional sentinel removed before classification
        threshold: Largest lower-part share that keeps the recursion going

    Returns:
        Ascending upper bounds: the discovered means (smallest first), then the maximum
    """
    threshold = _check_threshold(threshold)
    y = prepare_sample(values, nodata)

    means = _split_means(y, operator.lt, threshold)
    return np.array(means[::-1] + [y[-1]], dtype=np.float64)
