"""
Jenks Natural Breaks Engine
===========================

Exact optimal k-class partition of a sorted sample: minimises the sum over
classes of squared deviations from the class mean (SSD).

Dynamic program, with D[i][c] the smallest total SSD of the first i+1 sorted
values split into c classes:

    D[i][1] = SSD(0, i)
    D[i][c] = min over p in [c-2, i-1] of D[p][c-1] + SSD(p+1, i)

B[i][c] keeps the split point p reaching the minimum. Ties keep the
leftmost p, so the output is reproducible. Costs equal in exact arithmetic
can differ by a few ulps here, so a cost within a small tolerance of the
minimum (scaled by n and the SSD of the whole sample) counts as tied.

SSD(i, j) comes from prefix sums in O(1): sum(x^2) - sum(x)^2 / count. The
sample is shifted by its mean first; SSD is shift-invariant and the shift
keeps the subtraction well conditioned.

Both tables live in flat arrays of n * k cells, cell (i, c) at i * k + (c - 1).

Algorithms:
- direct:   every split point of every cell, O(n^2 k)
- monotone: divide and conquer on the optimal split point, which never
            decreases with i, O(k n log n). Same result as direct.

References:
- https://en.wikipedia.org/wiki/Jenks_natural_breaks_optimization
- Jenks, G. F. (1967). The data model concept in statistical mapping.
"""

import logging
import warnings
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from natbreaks.validation.errors import InvalidInputError
from natbreaks.validation.input_validation import (
    check_class_count,
    count_distinct,
    prepare_sample,
)

logger = logging.getLogger(__name__)

ALGORITHMS = ('direct', 'monotone')


@dataclass
class JenksResult:
    """Breaks plus the optimal objective value."""
    breaks: np.ndarray
    total_ssd: float
    n: int
    k: int
    algorithm: str = 'direct'


# ============================================================
# SSD FROM PREFIX SUMS
# ============================================================

def _prefix_sums(y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Prefix sums of x and x^2 over the mean-shifted sample, with a leading 0."""
    shifted = y - np.mean(y)
    s1 = np.zeros(y.size + 1)
    s2 = np.zeros(y.size + 1)
    np.cumsum(shifted, out=s1[1:])
    np.cumsum(shifted * shifted, out=s2[1:])
    return s1, s2


def _ssd(s1: np.ndarray, s2: np.ndarray, start, stop):
    """SSD of the run [start, stop] (inclusive). start/stop may be arrays."""
    count = stop - start + 1
    total = s1[stop + 1] - s1[start]
    total_sq = s2[stop + 1] - s2[start]
    return np.maximum(total_sq - total * total / count, 0.0)


# ============================================================
# TABLE FILLING
# ============================================================

def _tie_tolerance(s1: np.ndarray, s2: np.ndarray) -> float:
    """Cost difference below which two split points count as tied."""
    n = s1.size - 1
    total = float(_ssd(s1, s2, 0, n - 1))
    return 64.0 * np.finfo(np.float64).eps * n * total


def _best_split(table, s1, s2, k, c, i, p_lo, p_hi, tol):
    """
    Leftmost p in [p_lo, p_hi] minimising D[p][c-1] + SSD(p+1, i).

    Costs within tol of the minimum are ties: partitions with equal SSD can
    differ by a few ulps once computed from prefix sums.
    """
    p = np.arange(p_lo, p_hi + 1)
    cost = table[p * k + (c - 2)] + _ssd(s1, s2, p + 1, i)
    best = cost.min()
    j = int(np.flatnonzero(cost <= best + tol)[0])
    return int(p[j]), float(best)


def _fill_direct(table, back, s1, s2, n, k, c, tol):
    """Column c, every split point for every row."""
    for i in range(c - 1, n - (k - c)):
        p, cost = _best_split(table, s1, s2, k, c, i, c - 2, i - 1, tol)
        table[i * k + (c - 1)] = cost
        back[i * k + (c - 1)] = p


def _fill_monotone(table, back, s1, s2, n, k, c, tol):
    """Column c by divide and conquer: opt(i) is non-decreasing in i."""
    first, last = c - 1, n - (k - c) - 1
    # (row_lo, row_hi, split_lo, split_hi)
    pending = [(first, last, c - 2, last - 1)]
    while pending:
        i_lo, i_hi, p_lo, p_hi = pending.pop()
        if i_lo > i_hi:
            continue
        mid = (i_lo + i_hi) // 2
        p, cost = _best_split(
            table, s1, s2, k, c, mid,
            max(p_lo, c - 2), min(p_hi, mid - 1), tol,
        )
        table[mid * k + (c - 1)] = cost
        back[mid * k + (c - 1)] = p
        pending.append((i_lo, mid - 1, p_lo, p))
        pending.append((mid + 1, i_hi, p, p_hi))


_FILLERS = {
    'direct': _fill_direct,
    'monotone': _fill_monotone,
}


def _solve(y: np.ndarray, k: int, algorithm: str) -> Tuple[np.ndarray, np.ndarray]:
    """Fill the SSD and back-pointer arenas for a sorted sample."""
    n = y.size
    fill = _FILLERS[algorithm]

    s1, s2 = _prefix_sums(y)
    tol = _tie_tolerance(s1, s2)
    table = np.full(n * k, np.inf)
    back = np.full(n * k, -1, dtype=np.intp)

    # One class: the whole prefix
    rows = np.arange(n)
    table[rows * k] = _ssd(s1, s2, 0, rows)
    back[rows * k] = 0

    for c in range(2, k + 1):
        fill(table, back, s1, s2, n, k, c, tol)

    return table, back


def _backtrack(y: np.ndarray, back: np.ndarray, k: int) -> np.ndarray:
    """Follow split points from (n-1, k) down to class 1."""
    breaks = np.empty(k, dtype=np.float64)
    i = y.size - 1
    for c in range(k, 0, -1):
        breaks[c - 1] = y[i]
        if c > 1:
            i = int(back[i * k + (c - 1)])
    return breaks


# ============================================================
# PUBLIC API
# ============================================================

def jenks_result(values, k: int, nodata=None, algorithm: str = 'direct') -> JenksResult:
    """
    Jenks natural breaks with the minimal total within-class SSD.

    Args:
        values: Raw sample
        k: Number of classes (1 <= k <= number of usable values)
        nodata: Optional sentinel removed before classification
        algorithm: 'direct' or 'monotone'

    Returns:
        JenksResult with k upper bounds (last = maximum) and the optimal SSD

    Raises:
        InvalidClassCountError: k out of range
        InvalidInputError: unknown algorithm
    """
    if algorithm not in _FILLERS:
        raise InvalidInputError(
            f"Unknown Jenks algorithm: '{algorithm}'. Available: {', '.join(ALGORITHMS)}"
        )
    y = prepare_sample(values, nodata)
    n = y.size
    k = check_class_count(k, n)

    distinct = count_distinct(y)
    if k > distinct:
        warnings.warn(
            f"jenks: k={k} exceeds the {distinct} distinct values; breaks will repeat values",
            RuntimeWarning,
            stacklevel=3,
        )

    logger.debug("jenks %s: n=%d k=%d (%d table cells)", algorithm, n, k, n * k)

    table, back = _solve(y, k, algorithm)
    breaks = _backtrack(y, back, k)

    return JenksResult(
        breaks=breaks,
        total_ssd=float(table[(n - 1) * k + (k - 1)]),
        n=n,
        k=k,
        algorithm=algorithm,
    )


def jenks_breaks(values, k: int, nodata=None, algorithm: str = 'direct') -> np.ndarray:
    """
    Jenks natural breaks.

    Args:
        values: Raw sample
        k: Number of classes (1 <= k <= number of usable values)
        nodata: Optional sentinel removed before classification
        algorithm: 'direct' (O(n^2 k)) or 'monotone' (O(k n log n))

    Returns:
        k ascending upper bounds, the last equal to the sample maximum
    """
    return jenks_result(values, k, nodata=nodata, algorithm=algorithm).breaks
