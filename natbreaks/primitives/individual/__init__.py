"""
Individual primitives: single-sample computations.

- statistics: count, total, mean, variance, standard_deviation, median,
  harmonic_mean, geometric_mean, root_mean_square, kurtosis, sum_pow_deviations
"""

from .statistics import (
    count,
    total,
    mean,
    variance,
    standard_deviation,
    std,
    median,
    harmonic_mean,
    geometric_mean,
    root_mean_square,
    rms,
    kurtosis,
    sum_pow_deviations,
)

__all__ = [
    'count', 'total', 'mean', 'variance', 'standard_deviation', 'std',
    'median', 'harmonic_mean', 'geometric_mean', 'root_mean_square', 'rms',
    'kurtosis', 'sum_pow_deviations',
]
