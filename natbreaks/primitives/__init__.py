"""
natbreaks Primitives Library

Atomic functions, numpy in, numbers out.

Individual: single-sample statistics
- statistics: count, total, mean, variance, standard_deviation, median,
  harmonic_mean, geometric_mean, root_mean_square, kurtosis, sum_pow_deviations
"""

from .individual import (
    count, total, mean, variance, standard_deviation, std, median,
    harmonic_mean, geometric_mean, root_mean_square, rms, kurtosis,
    sum_pow_deviations,
)

from .individual import statistics

__all__ = [
    'statistics',
    'count', 'total', 'mean', 'variance', 'standard_deviation', 'std',
    'median', 'harmonic_mean', 'geometric_mean', 'root_mean_square', 'rms',
    'kurtosis', 'sum_pow_deviations',
]
