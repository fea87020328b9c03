"""
Descriptive statistics over a single sample.

Every function takes a non-empty 1-D sequence of finite numbers and returns
one float. Empty input raises EmptyInputError, NaN/inf raise
NonFiniteValueError. Inputs are copied, never modified.

Conventions:
    variance  population (divisor n)
    kurtosis  non-excess, population moments (normal distribution -> 3.0)
"""

import numpy as np
from scipy.stats import gmean as _scipy_gmean, kurtosis as _scipy_kurtosis

from natbreaks.validation.errors import (
    DivisionByZeroError,
    EmptyInputError,
    InvalidInputError,
    NonFiniteValueError,
)
from natbreaks.validation.input_validation import as_float_array


def _sample(values) -> np.ndarray:
    y = as_float_array(values)
    if y.size == 0:
        raise EmptyInputError()
    finite = np.isfinite(y)
    if not finite.all():
        raise NonFiniteValueError(np.flatnonzero(~finite).tolist())
    return y


def count(values) -> int:
    """Number of observations."""
    return int(_sample(values).size)


def total(values) -> float:
    """Sum of observations."""
    return float(np.sum(_sample(values)))


def mean(values) -> float:
    """Arithmetic mean."""
    return float(np.mean(_sample(values)))


def sum_pow_deviations(values, power: int = 2) -> float:
    """Sum of (x - mean) ** power."""
    y = _sample(values)
    return float(np.sum((y - np.mean(y)) ** power))


def variance(values) -> float:
    """Population variance (mean squared deviation, divisor n)."""
    y = _sample(values)
    return float(np.var(y, ddof=0))


def standard_deviation(values) -> float:
    """Population standard deviation."""
    return float(np.sqrt(variance(values)))


def median(values) -> float:
    """Middle value; mean of the two middle values for an even count."""
    return float(np.median(_sample(values)))


def harmonic_mean(values) -> float:
    """
    n / sum(1 / x).

    Raises:
        DivisionByZeroError: a value is zero, or the reciprocals sum to zero
    """
    y = _sample(values)
    if np.any(y == 0.0):
        raise DivisionByZeroError('harmonic_mean')
    reciprocal_sum = np.sum(1.0 / y)
    if reciprocal_sum == 0.0:
        raise DivisionByZeroError(
            'harmonic_mean', "harmonic_mean is undefined: reciprocals sum to zero"
        )
    return float(y.size / reciprocal_sum)


def geometric_mean(values) -> float:
    """
    n-th root of the product of the values.

    Raises:
        InvalidInputError: a value is zero or negative
    """
    y = _sample(values)
    if np.any(y <= 0.0):
        raise InvalidInputError("geometric_mean requires strictly positive values")
    return float(_scipy_gmean(y))


def root_mean_square(values) -> float:
    """Root mean square."""
    y = _sample(values)
    return float(np.sqrt(np.mean(y ** 2)))


def kurtosis(values) -> float:
    """
    Non-excess kurtosis: mean((x - mean)^4) / variance^2.

    A normal distribution gives 3.0 (not 0.0). Population moments are used
    (no small-sample bias correction).

    Raises:
        InvalidInputError: the sample has zero variance
    """
    y = _sample(values)
    if np.var(y) == 0.0:
        raise InvalidInputError("kurtosis is undefined for a sample with zero variance")
    return float(_scipy_kurtosis(y, fisher=False, bias=True))


# Short aliases
std = standard_deviation
rms = root_mean_square
