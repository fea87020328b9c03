"""
natbreaks: one-dimensional data classification and simple statistics.

Computes class breaks for choropleth legends and exploratory statistics.
Breaks are returned as k ascending upper bounds, the last one equal to the
sample maximum.

Public API:
    from natbreaks import classify, BoundsInfo
    classify(values, 'jenks', k=5)
    BoundsInfo.from_values(values, 'quantiles', k=4).get_class_index(3.2)

Layers:
    natbreaks.primitives  Statistics (mean, variance, median, kurtosis, ...)
    natbreaks.validation  Sample preparation and error types
    natbreaks.core        Classifiers (jenks, quantiles, equal_interval,
                          arithmetic, head_tail, tail_head), GVF, registry
    natbreaks.io          manifest.yaml, value reads, breaks writes
    natbreaks.run         CLI (python -m natbreaks)
"""

from natbreaks.primitives import statistics
from natbreaks.validation import (
    ClassificationError,
    EmptyInputError,
    NonFiniteValueError,
    InvalidClassCountError,
    DivisionByZeroError,
    InvalidInputError,
    prepare_sample,
)
from natbreaks.core import (
    equal_interval_breaks,
    quantile_breaks,
    arithmetic_breaks,
    head_tail_breaks,
    tail_head_breaks,
    jenks_breaks,
    jenks_result,
    JenksResult,
    goodness_of_variance_fit,
    within_class_ssd,
    Classification,
    classify,
    list_methods,
    BoundsInfo,
)

__version__ = "0.1.0"

__all__ = [
    'statistics',
    'ClassificationError',
    'EmptyInputError',
    'NonFiniteValueError',
    'InvalidClassCountError',
    'DivisionByZeroError',
    'InvalidInputError',
    'prepare_sample',
    'equal_interval_breaks',
    'quantile_breaks',
    'arithmetic_breaks',
    'head_tail_breaks',
    'tail_head_breaks',
    'jenks_breaks',
    'jenks_result',
    'JenksResult',
    'goodness_of_variance_fit',
    'within_class_ssd',
    'Classification',
    'classify',
    'list_methods',
    'BoundsInfo',
]
