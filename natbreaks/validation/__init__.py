"""
natbreaks Validation Module

Prepares samples and defines the error taxonomy shared by every classifier.

Exports:
    - prepare_sample: Sentinel removal, finiteness check, stable sort
    - check_class_count: Range check for k
    - check_breaks: Check a break sequence covers a sample
    - ClassificationError and its subclasses
"""

from .errors import (
    ClassificationError,
    EmptyInputError,
    NonFiniteValueError,
    InvalidClassCountError,
    DivisionByZeroError,
    InvalidInputError,
)

from .input_validation import (
    as_float_array,
    usable_mask,
    prepare_sample,
    check_class_count,
    check_breaks,
    count_distinct,
)

__all__ = [
    # Errors
    'ClassificationError',
    'EmptyInputError',
    'NonFiniteValueError',
    'InvalidClassCountError',
    'DivisionByZeroError',
    'InvalidInputError',
    # Preparation
    'as_float_array',
    'usable_mask',
    'prepare_sample',
    'check_class_count',
    'check_breaks',
    'count_distinct',
]
