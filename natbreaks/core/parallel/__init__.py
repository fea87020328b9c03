"""
Parallel runners.

Uses joblib to classify many independent samples at once.
"""

from .column_runner import classify_columns_parallel

__all__ = [
    'classify_columns_parallel',
]
