"""
natbreaks Core
==============

Classification engines. Sample in, breaks out, no file I/O.

Structure:
    simple.py     - Equal intervals, quantiles, arithmetic progression
    head_tail.py  - Head-Tail / Tail-Head breaks (self-determined class count)
    jenks.py      - Jenks natural breaks (exact dynamic program)
    gvf.py        - Goodness of variance fit
    registry.py   - Classification enum, method lookup, classify()
    bounds.py     - BoundsInfo (breaks + sample summary + class lookup)
    parallel/     - joblib runner for many columns
"""

from natbreaks.core.simple import (
    equal_interval_breaks,
    quantile_breaks,
    arithmetic_breaks,
)
from natbreaks.core.head_tail import head_tail_breaks, tail_head_breaks
from natbreaks.core.jenks import jenks_breaks, jenks_result, JenksResult
from natbreaks.core.gvf import goodness_of_variance_fit, within_class_ssd
from natbreaks.core.registry import (
    Classification,
    MethodRegistry,
    classify,
    get_registry,
    list_methods,
)
from natbreaks.core.bounds import BoundsInfo

__all__ = [
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
    'MethodRegistry',
    'classify',
    'get_registry',
    'list_methods',
    'BoundsInfo',
]
