"""
Method Registry - maps classification names to compute functions.

The registry provides:
1. The Classification enum and name parsing (snake_case or CamelCase)
2. Lookup of the compute function behind each method
3. A single classify() entry point
"""

import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

import numpy as np

from natbreaks.core.head_tail import head_tail_breaks, tail_head_breaks
from natbreaks.core.jenks import jenks_breaks
from natbreaks.core.simple import arithmetic_breaks, equal_interval_breaks, quantile_breaks
from natbreaks.validation.errors import InvalidClassCountError, InvalidInputError


class Classification(str, Enum):
    """Classification methods."""
    JENKS_NATURAL_BREAKS = "jenks"
    QUANTILES = "quantiles"
    EQUAL_INTERVAL = "equal_interval"
    ARITHMETIC_PROGRESSION = "arithmetic"
    HEAD_TAIL = "head_tail"
    TAIL_HEAD = "tail_head"

    @classmethod
    def parse(cls, name) -> "Classification":
        """
        Resolve a method name.

        Accepts enum members, enum values ("jenks", "head_tail"), and the
        CamelCase names ("JenksNaturalBreaks", "HeadTail"), case-insensitively.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise InvalidInputError(f"Classification name must be a string, got {name!r}")
        key = name.strip().lower().replace('_', '').replace('-', '').replace(' ', '')
        if key not in _ALIASES:
            available = ", ".join(m.value for m in cls)
            raise InvalidInputError(
                f"Unknown classification: '{name}'. Available: {available}"
            )
        return _ALIASES[key]


_ALIASES = {
    'jenks': Classification.JENKS_NATURAL_BREAKS,
    'jenksnaturalbreaks': Classification.JENKS_NATURAL_BREAKS,
    'naturalbreaks': Classification.JENKS_NATURAL_BREAKS,
    'quantiles': Classification.QUANTILES,
    'quantile': Classification.QUANTILES,
    'equalinterval': Classification.EQUAL_INTERVAL,
    'equalintervals': Classification.EQUAL_INTERVAL,
    'arithmetic': Classification.ARITHMETIC_PROGRESSION,
    'arithmeticprogression': Classification.ARITHMETIC_PROGRESSION,
    'headtail': Classification.HEAD_TAIL,
    'tailhead': Classification.TAIL_HEAD,
}


@dataclass
class MethodSpec:
    """How to call one classification method."""
    method: Classification
    compute: Callable[..., np.ndarray]
    takes_k: bool = True
    description: str = ""


class MethodRegistry:
    """Registry of available classification methods."""

    def __init__(self):
        self._methods: Dict[Classification, MethodSpec] = {}

    def register(self, spec: MethodSpec):
        self._methods[spec.method] = spec

    def list_methods(self) -> List[str]:
        """List all registered method names."""
        return sorted(m.value for m in self._methods)

    def has_method(self, name) -> bool:
        try:
            return Classification.parse(name) in self._methods
        except InvalidInputError:
            return False

    def get(self, name) -> MethodSpec:
        """Get the MethodSpec for a method, by enum or name."""
        method = Classification.parse(name)
        if method not in self._methods:
            available = ", ".join(self.list_methods())
            raise InvalidInputError(
                f"Method not registered: '{method.value}'. Available: {available}"
            )
        return self._methods[method]


def _default_registry() -> MethodRegistry:
    registry = MethodRegistry()
    registry.register(MethodSpec(
        Classification.JENKS_NATURAL_BREAKS, jenks_breaks,
        description="Optimal partition minimising within-class variance",
    ))
    registry.register(MethodSpec(
        Classification.QUANTILES, quantile_breaks,
        description="Equal-count classes (linear interpolation)",
    ))
    registry.register(MethodSpec(
        Classification.EQUAL_INTERVAL, equal_interval_breaks,
        description="Equal-width classes",
    ))
    registry.register(MethodSpec(
        Classification.ARITHMETIC_PROGRESSION, arithmetic_breaks,
        description="Class widths d, 2d, ..., kd",
    ))
    registry.register(MethodSpec(
        Classification.HEAD_TAIL, head_tail_breaks, takes_k=False,
        description="Recursive mean splits on the upper tail",
    ))
    registry.register(MethodSpec(
        Classification.TAIL_HEAD, tail_head_breaks, takes_k=False,
        description="Recursive mean splits on the lower tail",
    ))
    return registry


# Global registry instance (lazy initialized)
_registry: Optional[MethodRegistry] = None


def get_registry() -> MethodRegistry:
    """Get or create global method registry."""
    global _registry
    if _registry is None:
        _registry = _default_registry()
    return _registry


def list_methods() -> List[str]:
    return get_registry().list_methods()


def classify(values, method="jenks", k: Optional[int] = None, nodata=None, **options) -> np.ndarray:
    """
    Compute class breaks with any registered method.

    Args:
        values: Raw sample
        method: Classification member or name
        k: Number of classes (ignored by head_tail / tail_head)
        nodata: Optional sentinel removed before classification
        **options: Forwarded to the method (threshold, algorithm)

    Returns:
        Ascending upper bounds, the last equal to the sample maximum
    """
    spec = get_registry().get(method)

    if not spec.takes_k:
        if k is not None:
            warnings.warn(
                f"{spec.method.value} determines its own class count; k={k} ignored",
                RuntimeWarning,
                stacklevel=2,
            )
        return spec.compute(values, nodata=nodata, **options)

    if k is None:
        raise InvalidClassCountError(None)
    return spec.compute(values, k, nodata=nodata, **options)
