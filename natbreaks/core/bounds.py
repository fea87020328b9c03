"""
BoundsInfo - a classification result together with its sample summary.

Holds the k upper-bound breaks plus min, max and mean of the prepared
sample, and answers "which class does this value fall in?".
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import numpy as np

from natbreaks.core.gvf import goodness_of_variance_fit
from natbreaks.core.registry import Classification, classify
from natbreaks.validation.input_validation import as_float_array, prepare_sample


@dataclass
class BoundsInfo:
    """Class breaks for one sample."""

    method: Classification
    nb_class: int
    breaks: np.ndarray
    min: float
    max: float
    mean: float
    values: np.ndarray = field(default=None, repr=False)

    @classmethod
    def from_values(
        cls,
        values,
        method="jenks",
        k: Optional[int] = None,
        nodata=None,
        **options,
    ) -> "BoundsInfo":
        """
        Prepare a sample and classify it.

        Args:
            values: Raw sample
            method: Classification member or name
            k: Number of classes (not used by head_tail / tail_head)
            nodata: Optional sentinel removed before classification
            **options: Forwarded to the method
        """
        method = Classification.parse(method)
        y = prepare_sample(values, nodata)
        breaks = classify(y, method, k=k, **options)
        return cls(
            method=method,
            nb_class=int(breaks.size),
            breaks=breaks,
            min=float(y[0]),
            max=float(y[-1]),
            mean=float(np.mean(y)),
            values=y,
        )

    @property
    def bounds(self) -> np.ndarray:
        """k + 1 boundaries: the minimum followed by every upper bound."""
        return np.concatenate(([self.min], self.breaks))

    def get_class_index(self, value) -> Optional[int]:
        """
        0-based class of a value, or None outside [min, max].

        The minimum belongs to class 0; a value equal to a break belongs to
        the class that break closes.
        """
        value = float(value)
        if value != value or value < self.min or value > self.max:
            return None
        return int(np.searchsorted(self.breaks, value, side='left'))

    def classify_values(self, values) -> np.ndarray:
        """Vectorised get_class_index; -1 marks values outside [min, max] or NaN."""
        arr = as_float_array(values)
        idx = np.searchsorted(self.breaks, arr, side='left').astype(np.int64)
        outside = np.isnan(arr) | (arr < self.min) | (arr > self.max)
        idx[outside] = -1
        return idx

    def class_counts(self) -> np.ndarray:
        """Number of sample values in each class."""
        labels = np.searchsorted(self.breaks, self.values, side='left')
        return np.bincount(labels, minlength=self.nb_class)[:self.nb_class]

    def gvf(self) -> float:
        """Goodness of variance fit of these breaks on the sample."""
        return goodness_of_variance_fit(self.values, self.breaks)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to serializable dict."""
        return {
            'method': self.method.value,
            'nb_class': self.nb_class,
            'breaks': self.breaks.tolist(),
            'bounds': self.bounds.tolist(),
            'min': self.min,
            'max': self.max,
            'mean': self.mean,
        }
