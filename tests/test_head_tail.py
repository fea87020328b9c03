"""
Tests for Head-Tail and Tail-Head breaks.

Reference sample (76 values): mean 288/76, tail means 7, 100/11, 11, then
the single value 12.
"""

import numpy as np
import pytest

from natbreaks.core.head_tail import head_tail_breaks, tail_head_breaks
from natbreaks.validation.errors import EmptyInputError, InvalidInputError


class TestHeadTail:

    def test_reference(self, reference_values):
        breaks = head_tail_breaks(reference_values)
        np.testing.assert_allclose(
            breaks, [288 / 76, 7.0, 9.090909090909092, 11.0, 12.0]
        )

    def test_run_to_end_threshold(self, reference_values):
        """threshold=1.0 keeps splitting until one distinct value is left."""
        breaks = head_tail_breaks(reference_values, threshold=1.0)
        np.testing.assert_allclose(
            breaks, [288 / 76, 7.0, 9.090909090909092, 11.0, 12.0]
        )

    def test_majority_tail_stops(self, reference_values):
        """First tail holds 28/76 (36.8%): above a 35% threshold, stop there."""
        breaks = head_tail_breaks(reference_values, threshold=0.35)
        np.testing.assert_allclose(breaks, [288 / 76, 12.0])

    def test_minority_tail_continues(self):
        """Tail share 2/12 is below 0.4, so the recursion goes on; 1/2 then stops it."""
        breaks = head_tail_breaks([1] * 8 + [2, 3, 50, 100])
        np.testing.assert_allclose(breaks, [163 / 12, 75.0, 100.0])

    def test_heavy_tail_terminates(self):
        """A single outlier: one split, then the tail cannot shrink further."""
        breaks = head_tail_breaks([1, 1, 1, 1, 1, 2, 3, 100])
        np.testing.assert_allclose(breaks, [13.75, 100.0])

    def test_constant_sample(self):
        """Nothing above the mean: no split, the maximum alone."""
        np.testing.assert_array_equal(head_tail_breaks([5.0, 5.0, 5.0]), [5.0])

    def test_single_value(self):
        np.testing.assert_array_equal(head_tail_breaks([2.5]), [2.5])

    def test_strictly_increasing(self):
        rng = np.random.default_rng(3)
        values = rng.pareto(1.5, 2000)
        breaks = head_tail_breaks(values)
        assert np.all(np.diff(breaks) > 0)
        assert breaks[-1] == values.max()
        assert len(breaks) < 40

    def test_repeated_values_terminate(self):
        """Tail made of one repeated value stops instead of looping."""
        values = [0.1] * 3 + [0.7] * 5
        breaks = head_tail_breaks(values, threshold=1.0)
        assert breaks[-1] == 0.7
        assert len(breaks) == 2

    def test_nodata(self):
        breaks = head_tail_breaks([1.0, 3.0, -1.0], nodata=-1.0)
        np.testing.assert_allclose(breaks, [2.0, 3.0])

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            head_tail_breaks([])

    @pytest.mark.parametrize('threshold', [0.0, -0.1, 1.5, 'x'])
    def test_bad_threshold(self, threshold):
        with pytest.raises(InvalidInputError):
            head_tail_breaks([1.0, 2.0], threshold=threshold)


class TestTailHead:

    def test_reference(self, reference_values):
        """Lower part holds 48/76 of the values: one split at the default threshold."""
        breaks = tail_head_breaks(reference_values)
        np.testing.assert_allclose(breaks, [288 / 76, 12.0])

    def test_run_to_end_threshold(self, reference_values):
        breaks = tail_head_breaks(reference_values, threshold=1.0)
        np.testing.assert_allclose(breaks, [92 / 48, 288 / 76, 12.0])

    def test_constant_sample(self):
        np.testing.assert_array_equal(tail_head_breaks([2.0, 2.0]), [2.0])

    def test_ascending(self):
        breaks = tail_head_breaks([1.0, 50.0, 99.0, 100.0, 100.0, 100.0], threshold=1.0)
        assert np.all(np.diff(breaks) > 0)
        assert breaks[-1] == 100.0


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
