"""
Tests for goodness of variance fit.
"""

import numpy as np
import pytest

from natbreaks.core.gvf import goodness_of_variance_fit, within_class_ssd
from natbreaks.core.jenks import jenks_breaks, jenks_result
from natbreaks.core.simple import equal_interval_breaks, quantile_breaks
from natbreaks.validation.errors import EmptyInputError, InvalidInputError


class TestGVF:

    def test_known_value(self):
        """Within SSD 44/3 over a total SSD of 149.875."""
        values = [1, 2, 4, 5, 7, 9, 10, 15]
        gvf = goodness_of_variance_fit(values, [5, 10, 15])
        assert gvf == pytest.approx(1 - (44 / 3) / 149.875)

    def test_single_class_is_zero(self):
        values = [1.0, 4.0, 9.0]
        assert goodness_of_variance_fit(values, [9.0]) == 0.0

    def test_every_value_own_class_is_one(self):
        values = [0.3, 0.1, 0.2, 0.7]
        assert goodness_of_variance_fit(values, sorted(values)) == 1.0

    @pytest.mark.parametrize('k', [1, 2, 3])
    def test_constant_sample_is_one(self, k):
        values = [0.1, 0.1, 0.1]
        assert goodness_of_variance_fit(values, [0.1] * k) == 1.0

    def test_homogeneous_classes_is_one(self):
        values = [2.0, 2.0, 2.0, 9.0, 9.0]
        assert goodness_of_variance_fit(values, [2.0, 9.0]) == 1.0

    @pytest.mark.parametrize('seed', range(5))
    def test_bounds(self, seed):
        rng = np.random.default_rng(seed)
        values = rng.exponential(3.0, 50)
        for k in (1, 2, 4, 7):
            for breaks in (jenks_breaks(values, k), equal_interval_breaks(values, k),
                           quantile_breaks(values, k)):
                assert 0.0 <= goodness_of_variance_fit(values, breaks) <= 1.0

    def test_jenks_fits_best(self, continuous_sample):
        for k in (2, 3, 5):
            best = goodness_of_variance_fit(continuous_sample, jenks_breaks(continuous_sample, k))
            assert best >= goodness_of_variance_fit(
                continuous_sample, equal_interval_breaks(continuous_sample, k)) - 1e-12
            assert best >= goodness_of_variance_fit(
                continuous_sample, quantile_breaks(continuous_sample, k)) - 1e-12

    def test_gvf_grows_with_k(self, continuous_sample):
        fits = [goodness_of_variance_fit(continuous_sample, jenks_breaks(continuous_sample, k))
                for k in range(1, 7)]
        assert all(b >= a - 1e-12 for a, b in zip(fits, fits[1:]))

    def test_within_ssd_matches_jenks_objective(self, continuous_sample):
        result = jenks_result(continuous_sample, 4)
        assert within_class_ssd(continuous_sample, result.breaks) == pytest.approx(result.total_ssd)

    def test_nodata(self):
        assert goodness_of_variance_fit([1.0, -1.0, 2.0], [1.0, 2.0], nodata=-1.0) == 1.0

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            goodness_of_variance_fit([], [1.0])

    @pytest.mark.parametrize('breaks', [[], [3.0, 2.0, 9.0], [4.0]])
    def test_malformed_breaks(self, breaks):
        with pytest.raises(InvalidInputError):
            goodness_of_variance_fit([1.0, 4.0, 9.0], breaks)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
