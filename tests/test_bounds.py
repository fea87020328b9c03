"""
Tests for BoundsInfo, the Classification enum, and classify() dispatch.
"""

import numpy as np
import pytest

from natbreaks import BoundsInfo, Classification, classify, list_methods
from natbreaks.core.registry import get_registry
from natbreaks.validation.errors import InvalidClassCountError, InvalidInputError


class TestClassificationNames:

    @pytest.mark.parametrize('name,expected', [
        ('jenks', Classification.JENKS_NATURAL_BREAKS),
        ('JenksNaturalBreaks', Classification.JENKS_NATURAL_BREAKS),
        ('Quantiles', Classification.QUANTILES),
        ('EqualInterval', Classification.EQUAL_INTERVAL),
        ('equal-interval', Classification.EQUAL_INTERVAL),
        ('Arithmetic', Classification.ARITHMETIC_PROGRESSION),
        ('HeadTail', Classification.HEAD_TAIL),
        ('tail_head', Classification.TAIL_HEAD),
        (Classification.QUANTILES, Classification.QUANTILES),
    ])
    def test_parse(self, name, expected):
        assert Classification.parse(name) is expected

    @pytest.mark.parametrize('name', ['EqualInverval', 'kmeans', '', 3])
    def test_unknown(self, name):
        with pytest.raises(InvalidInputError):
            Classification.parse(name)

    def test_list_methods(self):
        assert list_methods() == sorted([
            'arithmetic', 'equal_interval', 'head_tail', 'jenks', 'quantiles', 'tail_head',
        ])

    def test_registry_has_method(self):
        registry = get_registry()
        assert registry.has_method('HeadTail')
        assert not registry.has_method('maximal_breaks')


class TestClassify:

    def test_dispatch(self, reference_values):
        np.testing.assert_array_equal(
            classify(reference_values, 'equal_interval', k=4), [3.75, 6.5, 9.25, 12.0]
        )
        np.testing.assert_array_equal(
            classify(reference_values, 'JenksNaturalBreaks', k=5), [2.0, 4.0, 6.0, 9.0, 12.0]
        )

    def test_missing_k(self):
        with pytest.raises(InvalidClassCountError):
            classify([1.0, 2.0], 'quantiles')

    def test_head_tail_ignores_k(self, reference_values):
        with pytest.warns(RuntimeWarning, match="ignored"):
            breaks = classify(reference_values, 'head_tail', k=3)
        assert len(breaks) == 5

    def test_options_forwarded(self, reference_values):
        breaks = classify(reference_values, 'head_tail', threshold=0.35)
        assert len(breaks) == 2
        np.testing.assert_array_equal(
            classify(reference_values, 'jenks', k=3, algorithm='monotone'),
            classify(reference_values, 'jenks', k=3),
        )

    def test_nodata(self):
        breaks = classify([1.0, -5.0, 2.0, 8.0], 'equal_interval', k=1, nodata=-5.0)
        np.testing.assert_array_equal(breaks, [8.0])


class TestBoundsInfo:

    def test_equal_interval(self, reference_values):
        info = BoundsInfo.from_values(reference_values, Classification.EQUAL_INTERVAL, k=4)
        assert info.nb_class == 4
        np.testing.assert_array_equal(info.bounds, [1.0, 3.75, 6.5, 9.25, 12.0])
        assert info.min == 1.0
        assert info.max == 12.0
        assert info.mean == pytest.approx(288 / 76)

    def test_get_class_index(self, reference_values):
        info = BoundsInfo.from_values(reference_values, 'EqualInterval', k=4)
        # below the minimum: no class
        assert info.get_class_index(0.1) is None
        assert info.get_class_index(1.0) == 0
        assert info.get_class_index(2.0) == 0
        # a break value belongs to the class it closes
        assert info.get_class_index(3.75) == 0
        assert info.get_class_index(4.0) == 1
        assert info.get_class_index(7.0) == 2
        assert info.get_class_index(10.0) == 3
        assert info.get_class_index(12.0) == 3
        # above the maximum: no class
        assert info.get_class_index(15.0) is None
        assert info.get_class_index(float('nan')) is None

    def test_classify_values(self, reference_values):
        info = BoundsInfo.from_values(reference_values, 'equal_interval', k=4)
        labels = info.classify_values([0.1, 2.0, 4.0, 7.0, 10.0, 15.0, float('nan')])
        np.testing.assert_array_equal(labels, [-1, 0, 1, 2, 3, -1, -1])

    def test_every_value_in_one_class(self, continuous_sample):
        info = BoundsInfo.from_values(continuous_sample, 'jenks', k=4)
        labels = info.classify_values(continuous_sample)
        assert (labels >= 0).all() and (labels < 4).all()
        assert info.class_counts().sum() == len(continuous_sample)

    def test_head_tail(self, reference_values):
        info = BoundsInfo.from_values(reference_values, 'HeadTail')
        assert info.method is Classification.HEAD_TAIL
        assert info.nb_class == 5
        np.testing.assert_allclose(info.bounds, [1.0, 288 / 76, 7.0, 100 / 11, 11.0, 12.0])

    def test_gvf(self):
        info = BoundsInfo.from_values([1, 2, 4, 5, 7, 9, 10, 15], 'jenks', k=3)
        assert info.gvf() == pytest.approx(1 - (44 / 3) / 149.875)

    def test_nodata(self):
        info = BoundsInfo.from_values([1.0, -1.0, 3.0], 'quantiles', k=1, nodata=-1.0)
        assert info.min == 1.0
        np.testing.assert_array_equal(info.values, [1.0, 3.0])

    def test_to_dict(self):
        info = BoundsInfo.from_values([1.0, 2.0, 3.0, 4.0], 'equal_interval', k=2)
        d = info.to_dict()
        assert d == {
            'method': 'equal_interval',
            'nb_class': 2,
            'breaks': [2.5, 4.0],
            'bounds': [1.0, 2.5, 4.0],
            'min': 1.0,
            'max': 4.0,
            'mean': 2.5,
        }


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
