"""Tests for curve boundaries."""

import pytest

from brepkernel.boundary import CurveBoundary


class TestCurveBoundary:
    """Test the interval operations on curve boundaries."""

    def test_reverse(self):
        b = CurveBoundary(0.25, 0.75)
        assert b.reverse() == CurveBoundary(0.75, 0.25)
        assert b.reverse().reverse() == b

    def test_normalize(self):
        assert CurveBoundary(0.75, 0.25).normalize() == CurveBoundary(0.25, 0.75)
        assert CurveBoundary(0.25, 0.75).normalize() == CurveBoundary(0.25, 0.75)
        assert not CurveBoundary(1.0, 0.0).is_normalized()

    def test_from_pair_accepts_nested_points(self):
        assert CurveBoundary.from_pair([[0.0], [1.0]]) == CurveBoundary(0.0, 1.0)
        assert CurveBoundary.from_pair((2, 3)) == CurveBoundary(2.0, 3.0)

    def test_from_pair_rejects_multidimensional_points(self):
        with pytest.raises(ValueError):
            CurveBoundary.from_pair([[0.0, 1.0], [1.0, 2.0]])

    def test_is_empty(self):
        assert CurveBoundary(1.0, 1.0).is_empty()
        assert not CurveBoundary(1.0, 2.0).is_empty()

    def test_contains_is_exclusive(self):
        b = CurveBoundary(1.0, 0.0)
        assert b.contains(0.5)
        assert not b.contains(0.0)
        assert not b.contains(1.0)
        assert not b.contains(1.5)

    def test_overlaps(self):
        a = CurveBoundary(0.0, 1.0)
        assert a.overlaps(CurveBoundary(0.5, 2.0))
        assert a.overlaps(CurveBoundary(2.0, 0.5))
        assert a.overlaps(CurveBoundary(1.0, 2.0))  # touching
        assert not a.overlaps(CurveBoundary(1.5, 2.0))

    def test_union(self):
        a = CurveBoundary(0.0, 1.0)
        assert a.union(CurveBoundary(2.0, 0.5)) == CurveBoundary(0.0, 2.0)
        assert a.union(CurveBoundary(1.0, 3.0)) == CurveBoundary(0.0, 3.0)

    def test_union_of_disjoint_boundaries_is_a_bug(self):
        with pytest.raises(AssertionError):
            CurveBoundary(0.0, 1.0).union(CurveBoundary(2.0, 3.0))

    def test_subset(self):
        a = CurveBoundary(0.0, 1.0)
        assert a.subset(CurveBoundary(0.75, 0.25)) == CurveBoundary(0.25, 0.75)
        assert a.subset(CurveBoundary(0.5, 3.0)) == CurveBoundary(0.5, 1.0)

    def test_subset_of_disjoint_boundaries_is_empty(self):
        assert CurveBoundary(0.0, 1.0).subset(CurveBoundary(2.0, 3.0)).is_empty()

    def test_ordering(self):
        boundaries = [CurveBoundary(0.6, 0.9), CurveBoundary(0.1, 0.4)]
        assert sorted(boundaries) == [CurveBoundary(0.1, 0.4), CurveBoundary(0.6, 0.9)]

    def test_unpacking(self):
        start, end = CurveBoundary(3, 4)
        assert (start, end) == (3.0, 4.0)
