"""Tests for partial curve approximations."""

import pytest

from brepkernel.approx import ApproxPoint, CurveApprox, CurveApproxSegment
from brepkernel.boundary import CurveBoundary


def _segment(start, end, ts):
    return CurveApproxSegment(CurveBoundary(start, end),
                              tuple(ApproxPoint((t,), (t, 0.0, 0.0)) for t in ts))


def _ts(segment):
    return [p.t for p in segment.points]


class TestCurveApproxSegment:
    """Test single segments."""

    def test_reverse(self):
        segment = _segment(0.1, 0.4, [0.2, 0.3]).reverse()
        assert segment.boundary == CurveBoundary(0.4, 0.1)
        assert _ts(segment) == [0.3, 0.2]

    def test_normalize(self):
        segment = _segment(0.4, 0.1, [0.3, 0.2])
        assert segment.normalize() == _segment(0.1, 0.4, [0.2, 0.3])
        assert segment.normalize().normalize() == segment.normalize()

    def test_make_subset(self):
        segment = _segment(0.0, 1.0, [0.2, 0.4, 0.6, 0.8])
        subset = segment.make_subset(CurveBoundary(0.3, 0.7))
        assert subset.boundary == CurveBoundary(0.3, 0.7)
        assert _ts(subset) == [0.4, 0.6]

    def test_make_subset_drops_points_on_new_ends(self):
        segment = _segment(0.0, 1.0, [0.25, 0.5, 0.75])
        subset = segment.make_subset(CurveBoundary(0.25, 0.75))
        assert _ts(subset) == [0.5]

    def test_make_subset_of_reversed_segment_is_normalized(self):
        segment = _segment(1.0, 0.0, [0.8, 0.6, 0.4, 0.2])
        subset = segment.make_subset(CurveBoundary(0.3, 0.7))
        assert subset.boundary == CurveBoundary(0.3, 0.7)
        assert _ts(subset) == [0.4, 0.6]

    def test_make_subset_wider_than_segment_keeps_all_points(self):
        segment = _segment(0.1, 0.4, [0.1, 0.25, 0.4])
        subset = segment.make_subset(CurveBoundary(0.0, 1.0))
        assert subset.boundary == CurveBoundary(0.1, 0.4)
        assert _ts(subset) == [0.1, 0.25, 0.4]

        subset = segment.make_subset(CurveBoundary(1.0, 0.0))
        assert subset.boundary == CurveBoundary(0.1, 0.4)
        assert _ts(subset) == [0.1, 0.25, 0.4]

    def test_merge(self):
        merged = _segment(0.0, 1.0, [0.5]).merge(_segment(0.75, 2.0, [1.0, 1.5]))
        assert merged.boundary == CurveBoundary(0.0, 2.0)
        assert _ts(merged) == [0.5, 1.0, 1.5]

    def test_merge_prefers_other_points_within_its_boundary(self):
        ours = _segment(0.0, 2.0, [0.5, 1.0, 1.5])
        theirs = CurveApproxSegment(CurveBoundary(0.75, 2.0),
                                    (ApproxPoint((1.0,), (9.0, 9.0, 9.0)),))
        merged = ours.merge(theirs)
        assert _ts(merged) == [0.5, 1.0]
        assert merged.points[1].global_form == (9.0, 9.0, 9.0)

    def test_merge_disjoint_segments_is_a_bug(self):
        with pytest.raises(AssertionError):
            _segment(0.0, 1.0, [0.5]).merge(_segment(2.0, 3.0, [2.5]))


class TestCurveApprox:
    """Test collections of segments."""

    def test_reverse(self):
        approx = CurveApprox([_segment(0.1, 0.4, [0.2, 0.3]),
                              _segment(0.6, 0.9, [0.7, 0.8])])
        approx.reverse()
        assert approx == CurveApprox([_segment(0.9, 0.6, [0.8, 0.7]),
                                      _segment(0.4, 0.1, [0.3, 0.2])])

    def test_make_subset(self):
        approx = CurveApprox([_segment(0.1, 0.4, [0.2, 0.3]),
                              _segment(0.6, 0.9, [0.7, 0.8])])
        approx.make_subset(CurveBoundary(0.25, 0.75))
        assert approx == CurveApprox([_segment(0.25, 0.4, [0.3]),
                                      _segment(0.6, 0.75, [0.7])])

    def test_make_subset_is_idempotent(self):
        approx = CurveApprox([_segment(0.1, 0.4, [0.2, 0.3]),
                              _segment(0.6, 0.9, [0.7, 0.8])])
        approx.make_subset(CurveBoundary(0.25, 0.75))
        once = approx.segments
        approx.make_subset(CurveBoundary(0.25, 0.75))
        assert approx.segments == once

    def test_make_subset_with_reversed_boundary(self):
        approx = CurveApprox([_segment(0.1, 0.4, [0.2, 0.3]),
                              _segment(0.6, 0.9, [0.7, 0.8])])
        approx.make_subset(CurveBoundary(0.75, 0.25))
        assert approx == CurveApprox([_segment(0.75, 0.6, [0.7]),
                                      _segment(0.4, 0.25, [0.3])])

    def test_make_subset_drops_segments_outside(self):
        approx = CurveApprox([_segment(0.1, 0.4, [0.2, 0.3]),
                              _segment(0.6, 0.9, [0.7, 0.8])])
        approx.make_subset(CurveBoundary(0.0, 0.5))
        assert approx == CurveApprox([_segment(0.1, 0.4, [0.2, 0.3])])

    def test_merge_bridges_segments(self):
        approx = CurveApprox([_segment(0.0, 1.0, [0.5]), _segment(2.0, 3.0, [2.5])])
        merged = approx.merge(_segment(0.5, 2.5, [1.0, 1.5, 2.0]))

        assert merged.boundary == CurveBoundary(0.0, 3.0)
        assert _ts(merged) == [0.5, 1.0, 1.5, 2.0, 2.5]
        assert approx.segments == (merged,)

    def test_merge_reversed_segment(self):
        approx = CurveApprox([_segment(0.0, 1.0, [0.5]), _segment(2.0, 3.0, [2.5])])
        merged = approx.merge(_segment(2.5, 0.5, [2.0, 1.5, 1.0]))
        assert merged.boundary == CurveBoundary(0.0, 3.0)
        assert _ts(merged) == [0.5, 1.0, 1.5, 2.0, 2.5]

    def test_merge_without_overlap_adds_segment(self):
        approx = CurveApprox([_segment(2.0, 3.0, [2.5])])
        merged = approx.merge(_segment(0.0, 1.0, [0.5]))
        assert merged == _segment(0.0, 1.0, [0.5])
        assert [s.boundary for s in approx.segments] == [
            CurveBoundary(0.0, 1.0), CurveBoundary(2.0, 3.0)]

    def test_merged_segments_never_overlap(self):
        approx = CurveApprox()
        for start, end in [(0.0, 0.2), (0.5, 0.7), (0.9, 1.0), (0.3, 0.4),
                           (0.15, 0.35), (0.8, 0.6)]:
            approx.merge(_segment(start, end, []))

        boundaries = [s.boundary for s in approx.segments]
        assert boundaries == sorted(boundaries)
        for a, b in zip(boundaries, boundaries[1:]):
            assert not a.overlaps(b)
        assert boundaries == [CurveBoundary(0.0, 0.4), CurveBoundary(0.5, 0.8),
                              CurveBoundary(0.9, 1.0)]

    def test_into_single_segment(self):
        boundary = CurveBoundary(0.0, 1.0)
        segment = _segment(0.0, 1.0, [0.5])
        assert CurveApprox().into_single_segment(boundary) is None
        assert CurveApprox([segment]).into_single_segment(boundary) == segment
        assert CurveApprox([segment]).into_single_segment(CurveBoundary(0.0, 2.0)) is None
        assert CurveApprox([_segment(0.0, 0.4, []), _segment(0.6, 1.0, [])]) \
            .into_single_segment(boundary) is None

    def test_empty_segments_are_pruned(self):
        approx = CurveApprox([_segment(1.0, 1.0, []), _segment(0.0, 1.0, [0.5])])
        assert len(approx) == 1
        assert [p.t for p in approx.points()] == [0.5]
