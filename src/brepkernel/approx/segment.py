"""Partial curve approximations and the interval algebra over them.

A :class:`CurveApproxSegment` is a run of approximation points covering one
boundary of a curve.  A :class:`CurveApprox` collects segments of the same
curve; its segments never overlap and are kept sorted by boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from brepkernel.approx.tolerance import ApproxPoint
from brepkernel.boundary import CurveBoundary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveApproxSegment:
    """Approximation points of a curve within ``boundary``.

    Points are ordered in the direction of the boundary.
    """

    boundary: CurveBoundary
    points: Tuple[ApproxPoint, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'points', tuple(self.points))

    def is_empty(self) -> bool:
        return self.boundary.is_empty()

    def reverse(self) -> 'CurveApproxSegment':
        return CurveApproxSegment(self.boundary.reverse(), self.points[::-1])

    def normalize(self) -> 'CurveApproxSegment':
        if self.boundary.is_normalized():
            return self
        return self.reverse()

    def make_subset(self, boundary: CurveBoundary) -> 'CurveApproxSegment':
        """Restrict the segment to ``boundary``; the result is normalized.

        Points are kept if they lie strictly inside ``boundary``, so a
        boundary wider than the segment's own keeps every point.
        """
        subset = self.boundary.subset(boundary)
        requested = boundary.normalize()
        points = sorted((p for p in self.points if requested.contains(p.t)),
                        key=lambda p: p.local_form)
        return CurveApproxSegment(subset, tuple(points))

    def merge(self, other: 'CurveApproxSegment') -> 'CurveApproxSegment':
        """Combine with an overlapping segment into one normalized segment.

        Within the other segment's boundary, its points replace ours.
        """
        assert self.boundary.overlaps(other.boundary), \
            "Shouldn't merge segments that don't overlap."
        other_boundary = other.boundary.normalize()
        merged = {p.local_form: p for p in self.points
                  if not other_boundary.contains(p.t)}
        for p in other.points:
            merged[p.local_form] = p
        points = tuple(merged[key] for key in sorted(merged))
        return CurveApproxSegment(self.boundary.union(other.boundary), points)


class CurveApprox:
    """A partial approximation of a curve made of disjoint segments."""

    def __init__(self, segments: Iterable[CurveApproxSegment] = ()) -> None:
        self._segments: List[CurveApproxSegment] = list(segments)
        self._prune()

    @property
    def segments(self) -> Tuple[CurveApproxSegment, ...]:
        return tuple(self._segments)

    def points(self) -> Iterator[ApproxPoint]:
        for segment in self._segments:
            yield from segment.points

    def __len__(self) -> int:
        return len(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveApprox):
            return NotImplemented
        return self._segments == other._segments

    def __repr__(self) -> str:
        return f'CurveApprox({self._segments!r})'

    def _prune(self) -> None:
        self._segments = [s for s in self._segments if not s.is_empty()]

    def _sort(self) -> None:
        self._segments.sort(key=lambda s: s.boundary.normalize())

    def into_single_segment(self, boundary: CurveBoundary) -> Optional[CurveApproxSegment]:
        """Return the one segment covering exactly ``boundary``, if there is one.

        ``None`` means the approximation has no segments, has gaps (more
        than one segment), or its only segment covers something else.
        """
        if len(self._segments) == 1 and self._segments[0].boundary == boundary:
            return self._segments[0]
        return None

    def reverse(self) -> None:
        self._segments = [segment.reverse() for segment in reversed(self._segments)]

    def make_subset(self, boundary: CurveBoundary) -> None:
        """Reduce the approximation to the part within ``boundary``.

        The remaining segments are oriented like ``boundary``.
        """
        self._segments = [segment.make_subset(boundary) for segment in self._segments]
        self._prune()
        self._sort()
        if not boundary.is_normalized():
            self.reverse()

    def merge(self, new_segment: CurveApproxSegment) -> CurveApproxSegment:
        """Merge ``new_segment`` with every segment it overlaps.

        Returns the merged segment, which replaces all segments involved.
        """
        overlapping = [s for s in self._segments if s.boundary.overlaps(new_segment.boundary)]
        self._segments = [s for s in self._segments
                          if not s.boundary.overlaps(new_segment.boundary)]

        merged = new_segment.normalize()
        for segment in overlapping:
            assert merged.boundary.overlaps(segment.boundary), \
                "Shouldn't merge segments that don't overlap."
            merged = merged.merge(segment)

        if overlapping:
            logger.debug('merged %d segment(s) into %r', len(overlapping), merged.boundary)

        self._segments.append(merged)
        self._prune()
        self._sort()
        return merged


__all__ = ['CurveApproxSegment', 'CurveApprox']
