"""Approximation of curves within a boundary, with caching.

The same curve is usually used by two half-edges, one for each adjacent
face, traversing it in opposite directions.  The cache makes sure both get
the same points and that the tessellation runs only once per curve and
boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from brepkernel.approx.path import approx_path
from brepkernel.approx.segment import CurveApproxSegment
from brepkernel.approx.tolerance import ApproxPoint, Tolerance
from brepkernel.boundary import CurveBoundary
from brepkernel.errors import UnsupportedConfiguration
from brepkernel.geometry import Geometry, HalfEdgeGeom
from brepkernel.path import Circle, Line, SurfacePath
from brepkernel.storage import Handle
from brepkernel.surface import SurfaceGeom
from brepkernel.topology import Curve, Surface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _CacheEntry:
    segment: CurveApproxSegment
    normalized: bool


class CurveApproxCache:
    """Curve approximations keyed by curve identity and boundary.

    Each entry is stored once, under the normalized boundary, together with
    the direction it was computed in.  Asking for the reversed boundary
    returns a reversed copy.

    ``hits`` and ``misses`` count lookups that were served from the cache
    and approximations that had to be computed.
    """

    def __init__(self) -> None:
        self._inner: Dict[Tuple[Handle[Curve], CurveBoundary], _CacheEntry] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._inner)

    def get(self, curve: Handle[Curve], boundary: CurveBoundary) -> Optional[CurveApproxSegment]:
        entry = self._inner.get((curve, boundary.normalize()))
        if entry is None:
            return None
        self.hits += 1
        if entry.normalized == boundary.is_normalized():
            return entry.segment
        return entry.segment.reverse()

    def insert(self, curve: Handle[Curve], segment: CurveApproxSegment) -> CurveApproxSegment:
        """Store ``segment`` and return it.

        If an approximation of the same boundary is already stored, that one
        wins and is returned instead, in the orientation of ``segment``.
        """
        self.misses += 1
        key = (curve, segment.boundary.normalize())
        entry = self._inner.setdefault(
            key, _CacheEntry(segment, segment.boundary.is_normalized()))
        if entry.normalized == segment.boundary.is_normalized():
            return entry.segment
        return entry.segment.reverse()


def approx_curve(curve: Handle[Curve], half_edge: HalfEdgeGeom, surface: Handle[Surface],
                 tolerance, geometry: Geometry,
                 cache: Optional[CurveApproxCache] = None) -> CurveApproxSegment:
    """Approximate ``curve`` within the half-edge's boundary on ``surface``.

    Raises :class:`~brepkernel.errors.UnsupportedConfiguration` for curve
    and surface combinations that cannot be approximated.
    """
    tolerance = Tolerance.coerce(tolerance)
    if cache is None:
        cache = CurveApproxCache()

    cached = cache.get(curve, half_edge.boundary)
    if cached is not None:
        return cached

    logger.debug('approximating %r within %r', curve, half_edge.boundary)
    points = _approx_curve(half_edge.path, geometry.of_surface(surface),
                           half_edge.boundary, tolerance)
    segment = CurveApproxSegment(half_edge.boundary, tuple(points))
    return cache.insert(curve, segment)


def _approx_curve(path: SurfacePath, surface: SurfaceGeom, boundary: CurveBoundary,
                  tolerance: Tolerance) -> List[ApproxPoint]:
    # Circles are the hard part: they need to be approximated, while lines
    # only need to follow whatever the surface does.
    if isinstance(path, Circle) and isinstance(surface.u, Circle):
        logger.warning('cannot approximate %r on curved surface %r', path, surface)
        raise UnsupportedConfiguration(
            'Approximating a circle on a curved surface is not supported',
            surface_path=path, global_path=surface.u)
    if isinstance(path, Circle) and isinstance(surface.u, Line):
        return _circle_on_flat_surface(path, surface, boundary, tolerance)
    if isinstance(path, Line) and isinstance(surface.u, Line):
        return _line_on_surface(path, surface, boundary, tolerance)
    if isinstance(path, Line) and isinstance(surface.u, Circle):
        return _line_on_surface(path, surface, boundary, tolerance)
    raise TypeError(f'unknown path combination: {path!r} on {surface.u!r}')


def _circle_on_flat_surface(path: Circle, surface: SurfaceGeom, boundary: CurveBoundary,
                            tolerance: Tolerance) -> List[ApproxPoint]:
    points = []
    for t, point_surface in approx_path(path, boundary, tolerance):
        point_global = surface.point_from_surface_coords(point_surface)
        points.append(ApproxPoint((t,), point_global))
    return points


def _line_on_surface(path: Line, surface: SurfaceGeom, boundary: CurveBoundary,
                     tolerance: Tolerance) -> List[ApproxPoint]:
    # The line itself needs no points, but where it follows the surface's
    # u-direction it inherits whatever curvature the surface has there.
    range_u = CurveBoundary(path.point_from_path_coords(boundary.start)[0],
                            path.point_from_path_coords(boundary.end)[0])

    points = []
    for u, _ in approx_path(surface.u, range_u, tolerance):
        t = (u - path.origin[0]) / path.direction[0]
        # recompute from the curve's own mapping instead of reusing the
        # global path's point
        point_surface = path.point_from_path_coords(t)
        point_global = surface.point_from_surface_coords(point_surface)
        points.append(ApproxPoint((t,), point_global))
    return points


__all__ = ['CurveApproxCache', 'approx_curve']
