"""Tolerance-bounded approximation of curves, faces and collections of faces.

The single entry point :func:`approximate` accepts any supported subject:

- ``(path, boundary)``: a bare surface or global path
- ``(curve, half_edge_geom, surface)``: a curve within a boundary
- ``(half_edge, surface)`` / ``(cycle, surface)``: handles plus the surface
  they are embedded in
- a handle to a face, sketch, shell or solid

One :class:`CurveApproxCache` is used for the whole request.  Pass one in
to share it between requests, or leave it out to get a fresh one.
"""

from __future__ import annotations

from typing import Optional

from brepkernel.approx.curve import CurveApproxCache, approx_curve
from brepkernel.approx.face import (
    CycleApprox, FaceApprox, HalfEdgeApprox, approx_cycle, approx_face,
    approx_faces, approx_half_edge, faces_of,
)
from brepkernel.approx.path import (
    PathApproxParams, approx_path, circle_sagitta, circle_vertex_count,
)
from brepkernel.approx.segment import CurveApprox, CurveApproxSegment
from brepkernel.approx.tolerance import ApproxPoint, Tolerance
from brepkernel.boundary import CurveBoundary
from brepkernel.geometry import Geometry, HalfEdgeGeom
from brepkernel.path import Circle, Line
from brepkernel.storage import Handle
from brepkernel.topology import Cycle, Face, HalfEdge


def approximate(subject, tolerance, geometry: Geometry,
                cache: Optional[CurveApproxCache] = None):
    """Approximate ``subject`` within ``tolerance``.

    Returns a list of :class:`ApproxPoint` for paths, a
    :class:`CurveApproxSegment` for curves, a :class:`HalfEdgeApprox`,
    :class:`CycleApprox` or :class:`FaceApprox` for half-edges, cycles and
    faces, and a list of :class:`FaceApprox` for sketches, shells and
    solids.
    """
    tolerance = Tolerance.coerce(tolerance)
    if cache is None:
        cache = CurveApproxCache()

    if isinstance(subject, tuple):
        if len(subject) == 2 and isinstance(subject[0], (Line, Circle)):
            path, boundary = subject
            if not isinstance(boundary, CurveBoundary):
                boundary = CurveBoundary.from_pair(boundary)
            return [ApproxPoint((t,), point)
                    for t, point in approx_path(path, boundary, tolerance)]
        if len(subject) == 3 and isinstance(subject[1], HalfEdgeGeom):
            curve, half_edge_geom, surface = subject
            return approx_curve(curve, half_edge_geom, surface, tolerance, geometry, cache)
        if len(subject) == 2 and isinstance(subject[0], Handle):
            handle, surface = subject
            value = handle.get()
            if isinstance(value, HalfEdge):
                return approx_half_edge(handle, surface, tolerance, geometry, cache)
            if isinstance(value, Cycle):
                return approx_cycle(handle, surface, tolerance, geometry, cache)
        raise TypeError(f'cannot approximate {subject!r}')

    if isinstance(subject, Handle):
        if isinstance(subject.get(), Face):
            return approx_face(subject, tolerance, geometry, cache)
        return approx_faces(faces_of(subject), tolerance, geometry, cache)

    raise TypeError(f'cannot approximate {subject!r}')


__all__ = [
    'ApproxPoint',
    'CurveApprox',
    'CurveApproxCache',
    'CurveApproxSegment',
    'CycleApprox',
    'FaceApprox',
    'HalfEdgeApprox',
    'PathApproxParams',
    'Tolerance',
    'approx_curve',
    'approx_cycle',
    'approx_face',
    'approx_faces',
    'approx_half_edge',
    'approx_path',
    'approximate',
    'circle_sagitta',
    'circle_vertex_count',
    'faces_of',
]
