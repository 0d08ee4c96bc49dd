"""Approximation of half-edges, cycles, faces and collections of faces.

These compose the curve approximation: each half-edge contributes its start
point followed by the interior points of its curve, so walking a cycle's
half-edges produces a closed polygon without duplicate points.

Approximation fails fast: if any half-edge of a face cannot be
approximated, the whole request raises and no partial result is produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from brepkernel.approx.curve import CurveApproxCache, approx_curve
from brepkernel.approx.tolerance import ApproxPoint, Tolerance
from brepkernel.geometry import Geometry
from brepkernel.storage import Handle
from brepkernel.topology import (
    DEFAULT_COLOR, Color, Cycle, Face, HalfEdge, Shell, Sketch, Solid, Surface,
)


@dataclass(frozen=True)
class HalfEdgeApprox:
    """Start point of a half-edge followed by its curve's interior points.

    All points carry surface coordinates as their local form.
    """

    half_edge: Handle[HalfEdge]
    start: ApproxPoint
    curve_points: Tuple[ApproxPoint, ...] = ()

    def points(self) -> List[ApproxPoint]:
        return [self.start, *self.curve_points]


@dataclass(frozen=True)
class CycleApprox:
    half_edges: Tuple[HalfEdgeApprox, ...] = ()

    def points(self) -> List[ApproxPoint]:
        """The cycle's polygon; the first point is not repeated at the end."""
        points: List[ApproxPoint] = []
        for half_edge in self.half_edges:
            points.extend(half_edge.points())
        return points

    def __len__(self) -> int:
        return len(self.half_edges)


@dataclass(frozen=True)
class FaceApprox:
    face: Handle[Face]
    exterior: CycleApprox
    interiors: Tuple[CycleApprox, ...] = ()
    color: Color = DEFAULT_COLOR

    def points(self) -> List[ApproxPoint]:
        points = self.exterior.points()
        for interior in self.interiors:
            points.extend(interior.points())
        return points


def approx_half_edge(half_edge: Handle[HalfEdge], surface: Handle[Surface], tolerance,
                     geometry: Geometry,
                     cache: Optional[CurveApproxCache] = None) -> HalfEdgeApprox:
    tolerance = Tolerance.coerce(tolerance)
    geom = geometry.of_half_edge(half_edge)
    surface_geom = geometry.of_surface(surface)

    start_surface = geom.start_position()
    start = ApproxPoint(start_surface, surface_geom.point_from_surface_coords(start_surface))

    segment = approx_curve(half_edge.curve, geom, surface, tolerance, geometry, cache)
    curve_points = tuple(
        ApproxPoint(geom.path.point_from_path_coords(p.t), p.global_form)
        for p in segment.points
    )
    return HalfEdgeApprox(half_edge, start, curve_points)


def approx_cycle(cycle: Handle[Cycle], surface: Handle[Surface], tolerance,
                 geometry: Geometry,
                 cache: Optional[CurveApproxCache] = None) -> CycleApprox:
    if cache is None:
        cache = CurveApproxCache()
    return CycleApprox(tuple(
        approx_half_edge(half_edge, surface, tolerance, geometry, cache)
        for half_edge in cycle.half_edges
    ))


def approx_face(face: Handle[Face], tolerance, geometry: Geometry,
                cache: Optional[CurveApproxCache] = None) -> FaceApprox:
    if cache is None:
        cache = CurveApproxCache()
    exterior = approx_cycle(face.exterior, face.surface, tolerance, geometry, cache)
    interiors = tuple(approx_cycle(interior, face.surface, tolerance, geometry, cache)
                      for interior in face.interiors)
    color = face.color if face.color is not None else DEFAULT_COLOR
    return FaceApprox(face, exterior, interiors, color)


def approx_faces(faces: Iterable[Handle[Face]], tolerance, geometry: Geometry,
                 cache: Optional[CurveApproxCache] = None) -> List[FaceApprox]:
    """Approximate several faces, sharing one cache between them."""
    if cache is None:
        cache = CurveApproxCache()
    return [approx_face(face, tolerance, geometry, cache) for face in faces]


def faces_of(subject) -> Iterator[Handle[Face]]:
    """Yield the faces of a face, sketch, shell or solid handle."""
    value = subject.get()
    if isinstance(value, Face):
        yield subject
    elif isinstance(value, (Sketch, Shell)):
        yield from value.faces
    elif isinstance(value, Solid):
        for shell in value.shells:
            yield from shell.faces
    else:
        raise TypeError(f'{type(value).__name__} has no faces')


__all__ = [
    'HalfEdgeApprox',
    'CycleApprox',
    'FaceApprox',
    'approx_half_edge',
    'approx_cycle',
    'approx_face',
    'approx_faces',
    'faces_of',
]
