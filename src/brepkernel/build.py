"""Small helpers for authoring topology.

Every builder inserts the new objects into the core's stores and registers
their geometry, returning handles.
"""

from __future__ import annotations

from math import tau
from typing import Iterable, Optional, Sequence

from brepkernel.boundary import CurveBoundary
from brepkernel.core import Core
from brepkernel.geometry import HalfEdgeGeom, LocalCurveGeom
from brepkernel.path import Circle, GlobalPath, Line, SurfacePath
from brepkernel.storage import Handle
from brepkernel.surface import SurfaceGeom
from brepkernel.topology import (
    Color, Curve, Cycle, Face, HalfEdge, Sketch, Surface, Vertex,
)


def surface_from_uv(u: GlobalPath, v: Sequence[float], core: Core) -> Handle[Surface]:
    """Insert a surface sweeping ``u`` along ``v``."""
    surface = core.insert(Surface())
    core.geometry.define_surface(surface, SurfaceGeom(u, tuple(v)))
    return surface


def curve_from_path(path: SurfacePath, surface: Handle[Surface], core: Core) -> Handle[Curve]:
    """Insert a curve defined by ``path`` in the coordinates of ``surface``."""
    curve = core.insert(Curve())
    core.geometry.define_curve(curve, surface, LocalCurveGeom(path))
    return curve


def half_edge(path: SurfacePath, boundary: CurveBoundary, surface: Handle[Surface],
              core: Core, *, curve: Optional[Handle[Curve]] = None,
              start_vertex: Optional[Handle[Vertex]] = None) -> Handle[HalfEdge]:
    """Insert a half-edge along ``path`` within ``boundary``.

    A new curve and start vertex are created unless given.
    """
    if curve is None:
        curve = curve_from_path(path, surface, core)
    if start_vertex is None:
        start_vertex = core.insert(Vertex())
    handle = core.insert(HalfEdge(curve, start_vertex))
    core.geometry.define_half_edge(handle, HalfEdgeGeom(path, boundary))
    return handle


def line_segment(points, surface: Handle[Surface], core: Core, *,
                 boundary: Optional[CurveBoundary] = None) -> Handle[HalfEdge]:
    """Half-edge along the straight line between two surface points."""
    path, default_boundary = Line.from_points(points)
    return half_edge(path, boundary or default_boundary, surface, core)


def circle_half_edge(center: Sequence[float], radius: float,
                     surface: Handle[Surface], core: Core) -> Handle[HalfEdge]:
    """Half-edge running once around a full circle, counter-clockwise."""
    path = Circle.from_center_and_radius(center, radius)
    return half_edge(path, CurveBoundary(0.0, tau), surface, core)


def cycle(half_edges: Iterable[Handle[HalfEdge]], core: Core) -> Handle[Cycle]:
    return core.insert(Cycle(tuple(half_edges)))


def polygon(points: Sequence[Sequence[float]], surface: Handle[Surface],
            core: Core) -> Handle[Cycle]:
    """Cycle of line segments through ``points``, closed back to the first."""
    points = list(points)
    n = len(points)
    edges = [line_segment([points[i], points[(i + 1) % n]], surface, core)
             for i in range(n)]
    return cycle(edges, core)


def circle_cycle(center: Sequence[float], radius: float,
                 surface: Handle[Surface], core: Core) -> Handle[Cycle]:
    return cycle([circle_half_edge(center, radius, surface, core)], core)


def face(surface: Handle[Surface], exterior: Handle[Cycle], core: Core, *,
         interiors: Iterable[Handle[Cycle]] = (),
         color: Optional[Color] = None) -> Handle[Face]:
    return core.insert(Face(surface, exterior, tuple(interiors), color))


def polygon_face(exterior: Sequence[Sequence[float]], surface: Handle[Surface],
                 core: Core, *, interiors: Iterable[Sequence[Sequence[float]]] = (),
                 color: Optional[Color] = None) -> Handle[Face]:
    """Face bounded by a polygon, with polygonal holes."""
    exterior_cycle = polygon(exterior, surface, core)
    interior_cycles = [polygon(points, surface, core) for points in interiors]
    return face(surface, exterior_cycle, core, interiors=interior_cycles, color=color)


def sketch(surface: Handle[Surface], faces: Iterable[Handle[Face]],
           core: Core) -> Handle[Sketch]:
    return core.insert(Sketch(surface, tuple(faces)))


__all__ = [
    'surface_from_uv',
    'curve_from_path',
    'half_edge',
    'line_segment',
    'circle_half_edge',
    'cycle',
    'polygon',
    'circle_cycle',
    'face',
    'polygon_face',
    'sketch',
]
