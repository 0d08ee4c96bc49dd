"""Operations that derive updated objects from existing ones.

Stored objects are immutable, so every function here inserts a new object
and returns its handle.  The input handle and everything it refers to stay
untouched; unchanged parts are shared between the old and new object.
"""

from __future__ import annotations

from typing import Iterable

from brepkernel.boundary import CurveBoundary
from brepkernel.core import Core
from brepkernel.geometry import HalfEdgeGeom
from brepkernel.path import SurfacePath
from brepkernel.storage import Handle
from brepkernel.topology import Curve, Cycle, Face, HalfEdge, Vertex


def _derive_half_edge(half_edge: Handle[HalfEdge], core: Core, *, curve=None,
                      start_vertex=None, geom=None) -> Handle[HalfEdge]:
    old_geom = core.geometry.of_half_edge(half_edge)
    new = core.insert(HalfEdge(
        curve if curve is not None else half_edge.curve,
        start_vertex if start_vertex is not None else half_edge.start_vertex,
    ))
    core.geometry.define_half_edge(new, geom if geom is not None else old_geom)
    return new


def replace_path(half_edge: Handle[HalfEdge], path: SurfacePath, core: Core) -> Handle[HalfEdge]:
    boundary = core.geometry.of_half_edge(half_edge).boundary
    return _derive_half_edge(half_edge, core, geom=HalfEdgeGeom(path, boundary))


def replace_boundary(half_edge: Handle[HalfEdge], boundary: CurveBoundary,
                     core: Core) -> Handle[HalfEdge]:
    path = core.geometry.of_half_edge(half_edge).path
    return _derive_half_edge(half_edge, core, geom=HalfEdgeGeom(path, boundary))


def replace_curve(half_edge: Handle[HalfEdge], curve: Handle[Curve],
                  core: Core) -> Handle[HalfEdge]:
    return _derive_half_edge(half_edge, core, curve=curve)


def replace_start_vertex(half_edge: Handle[HalfEdge], start_vertex: Handle[Vertex],
                         core: Core) -> Handle[HalfEdge]:
    return _derive_half_edge(half_edge, core, start_vertex=start_vertex)


def add_half_edges(cycle: Handle[Cycle], half_edges: Iterable[Handle[HalfEdge]],
                   core: Core) -> Handle[Cycle]:
    return core.insert(Cycle(cycle.half_edges + tuple(half_edges)))


def reverse_cycle(cycle: Handle[Cycle], core: Core) -> Handle[Cycle]:
    """Return a cycle that traverses the same edges in the opposite direction.

    Each reversed half-edge keeps its curve, runs through its boundary
    backwards and starts at the vertex its original ended at.
    """
    reversed_edges = []
    for current, following in cycle.get().half_edge_pairs():
        geom = core.geometry.of_half_edge(current).reverse()
        reversed_edges.append(_derive_half_edge(
            current, core, start_vertex=following.start_vertex, geom=geom))
    reversed_edges.reverse()
    return core.insert(Cycle(tuple(reversed_edges)))


def reverse_face(face: Handle[Face], core: Core) -> Handle[Face]:
    """Return the face with all of its cycles reversed."""
    exterior = reverse_cycle(face.exterior, core)
    interiors = tuple(reverse_cycle(c, core) for c in face.interiors)
    return core.insert(Face(face.surface, exterior, interiors, face.color))


def reverse_interiors(face: Handle[Face], core: Core) -> Handle[Face]:
    """Return the face with only its interior cycles reversed."""
    interiors = tuple(reverse_cycle(c, core) for c in face.interiors)
    return core.insert(Face(face.surface, face.exterior, interiors, face.color))


def replace_exterior(face: Handle[Face], exterior: Handle[Cycle], core: Core) -> Handle[Face]:
    return core.insert(Face(face.surface, exterior, face.interiors, face.color))


def add_interiors(face: Handle[Face], interiors: Iterable[Handle[Cycle]],
                  core: Core) -> Handle[Face]:
    return core.insert(Face(face.surface, face.exterior,
                            face.interiors + tuple(interiors), face.color))


__all__ = [
    'replace_path',
    'replace_boundary',
    'replace_curve',
    'replace_start_vertex',
    'add_half_edges',
    'reverse_cycle',
    'reverse_face',
    'reverse_interiors',
    'replace_exterior',
    'add_interiors',
]
