"""Topological objects.

These classes only describe connectivity.  What shape a curve or surface
has is kept separately in :class:`brepkernel.geometry.Geometry`, so the
same connectivity graph can carry different embeddings.

Objects are immutable and refer to one another through
:class:`~brepkernel.storage.Handle` instances.

Hierarchy:

- Vertex: a point shared by the half-edges that meet there
- Curve: a 1-D entity; half-edges are bounded uses of a curve
- Surface: a 2-D entity faces are embedded in
- HalfEdge: directed, bounded use of a curve, starting at a vertex
- Cycle: circular sequence of half-edges
- Face: exterior cycle plus interior cycles on a surface
- Shell: set of faces
- Solid: set of shells
- Sketch: set of faces in one surface
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple

from brepkernel.storage import Handle

Color = Tuple[int, int, int, int]

DEFAULT_COLOR: Color = (255, 0, 0, 255)


@dataclass(frozen=True)
class Vertex:
    """A vertex; its position is derived from the geometry of its half-edges."""


@dataclass(frozen=True)
class Curve:
    """A curve; its shape is defined per surface in the geometry table."""


@dataclass(frozen=True)
class Surface:
    """A surface; its shape is defined in the geometry table."""


@dataclass(frozen=True)
class HalfEdge:
    """A directed use of ``curve``, starting at ``start_vertex``.

    The half-edge's path on its surface and its boundary on the curve are
    stored in the geometry table.  Two half-edges that traverse the same
    curve in opposite directions form the edge shared by adjacent faces.
    """

    curve: Handle[Curve]
    start_vertex: Handle[Vertex]


@dataclass(frozen=True)
class Cycle:
    """A circular sequence of half-edges.

    The end of each half-edge is the start of the next one; the last
    half-edge connects back to the first.  An empty cycle is valid.
    """

    half_edges: Tuple[Handle[HalfEdge], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'half_edges', tuple(self.half_edges))

    def __len__(self) -> int:
        return len(self.half_edges)

    def __iter__(self) -> Iterator[Handle[HalfEdge]]:
        return iter(self.half_edges)

    def half_edge_pairs(self) -> Iterator[Tuple[Handle[HalfEdge], Handle[HalfEdge]]]:
        """Yield each half-edge together with the one following it."""
        n = len(self.half_edges)
        for i, half_edge in enumerate(self.half_edges):
            yield half_edge, self.half_edges[(i + 1) % n]

    def index_of(self, half_edge: Handle[HalfEdge]) -> Optional[int]:
        for i, candidate in enumerate(self.half_edges):
            if candidate == half_edge:
                return i
        return None

    def half_edge_after(self, half_edge: Handle[HalfEdge]) -> Optional[Handle[HalfEdge]]:
        i = self.index_of(half_edge)
        if i is None:
            return None
        return self.half_edges[(i + 1) % len(self.half_edges)]


@dataclass(frozen=True)
class Face:
    """A bounded region of ``surface``.

    ``exterior`` bounds the face from the outside; each of ``interiors``
    cuts a hole into it and must wind the opposite way.
    """

    surface: Handle[Surface]
    exterior: Handle[Cycle]
    interiors: Tuple[Handle[Cycle], ...] = ()
    color: Optional[Color] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'interiors', tuple(self.interiors))

    def all_cycles(self) -> Iterator[Handle[Cycle]]:
        yield self.exterior
        yield from self.interiors


@dataclass(frozen=True)
class Shell:
    faces: Tuple[Handle[Face], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'faces', tuple(self.faces))


@dataclass(frozen=True)
class Solid:
    shells: Tuple[Handle[Shell], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'shells', tuple(self.shells))


@dataclass(frozen=True)
class Sketch:
    """Faces that all lie in ``surface``."""

    surface: Handle[Surface]
    faces: Tuple[Handle[Face], ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, 'faces', tuple(self.faces))


class Winding(Enum):
    """Rotational direction of a closed cycle in surface coordinates."""

    CCW = 'ccw'
    CW = 'cw'

    def is_ccw(self) -> bool:
        return self is Winding.CCW

    def reverse(self) -> 'Winding':
        return Winding.CW if self is Winding.CCW else Winding.CCW


__all__ = [
    'Color',
    'DEFAULT_COLOR',
    'Vertex',
    'Curve',
    'Surface',
    'HalfEdge',
    'Cycle',
    'Face',
    'Shell',
    'Solid',
    'Sketch',
    'Winding',
]
