"""Triangulation of face approximations.

We delegate the ear clipping to ``mapbox-earcut``.  The polygons are
triangulated in the face's surface coordinates and each triangle is lifted
to model space through the global form of its approximation points, so no
geometry is recomputed here.

Triangles are wound like the face's exterior cycle in surface coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

try:
    import mapbox_earcut as _earcut
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError(
        "mapbox-earcut must be installed to triangulate faces"
    ) from exc

from brepkernel.approx.face import FaceApprox
from brepkernel.approx.tolerance import ApproxPoint
from brepkernel.topology import Color

Vec3 = Tuple[float, float, float]

_EPSILON = 1e-12


@dataclass
class Mesh:
    """Indexed triangle mesh with one color per triangle."""

    vertices: List[Vec3] = field(default_factory=list)
    triangles: List[Tuple[int, int, int]] = field(default_factory=list)
    colors: List[Color] = field(default_factory=list)
    _index: Dict[Vec3, int] = field(default_factory=dict, repr=False, compare=False)

    def add_vertex(self, point: Sequence[float]) -> int:
        key = tuple(float(c) for c in point)
        index = self._index.get(key)
        if index is None:
            index = len(self.vertices)
            self.vertices.append(key)
            self._index[key] = index
        return index

    def add_triangle(self, a: Sequence[float], b: Sequence[float], c: Sequence[float],
                     color: Color) -> None:
        self.triangles.append((self.add_vertex(a), self.add_vertex(b), self.add_vertex(c)))
        self.colors.append(color)

    def triangle_points(self) -> List[Tuple[Vec3, Vec3, Vec3]]:
        return [(self.vertices[a], self.vertices[b], self.vertices[c])
                for a, b, c in self.triangles]

    def __len__(self) -> int:
        return len(self.triangles)


def triangulate(face: FaceApprox, mesh: Optional[Mesh] = None) -> Mesh:
    """Triangulate ``face`` into ``mesh`` (a new one unless given)."""
    if mesh is None:
        mesh = Mesh()

    exterior = _prepare_ring(face.exterior.points())
    if len(exterior) < 3:
        return mesh
    exterior_sign = 1.0 if _signed_area(exterior) >= 0 else -1.0

    points: List[ApproxPoint] = list(exterior)
    ring_ends = [len(points)]
    for interior in face.interiors:
        ring = _prepare_ring(interior.points())
        if len(ring) < 3:
            continue
        points.extend(ring)
        ring_ends.append(len(points))

    vertices = np.asarray([p.local_form[:2] for p in points], dtype=np.float64)
    rings = np.asarray(ring_ends, dtype=np.uint32)
    indices = _earcut.triangulate_float64(vertices, rings)

    for i in range(0, len(indices), 3):
        a, b, c = (points[int(j)] for j in indices[i:i + 3])
        if _signed_area([a, b, c]) * exterior_sign < 0:
            b, c = c, b
        mesh.add_triangle(a.global_form, b.global_form, c.global_form, face.color)
    return mesh


def triangulate_all(faces: Iterable[FaceApprox]) -> Mesh:
    mesh = Mesh()
    for face in faces:
        triangulate(face, mesh)
    return mesh


def _prepare_ring(points: Sequence[ApproxPoint]) -> List[ApproxPoint]:
    ring: List[ApproxPoint] = []
    for point in points:
        if ring and _near(ring[-1], point):
            continue
        ring.append(point)
    if len(ring) > 1 and _near(ring[0], ring[-1]):
        ring.pop()
    return ring


def _near(a: ApproxPoint, b: ApproxPoint) -> bool:
    return all(abs(x - y) <= _EPSILON for x, y in zip(a.local_form, b.local_form))


def _signed_area(ring: Sequence[ApproxPoint]) -> float:
    total = 0.0
    for i, point in enumerate(ring):
        x0, y0 = point.local_form[:2]
        x1, y1 = ring[(i + 1) % len(ring)].local_form[:2]
        total += x0 * y1 - x1 * y0
    return total / 2.0


__all__ = ['Mesh', 'triangulate', 'triangulate_all']
