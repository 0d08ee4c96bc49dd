"""Axis-aligned bounding boxes of half-edges and cycles, in surface coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from brepkernel.geometry import Geometry
from brepkernel.path import Circle, Line
from brepkernel.storage import Handle
from brepkernel.topology import Cycle, HalfEdge


@dataclass(frozen=True)
class Aabb:
    min: Tuple[float, ...]
    max: Tuple[float, ...]

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> 'Aabb':
        array = np.asarray(list(points), dtype=float)
        if array.size == 0:
            raise ValueError('cannot bound an empty set of points')
        return cls(tuple(array.min(axis=0).tolist()), tuple(array.max(axis=0).tolist()))

    def merged(self, other: 'Aabb') -> 'Aabb':
        return Aabb(tuple(np.minimum(self.min, other.min).tolist()),
                    tuple(np.maximum(self.max, other.max).tolist()))

    def contains(self, point: Sequence[float]) -> bool:
        return all(lo <= c <= hi for lo, c, hi in zip(self.min, point, self.max))

    @property
    def size(self) -> Tuple[float, ...]:
        return tuple(hi - lo for lo, hi in zip(self.min, self.max))


def half_edge_aabb(half_edge: Handle[HalfEdge], geometry: Geometry) -> Optional[Aabb]:
    geom = geometry.of_half_edge(half_edge)
    path = geom.path
    if isinstance(path, Circle):
        # the whole circle; not tight for arcs, but always contains them
        r = path.radius
        center = np.asarray(path.center)
        return Aabb(tuple((center - r).tolist()), tuple((center + r).tolist()))
    if isinstance(path, Line):
        return Aabb.from_points([geom.start_position(), geom.end_position()])
    return None


def cycle_aabb(cycle: Handle[Cycle], geometry: Geometry) -> Optional[Aabb]:
    result = None
    for half_edge in cycle.half_edges:
        box = half_edge_aabb(half_edge, geometry)
        if box is None:
            continue
        result = box if result is None else result.merged(box)
    return result


__all__ = ['Aabb', 'half_edge_aabb', 'cycle_aabb']
