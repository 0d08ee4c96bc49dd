"""Swept-curve surface geometry.

A surface is described by a global path ``u`` swept along a vector ``v``:

    point(u, v) = u.point_from_path_coords(u) + v * v_coord

A line swept along a vector gives a plane; a circle swept along its axis
gives a cylinder.  The surface's parameter space is 2-D ``(u, v)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from brepkernel.path import Circle, GlobalPath, Line, axis_line

Point2D = Tuple[float, float]
Point3D = Tuple[float, float, float]


@dataclass(frozen=True)
class SurfaceGeom:
    """Geometry of a surface: the path ``u`` swept along the vector ``v``."""

    u: GlobalPath
    v: Tuple[float, float, float]

    def __post_init__(self) -> None:
        v = tuple(float(c) for c in self.v)
        if len(v) != 3:
            raise ValueError('surface sweep vector must be 3-D')
        if self.u.dim != 3:
            raise ValueError('surface u path must be a global (3-D) path')
        if not any(v):
            raise ValueError('surface sweep vector must not be zero')
        object.__setattr__(self, 'v', v)

    @classmethod
    def xy_plane(cls) -> 'SurfaceGeom':
        return cls(axis_line(0), (0.0, 1.0, 0.0))

    @classmethod
    def xz_plane(cls) -> 'SurfaceGeom':
        return cls(axis_line(0), (0.0, 0.0, 1.0))

    @classmethod
    def yz_plane(cls) -> 'SurfaceGeom':
        return cls(axis_line(1), (0.0, 0.0, 1.0))

    @classmethod
    def plane_from_points(cls, points) -> Tuple['SurfaceGeom', Tuple[Point2D, Point2D, Point2D]]:
        """Plane through three points.

        Returns the surface and the three points in its coordinates, which
        are always ``(0, 0)``, ``(1, 0)`` and ``(0, 1)``.
        """
        a, b, c = (np.asarray(p, dtype=float) for p in points)
        u, _ = Line.from_points([a, b])
        surface = cls(u, tuple(c - a))
        return surface, ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))

    def is_flat(self) -> bool:
        return isinstance(self.u, Line)

    def point_from_surface_coords(self, point: Sequence[float]) -> Point3D:
        u, v = float(point[0]), float(point[1])
        base = np.asarray(self.u.point_from_path_coords(u), dtype=float)
        return tuple(float(c) for c in base + np.asarray(self.v) * v)

    def vector_from_surface_coords(self, vector: Sequence[float]) -> Point3D:
        """Map a 2-D vector to model space.  Only defined on flat surfaces."""
        if not isinstance(self.u, Line):
            raise ValueError('vectors can only be mapped on flat surfaces')
        du, dv = float(vector[0]), float(vector[1])
        result = np.asarray(self.u.direction) * du + np.asarray(self.v) * dv
        return tuple(float(c) for c in result)

    def point_to_surface_coords(self, point: Sequence[float]) -> Point2D:
        """Map a model-space point into the surface's ``(u, v)`` space.

        The point is assumed to lie on the surface; points off the surface
        are projected.
        """
        p = np.asarray(point, dtype=float)
        v = np.asarray(self.v, dtype=float)
        if isinstance(self.u, Line):
            d = np.asarray(self.u.direction, dtype=float)
            basis = np.stack([d, v], axis=1)
            rhs = p - np.asarray(self.u.origin, dtype=float)
            (u_coord, v_coord), *_ = np.linalg.lstsq(basis, rhs, rcond=None)
            return float(u_coord), float(v_coord)
        if isinstance(self.u, Circle):
            rel = p - np.asarray(self.u.center, dtype=float)
            v_coord = float(np.dot(rel, v) / np.dot(v, v))
            in_plane = p - v * v_coord
            return self.u.point_to_path_coords(in_plane), v_coord
        raise TypeError(f'unknown surface path {self.u!r}')

    def normal(self) -> Point3D:
        """Unit normal of a flat surface (``u x v``)."""
        if not isinstance(self.u, Line):
            raise ValueError('only flat surfaces have a constant normal')
        n = np.cross(np.asarray(self.u.direction), np.asarray(self.v))
        return tuple(float(c) for c in n / np.linalg.norm(n))


__all__ = ['SurfaceGeom', 'Point2D', 'Point3D']
