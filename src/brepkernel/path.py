"""Parametric paths: the two curve shapes the kernel understands.

A path maps a single parameter ``t`` into an ``N``-dimensional space.  The
same two variants serve both as *surface paths* (2-D, in a surface's
parameter space) and as *global paths* (3-D, in model space):

- ``Line``: ``origin + direction * t``
- ``Circle``: ``center + a * cos(t) + b * sin(t)``

Code that needs to treat the variants differently dispatches on them
explicitly with ``isinstance``; there is no shared behaviour hidden in a
base class.

Points and vectors are stored as tuples of floats so paths are immutable
and hashable.  Arithmetic is done with numpy.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, tau
from typing import Sequence, Tuple, Union

import numpy as np

from brepkernel.boundary import CurveBoundary

Coords = Tuple[float, ...]


def _coords(values: Sequence[float]) -> Coords:
    return tuple(float(v) for v in values)


def _array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float)


@dataclass(frozen=True)
class Line:
    """A straight path through ``origin`` along ``direction``."""

    origin: Coords
    direction: Coords

    def __post_init__(self) -> None:
        object.__setattr__(self, 'origin', _coords(self.origin))
        object.__setattr__(self, 'direction', _coords(self.direction))
        if len(self.origin) != len(self.direction):
            raise ValueError('origin and direction must have the same dimension')
        if not np.any(_array(self.direction)):
            raise ValueError('line direction must not be zero')

    @property
    def dim(self) -> int:
        return len(self.origin)

    @classmethod
    def from_points(cls, points) -> Tuple['Line', CurveBoundary]:
        """Line through two points, with the boundary ``[0, 1]`` between them."""
        a, b = (_array(p) for p in points)
        return cls(a, b - a), CurveBoundary(0.0, 1.0)

    @classmethod
    def from_points_with_coords(cls, points) -> 'Line':
        """Line through ``[(t0, p0), (t1, p1)]`` with ``p(t0) == p0``, ``p(t1) == p1``."""
        (t0, p0), (t1, p1) = points
        t0 = _param(t0)
        t1 = _param(t1)
        if t0 == t1:
            raise ValueError('line coordinates must be distinct')
        p0 = _array(p0)
        p1 = _array(p1)
        direction = (p1 - p0) / (t1 - t0)
        origin = p0 - direction * t0
        return cls(origin, direction)

    def point_from_path_coords(self, t: float) -> Coords:
        t = _param(t)
        return _coords(_array(self.origin) + _array(self.direction) * t)

    def point_to_path_coords(self, point: Sequence[float]) -> float:
        """Project ``point`` onto the line and return its parameter."""
        d = _array(self.direction)
        return float(np.dot(_array(point) - _array(self.origin), d) / np.dot(d, d))

    def reverse(self) -> 'Line':
        return Line(self.origin, _coords(-_array(self.direction)))


@dataclass(frozen=True)
class Circle:
    """A circle around ``center`` spanned by the orthogonal radii ``a`` and ``b``."""

    center: Coords
    a: Coords
    b: Coords

    def __post_init__(self) -> None:
        object.__setattr__(self, 'center', _coords(self.center))
        object.__setattr__(self, 'a', _coords(self.a))
        object.__setattr__(self, 'b', _coords(self.b))
        if not len(self.center) == len(self.a) == len(self.b):
            raise ValueError('center, a and b must have the same dimension')
        a = _array(self.a)
        b = _array(self.b)
        if not np.isclose(np.linalg.norm(a), np.linalg.norm(b)):
            raise ValueError('a and b must have the same length')
        if not np.isclose(np.dot(a, b), 0.0, atol=1e-12 * max(1.0, np.dot(a, a))):
            raise ValueError('a and b must be orthogonal')
        if not np.any(a):
            raise ValueError('circle radius must not be zero')

    @property
    def dim(self) -> int:
        return len(self.center)

    @property
    def radius(self) -> float:
        return float(np.linalg.norm(_array(self.a)))

    @classmethod
    def from_center_and_radius(cls, center: Sequence[float], radius: float) -> 'Circle':
        center = _coords(center)
        r = float(radius)
        if len(center) == 2:
            return cls(center, (r, 0.0), (0.0, r))
        if len(center) == 3:
            return cls(center, (r, 0.0, 0.0), (0.0, r, 0.0))
        raise ValueError('circles are only defined in 2 or 3 dimensions')

    def point_from_path_coords(self, t: float) -> Coords:
        t = _param(t)
        point = (_array(self.center)
                 + _array(self.a) * np.cos(t)
                 + _array(self.b) * np.sin(t))
        return _coords(point)

    def point_to_path_coords(self, point: Sequence[float]) -> float:
        """Return the angle of ``point`` around the circle, in ``[0, tau)``."""
        v = _array(point) - _array(self.center)
        a = _array(self.a)
        b = _array(self.b)
        u = np.dot(v, a) / np.dot(a, a)
        w = np.dot(v, b) / np.dot(b, b)
        angle = atan2(w, u)
        if angle < 0:
            angle += tau
        return float(angle)

    def reverse(self) -> 'Circle':
        return Circle(self.center, self.a, _coords(-_array(self.b)))


SurfacePath = Union[Line, Circle]
GlobalPath = Union[Line, Circle]


def _param(t) -> float:
    if isinstance(t, (list, tuple, np.ndarray)):
        if len(t) != 1:
            raise ValueError('path coordinates are one-dimensional')
        return float(t[0])
    return float(t)


def axis_line(axis: int, dim: int = 3) -> Line:
    """Unit line through the origin along coordinate ``axis``."""
    direction = [0.0] * dim
    direction[axis] = 1.0
    return Line([0.0] * dim, direction)


__all__ = [
    'Line',
    'Circle',
    'SurfacePath',
    'GlobalPath',
    'axis_line',
]
