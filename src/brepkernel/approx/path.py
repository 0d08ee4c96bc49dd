"""Approximation of a single path within a boundary.

Only the points strictly inside the boundary are produced.  The boundary
end points belong to the vertices of whatever uses the path, so a line
approximates to nothing at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import acos, ceil, cos, floor, pi, tau
from typing import Iterator, List, Tuple

from brepkernel.boundary import CurveBoundary
from brepkernel.path import Circle, Line
from brepkernel.approx.tolerance import Tolerance

# slack, in units of the increment, so rounding noise at the boundary does
# not produce a sample on top of a boundary end
_INDEX_EPSILON = 1e-9


def circle_vertex_count(radius: float, tolerance: Tolerance) -> int:
    """Number of polygon vertices for a full circle within ``tolerance``.

    Chooses the smallest ``n`` for which the sagitta ``r (1 - cos(pi / n))``
    does not exceed the tolerance, and never fewer than 3.
    """
    t = float(tolerance)
    if t >= radius:
        return 3
    n = ceil(pi / acos(1.0 - t / radius))
    return max(n, 3)


def circle_sagitta(radius: float, vertex_count: int) -> float:
    """Largest distance between a regular ``vertex_count``-gon and its circle."""
    return radius * (1.0 - cos(pi / vertex_count))


@dataclass(frozen=True)
class PathApproxParams:
    """Sampling of a path at integer multiples of ``increment``."""

    increment: float

    @classmethod
    def for_circle(cls, circle: Circle, tolerance: Tolerance) -> 'PathApproxParams':
        return cls(tau / circle_vertex_count(circle.radius, tolerance))

    def points(self, boundary: CurveBoundary) -> Iterator[float]:
        """Yield sample parameters strictly inside ``boundary``, in its direction."""
        a = boundary.start / self.increment
        b = boundary.end / self.increment
        low, high = (a, b) if a <= b else (b, a)

        first = floor(low + _INDEX_EPSILON) + 1
        last = ceil(high - _INDEX_EPSILON) - 1

        if b < a:
            indices = range(last, first - 1, -1)
        else:
            indices = range(first, last + 1)
        for i in indices:
            yield self.increment * i


def approx_path(path, boundary: CurveBoundary,
                tolerance: Tolerance) -> List[Tuple[float, Tuple[float, ...]]]:
    """Return ``(t, point)`` pairs approximating ``path`` within ``boundary``."""
    tolerance = Tolerance.coerce(tolerance)
    if isinstance(path, Line):
        return []
    if isinstance(path, Circle):
        params = PathApproxParams.for_circle(path, tolerance)
        return [(t, path.point_from_path_coords(t)) for t in params.points(boundary)]
    raise TypeError(f'cannot approximate path {path!r}')


__all__ = [
    'circle_vertex_count',
    'circle_sagitta',
    'PathApproxParams',
    'approx_path',
]
