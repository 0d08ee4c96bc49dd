"""Winding of cycles in surface coordinates."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from brepkernel.geometry import Geometry
from brepkernel.storage import Handle
from brepkernel.topology import Cycle, Winding

# fractions of each half-edge's boundary sampled to find the cycle's winding;
# enough for a single circular half-edge to span a non-degenerate polygon
_SAMPLES = (0.0, 0.25, 0.5, 0.75)


def signed_area(points: Sequence[Sequence[float]]) -> float:
    """Shoelace area of a closed 2-D polygon; positive if counter-clockwise."""
    total = 0.0
    n = len(points)
    for i in range(n):
        x0, y0 = points[i][0], points[i][1]
        x1, y1 = points[(i + 1) % n][0], points[(i + 1) % n][1]
        total += x0 * y1 - x1 * y0
    return total / 2.0


def cycle_outline(cycle: Handle[Cycle], geometry: Geometry) -> List[Tuple[float, ...]]:
    """Points along ``cycle`` in surface coordinates, in traversal order."""
    outline = []
    for half_edge in cycle.half_edges:
        geom = geometry.of_half_edge(half_edge)
        start, end = geom.boundary.inner
        for f in _SAMPLES:
            outline.append(geom.path.point_from_path_coords(start + (end - start) * f))
    return outline


def cycle_winding(cycle: Handle[Cycle], geometry: Geometry,
                  tol: float = 0.0) -> Optional[Winding]:
    """Winding of ``cycle``, or ``None`` if it encloses no area."""
    area = signed_area(cycle_outline(cycle, geometry))
    if abs(area) <= tol:
        return None
    return Winding.CCW if area > 0 else Winding.CW


__all__ = ['signed_area', 'cycle_outline', 'cycle_winding']
