"""Individual validation checks.

Each check appends what it finds to ``errors`` and never stops early.
"""

from __future__ import annotations

from math import dist
from typing import List

from brepkernel.config import ValidationConfig
from brepkernel.geometry import Geometry
from brepkernel.validation.errors import (
    AdjacentHalfEdgesNotConnected,
    CycleNotClosed,
    FaceHasNoBoundary,
    HalfEdgeBoundaryIsDegenerate,
    InvalidInteriorWinding,
    ValidationError,
)
from brepkernel.winding import cycle_winding


def _coincident(a, b, config: ValidationConfig) -> bool:
    # identical_max_distance is relative to the magnitude of the coordinates
    scale = max(1.0, *(abs(c) for c in a), *(abs(c) for c in b))
    return dist(a, b) <= config.identical_max_distance * scale


def check_half_edge_boundaries(cycle, geometry: Geometry, config: ValidationConfig,
                               errors: List[ValidationError]) -> None:
    """Each half-edge must span distinct curve parameters."""
    for half_edge in cycle.half_edges:
        boundary = geometry.of_half_edge(half_edge).boundary
        length = abs(boundary.end - boundary.start)
        if length < config.distinct_min_distance:
            errors.append(HalfEdgeBoundaryIsDegenerate(cycle, half_edge, boundary, length))


def check_half_edge_connections(cycle, geometry: Geometry, config: ValidationConfig,
                                errors: List[ValidationError]) -> None:
    """Consecutive half-edges must meet: each ends where the next starts."""
    half_edges = cycle.half_edges
    for i in range(len(half_edges) - 1):
        first, second = half_edges[i], half_edges[i + 1]
        end = geometry.of_half_edge(first).end_position()
        start = geometry.of_half_edge(second).start_position()
        if not _coincident(end, start, config):
            errors.append(AdjacentHalfEdgesNotConnected(
                cycle, first, second, end, start, dist(end, start), i))


def check_cycle_closed(cycle, geometry: Geometry, config: ValidationConfig,
                       errors: List[ValidationError]) -> None:
    """The last half-edge must end where the first one starts."""
    half_edges = cycle.half_edges
    if not half_edges:
        return
    first, last = half_edges[0], half_edges[-1]
    end = geometry.of_half_edge(last).end_position()
    start = geometry.of_half_edge(first).start_position()
    if not _coincident(end, start, config):
        errors.append(CycleNotClosed(cycle, first, last, end, start, dist(end, start)))


def check_face_boundary(face, errors: List[ValidationError]) -> None:
    if not face.exterior.half_edges:
        errors.append(FaceHasNoBoundary(face))


def check_interior_winding(face, geometry: Geometry,
                           errors: List[ValidationError]) -> None:
    """Every interior cycle must wind opposite to the exterior."""
    if not face.exterior.half_edges:
        return
    exterior_winding = cycle_winding(face.exterior, geometry)
    if exterior_winding is None:
        return
    for interior in face.interiors:
        interior_winding = cycle_winding(interior, geometry)
        if interior_winding is None:
            continue
        if interior_winding == exterior_winding:
            errors.append(InvalidInteriorWinding(
                face, interior, exterior_winding, interior_winding))


__all__ = [
    'check_half_edge_boundaries',
    'check_half_edge_connections',
    'check_cycle_closed',
    'check_face_boundary',
    'check_interior_winding',
]
