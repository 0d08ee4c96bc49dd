"""Geometry side-table.

Maps handles of topological objects to their geometric representation.
Entries are registered once, when the object is created, and never change
afterwards.  Lookups are total over registered handles; asking for the
geometry of an unregistered handle is a programming error and raises
:class:`~brepkernel.errors.UnregisteredHandleError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple

from brepkernel.boundary import CurveBoundary
from brepkernel.errors import GeometryRedefinitionError, UnregisteredHandleError
from brepkernel.path import SurfacePath
from brepkernel.storage import Handle
from brepkernel.surface import SurfaceGeom
from brepkernel.topology import Curve, HalfEdge, Surface


@dataclass(frozen=True)
class HalfEdgeGeom:
    """Path of a half-edge in its surface, and the part of it the half-edge uses."""

    path: SurfacePath
    boundary: CurveBoundary

    def start_position(self) -> Tuple[float, ...]:
        """Start of the half-edge, in surface coordinates."""
        return self.path.point_from_path_coords(self.boundary.start)

    def end_position(self) -> Tuple[float, ...]:
        return self.path.point_from_path_coords(self.boundary.end)

    def reverse(self) -> 'HalfEdgeGeom':
        return HalfEdgeGeom(self.path, self.boundary.reverse())


@dataclass(frozen=True)
class LocalCurveGeom:
    """Definition of a curve in the coordinates of one surface."""

    path: SurfacePath


@dataclass
class CurveGeom:
    """All known definitions of one curve, keyed by surface."""

    definitions: Dict[Handle[Surface], LocalCurveGeom] = field(default_factory=dict)

    def local_on(self, surface: Handle[Surface]) -> Optional[LocalCurveGeom]:
        return self.definitions.get(surface)

    def __iter__(self) -> Iterator[Tuple[Handle[Surface], LocalCurveGeom]]:
        return iter(self.definitions.items())


class Geometry:
    """The geometry table.

    Registration methods are the only way in; there is no API to change or
    remove an entry.
    """

    def __init__(self) -> None:
        self._surfaces: Dict[Handle[Surface], SurfaceGeom] = {}
        self._half_edges: Dict[Handle[HalfEdge], HalfEdgeGeom] = {}
        self._curves: Dict[Handle[Curve], CurveGeom] = {}

    def define_surface(self, surface: Handle[Surface], geom: SurfaceGeom) -> None:
        _register(self._surfaces, surface, geom)

    def define_half_edge(self, half_edge: Handle[HalfEdge], geom: HalfEdgeGeom) -> None:
        _register(self._half_edges, half_edge, geom)

    def define_curve(self, curve: Handle[Curve], surface: Handle[Surface],
                     geom: LocalCurveGeom) -> None:
        """Define ``curve`` in the coordinates of ``surface``.

        A curve may be defined on several surfaces, but only once per surface.
        """
        curve_geom = self._curves.setdefault(curve, CurveGeom())
        _register(curve_geom.definitions, surface, geom)

    def of_surface(self, surface: Handle[Surface]) -> SurfaceGeom:
        return _lookup(self._surfaces, surface, 'surface')

    def of_half_edge(self, half_edge: Handle[HalfEdge]) -> HalfEdgeGeom:
        return _lookup(self._half_edges, half_edge, 'half-edge')

    def of_curve(self, curve: Handle[Curve]) -> CurveGeom:
        return _lookup(self._curves, curve, 'curve')

    def __contains__(self, handle: object) -> bool:
        return (handle in self._surfaces or handle in self._half_edges
                or handle in self._curves)


def _register(table, handle, geom) -> None:
    existing = table.get(handle)
    if existing is not None and existing != geom:
        raise GeometryRedefinitionError(
            f'geometry of {handle!r} is already defined as {existing!r}')
    table[handle] = geom


def _lookup(table, handle, kind):
    try:
        return table[handle]
    except KeyError:
        raise UnregisteredHandleError(
            f'no geometry registered for {kind} {handle!r}') from None


__all__ = [
    'Geometry',
    'HalfEdgeGeom',
    'LocalCurveGeom',
    'CurveGeom',
]
