"""The kernel's entry object: object stores plus the geometry table."""

from __future__ import annotations

from brepkernel.geometry import Geometry
from brepkernel.storage import Handle, Store
from brepkernel.surface import SurfaceGeom
from brepkernel.topology import (
    Curve, Cycle, Face, HalfEdge, Shell, Sketch, Solid, Surface, Vertex,
)


class Objects:
    """One store per kind of topological object."""

    def __init__(self) -> None:
        self.vertices: Store[Vertex] = Store('Vertex')
        self.curves: Store[Curve] = Store('Curve')
        self.surfaces: Store[Surface] = Store('Surface')
        self.half_edges: Store[HalfEdge] = Store('HalfEdge')
        self.cycles: Store[Cycle] = Store('Cycle')
        self.faces: Store[Face] = Store('Face')
        self.shells: Store[Shell] = Store('Shell')
        self.solids: Store[Solid] = Store('Solid')
        self.sketches: Store[Sketch] = Store('Sketch')

        self._by_type = {
            Vertex: self.vertices,
            Curve: self.curves,
            Surface: self.surfaces,
            HalfEdge: self.half_edges,
            Cycle: self.cycles,
            Face: self.faces,
            Shell: self.shells,
            Solid: self.solids,
            Sketch: self.sketches,
        }

    def insert(self, value) -> Handle:
        """Insert ``value`` into the store matching its type."""
        try:
            store = self._by_type[type(value)]
        except KeyError:
            raise TypeError(f'cannot store objects of type {type(value).__name__}') from None
        return store.insert(value)


class Surfaces:
    """The predefined coordinate-plane surfaces of a :class:`Core`."""

    def __init__(self, objects: Objects, geometry: Geometry) -> None:
        self.xy_plane = objects.insert(Surface())
        self.xz_plane = objects.insert(Surface())
        self.yz_plane = objects.insert(Surface())
        geometry.define_surface(self.xy_plane, SurfaceGeom.xy_plane())
        geometry.define_surface(self.xz_plane, SurfaceGeom.xz_plane())
        geometry.define_surface(self.yz_plane, SurfaceGeom.yz_plane())


class Core:
    """Owns all objects of one model and their geometry."""

    def __init__(self) -> None:
        self.objects = Objects()
        self.geometry = Geometry()
        self.surfaces = Surfaces(self.objects, self.geometry)

    def insert(self, value) -> Handle:
        return self.objects.insert(value)


__all__ = ['Core', 'Objects', 'Surfaces']
