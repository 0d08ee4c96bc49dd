"""Tests for building and updating topology."""

from math import tau

import pytest

from brepkernel import build, update
from brepkernel.boundary import CurveBoundary
from brepkernel.core import Core
from brepkernel.path import Line
from brepkernel.topology import Face, Winding
from brepkernel.winding import cycle_outline, cycle_winding, signed_area


@pytest.fixture
def core():
    return Core()


class TestBuild:
    """Test the authoring helpers."""

    def test_polygon_closes(self, core):
        cycle = build.polygon([[0, 0], [1, 0], [1, 1]], core.surfaces.xy_plane, core)
        half_edges = cycle.half_edges
        assert len(half_edges) == 3
        last = core.geometry.of_half_edge(half_edges[-1])
        first = core.geometry.of_half_edge(half_edges[0])
        assert last.end_position() == first.start_position()

    def test_half_edge_pairs_wrap_around(self, core):
        cycle = build.polygon([[0, 0], [1, 0], [1, 1]], core.surfaces.xy_plane, core)
        a, b, c = cycle.half_edges
        assert list(cycle.get().half_edge_pairs()) == [(a, b), (b, c), (c, a)]
        assert cycle.get().half_edge_after(c) == a
        assert cycle.get().index_of(b) == 1

    def test_circle_half_edge_boundary(self, core):
        half_edge = build.circle_half_edge([0, 0], 1.0, core.surfaces.xy_plane, core)
        assert core.geometry.of_half_edge(half_edge).boundary == CurveBoundary(0.0, tau)

    def test_polygon_face_with_interior(self, core):
        face = build.polygon_face([[0, 0], [3, 0], [0, 3]], core.surfaces.xy_plane, core,
                                  interiors=[[[1, 1], [1, 2], [2, 1]]])
        assert len(face.interiors) == 1
        assert face.surface == core.surfaces.xy_plane
        assert list(face.get().all_cycles()) == [face.exterior, face.interiors[0]]

    def test_surface_from_uv(self, core):
        surface = build.surface_from_uv(Line((0, 0, 0), (1, 0, 0)), (0, 0, 2), core)
        assert core.geometry.of_surface(surface).point_from_surface_coords((1, 1)) \
            == (1.0, 0.0, 2.0)

    def test_sketch(self, core):
        a = build.polygon_face([[0, 0], [1, 0], [0, 1]], core.surfaces.xy_plane, core)
        b = build.polygon_face([[2, 0], [3, 0], [2, 1]], core.surfaces.xy_plane, core)
        sketch = build.sketch(core.surfaces.xy_plane, [a, b], core)
        assert sketch.faces == (a, b)


class TestUpdate:
    """Updates create new objects and leave the old ones alone."""

    def test_replace_boundary(self, core):
        original = build.line_segment([[0, 0], [1, 0]], core.surfaces.xy_plane, core)
        updated = update.replace_boundary(original, CurveBoundary(0.0, 2.0), core)

        assert updated != original
        assert updated.curve == original.curve
        assert updated.start_vertex == original.start_vertex
        assert core.geometry.of_half_edge(original).boundary == CurveBoundary(0.0, 1.0)
        assert core.geometry.of_half_edge(updated).boundary == CurveBoundary(0.0, 2.0)

    def test_replace_path(self, core):
        original = build.line_segment([[0, 0], [1, 0]], core.surfaces.xy_plane, core)
        path = Line((0.0, 1.0), (1.0, 0.0))
        updated = update.replace_path(original, path, core)
        assert core.geometry.of_half_edge(updated).path == path
        assert core.geometry.of_half_edge(updated).boundary == CurveBoundary(0.0, 1.0)

    def test_replace_curve_and_vertex(self, core):
        a = build.line_segment([[0, 0], [1, 0]], core.surfaces.xy_plane, core)
        b = build.line_segment([[1, 0], [1, 1]], core.surfaces.xy_plane, core)
        with_curve = update.replace_curve(a, b.curve, core)
        with_vertex = update.replace_start_vertex(a, b.start_vertex, core)
        assert with_curve.curve == b.curve
        assert with_curve.start_vertex == a.start_vertex
        assert with_vertex.start_vertex == b.start_vertex
        assert with_vertex.curve == a.curve

    def test_add_half_edges(self, core):
        a = build.line_segment([[0, 0], [1, 0]], core.surfaces.xy_plane, core)
        b = build.line_segment([[1, 0], [0, 0]], core.surfaces.xy_plane, core)
        cycle = build.cycle([a], core)
        extended = update.add_half_edges(cycle, [b], core)
        assert cycle.half_edges == (a,)
        assert extended.half_edges == (a, b)

    def test_reverse_cycle(self, core):
        cycle = build.polygon([[0, 0], [1, 0], [1, 1]], core.surfaces.xy_plane, core)
        a, b, c = cycle.half_edges
        reversed_cycle = update.reverse_cycle(cycle, core)
        ra, rb, rc = reversed_cycle.half_edges

        # order is reversed: c', b', a'
        assert [ra.curve, rb.curve, rc.curve] == [c.curve, b.curve, a.curve]
        # each reversed half-edge starts where its original ended
        assert ra.start_vertex == a.start_vertex
        assert rb.start_vertex == c.start_vertex
        assert rc.start_vertex == b.start_vertex

        geom_a = core.geometry.of_half_edge(a)
        geom_ra = core.geometry.of_half_edge(rc)
        assert geom_ra.start_position() == geom_a.end_position()
        assert geom_ra.boundary == geom_a.boundary.reverse()

    def test_reverse_cycle_flips_winding(self, core):
        cycle = build.polygon([[0, 0], [1, 0], [1, 1]], core.surfaces.xy_plane, core)
        assert cycle_winding(cycle, core.geometry) is Winding.CCW
        reversed_cycle = update.reverse_cycle(cycle, core)
        assert cycle_winding(reversed_cycle, core.geometry) is Winding.CW
        assert cycle_winding(cycle, core.geometry) is Winding.CCW

    def test_reverse_face(self, core):
        face = build.polygon_face([[0, 0], [3, 0], [0, 3]], core.surfaces.xy_plane, core,
                                  interiors=[[[1, 1], [1, 2], [2, 1]]])
        reversed_face = update.reverse_face(face, core)
        assert cycle_winding(reversed_face.exterior, core.geometry) is Winding.CW
        assert cycle_winding(reversed_face.interiors[0], core.geometry) is Winding.CCW
        assert reversed_face.surface == face.surface

    def test_replace_exterior_and_add_interiors(self, core):
        face = build.polygon_face([[0, 0], [3, 0], [0, 3]], core.surfaces.xy_plane, core,
                                  color=(0, 255, 0, 255))
        exterior = build.polygon([[0, 0], [4, 0], [0, 4]], core.surfaces.xy_plane, core)
        hole = build.polygon([[1, 1], [1, 2], [2, 1]], core.surfaces.xy_plane, core)

        replaced = update.replace_exterior(face, exterior, core)
        assert replaced.exterior == exterior
        assert replaced.color == (0, 255, 0, 255)

        holed = update.add_interiors(face, [hole], core)
        assert holed.interiors == (hole,)
        assert face.interiors == ()
        assert isinstance(holed.get(), Face)


class TestWinding:
    """Test cycle winding in surface coordinates."""

    def test_signed_area(self):
        assert signed_area([[0, 0], [1, 0], [1, 1], [0, 1]]) == pytest.approx(1.0)
        assert signed_area([[0, 0], [0, 1], [1, 1], [1, 0]]) == pytest.approx(-1.0)

    def test_polygon_windings(self, core):
        ccw = build.polygon([[0, 0], [3, 0], [0, 3]], core.surfaces.xy_plane, core)
        cw = build.polygon([[1, 1], [1, 2], [2, 1]], core.surfaces.xy_plane, core)
        assert cycle_winding(ccw, core.geometry) is Winding.CCW
        assert cycle_winding(cw, core.geometry) is Winding.CW

    def test_circle_is_ccw(self, core):
        cycle = build.circle_cycle([0, 0], 1.0, core.surfaces.xy_plane, core)
        assert cycle_winding(cycle, core.geometry) is Winding.CCW
        assert len(cycle_outline(cycle, core.geometry)) == 4

    def test_empty_cycle_has_no_winding(self, core):
        cycle = build.cycle([], core)
        assert cycle_winding(cycle, core.geometry) is None

    def test_winding_reverse(self):
        assert Winding.CCW.reverse() is Winding.CW
        assert Winding.CCW.is_ccw()
        assert not Winding.CW.is_ccw()
