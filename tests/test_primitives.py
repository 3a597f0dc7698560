"""Tests for the geometry value types."""

import dataclasses

import numpy as np
import pytest

from planar.models import (
    Bbox,
    Line,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)


class TestPoint:
    """Test Point construction, accessors and arithmetic."""

    def test_accessors(self):
        p = Point(1.234, 2.345)
        assert p.x == 1.234
        assert p.y == 2.345
        assert p.lng == 1.234
        assert p.lat == 2.345

    def test_from_tuple_and_list(self):
        """Points build from an (x, y) pair or a 2-element list."""
        assert Point.from_coords((10.0, 20.0)) == Point(10.0, 20.0)
        assert Point.from_coords([10.0, 20.0]) == Point(10.0, 20.0)

    def test_from_coords_wrong_length(self):
        with pytest.raises(ValueError):
            Point.from_coords([1.0, 2.0, 3.0])

    def test_setters_return_new_point(self):
        """Setters produce a new value and never alias the original."""
        p = Point(1.234, 2.345)
        moved = p.set_x(9.876)
        assert moved.x == 9.876
        assert moved.y == 2.345
        assert p.x == 1.234

        assert p.set_y(9.876).y == 9.876
        assert p.set_lng(5.0) == Point(5.0, 2.345)
        assert p.set_lat(5.0) == Point(1.234, 5.0)

    def test_point_is_immutable(self):
        p = Point(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 3.0

    def test_dot(self):
        assert Point(1.5, 0.5).dot(Point(2.0, 4.5)) == 5.25

    def test_cross_prod(self):
        """Positive cross product means counter-clockwise."""
        p_a = Point(1.0, 2.0)
        p_b = Point(3.0, 5.0)
        p_c = Point(7.0, 12.0)
        assert p_a.cross_prod(p_b, p_c) == 2.0
        assert p_a.cross_prod(p_c, p_b) == -2.0

    def test_cross_prod_collinear(self):
        assert Point(0.0, 0.0).cross_prod(Point(1.0, 1.0), Point(2.0, 2.0)) == 0.0

    def test_negation(self):
        p = -Point(-1.25, 2.5)
        assert p == Point(1.25, -2.5)

    def test_add_and_sub(self):
        assert Point(1.25, 2.5) + Point(1.5, 2.5) == Point(2.75, 5.0)
        assert Point(1.25, 3.0) - Point(1.5, 2.5) == Point(-0.25, 0.5)

    def test_equality_is_exact(self):
        assert Point(0.1 + 0.2, 0.0) != Point(0.3, 0.0)

    def test_numpy_scalars_keep_their_type(self):
        p = Point(np.float32(1.5), np.float32(2.5)) + Point(np.float32(1.0), np.float32(1.0))
        assert isinstance(p.x, np.float32)
        assert p == Point(np.float32(2.5), np.float32(3.5))


class TestLine:
    """Test Line deltas and endpoints."""

    def test_deltas(self):
        line = Line.from_coords((1.0, 2.0), (4.0, 6.0))
        assert line.dx == 3.0
        assert line.dy == 4.0
        assert not line.is_degenerate

    def test_endpoints(self):
        line = Line((0.0, 0.0), (3.0, 4.0))
        assert line.start_point() == Point(0.0, 0.0)
        assert line.end_point() == Point(3.0, 4.0)
        assert line.points() == (Point(0.0, 0.0), Point(3.0, 4.0))

    def test_degenerate(self):
        line = Line(Point(2.0, 2.0), Point(2.0, 2.0))
        assert line.dx == 0
        assert line.dy == 0
        assert line.is_degenerate


class TestLineString:
    """Test LineString construction and segment iteration."""

    def test_from_pairs_and_points(self):
        from_pairs = LineString([(0.0, 0.0), (1.0, 1.0)])
        from_points = LineString([Point(0.0, 0.0), Point(1.0, 1.0)])
        assert from_pairs == from_points
        assert len(from_pairs) == 2
        assert from_pairs[1] == Point(1.0, 1.0)

    def test_lines_one_per_adjacent_pair(self):
        ls = LineString([(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)])
        lines = list(ls.lines())
        assert lines == [
            Line((0.0, 0.0), (1.0, 1.0)),
            Line((1.0, 1.0), (2.0, 0.0)),
        ]

    def test_lines_are_restartable(self):
        """Each call to lines() walks the segments from the start again."""
        ls = LineString([(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)])
        assert list(ls.lines()) == list(ls.lines())

    @pytest.mark.parametrize("coords", [[], [(5.0, 5.0)]])
    def test_short_linestrings_have_no_segments(self, coords):
        assert list(LineString(coords).lines()) == []

    def test_duplicates_preserved(self):
        ls = LineString([(0.0, 0.0), (0.0, 0.0), (1.0, 0.0)])
        assert len(ls) == 3
        assert list(ls.lines())[0].is_degenerate

    def test_is_closed(self):
        assert LineString([(0, 0), (1, 0), (1, 1), (0, 0)]).is_closed
        assert not LineString([(0, 0), (1, 0), (1, 1)]).is_closed
        assert not LineString().is_closed

    def test_coords_round_trip_order(self):
        coords = [(3.0, 1.0), (0.0, 0.0), (2.0, 5.0)]
        assert LineString(coords).coords() == coords


class TestPolygon:
    """Test Polygon ring handling."""

    def test_from_coordinate_lists(self):
        poly = Polygon(
            [(0, 0), (5, 0), (5, 6), (0, 6), (0, 0)],
            [[(1, 1), (4, 1), (4, 4), (1, 4), (1, 1)]],
        )
        assert isinstance(poly.exterior, LineString)
        assert len(poly.interiors) == 1
        assert poly.has_holes

    def test_rings_exterior_first(self):
        exterior = LineString([(0, 0), (5, 0), (5, 6), (0, 0)])
        hole = LineString([(1, 1), (2, 1), (2, 2), (1, 1)])
        poly = Polygon(exterior, [hole])
        assert list(poly.rings()) == [exterior, hole]

    def test_empty_polygon(self):
        poly = Polygon()
        assert poly.exterior.is_empty
        assert poly.interiors == ()


class TestBbox:
    """Test Bbox helpers."""

    def test_to_polygon_ring(self):
        """Box converts to a closed 5-point ring with no holes."""
        poly = Bbox(xmin=1.0, xmax=3.0, ymin=2.0, ymax=4.0).to_polygon()
        assert poly.exterior.coords() == [
            (1.0, 2.0),
            (1.0, 4.0),
            (3.0, 4.0),
            (3.0, 2.0),
            (1.0, 2.0),
        ]
        assert poly.interiors == ()

    def test_from_points(self):
        bbox = Bbox.from_points([(1, 5), (-2, 3), (4, -1)])
        assert bbox == Bbox(xmin=-2, xmax=4, ymin=-1, ymax=5)
        assert bbox.width == 6
        assert bbox.height == 6

    def test_from_points_empty(self):
        with pytest.raises(ValueError):
            Bbox.from_points([])

    def test_contains(self):
        outer = Bbox(-100.0, 100.0, -200.0, 200.0)
        inner = Bbox(-10.0, 10.0, -20.0, 20.0)
        assert outer.contains(inner)
        assert not inner.contains(outer)
        assert outer.contains_point(Point(100.0, 0.0))


class TestMultiGeometries:
    """Test collection types keep member order."""

    def test_multilinestring_from_coordinate_lists(self):
        mls = MultiLineString([[(0, 0), (1, 1)], LineString([(2, 2), (3, 3)])])
        assert len(mls) == 2
        assert list(mls)[1] == LineString([(2, 2), (3, 3)])

    def test_multipolygon_order(self):
        a = Polygon([(0, 0), (1, 0), (1, 1), (0, 0)])
        b = Polygon([(5, 5), (6, 5), (6, 6), (5, 5)])
        assert list(MultiPolygon([a, b])) == [a, b]

    def test_multipolygon_from_coordinate_lists(self):
        """Raw rings become hole-free polygons, like MultiLineString members."""
        ring = [(0, 0), (1, 0), (1, 1), (0, 0)]
        mpoly = MultiPolygon([ring, Polygon([(5, 5), (6, 5), (6, 6), (5, 5)])])
        assert list(mpoly)[0] == Polygon(ring)
        assert all(isinstance(m, Polygon) for m in mpoly)
