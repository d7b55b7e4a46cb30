"""Tests for Triangle2D."""

from itertools import permutations

import pytest

from tessera_geometry import (
    InvalidArgumentError,
    InvalidGeometryError,
    Line2D,
    Point2D,
    Triangle2D,
)


def make(*coordinates):
    return Triangle2D(tuple(Point2D(x, y) for x, y in coordinates))


# (input points, expected canonical order)
CANONICAL_ORDERS = [
    ([(0, 0), (1, 1), (2, 0)], [(0, 0), (1, 1), (2, 0)]),
    ([(0, 0), (2, 0), (1, -1)], [(0, 0), (2, 0), (1, -1)]),
    ([(0, 1), (1, 1), (0, 0)], [(0, 1), (1, 1), (0, 0)]),
    ([(0, 1), (1, 0), (0, 0)], [(0, 1), (1, 0), (0, 0)]),
    ([(0, 1), (1, 1), (1, 0)], [(0, 1), (1, 1), (1, 0)]),
    ([(0, 0), (1, 1), (1, 0)], [(0, 0), (1, 1), (1, 0)]),
    ([(0, 0), (2, 1), (1, 0)], [(0, 0), (2, 1), (1, 0)]),
    ([(0, 0), (10, -4), (5, -3)], [(0, 0), (10, -4), (5, -3)]),
]


class TestTriangleConstruction:
    def test_wrong_point_count(self):
        with pytest.raises(InvalidArgumentError):
            Triangle2D((Point2D.ZERO, Point2D.UP))
        with pytest.raises(InvalidArgumentError):
            Triangle2D((Point2D.ZERO, Point2D.UP, Point2D.RIGHT, Point2D.LEFT))
        with pytest.raises(InvalidArgumentError):
            Triangle2D(None)

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_missing_point(self, index):
        points = [Point2D.ZERO, Point2D.ZERO, Point2D.ZERO]
        points[index] = None
        with pytest.raises(InvalidArgumentError):
            Triangle2D(tuple(points))

    def test_duplicate_points(self):
        with pytest.raises(InvalidGeometryError):
            Triangle2D((Point2D.ZERO, Point2D.ZERO, Point2D.UP))
        with pytest.raises(InvalidGeometryError):
            Triangle2D((Point2D.ZERO, Point2D.UP, Point2D.UP))

    def test_colinear_points(self):
        with pytest.raises(InvalidGeometryError):
            Triangle2D((Point2D.ZERO, Point2D.RIGHT, Point2D.RIGHT * 2))

    def test_valid(self):
        triangle = Triangle2D.from_points(Point2D.ZERO, Point2D.UP, Point2D.RIGHT)
        assert len(triangle.points) == 3


class TestCanonicalOrder:
    @pytest.mark.parametrize("points, expected", CANONICAL_ORDERS)
    def test_every_permutation_gives_same_order(self, points, expected):
        expected_points = tuple(Point2D(x, y) for x, y in expected)
        for permutation in permutations(points):
            assert make(*permutation).points == expected_points

    @pytest.mark.parametrize("points, expected", CANONICAL_ORDERS)
    def test_every_permutation_is_equal(self, points, expected):
        triangles = {make(*permutation) for permutation in permutations(points)}
        assert len(triangles) == 1

    def test_edges_follow_canonical_order(self):
        triangle = make((2, 0), (0, 0), (1, 1))
        a, b, c = Point2D(0, 0), Point2D(1, 1), Point2D(2, 0)
        assert triangle.edges == (Line2D(a, b), Line2D(b, c), Line2D(c, a))

    def test_serialization_is_order_independent(self):
        assert make((2, 0), (0, 0), (1, 1)).to_dict() == make((1, 1), (2, 0), (0, 0)).to_dict()


class TestTriangleDerivedValues:
    def test_area_from_heron(self):
        assert make((0, 0), (0, 3), (4, 0)).area == pytest.approx(6.0)

    def test_circumcircle(self):
        triangle = make((0, 0), (4, 0), (0, 3))
        assert triangle.circumcircle.center == Point2D(2, 1.5)
        assert triangle.circumcircle.radius == pytest.approx(2.5)

    @pytest.mark.parametrize("points", [
        [(0, 0), (1, 1), (2, 0)],
        [(0, 0), (10, -4), (5, -3)],
        [(-3.5, 2), (7.25, 9), (4, -6)],
        [(100, 200), (640, 15), (321, 598)],
    ])
    def test_vertices_equidistant_from_circumcenter(self, points):
        triangle = make(*points)
        center = triangle.circumcircle.center
        for vertex in triangle.points:
            assert center.distance(vertex) == pytest.approx(triangle.circumcircle.radius)

    def test_point_inside_circumcircle(self):
        triangle = make((0, 0), (4, 0), (0, 3))
        assert triangle.is_point_inside_circumcircle(Point2D(2, 1.5))
        assert triangle.is_point_inside_circumcircle(Point2D(4, 3))
        assert not triangle.is_point_inside_circumcircle(Point2D(10, 10))

    def test_bounds(self):
        triangle = make((0, 0), (1, 1), (2, 0))
        assert triangle.bounds.width == 2.0
        assert triangle.bounds.height == 1.0

    def test_centroid(self):
        assert make((0, 0), (3, 0), (0, 3)).centroid == Point2D(1, 1)

    def test_to_array(self):
        array = make((0, 0), (1, 1), (2, 0)).to_array()
        assert array.shape == (3, 2)
        assert array.tolist() == [[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]]


class TestSharedEdges:
    def test_shares_edge(self):
        left = make((0, 0), (1, 1), (2, 0))
        right = make((2, 0), (1, 1), (2, 2))
        assert left.shares_edge_with_triangle(right)
        assert right.shares_edge_with_triangle(left)

    def test_shared_vertex_is_not_shared_edge(self):
        left = make((0, 0), (1, 1), (2, 0))
        right = make((2, 0), (3, 1), (4, 0))
        assert not left.shares_edge_with_triangle(right)

    def test_none(self):
        assert not make((0, 0), (1, 1), (2, 0)).shares_edge_with_triangle(None)


class TestTriangleSerialization:
    def test_round_trip(self):
        triangle = make((0, 0), (10, -4), (5, -3))
        assert Triangle2D.from_dict(triangle.to_dict()) == triangle

    def test_colinear_data_raises_geometry_error(self):
        data = {'points': [{'x': 0, 'y': 0}, {'x': 1, 'y': 0}, {'x': 2, 'y': 0}]}
        with pytest.raises(InvalidGeometryError):
            Triangle2D.from_dict(data)

    def test_missing_points(self):
        with pytest.raises(ValueError, match="Missing required Triangle2D field"):
            Triangle2D.from_dict({})
