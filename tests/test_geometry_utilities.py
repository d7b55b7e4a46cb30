"""Tests for the stateless geometry helpers and the random point source."""

import math

import pytest

from tessera_geometry import InvalidArgumentError, InvalidGeometryError, Point2D, Rectangle2D
from tessera_geometry.utilities import (
    are_points_all_colinear,
    generate_random_points,
    get_bounds_from_points,
    get_centroid_point,
    is_point_in_polygon,
    orient_points_clockwise,
    rotate_point_around_origin,
    validate_and_order_points_for_polygon,
)


def points(*coordinates):
    return [Point2D(x, y) for x, y in coordinates]


class TestBounds:
    def test_empty(self):
        assert get_bounds_from_points([]) == Rectangle2D.zero()
        assert get_bounds_from_points(None) == Rectangle2D.zero()

    def test_points(self):
        bounds = get_bounds_from_points(points((1, 5), (-2, 3), (4, -1)))
        assert bounds.top_left == Point2D(-2, 5)
        assert bounds.bottom_right == Point2D(4, -1)

    def test_single_point(self):
        bounds = get_bounds_from_points(points((3, 3)))
        assert bounds.area == 0.0
        assert bounds.center == Point2D(3, 3)


class TestOrientClockwise:
    def test_empty(self):
        assert orient_points_clockwise([]) == ()

    def test_single(self):
        assert orient_points_clockwise(points((2, 2))) == (Point2D(2, 2),)

    def test_anchor_is_leftmost_then_topmost(self):
        ordered = orient_points_clockwise(points((1, 0), (0, 0), (0, 1), (1, 1)))
        assert ordered == tuple(points((0, 1), (1, 1), (1, 0), (0, 0)))

    def test_none_entries_dropped(self):
        ordered = orient_points_clockwise([None, Point2D(1, 1), None, Point2D(0, 0)])
        assert ordered == tuple(points((0, 0), (1, 1)))

    def test_same_angle_on_first_ray_nearest_first(self):
        ordered = orient_points_clockwise(points((1, 1), (0, 0), (0.5, 1), (0, 1), (1, 0)))
        assert ordered == tuple(points((0, 1), (0.5, 1), (1, 1), (1, 0), (0, 0)))

    def test_same_angle_on_final_ray_farthest_first(self):
        ordered = orient_points_clockwise(points((0, 0.5), (1, 1), (0, 0), (0, 1), (1, 0)))
        assert ordered == tuple(points((0, 1), (1, 1), (1, 0), (0, 0), (0, 0.5)))


class TestColinear:
    def test_fewer_than_three(self):
        assert not are_points_all_colinear([])
        assert not are_points_all_colinear(points((1, 1)))
        assert are_points_all_colinear(points((1, 1), (2, 3)))

    def test_duplicates_ignored(self):
        assert are_points_all_colinear(points((0, 0), (0, 0), (5, 5)))
        assert not are_points_all_colinear(points((0, 0), (0, 0), (0, 0)))

    def test_colinear(self):
        assert are_points_all_colinear(points((0, 0), (1, 1), (2, 2), (3, 3)))
        assert are_points_all_colinear([None, Point2D(0, 0), Point2D(1, 0), Point2D(5, 0)])

    def test_not_colinear(self):
        assert not are_points_all_colinear(points((0, 0), (1, 1), (2, 0)))
        assert not are_points_all_colinear(points((0, 0), (1, 1), (2, 2), (3, 2)))


class TestCentroid:
    def test_empty(self):
        assert get_centroid_point([]) == Point2D.ZERO

    def test_single(self):
        assert get_centroid_point(points((4, -2))) == Point2D(4, -2)

    def test_mean(self):
        assert get_centroid_point(points((0, 0), (2, 0), (2, 2), (0, 2))) == Point2D(1, 1)

    def test_duplicates_ignored(self):
        assert get_centroid_point(points((0, 0), (0, 0), (3, 0))) == Point2D(1.5, 0)


class TestPointInPolygon:
    def test_unit_square(self, unit_square):
        assert is_point_in_polygon(unit_square, Point2D(0.5, 0.5))
        assert not is_point_in_polygon(unit_square, Point2D(2, 2))

    def test_none(self, unit_square):
        assert not is_point_in_polygon(unit_square, None)
        assert not is_point_in_polygon(None, Point2D(0.5, 0.5))


class TestRotation:
    def test_quarter_turn(self):
        rotated = rotate_point_around_origin(Point2D(1, 0), Point2D.ZERO, math.pi / 2)
        assert rotated.approximately_equals(Point2D(0, 1), 1e-12)

    def test_half_turn_about_other_origin(self):
        rotated = rotate_point_around_origin(Point2D(2, 1), Point2D(1, 1), math.pi)
        assert rotated.approximately_equals(Point2D(0, 1), 1e-12)

    @pytest.mark.parametrize("angle", [0, -1, -math.pi])
    def test_non_positive_angle_is_identity(self, angle):
        point = Point2D(3, 7)
        assert rotate_point_around_origin(point, Point2D(1, 1), angle) == point


class TestValidateAndOrder:
    def test_orders_and_deduplicates(self):
        ordered = validate_and_order_points_for_polygon(
            points((1, 0), (0, 0), (1, 1), (0, 1), (1, 1))
        )
        assert ordered == tuple(points((0, 1), (1, 1), (1, 0), (0, 0)))

    def test_too_few(self):
        with pytest.raises(InvalidArgumentError):
            validate_and_order_points_for_polygon(None)
        with pytest.raises(InvalidArgumentError):
            validate_and_order_points_for_polygon([None, Point2D(0, 0), None, Point2D(1, 1)])

    def test_colinear(self):
        with pytest.raises(InvalidGeometryError):
            validate_and_order_points_for_polygon(points((0, 0), (1, 0), (2, 0)))


class TestRandomPoints:
    def test_count_and_range(self):
        generated = generate_random_points(200, 800, 600, seed=1)
        assert len(generated) == 200
        for point in generated:
            assert 0 <= point.x < 800 and point.x == int(point.x)
            assert 0 <= point.y < 600 and point.y == int(point.y)

    def test_seed_is_reproducible(self):
        assert generate_random_points(20, 100, 100, seed=5) == generate_random_points(20, 100, 100, seed=5)

    def test_non_positive_count(self):
        assert generate_random_points(0, 10, 10) == ()
        assert generate_random_points(-5, 10, 10) == ()

    def test_sub_unit_bounds(self):
        generated = generate_random_points(3, 0.5, 0.5, seed=2)
        assert generated == (Point2D.ZERO,) * 3
