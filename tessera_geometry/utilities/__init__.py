"""Stateless geometry helpers and the random point source."""

from tessera_geometry.utilities.geometry import (
    get_bounds_from_points,
    orient_points_clockwise,
    are_points_all_colinear,
    get_centroid_point,
    is_point_in_polygon,
    rotate_point_around_origin,
    validate_and_order_points_for_polygon,
)
from tessera_geometry.utilities.points import generate_random_points

__all__ = [
    'get_bounds_from_points',
    'orient_points_clockwise',
    'are_points_all_colinear',
    'get_centroid_point',
    'is_point_in_polygon',
    'rotate_point_around_origin',
    'validate_and_order_points_for_polygon',
    'generate_random_points',
]
