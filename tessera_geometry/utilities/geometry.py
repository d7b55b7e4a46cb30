"""
Geometry Utilities
==================

Stateless helpers shared by the models and the triangulator.

Design:
- Plain functions over sequences of Point2D
- None entries are skipped wherever a point set is accepted
- Point-set reductions (bounds, centroid, rotation) go through numpy
"""

from typing import Iterable, List, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from tessera_geometry.constants import COLINEAR_EPSILON, MINIMUM_POINT_COUNT_FOR_POLYGON, ErrorMessages
from tessera_geometry.errors import InvalidArgumentError, InvalidGeometryError
from tessera_geometry.models.enums import PointOrientation
from tessera_geometry.models.line import Line2D
from tessera_geometry.models.point import Point2D
from tessera_geometry.models.rectangle import Rectangle2D

if TYPE_CHECKING:
    from tessera_geometry.models.polygon import Polygon2D


def _present(points: Optional[Iterable[Optional[Point2D]]]) -> List[Point2D]:
    if points is None:
        return []
    return [point for point in points if point is not None]


def _distinct(points: Iterable[Point2D]) -> List[Point2D]:
    # First occurrence wins; order is preserved
    return list(dict.fromkeys(points))


def get_bounds_from_points(points: Optional[Iterable[Optional[Point2D]]]) -> Rectangle2D:
    """
    Smallest axis-aligned rectangle containing every point.

    Returns a zero-area rectangle at the origin for an empty input.
    """
    present = _present(points)
    if not present:
        return Rectangle2D.zero()

    coordinates = np.array([point.to_tuple() for point in present], dtype=np.float64)
    x_min, y_min = coordinates.min(axis=0)
    x_max, y_max = coordinates.max(axis=0)

    return Rectangle2D(Point2D(x_min, y_max), Point2D(x_max, y_min))


def orient_points_clockwise(points: Optional[Iterable[Optional[Point2D]]]) -> Tuple[Point2D, ...]:
    """
    Order points clockwise around the leftmost-then-topmost point.

    The anchor is the point with the lowest X, ties broken by the highest Y.
    The rest are sorted by descending angle from the anchor. Points at the
    same angle are sorted nearest first, except on the final ray (the
    smallest angle), where they are sorted farthest first so the walk
    returns toward the anchor.

    Args:
        points: Points to order (None entries are dropped, duplicates kept)

    Returns:
        Tuple starting with the anchor; empty tuple for empty input
    """
    present = _present(points)
    if not present:
        return ()

    anchor_index = min(range(len(present)), key=lambda i: (present[i].x, -present[i].y))
    anchor = present[anchor_index]
    remaining = present[:anchor_index] + present[anchor_index + 1:]
    if not remaining:
        return (anchor,)

    angles = [anchor.angle_in_radians(point) for point in remaining]
    final_angle = min(angles)

    def sort_key(index: int) -> Tuple[float, float]:
        distance = anchor.distance_squared(remaining[index])
        if angles[index] == final_angle:
            distance = -distance
        return (-angles[index], distance)

    order = sorted(range(len(remaining)), key=sort_key)
    return (anchor,) + tuple(remaining[i] for i in order)


def are_points_all_colinear(
    points: Optional[Iterable[Optional[Point2D]]],
    epsilon: float = COLINEAR_EPSILON,
) -> bool:
    """
    True if every point lies on one line.

    None entries and duplicates are ignored. Two distinct points count as
    colinear; zero or one point does not.
    """
    distinct = _distinct(_present(points))
    if len(distinct) < 3:
        return len(distinct) == 2

    line = Line2D(distinct[0], distinct[1])
    return all(
        line.orientation_of_point(point, epsilon) == PointOrientation.COLINEAR
        for point in distinct[2:]
    )


def get_centroid_point(points: Optional[Iterable[Optional[Point2D]]]) -> Point2D:
    """
    Arithmetic mean of the distinct points.

    Returns the point itself for a single point and Point2D.ZERO when empty.
    """
    distinct = _distinct(_present(points))
    if not distinct:
        return Point2D.ZERO
    if len(distinct) == 1:
        return distinct[0]

    x_mean, y_mean = np.array([point.to_tuple() for point in distinct], dtype=np.float64).mean(axis=0)
    return Point2D(x_mean, y_mean)


def is_point_in_polygon(polygon: Optional['Polygon2D'], point: Optional[Point2D]) -> bool:
    """
    Even-odd ray casting with a horizontal ray toward +X.

    Points exactly on an edge may fall on either side.
    """
    if polygon is None or point is None:
        return False

    vertices = polygon.points
    inside = False

    previous = vertices[-1]
    for current in vertices:
        if (current.y > point.y) != (previous.y > point.y):
            crossing_x = (
                (previous.x - current.x) * (point.y - current.y) / (previous.y - current.y)
                + current.x
            )
            if point.x < crossing_x:
                inside = not inside
        previous = current

    return inside


def rotate_point_around_origin(point: Point2D, origin: Point2D, angle_radians: float) -> Point2D:
    """
    Rotate point counter-clockwise about origin.

    An angle <= 0 returns the point unchanged.
    """
    if angle_radians <= 0:
        return point

    cos_angle = np.cos(angle_radians)
    sin_angle = np.sin(angle_radians)
    rotation = np.array([[cos_angle, -sin_angle], [sin_angle, cos_angle]])

    rotated = rotation @ (point.to_array() - origin.to_array()) + origin.to_array()
    return Point2D(rotated[0], rotated[1])


def validate_and_order_points_for_polygon(
    points: Optional[Sequence[Optional[Point2D]]],
) -> Tuple[Point2D, ...]:
    """
    Turn a raw point list into a usable polygon ring.

    Drops None entries, orders clockwise, then removes duplicates.

    Raises:
        InvalidArgumentError: Fewer than 3 distinct points remain
        InvalidGeometryError: All remaining points are colinear
    """
    ordered = _distinct(orient_points_clockwise(points))

    if len(ordered) < MINIMUM_POINT_COUNT_FOR_POLYGON:
        raise InvalidArgumentError(ErrorMessages.POLYGON_TOO_FEW_POINTS)

    if are_points_all_colinear(ordered):
        raise InvalidGeometryError(ErrorMessages.POLYGON_COLINEAR)

    return tuple(ordered)
