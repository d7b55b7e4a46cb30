"""
Triangle with canonical clockwise point order.

Any permutation or winding of the same three points produces an equal
triangle: points are reordered clockwise starting from the leftmost-then-
topmost vertex, and every derived value is computed from that order.
"""

import math
from dataclasses import dataclass
from typing import Dict, Any, Optional, Sequence, Tuple

import numpy as np

from tessera_geometry.constants import TRIANGLE_POINT_COUNT, ErrorMessages
from tessera_geometry.errors import InvalidArgumentError, InvalidGeometryError
from tessera_geometry.models.circle import Circle2D
from tessera_geometry.models.enums import PointOrientation
from tessera_geometry.models.line import Line2D
from tessera_geometry.models.point import Point2D
from tessera_geometry.models.rectangle import Rectangle2D
from tessera_geometry.utilities.geometry import get_bounds_from_points, orient_points_clockwise


@dataclass(frozen=True)
class Triangle2D:
    """
    Immutable triangle.

    Attributes:
        points: Three distinct, non-colinear points (stored clockwise)

    Derived values (computed at construction):
        edges: (p0, p1), (p1, p2), (p2, p0)
        area: Heron's formula over the edge lengths
        circumcircle: Circle through all three points
        bounds, centroid

    Example:
        >>> t = Triangle2D((Point2D(2, 0), Point2D(0, 0), Point2D(1, 1)))
        >>> [str(p) for p in t.points]
        ['(0.0, 0.0)', '(1.0, 1.0)', '(2.0, 0.0)']
        >>> t.area
        1.0
    """

    points: Tuple[Point2D, Point2D, Point2D]

    def __post_init__(self):
        """Validate, canonicalize and precompute derived values."""
        points = self._validate_points(self.points)
        ordered = orient_points_clockwise(points)

        object.__setattr__(self, 'points', ordered)

        edges = (
            Line2D(ordered[0], ordered[1]),
            Line2D(ordered[1], ordered[2]),
            Line2D(ordered[2], ordered[0]),
        )
        object.__setattr__(self, '_edges', edges)
        object.__setattr__(self, '_area', self._area_from_sides(edges))
        object.__setattr__(self, '_circumcircle', self._circumcircle_from_points(ordered))
        object.__setattr__(self, '_bounds', get_bounds_from_points(ordered))
        object.__setattr__(
            self,
            '_centroid',
            Point2D(
                (ordered[0].x + ordered[1].x + ordered[2].x) / 3.0,
                (ordered[0].y + ordered[1].y + ordered[2].y) / 3.0,
            ),
        )

    @staticmethod
    def _validate_points(points: Sequence[Optional[Point2D]]) -> Tuple[Point2D, ...]:
        if points is None or len(points) != TRIANGLE_POINT_COUNT:
            raise InvalidArgumentError(ErrorMessages.TRIANGLE_POINT_COUNT)

        if any(point is None for point in points):
            raise InvalidArgumentError(ErrorMessages.TRIANGLE_POINT_MISSING)

        first, second, third = points
        if first == second or first == third or second == third:
            raise InvalidGeometryError(ErrorMessages.TRIANGLE_NON_DISTINCT_POINTS)

        if Line2D(first, second).orientation_of_point(third) == PointOrientation.COLINEAR:
            raise InvalidGeometryError(ErrorMessages.TRIANGLE_COLINEAR)

        return tuple(points)

    @staticmethod
    def _area_from_sides(edges: Tuple[Line2D, ...]) -> float:
        # Heron's formula
        side_a, side_b, side_c = (edge.length for edge in edges)
        s = (side_a + side_b + side_c) / 2.0
        # Slivers can round the product slightly below zero
        return math.sqrt(max(0.0, s * (s - side_a) * (s - side_b) * (s - side_c)))

    @staticmethod
    def _circumcircle_from_points(points: Tuple[Point2D, ...]) -> Circle2D:
        a, b, c = points

        d = 2.0 * ((a.x * (b.y - c.y)) + (b.x * (c.y - a.y)) + (c.x * (a.y - b.y)))
        if d == 0:
            return Circle2D.degenerate()

        x = (
            (a.magnitude_squared * (b.y - c.y))
            + (b.magnitude_squared * (c.y - a.y))
            + (c.magnitude_squared * (a.y - b.y))
        ) / d
        y = (
            (a.magnitude_squared * (c.x - b.x))
            + (b.magnitude_squared * (a.x - c.x))
            + (c.magnitude_squared * (b.x - a.x))
        ) / d

        circumcenter = Point2D(x, y)
        return Circle2D(a.distance(circumcenter), circumcenter)

    @classmethod
    def from_points(cls, first: Point2D, second: Point2D, third: Point2D) -> 'Triangle2D':
        """Build a triangle from three separate points."""
        return cls((first, second, third))

    @property
    def edges(self) -> Tuple[Line2D, Line2D, Line2D]:
        return self._edges

    @property
    def area(self) -> float:
        return self._area

    @property
    def circumcircle(self) -> Circle2D:
        return self._circumcircle

    @property
    def bounds(self) -> Rectangle2D:
        return self._bounds

    @property
    def centroid(self) -> Point2D:
        """Mean of the three vertices."""
        return self._centroid

    def is_point_inside_circumcircle(self, point: Optional[Point2D]) -> bool:
        return self._circumcircle.is_point_in_circle(point)

    def shares_edge_with_triangle(self, other: Optional['Triangle2D']) -> bool:
        """True if any undirected edge appears in both triangles."""
        if other is None:
            return False
        return any(edge in other.edges for edge in self._edges)

    def has_vertex(self, point: Point2D) -> bool:
        return point in self.points

    def to_array(self) -> np.ndarray:
        """Shape (3, 2) float array of the vertices."""
        return np.array([point.to_tuple() for point in self.points], dtype=np.float64)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {'points': [point.to_dict() for point in self.points]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Triangle2D':
        """Deserialize from dict with key points (a list of point dicts)."""
        try:
            return cls(tuple(Point2D.from_dict(point) for point in data['points']))
        except KeyError as e:
            raise ValueError(f"Missing required Triangle2D field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid Triangle2D data: {e}")

    def __str__(self) -> str:
        return f"({', '.join(str(point) for point in self.points)})"
