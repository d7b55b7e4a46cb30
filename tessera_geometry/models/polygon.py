"""
Simple polygon (no holes).

Points are validated and ordered clockwise from the leftmost-then-topmost
vertex at construction. Changing a vertex means building a new polygon.
"""

import math
from dataclasses import dataclass
from typing import Dict, Any, Optional, Tuple

import numpy as np

from tessera_geometry.constants import MINIMUM_POINT_COUNT_FOR_POLYGON
from tessera_geometry.models.line import Line2D
from tessera_geometry.models.point import Point2D
from tessera_geometry.models.rectangle import Rectangle2D
from tessera_geometry.models.triangle import Triangle2D
from tessera_geometry.utilities.geometry import (
    get_bounds_from_points,
    get_centroid_point,
    is_point_in_polygon,
    validate_and_order_points_for_polygon,
)


@dataclass(frozen=True)
class Polygon2D:
    """
    Immutable polygon.

    Attributes:
        points: At least 3 distinct, not all colinear points

    Derived values (computed at construction):
        edges: Consecutive point pairs, closing edge last
        area: Heron's formula for 3 points, otherwise the summed area of
            the polygon's triangulation
        centroid: Mean of the vertices
        bounds: Axis-aligned bounding rectangle

    Raises:
        InvalidArgumentError: Fewer than 3 distinct points
        InvalidGeometryError: All points colinear

    Example:
        >>> square = Polygon2D([Point2D(0, 0), Point2D(1, 0), Point2D(1, 1), Point2D(0, 1)])
        >>> square.contains_point(Point2D(0.5, 0.5))
        True
        >>> round(square.area, 6)
        1.0
    """

    points: Tuple[Point2D, ...]

    def __post_init__(self):
        """Validate, order and precompute derived values."""
        points = validate_and_order_points_for_polygon(self.points)
        object.__setattr__(self, 'points', points)

        edges = tuple(
            Line2D(points[i], points[(i + 1) % len(points)])
            for i in range(len(points))
        )
        object.__setattr__(self, '_edges', edges)
        object.__setattr__(self, '_centroid', get_centroid_point(points))
        object.__setattr__(self, '_bounds', get_bounds_from_points(points))
        object.__setattr__(self, '_area', self._compute_area())

    def _compute_area(self) -> float:
        if len(self.points) == MINIMUM_POINT_COUNT_FOR_POLYGON:
            # Heron's formula
            side_a, side_b, side_c = (edge.length for edge in self._edges)
            s = (side_a + side_b + side_c) / 2.0
            return math.sqrt(max(0.0, s * (s - side_a) * (s - side_b) * (s - side_c)))

        from tessera_geometry.triangulation.delaunay import DelaunayVoronoi

        return sum(triangle.area for triangle in DelaunayVoronoi.triangulate_polygon(self))

    @property
    def edges(self) -> Tuple[Line2D, ...]:
        return self._edges

    @property
    def area(self) -> float:
        return self._area

    @property
    def centroid(self) -> Point2D:
        return self._centroid

    @property
    def bounds(self) -> Rectangle2D:
        return self._bounds

    def contains_point(self, point: Optional[Point2D]) -> bool:
        """Ray-casting containment; None is never contained."""
        return point is not None and is_point_in_polygon(self, point)

    def triangulate_at_point(self, point: Optional[Point2D]) -> Tuple[Triangle2D, ...]:
        """
        Triangulate the polygon's vertices.

        Returns an empty tuple if point is None or outside the polygon.
        """
        from tessera_geometry.triangulation.delaunay import DelaunayVoronoi

        return DelaunayVoronoi.triangulate_polygon_at_point(self, point)

    def to_array(self) -> np.ndarray:
        """Shape (N, 2) float array of the vertices."""
        return np.array([point.to_tuple() for point in self.points], dtype=np.float64)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {'points': [point.to_dict() for point in self.points]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Polygon2D':
        """Deserialize from dict with key points (a list of point dicts)."""
        try:
            return cls(tuple(Point2D.from_dict(point) for point in data['points']))
        except KeyError as e:
            raise ValueError(f"Missing required Polygon2D field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid Polygon2D data: {e}")

    def __str__(self) -> str:
        return f"[{', '.join(str(point) for point in self.points)}]"
