"""
Line segment between two points.

Equality is undirected: a segment from A to B equals the segment from B to A,
and both hash the same. Triangulation relies on this to match shared edges.
"""

import math
from dataclasses import dataclass
from typing import Dict, Any, Optional

from tessera_geometry.constants import COLINEAR_EPSILON, ErrorMessages
from tessera_geometry.errors import InvalidArgumentError, InvalidGeometryError
from tessera_geometry.models.enums import PointOrientation
from tessera_geometry.models.point import Point2D
from tessera_geometry.models.rectangle import Rectangle2D


@dataclass(frozen=True, eq=False)
class Line2D:
    """
    Immutable line segment.

    Attributes:
        start: First endpoint
        end: Second endpoint

    Invariants:
        - start != end (zero-length segments are rejected)

    Derived values (computed at construction):
        bounds, midpoint, length, slope, intercept.
        A vertical segment has an infinite slope and a NaN intercept.

    Example:
        >>> line = Line2D(Point2D(0, 0), Point2D(2, 2))
        >>> line.slope, line.midpoint
        (1.0, Point2D(x=1.0, y=1.0))
        >>> line == Line2D(Point2D(2, 2), Point2D(0, 0))
        True
    """

    start: Point2D
    end: Point2D

    def __post_init__(self):
        """Validate endpoints and precompute derived values."""
        if self.start is None or self.end is None:
            raise InvalidArgumentError(ErrorMessages.LINE_POINT_MISSING)

        length = self.start.distance(self.end)
        if length == 0:
            raise InvalidGeometryError(ErrorMessages.LINE_ZERO_LENGTH)

        delta_x = self.end.x - self.start.x
        delta_y = self.end.y - self.start.y

        if delta_x == 0:
            slope = math.copysign(math.inf, delta_y)
            intercept = math.nan
        else:
            slope = delta_y / delta_x
            intercept = self.start.y - (slope * self.start.x)

        object.__setattr__(self, '_bounds', Rectangle2D(self.start, self.end))
        object.__setattr__(
            self,
            '_midpoint',
            Point2D((self.start.x + self.end.x) / 2.0, (self.start.y + self.end.y) / 2.0),
        )
        object.__setattr__(self, '_length', length)
        object.__setattr__(self, '_slope', slope)
        object.__setattr__(self, '_intercept', intercept)

    @property
    def bounds(self) -> Rectangle2D:
        return self._bounds

    @property
    def midpoint(self) -> Point2D:
        return self._midpoint

    @property
    def length(self) -> float:
        return self._length

    @property
    def slope(self) -> float:
        return self._slope

    @property
    def intercept(self) -> float:
        """Y-intercept of the infinite line through the segment."""
        return self._intercept

    # ========================================================================
    # Point predicates
    # ========================================================================

    def orientation_of_point(
        self,
        point: Point2D,
        epsilon: float = COLINEAR_EPSILON,
    ) -> PointOrientation:
        """
        Orientation of a point relative to this directed line.

        Uses the cross product of (end - start) and (point - end):
            (y2 - y1) * (x3 - x2) - (y3 - y2) * (x2 - x1)

        Args:
            point: Point to classify
            epsilon: Cross products with an absolute value <= epsilon are
                colinear. The default of 0.0 is an exact comparison.

        Returns:
            COLINEAR, CLOCKWISE (cross > 0) or COUNTER_CLOCKWISE (cross < 0)
        """
        cross = (
            (self.end.y - self.start.y) * (point.x - self.end.x)
            - (point.y - self.end.y) * (self.end.x - self.start.x)
        )

        if abs(cross) <= epsilon:
            return PointOrientation.COLINEAR
        if cross > 0:
            return PointOrientation.CLOCKWISE
        return PointOrientation.COUNTER_CLOCKWISE

    def is_point_on_line(self, point: Optional[Point2D], epsilon: float = COLINEAR_EPSILON) -> bool:
        """True if point lies on the infinite line through this segment."""
        if point is None:
            return False
        return self.orientation_of_point(point, epsilon) == PointOrientation.COLINEAR

    def is_point_on_line_segment(self, point: Optional[Point2D], epsilon: float = COLINEAR_EPSILON) -> bool:
        """True if point lies on the line and within the segment's bounds."""
        return self.is_point_on_line(point, epsilon) and self._bounds.is_point_inside(point)

    # ========================================================================
    # Intersection
    # ========================================================================

    def _denominator(self, line: 'Line2D') -> float:
        # (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
        return (
            (self.start.x - self.end.x) * (line.start.y - line.end.y)
            - (self.start.y - self.end.y) * (line.start.x - line.end.x)
        )

    def _t_numerator(self, line: 'Line2D') -> float:
        # (x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)
        return (
            (self.start.x - line.start.x) * (line.start.y - line.end.y)
            - (self.start.y - line.start.y) * (line.start.x - line.end.x)
        )

    def _u_numerator(self, line: 'Line2D') -> float:
        # (x1 - x3) * (y1 - y2) - (y1 - y3) * (x1 - x2)
        return (
            (self.start.x - line.start.x) * (self.start.y - self.end.y)
            - (self.start.y - line.start.y) * (self.start.x - self.end.x)
        )

    def do_lines_intersect(self, line: Optional['Line2D']) -> bool:
        """True unless the infinite lines are parallel or coincident."""
        if line is None:
            return False
        return self._denominator(line) != 0

    def do_line_segments_intersect(self, line: Optional['Line2D']) -> bool:
        """
        True if the segments intersect.

        The lines must not be parallel, and the intersection parameter must
        fall in [0, 1] along this segment (t) or along the other segment (u).
        """
        if line is None:
            return False

        denominator = self._denominator(line)
        if denominator == 0:
            return False

        t = self._t_numerator(line) / denominator
        if 0.0 <= t <= 1.0:
            return True

        u = self._u_numerator(line) / denominator
        return 0.0 <= u <= 1.0

    def intersection_point_of_lines(self, line: Optional['Line2D']) -> Optional[Point2D]:
        """
        Point where the infinite lines cross.

        Returns:
            Intersection point, or None if the lines are parallel or coincident
        """
        if line is None:
            return None

        denominator = self._denominator(line)
        if denominator == 0:
            return None

        x1_x2 = self.start.x - self.end.x
        y1_y2 = self.start.y - self.end.y
        x3_x4 = line.start.x - line.end.x
        y3_y4 = line.start.y - line.end.y

        # x1 * y2 - y1 * x2 and x3 * y4 - y3 * x4
        self_determinant = (self.start.x * self.end.y) - (self.start.y * self.end.x)
        line_determinant = (line.start.x * line.end.y) - (line.start.y * line.end.x)

        x = ((self_determinant * x3_x4) - (x1_x2 * line_determinant)) / denominator
        y = ((self_determinant * y3_y4) - (y1_y2 * line_determinant)) / denominator

        return Point2D(x, y)

    def intersection_point_of_line_segments(self, line: Optional['Line2D']) -> Optional[Point2D]:
        """
        Point where the segments cross.

        Evaluated from t along this segment when t is in [0, 1], otherwise
        from u along the other segment when u is in [0, 1].

        Returns:
            Intersection point, or None if parallel or out of range
        """
        if line is None:
            return None

        denominator = self._denominator(line)
        if denominator == 0:
            return None

        t = self._t_numerator(line) / denominator
        if 0.0 <= t <= 1.0:
            return Point2D(
                self.start.x + (t * (self.end.x - self.start.x)),
                self.start.y + (t * (self.end.y - self.start.y)),
            )

        u = self._u_numerator(line) / denominator
        if 0.0 <= u <= 1.0:
            return Point2D(
                line.start.x + (u * (line.end.x - line.start.x)),
                line.start.y + (u * (line.end.y - line.start.y)),
            )

        return None

    # ========================================================================
    # Value semantics
    # ========================================================================

    def has_endpoint(self, point: Point2D) -> bool:
        """True if point equals either endpoint."""
        return point == self.start or point == self.end

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'start': self.start.to_dict(),
            'end': self.end.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Line2D':
        """Deserialize from dict with keys start, end."""
        try:
            return cls(
                start=Point2D.from_dict(data['start']),
                end=Point2D.from_dict(data['end']),
            )
        except KeyError as e:
            raise ValueError(f"Missing required Line2D field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid Line2D data: {e}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line2D):
            return NotImplemented
        return (
            (self.start == other.start and self.end == other.end)
            or (self.start == other.end and self.end == other.start)
        )

    def __hash__(self) -> int:
        return hash(frozenset((self.start, self.end)))

    def __str__(self) -> str:
        return f"({self.start}, {self.end})"
