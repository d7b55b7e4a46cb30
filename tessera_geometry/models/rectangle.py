"""
Axis-aligned rectangle.

Corners are normalized at construction, so top >= bottom and right >= left
whatever pair of opposite corners the caller supplies.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional

from tessera_geometry.constants import ErrorMessages
from tessera_geometry.errors import InvalidArgumentError
from tessera_geometry.models.point import Point2D


@dataclass(frozen=True)
class Rectangle2D:
    """
    Immutable axis-aligned rectangle (Y axis pointing up).

    Attributes:
        top_left: Corner with the lowest X and highest Y
        bottom_right: Corner with the highest X and lowest Y

    Invariants:
        - top_left.x <= bottom_right.x
        - top_left.y >= bottom_right.y
        - Zero width and/or height is allowed

    Example:
        >>> rect = Rectangle2D(Point2D(4, 0), Point2D(0, 3))
        >>> rect.top_left, rect.bottom_right
        (Point2D(x=0.0, y=3.0), Point2D(x=4.0, y=0.0))
        >>> rect.area
        12.0
    """

    top_left: Point2D
    bottom_right: Point2D

    def __post_init__(self):
        """Normalize corners and precompute derived values."""
        if self.top_left is None or self.bottom_right is None:
            raise InvalidArgumentError(ErrorMessages.RECTANGLE_POINT_MISSING)

        left = min(self.top_left.x, self.bottom_right.x)
        right = max(self.top_left.x, self.bottom_right.x)
        bottom = min(self.top_left.y, self.bottom_right.y)
        top = max(self.top_left.y, self.bottom_right.y)

        width = right - left
        height = top - bottom

        object.__setattr__(self, 'top_left', Point2D(left, top))
        object.__setattr__(self, 'bottom_right', Point2D(right, bottom))
        object.__setattr__(self, '_top_right', Point2D(right, top))
        object.__setattr__(self, '_bottom_left', Point2D(left, bottom))
        object.__setattr__(self, '_center', Point2D(left + (width / 2.0), bottom + (height / 2.0)))
        object.__setattr__(self, '_width', width)
        object.__setattr__(self, '_height', height)

    @classmethod
    def zero(cls) -> 'Rectangle2D':
        """Zero-area rectangle at the origin."""
        return cls(Point2D.ZERO, Point2D.ZERO)

    @classmethod
    def from_dimensions(cls, width: float, height: float) -> 'Rectangle2D':
        """Rectangle spanning (0, height) to (width, 0)."""
        return cls(Point2D(0, height), Point2D(width, 0))

    @property
    def top_right(self) -> Point2D:
        return self._top_right

    @property
    def bottom_left(self) -> Point2D:
        return self._bottom_left

    @property
    def center(self) -> Point2D:
        return self._center

    @property
    def top(self) -> float:
        """Highest Y value."""
        return self.top_left.y

    @property
    def bottom(self) -> float:
        """Lowest Y value."""
        return self.bottom_right.y

    @property
    def left(self) -> float:
        """Lowest X value."""
        return self.top_left.x

    @property
    def right(self) -> float:
        """Highest X value."""
        return self.bottom_right.x

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def area(self) -> float:
        return self._width * self._height

    @property
    def perimeter(self) -> float:
        return 2.0 * (self._width + self._height)

    def is_point_inside(self, point: Optional[Point2D]) -> bool:
        """True if point lies within the rectangle, edges included."""
        return (
            point is not None
            and self.left <= point.x <= self.right
            and self.bottom <= point.y <= self.top
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'top_left': self.top_left.to_dict(),
            'bottom_right': self.bottom_right.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Rectangle2D':
        """Deserialize from dict with keys top_left, bottom_right."""
        try:
            return cls(
                top_left=Point2D.from_dict(data['top_left']),
                bottom_right=Point2D.from_dict(data['bottom_right']),
            )
        except KeyError as e:
            raise ValueError(f"Missing required Rectangle2D field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid Rectangle2D data: {e}")
