"""Circle defined by a radius and a center point."""

import math
from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from tessera_geometry.constants import ErrorMessages
from tessera_geometry.errors import InvalidArgumentError
from tessera_geometry.models.point import Point2D
from tessera_geometry.models.rectangle import Rectangle2D


@dataclass(frozen=True)
class Circle2D:
    """
    Immutable circle.

    Attributes:
        radius: Radius, strictly positive
        center: Center point (default origin)

    Derived values: diameter, circumference, area, bounds.

    Example:
        >>> circle = Circle2D(2.0, Point2D(1, 1))
        >>> circle.is_point_in_circle(Point2D(3, 1))
        True
    """

    radius: float
    center: Point2D = field(default_factory=lambda: Point2D.ZERO)

    def __post_init__(self):
        """Validate radius and precompute derived values."""
        if self.center is None:
            raise InvalidArgumentError("Circle center point is required.")

        try:
            radius = float(self.radius)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Radius must be a number: {e}") from e

        if not radius > 0:
            raise InvalidArgumentError(ErrorMessages.RADIUS_TOO_SMALL)

        object.__setattr__(self, 'radius', radius)
        self._set_derived_values()

    def _set_derived_values(self):
        diameter = self.radius * 2.0
        object.__setattr__(self, '_diameter', diameter)
        object.__setattr__(self, '_circumference', math.pi * diameter)
        object.__setattr__(self, '_area', math.pi * (self.radius * self.radius))
        object.__setattr__(
            self,
            '_bounds',
            Rectangle2D(
                Point2D(self.center.x - self.radius, self.center.y + self.radius),
                Point2D(self.center.x + self.radius, self.center.y - self.radius),
            ),
        )

    @classmethod
    def degenerate(cls) -> 'Circle2D':
        """
        Zero-radius circle at the origin.

        Returned as the circumcircle of a triangle whose circumcenter
        determinant is exactly zero. Skips radius validation.
        """
        circle = cls.__new__(cls)
        object.__setattr__(circle, 'radius', 0.0)
        object.__setattr__(circle, 'center', Point2D.ZERO)
        circle._set_derived_values()
        return circle

    @property
    def is_degenerate(self) -> bool:
        return self.radius == 0

    @property
    def diameter(self) -> float:
        return self._diameter

    @property
    def circumference(self) -> float:
        return self._circumference

    @property
    def area(self) -> float:
        return self._area

    @property
    def bounds(self) -> Rectangle2D:
        return self._bounds

    def is_point_in_circle(self, point: Optional[Point2D]) -> bool:
        """True if point is within radius of the center, boundary included."""
        if point is None:
            return False
        return self.center.distance(point) <= self.radius

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'radius': self.radius,
            'center': self.center.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Circle2D':
        """Deserialize from dict with keys radius, center."""
        try:
            return cls(
                radius=data['radius'],
                center=Point2D.from_dict(data['center']),
            )
        except KeyError as e:
            raise ValueError(f"Missing required Circle2D field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid Circle2D data: {e}")
