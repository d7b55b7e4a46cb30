"""
Two-dimensional point / vector.

Immutable value type: magnitude and magnitude squared are computed once at
construction, so there is no cache to invalidate.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Dict, Any, Optional, Tuple

import numpy as np

from tessera_geometry.errors import InvalidArgumentError


@dataclass(frozen=True)
class Point2D:
    """
    Immutable 2D point.

    Attributes:
        x: X position
        y: Y position

    Invariants:
        - x and y are finite

    Example:
        >>> p = Point2D(3, 4)
        >>> p.magnitude
        5.0
        >>> p + Point2D.UP
        Point2D(x=3.0, y=5.0)
    """

    x: float
    y: float

    def __post_init__(self):
        """Coerce to float, validate and precompute derived values."""
        try:
            x = float(self.x)
            y = float(self.y)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Point coordinates must be numbers: {e}") from e

        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidArgumentError(f"Point coordinates must be finite, got ({x}, {y})")

        magnitude_squared = (x * x) + (y * y)

        # Frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)
        object.__setattr__(self, '_magnitude_squared', magnitude_squared)
        object.__setattr__(self, '_magnitude', math.sqrt(magnitude_squared))

    @property
    def magnitude(self) -> float:
        """Length of the vector from the origin."""
        return self._magnitude

    @property
    def magnitude_squared(self) -> float:
        """Squared length of the vector from the origin."""
        return self._magnitude_squared

    def dot(self, other: 'Point2D') -> float:
        """Dot product with another point."""
        return (self.x * other.x) + (self.y * other.y)

    def cross(self, other: 'Point2D') -> float:
        """2D cross product (a scalar) with another point."""
        return (self.x * other.y) - (self.y * other.x)

    def distance(self, other: 'Point2D') -> float:
        """Euclidean distance to another point."""
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: 'Point2D') -> float:
        """Squared Euclidean distance to another point."""
        delta_x = other.x - self.x
        delta_y = other.y - self.y
        return (delta_x * delta_x) + (delta_y * delta_y)

    def angle_in_radians(self, other: Optional['Point2D']) -> float:
        """
        Angle of the direction from this point to another, in radians.

        Orientation: right = 0, up = pi/2, left = +/-pi.
        Returns 0.0 if other is None.
        """
        if other is None:
            return 0.0

        return math.atan2(other.y - self.y, other.x - self.x)

    def angle_in_degrees(self, other: Optional['Point2D']) -> float:
        """Angle to another point in degrees, between 0 and +/-180."""
        return math.degrees(self.angle_in_radians(other))

    def angle_in_degrees_360(self, other: Optional['Point2D']) -> float:
        """Angle to another point in degrees, between 0 and 360."""
        degrees = self.angle_in_degrees(other)
        if degrees < 0:
            degrees += 360.0
        return degrees

    def normalized(self) -> 'Point2D':
        """
        Unit vector in the same direction.

        Returns Point2D.ZERO when the magnitude is zero.
        """
        if self._magnitude == 0:
            return Point2D.ZERO

        inverse_magnitude = 1.0 / self._magnitude
        return Point2D(self.x * inverse_magnitude, self.y * inverse_magnitude)

    def approximately_equals(self, other: Optional['Point2D'], threshold: float) -> bool:
        """True if other is no more than threshold units away (negative threshold acts as 0)."""
        return other is not None and self.distance(other) <= max(0.0, threshold)

    def to_tuple(self) -> Tuple[float, float]:
        """(x, y) tuple."""
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        """Shape (2,) float array."""
        return np.array([self.x, self.y], dtype=np.float64)

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON-compatible dict."""
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Point2D':
        """Deserialize from dict.

        Args:
            data: Dictionary with keys: x, y

        Returns:
            Point2D instance

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(x=data['x'], y=data['y'])
        except KeyError as e:
            raise ValueError(f"Missing required Point2D field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid Point2D data: {e}")

    def __add__(self, other: 'Point2D') -> 'Point2D':
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point2D') -> 'Point2D':
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> 'Point2D':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Point2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> 'Point2D':
        return Point2D(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Point2D.ZERO = Point2D(0.0, 0.0)
Point2D.UP = Point2D(0.0, 1.0)
Point2D.DOWN = Point2D(0.0, -1.0)
Point2D.RIGHT = Point2D(1.0, 0.0)
Point2D.LEFT = Point2D(-1.0, 0.0)
