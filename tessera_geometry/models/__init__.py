"""
Geometry Models
===============

Immutable 2D primitives. Derived values are computed at construction.

Public API
----------
    Point2D: Position / vector
    PointOrientation: Enum (COLINEAR, CLOCKWISE, COUNTER_CLOCKWISE)
    Rectangle2D: Axis-aligned rectangle, corners normalized
    Line2D: Segment with undirected equality
    Circle2D: Radius + center
    Triangle2D: Three points in canonical clockwise order
    Polygon2D: Clockwise ring of at least three points
"""

# Import order matters: later models build on earlier ones
from .point import Point2D
from .enums import PointOrientation
from .rectangle import Rectangle2D
from .line import Line2D
from .circle import Circle2D
from .triangle import Triangle2D
from .polygon import Polygon2D

__all__ = [
    'Point2D',
    'PointOrientation',
    'Rectangle2D',
    'Line2D',
    'Circle2D',
    'Triangle2D',
    'Polygon2D',
]
