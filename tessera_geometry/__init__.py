"""
Tessera Geometry
================

Bounded Context: 2D computational geometry.

Design Philosophy:
- Immutable value types: derived values computed once, never invalidated
- Fail fast: invalid shapes raise at construction
- Degenerate numerics are not errors: parallel lines give None,
  invalid polygon triangulation input gives an empty tuple

Architecture:

    tessera_geometry/
    ├── models/            # Point2D, Line2D, Circle2D, Rectangle2D,
    │                      # Triangle2D, Polygon2D
    ├── utilities/         # Bounds, ordering, colinearity, containment,
    │                      # rotation, random points
    ├── triangulation/     # DelaunayVoronoi (Bowyer-Watson), EdgeAdjacency
    ├── logging/           # StructuredLogger, LogEvent
    ├── errors.py          # InvalidArgumentError, InvalidGeometryError
    └── constants.py

Usage:

    from tessera_geometry import DelaunayVoronoi, Point2D, Polygon2D

    result = DelaunayVoronoi.generate_bowyer_watson_result(800, 600, point_count=100)
    for triangle in result.delaunay_triangles:
        center = triangle.circumcircle.center

    square = Polygon2D([Point2D(0, 0), Point2D(1, 0), Point2D(1, 1), Point2D(0, 1)])
    triangles = square.triangulate_at_point(Point2D(0.5, 0.5))
"""

from tessera_geometry.constants import COLINEAR_EPSILON, MINIMUM_POINT_COUNT_FOR_POLYGON
from tessera_geometry.errors import GeometryError, InvalidArgumentError, InvalidGeometryError

# Models first: utilities and triangulation import them
from tessera_geometry.models import (
    Point2D,
    PointOrientation,
    Rectangle2D,
    Line2D,
    Circle2D,
    Triangle2D,
    Polygon2D,
)
from tessera_geometry import utilities
from tessera_geometry.triangulation import DelaunayVoronoi, EdgeAdjacency

__all__ = [
    # Errors
    "GeometryError",
    "InvalidArgumentError",
    "InvalidGeometryError",
    # Models
    "Point2D",
    "PointOrientation",
    "Rectangle2D",
    "Line2D",
    "Circle2D",
    "Triangle2D",
    "Polygon2D",
    # Triangulation
    "DelaunayVoronoi",
    "EdgeAdjacency",
    # Helpers
    "utilities",
    "COLINEAR_EPSILON",
    "MINIMUM_POINT_COUNT_FOR_POLYGON",
]

__version__ = "1.0.0"
