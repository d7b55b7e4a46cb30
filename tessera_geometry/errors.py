"""
Geometry Errors
===============

Construction-time failures raised by the geometry models.

Both classes derive from ValueError so callers that only care about
"bad input" can catch one type.
"""


class GeometryError(ValueError):
    """Base class for geometry construction failures."""
    pass


class InvalidArgumentError(GeometryError):
    """
    Raised for unusable arguments: non-positive radius or plane dimensions,
    wrong point count, or a missing (None) required point.
    """
    pass


class InvalidGeometryError(GeometryError):
    """
    Raised when the arguments are well-formed but describe degenerate
    geometry: duplicate points, all-colinear points, zero-length segments.
    """
    pass
