"""
Geometry constants and error messages shared by the models.
"""

MINIMUM_POINT_COUNT_FOR_POLYGON = 3
"""Smallest number of points that can form a polygon (a triangle)."""

TRIANGLE_POINT_COUNT = 3

COLINEAR_EPSILON = 0.0
"""
Default threshold for the orientation predicate. A cross product whose
absolute value is <= this is treated as colinear. 0.0 is an exact test,
which is only reliable for low-precision, near-integer coordinates.
"""


class ErrorMessages:
    """Exception messages raised by the geometry models."""

    LINE_ZERO_LENGTH = "Line cannot have zero length."
    LINE_POINT_MISSING = "Line start and end points are required."

    RADIUS_TOO_SMALL = "Radius must be greater than 0."

    RECTANGLE_POINT_MISSING = "Rectangle corner points are required."

    TRIANGLE_POINT_COUNT = "A triangle must have no more and no less than three points."
    TRIANGLE_POINT_MISSING = "A triangle cannot contain a missing point."
    TRIANGLE_NON_DISTINCT_POINTS = "A triangle must have three distinct points."
    TRIANGLE_COLINEAR = "Triangle cannot be made of only colinear points."

    POLYGON_TOO_FEW_POINTS = "Any type of polygon must contain at least three distinct points."
    POLYGON_COLINEAR = "Points of any polygon cannot all be colinear."

    PLANE_WIDTH = "Plane width must be greater than 0."
    PLANE_HEIGHT = "Plane height must be greater than 0."
