"""Geometry enumerations."""

from enum import Enum


class PointOrientation(str, Enum):
    """Rotational sense of a point relative to a directed line."""
    COLINEAR = "colinear"                      # Lies on the same line
    CLOCKWISE = "clockwise"                    # Rotated clockwise away
    COUNTER_CLOCKWISE = "counter_clockwise"    # Rotated counter-clockwise away
