"""JSON writers for triangulation messages."""

from .base import BaseWriter
from .diagram import DiagramWriter, PolygonTriangulationWriter

__all__ = [
    'BaseWriter',
    'DiagramWriter',
    'PolygonTriangulationWriter',
]
