"""
Tessera Schemas
===============

Bounded Context: Data Structures

Immutable, typed messages for triangulation output.

Design:
- Frozen dataclasses (immutability)
- to_dict() for JSON serialization
- from_dict() for deserialization
- Schema versioning for evolution

Public API
----------
    Timestamp: ISO 8601 timestamp wrapper
    DiagramMessage: Plane triangulation + Voronoi edges
    PolygonTriangulationMessage: Triangulation of one polygon
"""

from .common import SCHEMA_VERSION, Timestamp
from .diagram import DiagramMessage, PolygonTriangulationMessage

__all__ = [
    'SCHEMA_VERSION',
    'Timestamp',
    'DiagramMessage',
    'PolygonTriangulationMessage',
]
