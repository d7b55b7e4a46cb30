"""
Tessera CLI
===========

Command-line entry point (`tessera`) for diagram generation and polygon
triangulation, configured through YAML.
"""

from .config import DiagramConfig, PlaneConfig, LoggingConfig, PolygonConfig

__all__ = [
    'DiagramConfig',
    'PlaneConfig',
    'LoggingConfig',
    'PolygonConfig',
]
