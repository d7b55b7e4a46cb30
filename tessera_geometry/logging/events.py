"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (component.action)
- Searchable in log aggregators

Event Naming Convention:
    <component>.<action>

    component: points, delaunay, voronoi, polygon, diagram, config, error
    action: generated, triangulated, derived, written, loaded

Example Log Query (jq):
    jq 'select(.event == "delaunay.triangulated") | .metadata.elapsed_ms'
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - points.*: Seed point generation
    - delaunay.*: Bowyer-Watson triangulation
    - voronoi.*: Voronoi edge derivation
    - polygon.*: Polygon-relative triangulation
    - diagram.*: Result serialization and output
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Generation Events ==========
    POINTS_GENERATED = "points.generated"
    """Random seed points generated for a plane."""

    DELAUNAY_SEEDED = "delaunay.seeded"
    """Seed triangles covering the working bounds created."""

    DELAUNAY_TRIANGULATED = "delaunay.triangulated"
    """Incremental insertion finished for all points."""

    VORONOI_DERIVED = "voronoi.derived"
    """Voronoi edges derived from triangle adjacency."""

    POLYGON_TRIANGULATED = "polygon.triangulated"
    """Polygon triangulated around an interior point."""

    POLYGON_REJECTED = "polygon.rejected"
    """Polygon triangulation input was unusable; empty result returned."""

    # ========== Output Events ==========
    DIAGRAM_SERIALIZED = "diagram.serialized"
    """Diagram message serialized to JSON."""

    DIAGRAM_WRITTEN = "diagram.written"
    """Diagram message written to its destination."""

    DIAGRAM_WRITE_FAILED = "diagram.write.failed"
    """Diagram message could not be written."""

    CONFIG_LOADED = "config.loaded"
    """Configuration file loaded and validated."""

    # ========== Error Events ==========
    SERIALIZATION_ERROR = "error.serialization"
    """Failed to serialize a message to JSON."""

    GEOMETRY_ERROR = "error.geometry"
    """Geometry construction failed validation."""

    CONFIG_ERROR = "error.config"
    """Configuration failed validation."""


# Event categories for filtering
GENERATION_EVENTS = {
    LogEvent.POINTS_GENERATED,
    LogEvent.DELAUNAY_SEEDED,
    LogEvent.DELAUNAY_TRIANGULATED,
    LogEvent.VORONOI_DERIVED,
    LogEvent.POLYGON_TRIANGULATED,
    LogEvent.POLYGON_REJECTED,
}

OUTPUT_EVENTS = {
    LogEvent.DIAGRAM_SERIALIZED,
    LogEvent.DIAGRAM_WRITTEN,
    LogEvent.DIAGRAM_WRITE_FAILED,
}

ERROR_EVENTS = {
    LogEvent.SERIALIZATION_ERROR,
    LogEvent.GEOMETRY_ERROR,
    LogEvent.CONFIG_ERROR,
}
