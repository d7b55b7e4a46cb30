"""
Diagram Message Schema
======================

Bounded Context: Triangulation Output

Serialized form of a DelaunayVoronoi result.

Design:
- Immutable (frozen dataclass), tuples of geometry models
- Geometry serializes through each model's own to_dict()
- from_dict() rebuilds (and so revalidates) every shape

Message Flow:
    DelaunayVoronoi → DiagramMessage → DiagramWriter → JSON file / stream
"""

from dataclasses import dataclass
from typing import Dict, Any, Tuple

from tessera_geometry import DelaunayVoronoi, Line2D, Point2D, Polygon2D, Rectangle2D, Triangle2D

from .common import SCHEMA_VERSION, Timestamp


@dataclass(frozen=True)
class DiagramMessage:
    """
    Delaunay triangulation and Voronoi edges for one plane.

    Attributes:
        schema_version: Message schema version (for evolution)
        timestamp: ISO 8601 timestamp of message creation
        bounds: Plane the triangulation covers
        triangles: Delaunay triangles
        delaunay_edges: Distinct triangle edges
        voronoi_edges: Distinct Voronoi edges
        voronoi_polygons: Voronoi cells (empty until cells are assembled)

    Example:
        >>> result = DelaunayVoronoi.generate_bowyer_watson_result(800, 600, seed=1)
        >>> msg = DiagramMessage.from_result(result)
        >>> msg.triangle_count == len(result.delaunay_triangles)
        True
    """
    schema_version: str
    timestamp: Timestamp
    bounds: Rectangle2D
    triangles: Tuple[Triangle2D, ...] = ()
    delaunay_edges: Tuple[Line2D, ...] = ()
    voronoi_edges: Tuple[Line2D, ...] = ()
    voronoi_polygons: Tuple[Polygon2D, ...] = ()

    def __post_init__(self):
        """Validate invariants."""
        if not self.schema_version:
            raise ValueError("Schema version is required")
        if self.bounds is None:
            raise ValueError("Diagram bounds are required")

        # Accept any sequence, store tuples
        for name in ('triangles', 'delaunay_edges', 'voronoi_edges', 'voronoi_polygons'):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @classmethod
    def from_result(cls, result: DelaunayVoronoi) -> 'DiagramMessage':
        """Build a message from a triangulation result."""
        return cls(
            schema_version=SCHEMA_VERSION,
            timestamp=Timestamp.now(),
            bounds=result.bounds,
            triangles=result.delaunay_triangles,
            delaunay_edges=result.delaunay_distinct_edges,
            voronoi_edges=result.voronoi_distinct_edges,
            voronoi_polygons=result.voronoi_polygons,
        )

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    @property
    def circumcenters(self) -> Tuple[Point2D, ...]:
        """Circumcircle center of each triangle, in triangle order."""
        return tuple(triangle.circumcircle.center for triangle in self.triangles)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict.

        circumcenters is derived output for consumers and is ignored by
        from_dict().

        Returns:
            Dictionary ready for json.dumps()
        """
        return {
            'schema_version': self.schema_version,
            'timestamp': self.timestamp.to_dict(),
            'bounds': self.bounds.to_dict(),
            'triangles': [triangle.to_dict() for triangle in self.triangles],
            'delaunay_edges': [edge.to_dict() for edge in self.delaunay_edges],
            'voronoi_edges': [edge.to_dict() for edge in self.voronoi_edges],
            'voronoi_polygons': [polygon.to_dict() for polygon in self.voronoi_polygons],
            'circumcenters': [center.to_dict() for center in self.circumcenters],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DiagramMessage':
        """Deserialize from dict.

        Args:
            data: Dictionary with message fields

        Returns:
            DiagramMessage instance

        Raises:
            ValueError: If required fields missing or invalid; geometry
                validation errors propagate unchanged
        """
        try:
            return cls(
                schema_version=str(data['schema_version']),
                timestamp=Timestamp(value=data['timestamp']),
                bounds=Rectangle2D.from_dict(data['bounds']),
                triangles=tuple(
                    Triangle2D.from_dict(triangle)
                    for triangle in data.get('triangles', [])
                ),
                delaunay_edges=tuple(
                    Line2D.from_dict(edge)
                    for edge in data.get('delaunay_edges', [])
                ),
                voronoi_edges=tuple(
                    Line2D.from_dict(edge)
                    for edge in data.get('voronoi_edges', [])
                ),
                voronoi_polygons=tuple(
                    Polygon2D.from_dict(polygon)
                    for polygon in data.get('voronoi_polygons', [])
                ),
            )
        except KeyError as e:
            raise ValueError(f"Missing required DiagramMessage field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid DiagramMessage data: {e}")


@dataclass(frozen=True)
class PolygonTriangulationMessage:
    """
    Triangulation of a single polygon.

    Attributes:
        schema_version: Message schema version
        timestamp: ISO 8601 timestamp of message creation
        polygon: Triangulated polygon
        point: Interior point the triangulation was requested at
        triangles: Resulting triangles (empty if the point is outside)
    """
    schema_version: str
    timestamp: Timestamp
    polygon: Polygon2D
    point: Point2D
    triangles: Tuple[Triangle2D, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'triangles', tuple(self.triangles))

    @property
    def area(self) -> float:
        """Summed area of the triangles."""
        return sum(triangle.area for triangle in self.triangles)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'schema_version': self.schema_version,
            'timestamp': self.timestamp.to_dict(),
            'polygon': self.polygon.to_dict(),
            'point': self.point.to_dict(),
            'triangles': [triangle.to_dict() for triangle in self.triangles],
            'area': self.area,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PolygonTriangulationMessage':
        """Deserialize from dict (area is recomputed)."""
        try:
            return cls(
                schema_version=str(data['schema_version']),
                timestamp=Timestamp(value=data['timestamp']),
                polygon=Polygon2D.from_dict(data['polygon']),
                point=Point2D.from_dict(data['point']),
                triangles=tuple(
                    Triangle2D.from_dict(triangle)
                    for triangle in data.get('triangles', [])
                ),
            )
        except KeyError as e:
            raise ValueError(f"Missing required PolygonTriangulationMessage field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid PolygonTriangulationMessage data: {e}")
