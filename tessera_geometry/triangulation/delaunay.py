"""
Delaunay / Voronoi
==================

Bounded Context: Triangulation

Bowyer-Watson incremental Delaunay triangulation and the dual Voronoi edge
set derived from it.

Design:
- Seed -> Incremental-Insert (x N) -> Finalize
- Results are immutable; every call builds a new DelaunayVoronoi
- Voronoi edges come from an edge -> triangle adjacency index built once
  over the finished triangulation
- Voronoi cells are not assembled (voronoi_polygons is always empty)

Example:
    >>> result = DelaunayVoronoi.generate_bowyer_watson_result(800, 600, point_count=100, seed=42)
    >>> len(result.delaunay_triangles) > 0
    True
    >>> round(sum(t.area for t in result.delaunay_triangles))
    480000
"""

import time
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from tessera_geometry.constants import COLINEAR_EPSILON, ErrorMessages
from tessera_geometry.errors import InvalidArgumentError
from tessera_geometry.logging import LogEvent, StructuredLogger, create_logger
from tessera_geometry.models.enums import PointOrientation
from tessera_geometry.models.line import Line2D
from tessera_geometry.models.point import Point2D
from tessera_geometry.models.polygon import Polygon2D
from tessera_geometry.models.rectangle import Rectangle2D
from tessera_geometry.models.triangle import Triangle2D
from tessera_geometry.triangulation.adjacency import EdgeAdjacency
from tessera_geometry.utilities.points import generate_random_points


_default_logger = create_logger("delaunay")


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000.0, 3)


@dataclass(frozen=True)
class DelaunayVoronoi:
    """
    Result of one Delaunay / Voronoi generation.

    Attributes:
        bounds: Plane the triangulation covers
        delaunay_triangles: Delaunay triangulation
        delaunay_distinct_edges: Triangle edges without duplicates
        voronoi_distinct_edges: Lines between circumcenters of adjacent triangles
        voronoi_polygons: Voronoi cells (not assembled, always empty)
    """

    bounds: Rectangle2D
    delaunay_triangles: Tuple[Triangle2D, ...] = ()
    delaunay_distinct_edges: Tuple[Line2D, ...] = ()
    voronoi_distinct_edges: Tuple[Line2D, ...] = ()
    voronoi_polygons: Tuple[Polygon2D, ...] = ()

    @classmethod
    def generate_bowyer_watson_result(
        cls,
        plane_width: float,
        plane_height: float,
        point_count: int = 100,
        seed: Optional[int] = None,
        points: Optional[Sequence[Optional[Point2D]]] = None,
        epsilon: float = COLINEAR_EPSILON,
        logger: Optional[StructuredLogger] = None,
    ) -> 'DelaunayVoronoi':
        """
        Triangulate points over a plane and derive the Voronoi edges.

        The plane spans (0, plane_height) to (plane_width, 0) and is seeded
        with two triangles: (bottom-left, top-left, top-right) and
        (bottom-left, top-right, bottom-right).

        Args:
            plane_width: Plane width, > 0
            plane_height: Plane height, > 0
            point_count: Random points to generate (negative clamps to 0)
            seed: Random seed for reproducible point sets
            points: Explicit points to insert instead of random ones; must
                lie inside the plane
            epsilon: Colinearity threshold for the sliver guard
            logger: Structured logger (default: the module-level "delaunay"
                logger, whose level callers may change)

        Returns:
            New DelaunayVoronoi result

        Raises:
            InvalidArgumentError: Non-positive plane dimensions, or an
                explicit point outside the plane
        """
        if not plane_width > 0:
            raise InvalidArgumentError(ErrorMessages.PLANE_WIDTH)
        if not plane_height > 0:
            raise InvalidArgumentError(ErrorMessages.PLANE_HEIGHT)

        logger = logger or _default_logger
        bounds = Rectangle2D.from_dimensions(plane_width, plane_height)

        started = time.perf_counter()
        if points is None:
            insert_points = generate_random_points(point_count, bounds.width, bounds.height, seed)
        else:
            insert_points = tuple(point for point in points if point is not None)
            outside = [point for point in insert_points if not bounds.is_point_inside(point)]
            if outside:
                raise InvalidArgumentError(
                    f"{len(outside)} point(s) lie outside the plane, first: {outside[0]}"
                )

        logger.debug(
            event=LogEvent.POINTS_GENERATED,
            message=f"Prepared {len(insert_points)} points",
            metadata={
                'point_count': len(insert_points),
                'random': points is None,
                'seed': seed,
                'elapsed_ms': _elapsed_ms(started),
            }
        )

        seed_triangles = (
            Triangle2D((bounds.bottom_left, bounds.top_left, bounds.top_right)),
            Triangle2D((bounds.bottom_left, bounds.top_right, bounds.bottom_right)),
        )
        logger.debug(
            event=LogEvent.DELAUNAY_SEEDED,
            message="Seeded plane with two triangles",
            metadata={'width': bounds.width, 'height': bounds.height}
        )

        started = time.perf_counter()
        triangles = cls.triangulate(seed_triangles, insert_points, epsilon)
        adjacency = EdgeAdjacency(triangles)
        logger.info(
            event=LogEvent.DELAUNAY_TRIANGULATED,
            message="Performed Delaunay triangulation",
            metadata={
                'point_count': len(insert_points),
                'triangle_count': len(triangles),
                'edge_count': len(adjacency),
                'elapsed_ms': _elapsed_ms(started),
            }
        )

        started = time.perf_counter()
        voronoi_edges = cls._voronoi_edges_from_adjacency(adjacency)
        logger.info(
            event=LogEvent.VORONOI_DERIVED,
            message="Derived Voronoi edges",
            metadata={
                'edge_count': len(voronoi_edges),
                'elapsed_ms': _elapsed_ms(started),
            }
        )

        return cls(
            bounds=bounds,
            delaunay_triangles=triangles,
            delaunay_distinct_edges=adjacency.edges,
            voronoi_distinct_edges=voronoi_edges,
        )

    @classmethod
    def triangulate_polygon_at_point(
        cls,
        polygon: Optional[Polygon2D],
        point: Optional[Point2D],
    ) -> Tuple[Triangle2D, ...]:
        """
        Triangulate a polygon's vertices.

        Returns an empty tuple if polygon or point is None, or the point
        lies outside the polygon.
        """
        if polygon is None or point is None or not polygon.contains_point(point):
            return ()

        return cls.triangulate_polygon(polygon)

    @classmethod
    def triangulate_polygon(cls, polygon: Polygon2D) -> Tuple[Triangle2D, ...]:
        """
        Triangulate a polygon's vertices inside an encompassing triangle.

        The encompassing triangle sits on the polygon's bottom edge, extends
        one bounds-height past each side, and meets at the intersection of
        the lines through its base corners and the polygon's top corners.
        Triangles that touch the encompassing triangle, or whose centroid
        falls outside the polygon, are dropped.
        """
        bounds = polygon.bounds
        super_triangle = cls._encompassing_triangle(bounds)

        triangulation = cls.triangulate((super_triangle,), polygon.points)
        return tuple(
            triangle
            for triangle in triangulation
            if not any(triangle.has_vertex(vertex) for vertex in super_triangle.points)
            and polygon.contains_point(triangle.centroid)
        )

    @staticmethod
    def _encompassing_triangle(bounds: Rectangle2D) -> Triangle2D:
        first = Point2D(bounds.bottom_left.x - bounds.height, bounds.bottom_left.y)
        third = Point2D(bounds.bottom_right.x + bounds.height, bounds.bottom_right.y)

        apex = Line2D(first, bounds.top_left).intersection_point_of_lines(
            Line2D(third, bounds.top_right)
        )
        return Triangle2D((first, apex, third))

    @staticmethod
    def triangulate(
        starting_triangles: Iterable[Triangle2D],
        points: Iterable[Optional[Point2D]],
        epsilon: float = COLINEAR_EPSILON,
    ) -> Tuple[Triangle2D, ...]:
        """
        Bowyer-Watson incremental insertion.

        For each point in order:
            1. Remove every triangle whose circumcircle contains the point
            2. Keep the removed triangles' edges that occur exactly once
               (the cavity boundary)
            3. Drop boundary edges that touch the point or are colinear
               with it
            4. Connect the point to each remaining boundary edge

        Args:
            starting_triangles: Triangles covering every point to insert
            points: Points to insert (None entries are skipped)
            epsilon: Colinearity threshold for step 3

        Returns:
            Triangulation as a tuple
        """
        triangles: List[Triangle2D] = list(starting_triangles)

        for point in points:
            if point is None:
                continue

            kept: List[Triangle2D] = []
            bad: List[Triangle2D] = []
            for triangle in triangles:
                if triangle.is_point_inside_circumcircle(point):
                    bad.append(triangle)
                else:
                    kept.append(triangle)

            if not bad:
                continue

            edge_counts = Counter(edge for triangle in bad for edge in triangle.edges)
            cavity = [
                edge
                for edge, count in edge_counts.items()
                if count == 1
                and not edge.has_endpoint(point)
                and edge.orientation_of_point(point, epsilon) != PointOrientation.COLINEAR
            ]

            kept.extend(Triangle2D((point, edge.start, edge.end)) for edge in cavity)
            triangles = kept

        return tuple(triangles)

    @classmethod
    def derive_voronoi_edges(cls, triangles: Iterable[Triangle2D]) -> Tuple[Line2D, ...]:
        """
        Lines between the circumcenters of every pair of adjacent triangles.

        Pairs whose circumcenters coincide are skipped. The result has no
        duplicates.
        """
        return cls._voronoi_edges_from_adjacency(EdgeAdjacency(triangles))

    @staticmethod
    def _voronoi_edges_from_adjacency(adjacency: EdgeAdjacency) -> Tuple[Line2D, ...]:
        edges = {}
        for _, left, right in adjacency.shared_edges():
            left_center = left.circumcircle.center
            right_center = right.circumcircle.center

            if left_center.distance(right_center) > 0:
                edges[Line2D(left_center, right_center)] = None

        return tuple(edges)
