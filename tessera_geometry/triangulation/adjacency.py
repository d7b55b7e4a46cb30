"""
Edge to triangle adjacency index.

Built once over a finished triangulation so that neighbor lookups are a
dictionary hit instead of a scan over every triangle pair.
"""

from typing import Dict, Iterable, Iterator, List, Tuple

from tessera_geometry.models.line import Line2D
from tessera_geometry.models.triangle import Triangle2D


class EdgeAdjacency:
    """
    Maps each undirected edge to the triangles that use it.

    In a valid triangulation an edge belongs to one triangle (hull edge)
    or two (interior edge).

    Example:
        >>> adjacency = EdgeAdjacency(triangles)
        >>> for edge, left, right in adjacency.shared_edges():
        ...     print(edge, left.circumcircle.center, right.circumcircle.center)
    """

    def __init__(self, triangles: Iterable[Triangle2D]):
        self.triangles: Tuple[Triangle2D, ...] = tuple(triangles)
        self._by_edge: Dict[Line2D, List[int]] = {}

        for index, triangle in enumerate(self.triangles):
            for edge in triangle.edges:
                self._by_edge.setdefault(edge, []).append(index)

    def __len__(self) -> int:
        """Number of distinct edges."""
        return len(self._by_edge)

    def __contains__(self, edge: Line2D) -> bool:
        return edge in self._by_edge

    @property
    def edges(self) -> Tuple[Line2D, ...]:
        """Distinct edges in first-seen order."""
        return tuple(self._by_edge)

    def triangles_for_edge(self, edge: Line2D) -> Tuple[Triangle2D, ...]:
        return tuple(self.triangles[i] for i in self._by_edge.get(edge, ()))

    def neighbors(self, triangle: Triangle2D) -> Tuple[Triangle2D, ...]:
        """Triangles sharing at least one edge with triangle."""
        found: Dict[Triangle2D, None] = {}
        for edge in triangle.edges:
            for index in self._by_edge.get(edge, ()):
                other = self.triangles[index]
                if other != triangle:
                    found[other] = None
        return tuple(found)

    def shared_edges(self) -> Iterator[Tuple[Line2D, Triangle2D, Triangle2D]]:
        """
        Yield (edge, left, right) for every edge used by exactly two triangles.

        left is the triangle that appears first in the triangulation.
        """
        for edge, indices in self._by_edge.items():
            if len(indices) == 2:
                yield edge, self.triangles[indices[0]], self.triangles[indices[1]]

    def boundary_edges(self) -> Tuple[Line2D, ...]:
        """Edges used by exactly one triangle."""
        return tuple(edge for edge, indices in self._by_edge.items() if len(indices) == 1)
