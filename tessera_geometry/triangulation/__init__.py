"""Bowyer-Watson triangulation and Voronoi edge derivation."""

from .adjacency import EdgeAdjacency
from .delaunay import DelaunayVoronoi

__all__ = [
    'EdgeAdjacency',
    'DelaunayVoronoi',
]
