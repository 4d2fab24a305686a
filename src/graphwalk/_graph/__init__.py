"""Graph module providing the graph container and its algorithms.

This module contains:
- Graph[T]: A mutable graph owning its vertices and edges
- Vertex[T], Edge[T]: The vertex/edge model
- topological_sort, stable_topological_sort: Orderings by precedence
- has_path: Reachability between two vertices
"""

from ._algorithms import has_path, stable_topological_sort, topological_sort
from ._graph import Graph
from ._vertex import Edge, Vertex

__all__ = ["Edge", "Graph", "Vertex", "has_path", "stable_topological_sort", "topological_sort"]
