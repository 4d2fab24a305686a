"""Traversal in topological order."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING

from graphwalk._graph import stable_topological_sort, topological_sort

from ._base import Traversal

if TYPE_CHECKING:
    from graphwalk._graph import Graph, Vertex
    from graphwalk._graph._algorithms import Less


class TopologicalTraversal[T: Hashable](Traversal[T]):
    """Produce every vertex so that each edge points forward.

    The whole order is computed eagerly, at construction and on every
    ``reset()``. With ``less`` the order comes from
    ``stable_topological_sort``; without it, from ``topological_sort``.
    """

    def __init__(self, graph: Graph[T], less: Less[T] | None = None) -> None:
        """Create a traversal over the whole graph.

        Raises:
            CycleError: If the graph contains a cycle.
            InvalidModeOperationError: If the graph is undirected.

        """
        super().__init__(graph)
        self._less = less
        self.reset()

    def reset(self) -> None:
        if self._less is None:
            self._order = topological_sort(self._graph)
        else:
            self._order = stable_topological_sort(self._graph, self._less)
        self._head = -1

    def has_next(self) -> bool:
        return self._head < len(self._order) - 1

    def next(self) -> Vertex[T] | None:
        if not self.has_next():
            return None
        self._head += 1
        return self._order[self._head]
