"""Depth-first traversal."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING

from ._base import Traversal

if TYPE_CHECKING:
    from graphwalk._graph import Graph, Vertex


class DepthFirstTraversal[T: Hashable](Traversal[T]):
    """Visit vertices depth first using an explicit stack.

    Neighbors are pushed in adjacency order, so the last-connected neighbor
    is produced first. A vertex is marked visited when it is pushed and never
    enters the stack twice.
    """

    def __init__(self, graph: Graph[T], start: T) -> None:
        """Create a traversal starting at ``start``.

        Raises:
            VertexNotFoundError: If ``start`` is not in the graph.

        """
        super().__init__(graph)
        graph.require_vertex(start)
        self._start = start
        self.reset()

    def reset(self) -> None:
        self._stack: list[T] = [self._start]
        self._visited: set[T] = {self._start}

    def has_next(self) -> bool:
        return len(self._stack) > 0

    def next(self) -> Vertex[T] | None:
        if not self.has_next():
            return None

        label = self._stack.pop()
        vertex = self._graph.get_vertex(label)
        if vertex is None:
            return None

        for neighbor in vertex.neighbors():
            if neighbor.label not in self._visited:
                self._visited.add(neighbor.label)
                self._stack.append(neighbor.label)

        return vertex
