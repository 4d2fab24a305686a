"""Breadth-first traversal with depth tracking."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING

from ._base import Traversal

if TYPE_CHECKING:
    from collections.abc import Callable

    from graphwalk._graph import Graph, Vertex


class BreadthFirstTraversal[T: Hashable](Traversal[T]):
    """Visit vertices level by level from a start vertex.

    A vertex is marked visited and given its depth (parent depth + 1) when it
    is first discovered, not when it is produced. The queue is never popped;
    a cursor marks the position of the last produced vertex.

    Example:
        >>> traversal = BreadthFirstTraversal(graph, "A")
        >>> traversal.iterate_with_depth(lambda v, depth: print(v.label, depth))

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
        self._queue: list[T] = [self._start]
        self._head = -1
        self._visited: set[T] = {self._start}
        self._depth: dict[T, int] = {self._start: 0}
        self._current_depth = 0

    def has_next(self) -> bool:
        return self._head < len(self._queue) - 1

    def next(self) -> Vertex[T] | None:
        if not self.has_next():
            return None

        self._head += 1
        label = self._queue[self._head]
        vertex = self._graph.get_vertex(label)
        if vertex is None:
            return None
        self._current_depth = self._depth[label]

        for neighbor in vertex.neighbors():
            if neighbor.label not in self._visited:
                self._visited.add(neighbor.label)
                self._queue.append(neighbor.label)
                self._depth[neighbor.label] = self._current_depth + 1

        return vertex

    @property
    def current_depth(self) -> int:
        """Depth of the most recently produced vertex (0 before the first step)."""
        return self._current_depth

    def depth_of(self, label: T) -> int:
        """Depth at which ``label`` was discovered, or -1 if it has not been."""
        return self._depth.get(label, -1)

    def iterate_with_depth(self, visit: Callable[[Vertex[T], int], object]) -> None:
        """Like ``iterate``, but also pass each vertex's depth to ``visit``."""
        while self.has_next():
            vertex = self.next()
            if vertex is None:
                break
            visit(vertex, self._current_depth)
