"""Closest-first traversal ordered by accumulated edge weight."""

from __future__ import annotations

import heapq
from collections.abc import Hashable
from itertools import count
from typing import TYPE_CHECKING

from ._base import Traversal

if TYPE_CHECKING:
    from graphwalk._graph import Edge, Graph, Vertex


class ClosestFirstTraversal[T: Hashable](Traversal[T]):
    """Visit vertices in order of shortest distance from a start vertex.

    Distances are sums of edge weights in weighted graphs and hop counts in
    unweighted ones. Ties are broken by discovery order. When a shorter
    distance is found for a vertex that is still pending, its heap entry is
    invalidated and replaced, so every vertex is pending at most once.

    Negative edge weights are not supported; the resulting order is
    unspecified.
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
        self._sequence = count()
        # entries are [distance, discovery sequence, label, live]
        self._heap: list[list] = []
        self._pending: dict[T, list] = {}
        self._settled: set[T] = set()
        self._distances: dict[T, float] = {}
        self._current_distance = 0.0
        self._push(self._start, 0.0, next(self._sequence))

    def has_next(self) -> bool:
        return len(self._pending) > 0

    def next(self) -> Vertex[T] | None:
        if not self.has_next():
            return None

        distance, _, label, _ = self._pop()
        self._settled.add(label)
        self._current_distance = distance
        vertex = self._graph.get_vertex(label)
        if vertex is None:
            return None

        for edge in vertex.edges():
            neighbor = edge.opposite(vertex)
            if neighbor.label in self._settled:
                continue
            candidate = distance + self._cost(edge)
            entry = self._pending.get(neighbor.label)
            if entry is None:
                self._push(neighbor.label, candidate, next(self._sequence))
            elif candidate < entry[0]:
                # keep the original discovery sequence for tie-breaking
                entry[3] = False
                self._push(neighbor.label, candidate, entry[1])

        return vertex

    @property
    def current_distance(self) -> float:
        """Distance of the most recently produced vertex (0 before the first step)."""
        return self._current_distance

    def distance_of(self, label: T) -> float | None:
        """Best distance found so far for ``label``, or None if undiscovered.

        The distance is final once the vertex has been produced.
        """
        return self._distances.get(label)

    def _cost(self, edge: Edge[T]) -> float:
        return edge.weight if self._graph.is_weighted else 1.0

    def _push(self, label: T, distance: float, sequence: int) -> None:
        entry = [distance, sequence, label, True]
        self._pending[label] = entry
        self._distances[label] = distance
        heapq.heappush(self._heap, entry)

    def _pop(self) -> list:
        while True:
            entry = heapq.heappop(self._heap)
            if entry[3]:
                del self._pending[entry[2]]
                return entry
