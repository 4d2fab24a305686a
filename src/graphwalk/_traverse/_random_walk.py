"""Random walk over a graph."""

from __future__ import annotations

import random
from collections.abc import Hashable
from typing import TYPE_CHECKING

from ._base import Traversal

if TYPE_CHECKING:
    from graphwalk._graph import Graph, Vertex


class RandomWalkTraversal[T: Hashable](Traversal[T]):
    """Walk from vertex to vertex, choosing each next neighbor uniformly.

    The walk ends at a vertex with no neighbors, or once ``max_steps``
    vertices (the start included) have been produced. On a graph with cycles
    and no ``max_steps`` the walk never ends.

    The random generator's state is captured at construction, so ``reset()``
    replays the same walk. Pass ``seed`` to make the walk reproducible across
    traversal instances too.
    """

    def __init__(
        self,
        graph: Graph[T],
        start: T,
        *,
        max_steps: int | None = None,
        seed: int | None = None,
    ) -> None:
        """Create a walk starting at ``start``.

        Raises:
            VertexNotFoundError: If ``start`` is not in the graph.
            ValueError: If ``max_steps`` is negative.

        """
        super().__init__(graph)
        graph.require_vertex(start)
        if max_steps is not None and max_steps < 0:
            msg = f"max_steps must be non-negative, got {max_steps}"
            raise ValueError(msg)
        self._start = start
        self._max_steps = max_steps
        self._random = random.Random(seed)  # noqa: S311
        self._initial_state = self._random.getstate()
        self.reset()

    @property
    def max_steps(self) -> int | None:
        return self._max_steps

    @property
    def steps(self) -> int:
        """Number of vertices produced so far."""
        return self._steps

    def reset(self) -> None:
        self._random.setstate(self._initial_state)
        self._current: T | None = self._start
        self._steps = 0

    def has_next(self) -> bool:
        if self._current is None:
            return False
        return self._max_steps is None or self._steps < self._max_steps

    def next(self) -> Vertex[T] | None:
        if not self.has_next():
            return None

        vertex = self._graph.get_vertex(self._current)
        if vertex is None:
            self._current = None
            return None
        self._steps += 1

        neighbors = vertex.neighbors()
        self._current = self._random.choice(neighbors).label if neighbors else None
        return vertex
