"""Shared contract of all graph traversals."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Callable

    from graphwalk._graph import Graph, Vertex


class Traversal[T: Hashable](ABC):
    """A re-startable, step-by-step walk over a graph.

    Subclasses must implement:
    - has_next(): Whether another vertex can be produced
    - next(): Produce the next vertex, or None once exhausted
    - reset(): Return to the state right after construction

    Traversals read the graph's adjacency lazily and never mutate it. The
    graph must not be mutated while a traversal over it is in use; the
    effect of doing so is unspecified.

    Traversals are also Python iterators, so ``list(traversal)`` drains one.
    """

    def __init__(self, graph: Graph[T]) -> None:
        self._graph = graph

    @property
    def graph(self) -> Graph[T]:
        return self._graph

    @abstractmethod
    def has_next(self) -> bool:
        """Return True if at least one more vertex can be produced."""
        ...

    @abstractmethod
    def next(self) -> Vertex[T] | None:
        """Produce the next vertex and advance. Returns None once exhausted."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reinitialize all traversal state to its post-construction values."""
        ...

    def iterate(self, visit: Callable[[Vertex[T]], object]) -> None:
        """Call ``visit`` on every remaining vertex in traversal order.

        An exception raised by ``visit`` propagates unchanged and stops the
        traversal; the vertex it was raised for stays consumed.
        """
        while self.has_next():
            vertex = self.next()
            if vertex is None:
                break
            visit(vertex)

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Vertex[T]:
        vertex = self.next()
        if vertex is None:
            raise StopIteration
        return vertex
