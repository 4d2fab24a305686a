"""Vertex and edge types.

Vertices and edges are created and mutated only by the owning ``Graph``.
Their adjacency attributes are private; the public surface is read-only.
"""

from __future__ import annotations

from collections.abc import Hashable
from itertools import chain


class Vertex[T: Hashable]:
    """A labelled vertex with its adjacency.

    Attributes:
        weight: Numeric weight of the vertex.

    """

    __slots__ = ("_in_degree", "_inbound", "_label", "_outbound", "weight")

    def __init__(self, label: T, weight: float = 0.0) -> None:
        self._label = label
        self.weight = weight
        # neighbor label -> edges; for undirected graphs, every incident edge
        self._outbound: dict[T, list[Edge[T]]] = {}
        # predecessor label -> edges; only populated for directed graphs
        self._inbound: dict[T, list[Edge[T]]] = {}
        self._in_degree = 0

    @property
    def label(self) -> T:
        """Identity of the vertex within its graph."""
        return self._label

    @property
    def in_degree(self) -> int:
        """Number of edge instances terminating at this vertex.

        Only meaningful in directed graphs. In an undirected graph each edge
        is counted once, on the ``target`` it was added with.
        """
        return self._in_degree

    @property
    def out_degree(self) -> int:
        """Number of outgoing edge instances (incident edges for undirected graphs)."""
        return sum(len(edges) for edges in self._outbound.values())

    @property
    def is_root(self) -> bool:
        """True if no edge terminates at this vertex (directed graphs only, see ``in_degree``)."""
        return self._in_degree == 0

    @property
    def is_leaf(self) -> bool:
        """True if no edge leaves this vertex."""
        return not self._outbound

    def neighbors(self) -> list[Vertex[T]]:
        """Distinct neighbors in the order they were first connected."""
        return [edges[0].opposite(self) for edges in self._outbound.values()]

    def neighbor(self, label: T) -> Vertex[T] | None:
        """Get the neighbor with the given label, or None if not adjacent."""
        edges = self._outbound.get(label)
        if not edges:
            return None
        return edges[0].opposite(self)

    def has_neighbor(self, label: T) -> bool:
        """True if an edge connects this vertex to ``label``."""
        return label in self._outbound

    def edges(self) -> list[Edge[T]]:
        """Outgoing edge instances in adjacency order, parallel edges included."""
        return list(chain.from_iterable(self._outbound.values()))

    def edges_to(self, label: T) -> list[Edge[T]]:
        """All edges from this vertex to the neighbor with the given label."""
        return list(self._outbound.get(label, ()))

    def predecessors(self) -> list[Vertex[T]]:
        """Distinct vertices with an edge into this one (directed graphs only)."""
        return [edges[0].source for edges in self._inbound.values()]

    def __repr__(self) -> str:
        return f"Vertex({self._label!r})"


class Edge[T: Hashable]:
    """A connection between two vertices.

    An edge does not own its endpoints. In an undirected graph the same
    edge object is listed in the adjacency of both endpoints.
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: Vertex[T], target: Vertex[T], weight: float = 0.0) -> None:
        self.source = source
        self.target = target
        self.weight = weight

    @property
    def endpoints(self) -> tuple[Vertex[T], Vertex[T]]:
        return (self.source, self.target)

    def opposite(self, vertex: Vertex[T]) -> Vertex[T]:
        """Return the endpoint that is not ``vertex``.

        For a self-loop, both endpoints are ``vertex``.

        Raises:
            ValueError: If ``vertex`` is not an endpoint of this edge.

        """
        if vertex is self.source:
            return self.target
        if vertex is self.target:
            return self.source
        msg = f"{vertex!r} is not an endpoint of {self!r}"
        raise ValueError(msg)

    def __repr__(self) -> str:
        return f"Edge({self.source.label!r}, {self.target.label!r}, weight={self.weight!r})"
