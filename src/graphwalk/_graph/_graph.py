"""Mutable graph container owning vertices and edges."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TYPE_CHECKING

from graphwalk._errors import (
    CycleError,
    DuplicateEdgeError,
    InvalidModeOperationError,
    SelfLoopError,
    VertexNotFoundError,
)
from graphwalk._mode import GraphMode

from ._algorithms import has_path
from ._vertex import Edge, Vertex

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class Graph[T: Hashable]:
    """An in-memory graph over hashable labels.

    The graph is the only writer of vertex adjacency and in-degree. Its mode
    is fixed at construction, either as a ``GraphMode`` or as keyword flags.

    The graph is not synchronized. Callers must serialize mutations, and must
    not mutate a graph while a traversal over it is still in use.

    Example:
        >>> graph = Graph[int](acyclic=True)
        >>> _ = graph.add_edge(1, 2)
        >>> graph.add_edge(2, 1)
        Traceback (most recent call last):
        ...
        graphwalk._errors.CycleError: Edge 2 -> 1 would create a cycle

    """

    def __init__(self, mode: GraphMode | None = None, **flags: bool) -> None:
        if mode is not None and flags:
            msg = "Pass either a GraphMode or keyword flags, not both"
            raise TypeError(msg)
        self._mode = mode if mode is not None else GraphMode(**flags)
        self._vertices: dict[T, Vertex[T]] = {}
        # dict as an insertion-ordered identity set
        self._edges: dict[Edge[T], None] = {}

    # -----------------
    # MODE
    # -----------------

    @property
    def mode(self) -> GraphMode:
        return self._mode

    @property
    def is_directed(self) -> bool:
        return self._mode.directed

    @property
    def is_weighted(self) -> bool:
        return self._mode.weighted

    @property
    def is_acyclic(self) -> bool:
        return self._mode.acyclic

    # -----------------
    # VERTEX OPERATIONS
    # -----------------

    def add_vertex(self, label: T, *, weight: float = 0.0) -> Vertex[T]:
        """Insert a vertex, or return the existing one with the same label.

        An existing vertex keeps its weight.

        Args:
            label: Identity of the vertex.
            weight: Weight of a newly created vertex.

        Returns:
            The vertex registered under ``label``.

        """
        existing = self._vertices.get(label)
        if existing is not None:
            return existing
        vertex = Vertex(label, weight)
        self._vertices[label] = vertex
        logger.debug("Added vertex %r", label)
        return vertex

    def get_vertex(self, label: T) -> Vertex[T] | None:
        return self._vertices.get(label)

    def require_vertex(self, label: T) -> Vertex[T]:
        """Get a vertex by label.

        Raises:
            VertexNotFoundError: If no vertex has the given label.

        """
        vertex = self._vertices.get(label)
        if vertex is None:
            raise VertexNotFoundError(label)
        return vertex

    def contains_vertex(self, label: T) -> bool:
        return label in self._vertices

    def vertices(self) -> list[Vertex[T]]:
        """All vertices in insertion order."""
        return list(self._vertices.values())

    def labels(self) -> list[T]:
        return list(self._vertices)

    def remove_vertex(self, label: T) -> None:
        """Remove a vertex and every edge incident to it.

        Removing an absent label does nothing.
        """
        if label not in self._vertices:
            return
        for edge in self.edges_of(label):
            self._unlink(edge)
        del self._vertices[label]
        logger.debug("Removed vertex %r", label)

    def remove_vertices(self, *labels: T) -> None:
        for label in labels:
            self.remove_vertex(label)

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, source: T | Vertex[T], target: T | Vertex[T], *, weight: float = 0.0) -> Edge[T]:
        """Connect two vertices.

        Endpoints may be given as labels or as vertices. Missing endpoints are
        created, but only once the edge has passed validation, so a rejected
        edge leaves the graph untouched. A ``Vertex`` from outside this graph
        only contributes its label and weight.

        Args:
            source: Source vertex or label.
            target: Target vertex or label.
            weight: Weight of the new edge.

        Returns:
            The new edge.

        Raises:
            SelfLoopError: If ``source`` equals ``target`` and the mode forbids self-loops.
            DuplicateEdgeError: If the pair is already connected and the mode forbids parallel edges.
            CycleError: If the graph is acyclic and ``source`` is reachable from ``target``.

        """
        source_label = _label_of(source)
        target_label = _label_of(target)

        if source_label == target_label and not self._mode.allows_self_loops:
            logger.debug("Rejected self-loop on %r", source_label)
            raise SelfLoopError(source_label)

        existing_source = self._vertices.get(source_label)
        if existing_source is not None and target_label in self._vertices:
            if not self._mode.allow_parallel_edges and existing_source.has_neighbor(target_label):
                logger.debug("Rejected parallel edge %r -> %r", source_label, target_label)
                raise DuplicateEdgeError(source_label, target_label)
            if self._mode.acyclic and has_path(self, target_label, source_label):
                logger.debug("Rejected edge %r -> %r: it would close a cycle", source_label, target_label)
                msg = f"Edge {source_label!r} -> {target_label!r} would create a cycle"
                raise CycleError(msg)

        source_vertex = self.add_vertex(source_label, weight=_weight_of(source))
        target_vertex = self.add_vertex(target_label, weight=_weight_of(target))
        edge = Edge(source_vertex, target_vertex, weight)
        self._link(edge)
        logger.debug("Added edge %r -> %r", source_label, target_label)
        return edge

    def get_edge(self, source: T, target: T) -> Edge[T] | None:
        """Get the first edge connecting ``source`` to ``target``, if any."""
        vertex = self._vertices.get(source)
        if vertex is None:
            return None
        edges = vertex.edges_to(target)
        return edges[0] if edges else None

    def get_all_edges(self, source: T, target: T) -> list[Edge[T]]:
        """Get every edge connecting ``source`` to ``target``, parallel edges included."""
        vertex = self._vertices.get(source)
        if vertex is None:
            return []
        return vertex.edges_to(target)

    def contains_edge(self, source: T, target: T) -> bool:
        vertex = self._vertices.get(source)
        return vertex is not None and vertex.has_neighbor(target)

    def edges(self) -> list[Edge[T]]:
        """All edges in insertion order. An undirected edge appears once."""
        return list(self._edges)

    def edges_of(self, label: T) -> list[Edge[T]]:
        """All edges incident to a vertex, each listed once.

        Returns an empty list for an absent label.
        """
        vertex = self._vertices.get(label)
        if vertex is None:
            return []
        outgoing = vertex.edges()
        if not self._mode.directed:
            return outgoing
        seen = {id(edge) for edge in outgoing}
        incoming = [
            edge
            for edges in vertex._inbound.values()  # noqa: SLF001
            for edge in edges
            if id(edge) not in seen
        ]
        return outgoing + incoming

    def remove_edge(self, edge: Edge[T]) -> None:
        """Remove an edge. Removing an edge not in this graph does nothing."""
        if edge not in self._edges:
            return
        self._unlink(edge)
        logger.debug("Removed edge %r -> %r", edge.source.label, edge.target.label)

    def remove_edges(self, *edges: Edge[T]) -> None:
        for edge in edges:
            self.remove_edge(edge)

    # -----------------
    # QUERIES
    # -----------------

    def neighbors(self, label: T) -> list[Vertex[T]]:
        """Distinct neighbors of a vertex in adjacency order.

        Raises:
            VertexNotFoundError: If no vertex has the given label.

        """
        return self.require_vertex(label).neighbors()

    def in_degree(self, label: T) -> int:
        """Number of edges terminating at a vertex.

        Raises:
            InvalidModeOperationError: If the graph is undirected.
            VertexNotFoundError: If no vertex has the given label.

        """
        if not self._mode.directed:
            msg = "In-degree is not defined for undirected graphs"
            raise InvalidModeOperationError(msg)
        return self.require_vertex(label).in_degree

    def roots(self) -> list[Vertex[T]]:
        """Vertices with no incoming edges (directed graphs only).

        Raises:
            InvalidModeOperationError: If the graph is undirected.

        """
        if not self._mode.directed:
            msg = "Roots are not defined for undirected graphs"
            raise InvalidModeOperationError(msg)
        return [vertex for vertex in self._vertices.values() if vertex.is_root]

    def leaves(self) -> list[Vertex[T]]:
        """Vertices with no outgoing edges (no incident edges if undirected)."""
        return [vertex for vertex in self._vertices.values() if vertex.is_leaf]

    @property
    def order(self) -> int:
        """Number of vertices."""
        return len(self._vertices)

    @property
    def size(self) -> int:
        """Number of edges."""
        return len(self._edges)

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        """Check if a vertex with the given label is in the graph."""
        return label in self._vertices

    def __iter__(self) -> Iterator[Vertex[T]]:
        return iter(self._vertices.values())

    def __repr__(self) -> str:
        return f"Graph(order={self.order}, size={self.size}, mode={self._mode!r})"

    # -----------------
    # ADJACENCY BOOKKEEPING
    # -----------------

    def _link(self, edge: Edge[T]) -> None:
        source, target = edge.endpoints
        source._outbound.setdefault(target.label, []).append(edge)  # noqa: SLF001
        if self._mode.directed:
            target._inbound.setdefault(source.label, []).append(edge)  # noqa: SLF001
        elif target is not source:
            target._outbound.setdefault(source.label, []).append(edge)  # noqa: SLF001
        target._in_degree += 1  # noqa: SLF001
        self._edges[edge] = None

    def _unlink(self, edge: Edge[T]) -> None:
        source, target = edge.endpoints
        _detach(source._outbound, target.label, edge)  # noqa: SLF001
        if self._mode.directed:
            _detach(target._inbound, source.label, edge)  # noqa: SLF001
        elif target is not source:
            _detach(target._outbound, source.label, edge)  # noqa: SLF001
        target._in_degree -= 1  # noqa: SLF001
        del self._edges[edge]


def _label_of[T: Hashable](item: T | Vertex[T]) -> T:
    return item.label if isinstance(item, Vertex) else item


def _weight_of[T: Hashable](item: T | Vertex[T]) -> float:
    return item.weight if isinstance(item, Vertex) else 0.0


def _detach[T: Hashable](adjacency: dict[T, list[Edge[T]]], label: T, edge: Edge[T]) -> None:
    """Remove ``edge`` from ``adjacency[label]``, dropping the key once empty."""
    edges = adjacency[label]
    edges.remove(edge)
    if not edges:
        del adjacency[label]
