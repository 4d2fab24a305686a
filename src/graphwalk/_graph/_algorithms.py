"""Graph algorithms: topological sorting and reachability."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Hashable
from functools import cmp_to_key
from typing import TYPE_CHECKING

from graphwalk._errors import CycleError, InvalidModeOperationError

if TYPE_CHECKING:
    from ._graph import Graph
    from ._vertex import Vertex

logger = logging.getLogger(__name__)

type Less[T] = Callable[[T, T], bool]


def topological_sort[T: Hashable](graph: Graph[T]) -> list[Vertex[T]]:
    """Sort a directed graph topologically using Kahn's algorithm.

    Vertices with no incoming edges are emitted first; among vertices that
    become available at the same time, the one discovered first wins. The
    graph itself is not modified.

    Args:
        graph: A directed graph.

    Returns:
        Vertices ordered so that every edge points forward.

    Raises:
        InvalidModeOperationError: If the graph is undirected.
        CycleError: If the graph contains a cycle.

    Example:
        >>> graph = Graph[str]()
        >>> _ = graph.add_edge("a", "b")
        >>> _ = graph.add_edge("b", "c")
        >>> [v.label for v in topological_sort(graph)]
        ['a', 'b', 'c']

    """
    _require_directed(graph)

    # Copy in-degrees so the graph's own counters stay intact
    indegree = {vertex.label: vertex.in_degree for vertex in graph.vertices()}

    # Start with vertices that have no predecessors
    queue = deque(vertex for vertex in graph.vertices() if indegree[vertex.label] == 0)
    order: list[Vertex[T]] = []

    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for successor in _release_successors(vertex, indegree):
            queue.append(successor)

    _check_complete(graph, order)
    return order


def stable_topological_sort[T: Hashable](graph: Graph[T], less: Less[T] | None) -> list[Vertex[T]]:
    """Sort topologically, breaking ties with a caller-supplied ordering.

    Whenever new vertices become available, the whole frontier is re-sorted
    by ``less`` so that among the vertices with no outstanding predecessor,
    the smallest one comes next. Sorting is stable: labels ``less`` cannot
    tell apart keep their discovery order. With ``less=None`` the frontier is
    never sorted.

    Args:
        graph: A directed graph.
        less: Strict ordering over labels, ``less(a, b)`` is True if ``a`` goes first.

    Returns:
        Vertices ordered so that every edge points forward.

    Raises:
        InvalidModeOperationError: If the graph is undirected.
        CycleError: If the graph contains a cycle.

    Example:
        >>> graph = Graph[int]()
        >>> _ = graph.add_edge(1, 3)
        >>> _ = graph.add_edge(1, 2)
        >>> [v.label for v in stable_topological_sort(graph, lambda a, b: a < b)]
        [1, 2, 3]

    """
    _require_directed(graph)

    indegree = {vertex.label: vertex.in_degree for vertex in graph.vertices()}
    key = _sort_key(less)

    frontier = [vertex for vertex in graph.vertices() if indegree[vertex.label] == 0]
    if key is not None:
        frontier.sort(key=key)
    order: list[Vertex[T]] = []

    while frontier:
        vertex = frontier.pop(0)
        order.append(vertex)
        released = _release_successors(vertex, indegree)
        if released:
            frontier.extend(released)
            if key is not None:
                frontier.sort(key=key)

    _check_complete(graph, order)
    return order


def has_path[T: Hashable](graph: Graph[T], source: T, target: T) -> bool:
    """Check whether ``target`` is reachable from ``source`` along edges.

    A vertex always reaches itself. Absent labels reach nothing.
    """
    start = graph.get_vertex(source)
    if start is None or target not in graph:
        return False
    if source == target:
        return True

    visited: set[T] = {source}
    stack = [start]
    while stack:
        current = stack.pop()
        for neighbor in current.neighbors():
            if neighbor.label == target:
                return True
            if neighbor.label not in visited:
                visited.add(neighbor.label)
                stack.append(neighbor)
    return False


def _release_successors[T: Hashable](vertex: Vertex[T], indegree: dict[T, int]) -> list[Vertex[T]]:
    """Remove ``vertex``'s outgoing edges and return successors left with no predecessors."""
    released: list[Vertex[T]] = []
    for edge in vertex.edges():
        successor = edge.target
        indegree[successor.label] -= 1
        if indegree[successor.label] == 0:
            released.append(successor)
    return released


def _sort_key[T: Hashable](less: Less[T] | None) -> Callable[[Vertex[T]], object] | None:
    if less is None:
        return None

    def compare(a: Vertex[T], b: Vertex[T]) -> int:
        if less(a.label, b.label):
            return -1
        if less(b.label, a.label):
            return 1
        return 0

    return cmp_to_key(compare)


def _require_directed(graph: Graph) -> None:
    if not graph.is_directed:
        msg = "Topological order is not defined for undirected graphs"
        raise InvalidModeOperationError(msg)


def _check_complete(graph: Graph, order: list) -> None:
    if len(order) != len(graph):
        logger.debug("Topological sort stopped after %d of %d vertices", len(order), len(graph))
        msg = "Cycle detected in graph"
        raise CycleError(msg)
