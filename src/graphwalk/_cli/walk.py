"""Graph building and traversal functions for CLI commands.

This module provides pure functions behind the CLI commands.
These are the functional core - no I/O, no Rich rendering.
"""

from dataclasses import dataclass

from graphwalk._graph import Graph, Vertex, stable_topological_sort, topological_sort
from graphwalk._mode import GraphMode
from graphwalk._traverse import (
    BreadthFirstTraversal,
    ClosestFirstTraversal,
    DepthFirstTraversal,
    RandomWalkTraversal,
    Traversal,
)

from .config import Strategy


class EdgeSpecError(ValueError):
    """Raised when an edge argument cannot be parsed."""


@dataclass(frozen=True, slots=True)
class EdgeSpec:
    """An edge given on the command line as SOURCE:TARGET[:WEIGHT]."""

    source: str
    target: str
    weight: float = 0.0


@dataclass(frozen=True, slots=True)
class Step:
    """One produced vertex of a traversal.

    ``metric`` is the depth for breadth-first traversals, the distance for
    closest-first traversals and None otherwise.
    """

    index: int
    label: str
    metric: float | None = None


def parse_edge(text: str) -> EdgeSpec:
    """Parse an edge argument.

    Args:
        text: Edge in the form ``SOURCE:TARGET`` or ``SOURCE:TARGET:WEIGHT``.

    Returns:
        The parsed EdgeSpec.

    Raises:
        EdgeSpecError: If the text is malformed.

    Example:
        >>> parse_edge("a:b:2.5")
        EdgeSpec(source='a', target='b', weight=2.5)

    """
    parts = text.split(":")
    if len(parts) not in (2, 3) or not parts[0] or not parts[1]:
        msg = f"Invalid edge '{text}'. Expected SOURCE:TARGET or SOURCE:TARGET:WEIGHT"
        raise EdgeSpecError(msg)
    if len(parts) == 2:
        return EdgeSpec(parts[0], parts[1])
    try:
        weight = float(parts[2])
    except ValueError:
        msg = f"Invalid weight '{parts[2]}' in edge '{text}'"
        raise EdgeSpecError(msg) from None
    return EdgeSpec(parts[0], parts[1], weight)


def build_graph(edges: list[EdgeSpec], mode: GraphMode) -> Graph[str]:
    """Build a graph with the given mode from parsed edges.

    Raises:
        GraphError: If an edge is rejected by the graph's mode.

    """
    graph = Graph[str](mode)
    for edge in edges:
        graph.add_edge(edge.source, edge.target, weight=edge.weight)
    return graph


def make_traversal(
    graph: Graph[str],
    start: str,
    strategy: Strategy,
    *,
    max_steps: int | None = None,
    seed: int | None = None,
) -> Traversal[str]:
    """Create the traversal for a strategy.

    Raises:
        VertexNotFoundError: If ``start`` is not in the graph.

    """
    match strategy:
        case Strategy.BFS:
            return BreadthFirstTraversal(graph, start)
        case Strategy.DFS:
            return DepthFirstTraversal(graph, start)
        case Strategy.CLOSEST:
            return ClosestFirstTraversal(graph, start)
        case Strategy.RANDOM:
            return RandomWalkTraversal(graph, start, max_steps=max_steps, seed=seed)


def run_traversal(traversal: Traversal[str]) -> list[Step]:
    """Drain a traversal into a list of steps."""
    steps: list[Step] = []

    def record(vertex: Vertex[str]) -> None:
        metric: float | None = None
        if isinstance(traversal, BreadthFirstTraversal):
            metric = traversal.current_depth
        elif isinstance(traversal, ClosestFirstTraversal):
            metric = traversal.current_distance
        steps.append(Step(index=len(steps) + 1, label=vertex.label, metric=metric))

    traversal.iterate(record)
    return steps


def topological_labels(graph: Graph[str], *, stable: bool, reverse: bool) -> list[str]:
    """Topological order of a graph as labels.

    Args:
        graph: A directed graph.
        stable: Break ties by label instead of discovery order.
        reverse: With ``stable``, break ties by descending label.

    Raises:
        CycleError: If the graph contains a cycle.

    """
    if not stable:
        return [vertex.label for vertex in topological_sort(graph)]
    if reverse:
        order = stable_topological_sort(graph, lambda a, b: a > b)
    else:
        order = stable_topological_sort(graph, lambda a, b: a < b)
    return [vertex.label for vertex in order]
