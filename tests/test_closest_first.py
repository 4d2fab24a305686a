"""Tests for ClosestFirstTraversal."""

import pytest

from graphwalk import ClosestFirstTraversal, Graph, VertexNotFoundError


def _weighted(edges: list[tuple[str, str, float]], **flags: bool) -> Graph[str]:
    graph = Graph[str](weighted=True, **flags)
    for source, target, weight in edges:
        graph.add_edge(source, target, weight=weight)
    return graph


@pytest.fixture
def shortcut() -> Graph[str]:
    """A -> B is expensive; A -> C -> B is cheaper."""
    return _weighted([("A", "B", 4.0), ("A", "C", 1.0), ("C", "B", 1.0), ("B", "D", 1.0), ("C", "D", 5.0)])


class TestClosestFirstTraversal:
    """Tests for ClosestFirstTraversal."""

    def test_missing_start(self, shortcut: Graph[str]) -> None:
        with pytest.raises(VertexNotFoundError):
            ClosestFirstTraversal(shortcut, "X")

    def test_order_by_distance(self, shortcut: Graph[str]) -> None:
        traversal = ClosestFirstTraversal(shortcut, "A")
        visits: list[tuple[str, float]] = []
        while traversal.has_next():
            vertex = traversal.next()
            assert vertex is not None
            visits.append((vertex.label, traversal.current_distance))
        assert visits == [("A", 0.0), ("C", 1.0), ("B", 2.0), ("D", 3.0)]
        assert traversal.next() is None

    def test_distance_updated_not_duplicated(self, shortcut: Graph[str]) -> None:
        traversal = ClosestFirstTraversal(shortcut, "A")
        traversal.next()
        assert traversal.distance_of("B") == 4.0
        traversal.next()
        assert traversal.distance_of("B") == 2.0
        labels = [v.label for v in traversal]
        assert labels == ["B", "D"]

    def test_ties_broken_by_discovery_order(self) -> None:
        graph = _weighted([("A", "X", 2.0), ("A", "Y", 1.0), ("Y", "Z", 1.0)])
        assert [v.label for v in ClosestFirstTraversal(graph, "A")] == ["A", "Y", "X", "Z"]

    def test_shortened_distance_keeps_discovery_order(self) -> None:
        # B is discovered before D; both end at distance 3 once C shortens B
        graph = _weighted([("S", "B", 5.0), ("S", "C", 1.0), ("C", "D", 2.0), ("C", "B", 2.0)])
        traversal = ClosestFirstTraversal(graph, "S")
        assert [v.label for v in traversal] == ["S", "C", "B", "D"]
        assert traversal.distance_of("B") == traversal.distance_of("D") == 3.0

    def test_unweighted_counts_hops(self) -> None:
        graph = Graph[str]()
        graph.add_edge("A", "B", weight=10.0)
        graph.add_edge("B", "C", weight=10.0)
        graph.add_edge("A", "C", weight=0.5)
        traversal = ClosestFirstTraversal(graph, "A")
        assert [v.label for v in traversal] == ["A", "B", "C"]
        assert traversal.distance_of("C") == 1.0

    def test_parallel_edges_use_cheapest(self) -> None:
        graph = _weighted([("A", "B", 5.0), ("A", "B", 2.0)])
        traversal = ClosestFirstTraversal(graph, "A")
        list(traversal)
        assert traversal.distance_of("B") == 2.0

    def test_undirected(self) -> None:
        graph = _weighted([("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 5.0)], directed=False)
        traversal = ClosestFirstTraversal(graph, "C")
        assert [v.label for v in traversal] == ["C", "B", "A"]
        assert traversal.distance_of("A") == 2.0

    def test_unreached_vertex(self, shortcut: Graph[str]) -> None:
        shortcut.add_vertex("Z")
        traversal = ClosestFirstTraversal(shortcut, "A")
        list(traversal)
        assert traversal.distance_of("Z") is None

    def test_reset(self, shortcut: Graph[str]) -> None:
        traversal = ClosestFirstTraversal(shortcut, "A")
        first = [v.label for v in traversal]
        traversal.reset()
        assert traversal.current_distance == 0.0
        assert traversal.distance_of("D") is None
        assert [v.label for v in traversal] == first

    def test_iterate_propagates_error(self, shortcut: Graph[str]) -> None:
        traversal = ClosestFirstTraversal(shortcut, "A")
        visited: list[str] = []

        def visit(vertex) -> None:  # noqa: ANN001
            visited.append(vertex.label)
            if vertex.label == "C":
                msg = "stop at C"
                raise LookupError(msg)

        with pytest.raises(LookupError, match="stop at C"):
            traversal.iterate(visit)
        assert visited == ["A", "C"]
