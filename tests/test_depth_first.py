"""Tests for DepthFirstTraversal."""

import pytest

from graphwalk import DepthFirstTraversal, Graph, VertexNotFoundError


@pytest.fixture
def grid() -> Graph[str]:
    """A -> B -> C, A -> D -> E -> F, B -> E, C -> F."""
    graph = Graph[str]()
    for source, target in [("A", "B"), ("A", "D"), ("B", "C"), ("B", "E"), ("C", "F"), ("D", "E"), ("E", "F")]:
        graph.add_edge(source, target)
    return graph


class TestDepthFirstTraversal:
    """Tests for DepthFirstTraversal."""

    def test_missing_start(self, grid: Graph[str]) -> None:
        with pytest.raises(VertexNotFoundError):
            DepthFirstTraversal(grid, "X")

    def test_visit_order(self, grid: Graph[str]) -> None:
        # neighbors are pushed in adjacency order, so the last one is explored first
        traversal = DepthFirstTraversal(grid, "A")
        assert [v.label for v in traversal] == ["A", "D", "E", "F", "B", "C"]
        assert not traversal.has_next()
        assert traversal.next() is None

    def test_each_vertex_once(self) -> None:
        graph = Graph[int]()
        for source, target in [(1, 2), (1, 3), (2, 3), (3, 1), (3, 4), (4, 2)]:
            graph.add_edge(source, target)
        labels = [v.label for v in DepthFirstTraversal(graph, 1)]
        assert sorted(labels) == [1, 2, 3, 4]
        assert labels[0] == 1

    def test_chain_goes_deep_first(self) -> None:
        graph = Graph[str]()
        for source, target in [("A", "B"), ("B", "C"), ("A", "X")]:
            graph.add_edge(source, target)
        assert [v.label for v in DepthFirstTraversal(graph, "A")] == ["A", "X", "B", "C"]

    def test_reset(self, grid: Graph[str]) -> None:
        traversal = DepthFirstTraversal(grid, "A")
        first = [v.label for v in traversal]
        traversal.reset()
        assert [v.label for v in traversal] == first

    def test_reset_after_partial_consumption(self, grid: Graph[str]) -> None:
        traversal = DepthFirstTraversal(grid, "A")
        traversal.next()
        traversal.next()
        traversal.reset()
        assert [v.label for v in traversal] == ["A", "D", "E", "F", "B", "C"]

    def test_iterate(self, grid: Graph[str]) -> None:
        traversal = DepthFirstTraversal(grid, "A")
        ordered: list[str] = []
        traversal.iterate(lambda vertex: ordered.append(vertex.label))
        assert ordered == ["A", "D", "E", "F", "B", "C"]

    def test_iterate_propagates_error(self, grid: Graph[str]) -> None:
        traversal = DepthFirstTraversal(grid, "A")
        expected = KeyError("boom")

        def visit(vertex) -> None:  # noqa: ANN001, ARG001
            raise expected

        with pytest.raises(KeyError) as exc_info:
            traversal.iterate(visit)
        assert exc_info.value is expected

    def test_undirected(self) -> None:
        graph = Graph[str](directed=False)
        graph.add_edge("B", "A")
        graph.add_edge("B", "C")
        assert [v.label for v in DepthFirstTraversal(graph, "A")] == ["A", "B", "C"]
