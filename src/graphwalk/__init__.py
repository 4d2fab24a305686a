"""In-memory graphs with re-startable traversals."""

__all__ = [
    "BreadthFirstTraversal",
    "ClosestFirstTraversal",
    "CycleError",
    "DepthFirstTraversal",
    "DuplicateEdgeError",
    "Edge",
    "ErrorKind",
    "Graph",
    "GraphError",
    "GraphMode",
    "InvalidModeOperationError",
    "RandomWalkTraversal",
    "SelfLoopError",
    "TopologicalTraversal",
    "Traversal",
    "Vertex",
    "VertexNotFoundError",
    "has_path",
    "stable_topological_sort",
    "topological_sort",
]

from ._errors import (
    CycleError,
    DuplicateEdgeError,
    ErrorKind,
    GraphError,
    InvalidModeOperationError,
    SelfLoopError,
    VertexNotFoundError,
)
from ._graph import Edge, Graph, Vertex, has_path, stable_topological_sort, topological_sort
from ._mode import GraphMode
from ._traverse import (
    BreadthFirstTraversal,
    ClosestFirstTraversal,
    DepthFirstTraversal,
    RandomWalkTraversal,
    TopologicalTraversal,
    Traversal,
)
