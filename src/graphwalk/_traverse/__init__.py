"""Traversals sharing the has_next/next/iterate/reset contract."""

from ._base import Traversal
from ._breadth_first import BreadthFirstTraversal
from ._closest_first import ClosestFirstTraversal
from ._depth_first import DepthFirstTraversal
from ._random_walk import RandomWalkTraversal
from ._topological import TopologicalTraversal

__all__ = [
    "BreadthFirstTraversal",
    "ClosestFirstTraversal",
    "DepthFirstTraversal",
    "RandomWalkTraversal",
    "TopologicalTraversal",
    "Traversal",
]
