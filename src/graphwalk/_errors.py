"""Error kinds and exceptions raised by graph operations."""

from enum import StrEnum
from typing import Self


class ErrorKind(StrEnum):
    """Closed set of failure kinds.

    Each member carries a docstring describing when it is raised.
    """

    def __new__(cls, value: str, doc: str = "") -> Self:
        """Create a new enum member with a docstring."""
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj

    VERTEX_NOT_FOUND = "vertex_not_found", "A lookup or traversal named a label that is not in the graph."
    CYCLE = "cycle", "An acyclic graph would gain a cycle, or a sort encountered one."
    SELF_LOOP = "self_loop", "A self-loop was inserted into a graph whose mode forbids it."
    DUPLICATE_EDGE = "duplicate_edge", "A parallel edge was inserted into a graph that forbids them."
    INVALID_MODE_OPERATION = "invalid_mode_operation", "The operation is not meaningful for the graph's mode."


class GraphError(Exception):
    """Base class for graph errors. Compare by ``kind``, not by identity."""

    kind: ErrorKind


class VertexNotFoundError(GraphError):
    """Raised when a label does not name a vertex of the graph."""

    kind = ErrorKind.VERTEX_NOT_FOUND

    def __init__(self, label: object) -> None:
        self.label = label
        super().__init__(f"Vertex {label!r} does not exist")


class CycleError(GraphError):
    """Raised when an operation would create, or ran into, a cycle."""

    kind = ErrorKind.CYCLE


class SelfLoopError(GraphError):
    """Raised when a self-loop is added to a graph that forbids them."""

    kind = ErrorKind.SELF_LOOP

    def __init__(self, label: object) -> None:
        self.label = label
        super().__init__(f"Self-loop on vertex {label!r} is not allowed in this graph")


class DuplicateEdgeError(GraphError):
    """Raised when a parallel edge is added to a graph that forbids them."""

    kind = ErrorKind.DUPLICATE_EDGE

    def __init__(self, source: object, target: object) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Edge {source!r} -> {target!r} already exists")


class InvalidModeOperationError(GraphError):
    """Raised when an operation does not apply to the graph's mode."""

    kind = ErrorKind.INVALID_MODE_OPERATION
