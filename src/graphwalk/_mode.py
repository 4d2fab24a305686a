"""Graph mode flags, fixed when a graph is constructed."""

from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator


class GraphMode(BaseModel):
    """Combination of flags describing what kind of graph this is.

    Attributes:
        directed: Edges have a direction. Undirected edges are reachable from both endpoints.
        weighted: Edge weights are meaningful to weight-aware traversals.
        acyclic: Edges that would close a cycle (including self-loops) are rejected.
        allow_parallel_edges: More than one edge may connect the same ordered pair.

    Example:
        >>> GraphMode(acyclic=True).allows_self_loops
        False

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    directed: bool = True
    weighted: bool = False
    acyclic: bool = False
    allow_parallel_edges: bool = True

    @model_validator(mode="after")
    def _acyclic_requires_directed(self) -> Self:
        if self.acyclic and not self.directed:
            msg = "An acyclic graph must be directed"
            raise ValueError(msg)
        return self

    @property
    def allows_self_loops(self) -> bool:
        """Whether an edge may start and end at the same vertex."""
        return not self.acyclic
