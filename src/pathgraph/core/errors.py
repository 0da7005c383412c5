"""
Error taxonomy for graph mutation and lookup.

All errors derive from ``GraphError`` (itself a ``ValueError``) so callers
can catch the whole family or a single condition.
"""
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from pathgraph.core.graph_edge import Edge
    from pathgraph.core.graph_vertex import Vertex


def _describe_edge(edge: Optional["Edge"]) -> str:
    if edge is None:
        return "None"
    return f"the two vertices {edge.from_id} and {edge.to_id}"


class GraphError(ValueError):
    """Base class for caller-visible graph errors."""


class VertexAlreadyExistsError(GraphError):
    """Raised when adding a vertex whose id is already in the graph."""

    def __init__(self, vertex: "Vertex"):
        self.vertex = vertex
        super().__init__(f"Vertex already exists in graph for {vertex}.")


class VertexDoesNotExistError(GraphError):
    """Raised when an operation references a vertex the graph does not hold."""

    def __init__(self, vertex: Optional["Vertex"]):
        self.vertex = vertex
        super().__init__(f"Vertex does not exist in graph for {vertex}.")


class EdgeAlreadyExistsError(GraphError):
    """Raised when adding an edge whose ordered endpoints are already joined."""

    def __init__(self, edge: "Edge"):
        self.edge = edge
        super().__init__(f"Edge already exists for {_describe_edge(edge)}.")


class EdgeDoesNotExistError(GraphError):
    """Raised when removing or updating an edge the graph does not hold."""

    def __init__(self, edge: Optional["Edge"]):
        self.edge = edge
        super().__init__(f"Edge does not exist for {_describe_edge(edge)}.")


class EmptyGraphError(GraphError):
    """Raised by connectivity queries on a graph with no vertices."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Graph '{name}' has no vertices; connectivity is undefined.")
