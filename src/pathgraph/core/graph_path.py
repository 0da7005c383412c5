from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, Tuple

from pathgraph.core.graph_edge import Edge


class Path(BaseModel):
    """
    An immutable simple walk through the graph.

    Paths are only built through ``from_edge`` and ``extend``. Either one
    returns the empty sentinel (``is_valid`` is False) when the walk would be
    a self-loop, revisit a vertex, not continue from the current end, or have
    a non-positive length.
    """

    start: Optional[int] = Field(default=None, description="First vertex ID")
    end: Optional[int] = Field(default=None, description="Last vertex ID")
    length: int = Field(default=0, description="Sum of edge weights")
    vertices: Tuple[int, ...] = Field(default=(), description="Visited vertex IDs, start first")
    edges: Tuple[Edge, ...] = Field(default=(), description="Traversed edges in order")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def empty(cls) -> 'Path':
        """The invalid sentinel path."""
        return cls()

    @classmethod
    def from_edge(cls, edge: Optional[Edge]) -> 'Path':
        """Single-edge path; empty for a missing edge or a self-loop."""
        if edge is None or edge.is_self_loop:
            return cls.empty()
        return cls(
            start=edge.from_id,
            end=edge.to_id,
            length=edge.weight,
            vertices=(edge.from_id, edge.to_id),
            edges=(edge,),
        )

    def extend(self, edge: Optional[Edge]) -> 'Path':
        """
        Continue this path along ``edge``.

        Args:
            edge: Edge leaving this path's end vertex

        Returns:
            The longer path, or the empty sentinel if ``edge`` does not leave
            the current end or would revisit a vertex already on the path
        """
        if (
            edge is None
            or self.end is None
            or self.end != edge.from_id
            or edge.to_id in self.vertices
        ):
            return Path.empty()
        return Path(
            start=self.start,
            end=edge.to_id,
            length=self.length + edge.weight,
            vertices=self.vertices + (edge.to_id,),
            edges=self.edges + (edge,),
        )

    @property
    def is_valid(self) -> bool:
        return self.length > 0

    def _identity(self) -> tuple:
        return (self.start, self.end, self.length, self.vertices, self.edges)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._identity() == other._identity()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._identity())

    def __len__(self) -> int:
        return len(self.edges)

    def __str__(self) -> str:
        route = " -> ".join(str(v) for v in self.vertices)
        return f"Path: From {self.start} To {self.end} Length = {self.length} via {route}"
