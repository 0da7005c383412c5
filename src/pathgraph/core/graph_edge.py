from pydantic import BaseModel, Field, ConfigDict, model_validator
from typing import Any, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from pathgraph.core.graph_vertex import Vertex


class Edge(BaseModel):
    """
    Represents a directed, weighted, labeled edge between two vertices.

    Endpoints are stored as vertex ids, i.e. keys into the owning graph's
    vertex collection. Identity is the ordered pair ``(from_id, to_id)``;
    weight and label are mutable presentation data.
    """

    from_id: int = Field(..., description="Source vertex ID")
    to_id: int = Field(..., description="Target vertex ID")
    weight: int = Field(default=1, description="Edge weight, summed into path length")
    label: str = Field(default="", description="Display label")

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "from_id": 1,
                "to_id": 2,
                "weight": 10,
                "label": "1->2"
            }
        }
    )

    @model_validator(mode='before')
    @classmethod
    def default_label(cls, data: Any) -> Any:
        """Label unlabeled edges ``<from>-><to>``."""
        if isinstance(data, dict) and not data.get("label"):
            if "from_id" in data and "to_id" in data:
                data = {**data, "label": f"{data['from_id']}->{data['to_id']}"}
        return data

    @classmethod
    def between(
        cls,
        from_vertex: "Vertex",
        to_vertex: "Vertex",
        weight: int = 1,
        label: Optional[str] = None
    ) -> 'Edge':
        """
        Create an edge joining two vertices.

        Args:
            from_vertex: Source vertex
            to_vertex: Target vertex
            weight: Edge weight (default 1)
            label: Display label, defaults to ``<from name>-><to name>``

        Returns:
            New Edge keyed on the two vertex ids
        """
        if label is None:
            label = f"{from_vertex.name}->{to_vertex.name}"
        return cls(
            from_id=from_vertex.id,
            to_id=to_vertex.id,
            weight=weight,
            label=label,
        )

    @property
    def key(self) -> Tuple[int, int]:
        """Ordered endpoint pair identifying this edge."""
        return (self.from_id, self.to_id)

    @property
    def is_self_loop(self) -> bool:
        """Check if edge is a self-loop."""
        return self.from_id == self.to_id

    def reverse(self, label: Optional[str] = None) -> 'Edge':
        """
        Create the mirrored edge for undirected graphs.

        Args:
            label: Label for the mirror, defaults to ``<to>-><from>``

        Returns:
            New Edge with reversed direction and the same weight
        """
        return Edge(
            from_id=self.to_id,
            to_id=self.from_id,
            weight=self.weight,
            label=label or f"{self.to_id}->{self.from_id}",
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Edge):
            return self.key == other.key
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"({self.from_id} -> {self.to_id}) Label='{self.label}' Weight={self.weight}"
