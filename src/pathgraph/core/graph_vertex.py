from pydantic import BaseModel, Field, ConfigDict, model_validator
from typing import Any


class Vertex(BaseModel):
    """
    Represents an identity-bearing vertex in the graph.

    Two vertices are the same vertex when their ids match; the name is
    display data only and plays no part in equality or hashing.
    """

    id: int = Field(..., description="Unique vertex identifier")
    name: str = Field(..., description="Display name, defaults to the id's text")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "pump-station"
            }
        }
    )

    @model_validator(mode='before')
    @classmethod
    def default_name_from_id(cls, data: Any) -> Any:
        """Fill a missing name with the decimal text of the id."""
        if isinstance(data, dict) and data.get("name") is None and "id" in data:
            data = {**data, "name": str(data["id"])}
        return data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vertex):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"ID={self.id}, Name='{self.name}'"
