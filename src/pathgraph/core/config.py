from pydantic import BaseModel, Field, ConfigDict


class GraphConfig(BaseModel):
    """
    Behavioral settings for a Graph.

    ``directed=False`` turns on edge mirroring (see ``UndirectedGraph``).
    ``atomic_mirror`` decides what happens when the second half of a mirrored
    add/remove fails: by default the first half stays applied and the error
    propagates; when set, the first half is rolled back before the error
    propagates.
    """

    directed: bool = Field(
        default=True,
        description="Whether edges are one-way; False mirrors every edge mutation"
    )
    atomic_mirror: bool = Field(
        default=False,
        description="Roll back the forward half of a mirrored mutation if the mirror fails"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "directed": False,
                "atomic_mirror": True
            }
        }
    )
