"""
Structured export/import of a graph's vertices and edges.

A ``GraphSnapshot`` holds exactly what is needed to rebuild an equal graph;
the path cache is never part of it.
"""
import xml.etree.ElementTree as ET
from typing import Any, Dict, List

from pydantic import BaseModel, Field, ConfigDict

from pathgraph.core.config import GraphConfig
from pathgraph.core.graph_edge import Edge
from pathgraph.core.graph_vertex import Vertex


class GraphSnapshot(BaseModel):
    """Serializable view of a graph's structure."""

    name: str = Field(..., min_length=1, description="Graph name")
    config: GraphConfig = Field(default_factory=GraphConfig, description="Graph behavior")
    vertices: List[Vertex] = Field(default_factory=list, description="Vertices in insertion order")
    edges: List[Edge] = Field(default_factory=list, description="Edges in insertion order, mirrors included")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "pipeline",
                "config": {"directed": True, "atomic_mirror": False},
                "vertices": [{"id": 1, "name": "1"}, {"id": 2, "name": "2"}],
                "edges": [{"from_id": 1, "to_id": 2, "weight": 1, "label": "1->2"}]
            }
        }
    )


def snapshot_to_xml(snapshot: GraphSnapshot) -> str:
    """
    Render a snapshot as an XML document.

    Layout::

        <graph name=".." directed="true" atomic_mirror="false">
          <vertex id="1" name="1" />
          <edge from="1" to="2" weight="1" label="1->2" />
        </graph>
    """
    root = ET.Element("graph", {
        "name": snapshot.name,
        "directed": str(snapshot.config.directed).lower(),
        "atomic_mirror": str(snapshot.config.atomic_mirror).lower(),
    })
    for vertex in snapshot.vertices:
        ET.SubElement(root, "vertex", {"id": str(vertex.id), "name": vertex.name})
    for edge in snapshot.edges:
        ET.SubElement(root, "edge", {
            "from": str(edge.from_id),
            "to": str(edge.to_id),
            "weight": str(edge.weight),
            "label": edge.label,
        })
    ET.indent(root)
    return ET.tostring(root, encoding="unicode")


def snapshot_from_xml(xml: str) -> GraphSnapshot:
    """
    Parse a document produced by ``snapshot_to_xml``.

    Attribute text is handed to pydantic, which coerces ids, weights and
    flags and raises ``ValidationError`` on malformed values.
    """
    root = ET.fromstring(xml)
    if root.tag != "graph":
        raise ValueError(f"Expected <graph> root element, got <{root.tag}>")

    data: Dict[str, Any] = {
        "name": root.get("name"),
        "config": {
            "directed": root.get("directed", "true"),
            "atomic_mirror": root.get("atomic_mirror", "false"),
        },
        "vertices": [
            {"id": element.get("id"), "name": element.get("name")}
            for element in root.iter("vertex")
        ],
        "edges": [
            {
                "from_id": element.get("from"),
                "to_id": element.get("to"),
                "weight": element.get("weight", 1),
                "label": element.get("label", ""),
            }
            for element in root.iter("edge")
        ],
    }
    return GraphSnapshot.model_validate(data)
