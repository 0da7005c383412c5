"""
pathgraph Core Module

Graph containers, the vertex/edge/path models, and the path enumeration
engine behind connectivity and shortest-path queries.
"""

from pathgraph.core.config import GraphConfig
from pathgraph.core.errors import (
    GraphError,
    VertexAlreadyExistsError,
    VertexDoesNotExistError,
    EdgeAlreadyExistsError,
    EdgeDoesNotExistError,
    EmptyGraphError,
)
from pathgraph.core.graph import Graph, UndirectedGraph
from pathgraph.core.graph_edge import Edge
from pathgraph.core.graph_path import Path
from pathgraph.core.graph_vertex import Vertex
from pathgraph.core.snapshot import GraphSnapshot

__all__ = [
    "Graph",
    "UndirectedGraph",
    "GraphConfig",
    "GraphSnapshot",
    "Vertex",
    "Edge",
    "Path",
    "GraphError",
    "VertexAlreadyExistsError",
    "VertexDoesNotExistError",
    "EdgeAlreadyExistsError",
    "EdgeDoesNotExistError",
    "EmptyGraphError",
]
