r"""
pathgraph - Simple-path analysis for small directed graphs

pathgraph models a directed graph of weighted, labeled edges and answers:
- every simple path between any two vertices (cached, rebuilt on mutation)
- which vertices reach all others, and the graph's connectivity percentage
- the cheapest path between two vertices

Example:
    ```python
    from pathgraph import Graph, UndirectedGraph, Vertex, Edge

    graph = Graph(name="pipeline")
    a, b, c = (Vertex(id=i) for i in (1, 2, 3))
    for v in (a, b, c):
        graph.add_vertex(v)

    graph.add_edge(Edge.between(a, b, weight=10))
    graph.add_edge(Edge.between(b, c, weight=20))

    graph.shortest_path(a, c).length   # 30
    graph.connectivity_percentage()    # 33

    restored = Graph.from_json(graph.to_json())
    assert restored == graph
    ```
"""

from pathgraph.core.graph import Graph, UndirectedGraph
from pathgraph.core.graph_vertex import Vertex
from pathgraph.core.graph_edge import Edge
from pathgraph.core.graph_path import Path
from pathgraph.core.config import GraphConfig
from pathgraph.core.snapshot import GraphSnapshot
from pathgraph.core.errors import (
    GraphError,
    VertexAlreadyExistsError,
    VertexDoesNotExistError,
    EdgeAlreadyExistsError,
    EdgeDoesNotExistError,
    EmptyGraphError,
)

__version__ = "0.1.0"

__all__ = [
    # Graphs
    "Graph",
    "UndirectedGraph",
    "GraphConfig",
    "GraphSnapshot",

    # Models
    "Vertex",
    "Edge",
    "Path",

    # Errors
    "GraphError",
    "VertexAlreadyExistsError",
    "VertexDoesNotExistError",
    "EdgeAlreadyExistsError",
    "EdgeDoesNotExistError",
    "EmptyGraphError",

    # Version
    "__version__",
]
