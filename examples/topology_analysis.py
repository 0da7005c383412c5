"""
Example: analysing a small control topology with pathgraph.

Builds a pumping network, asks which stations can reach every other one,
finds the cheapest routes, then shows the undirected view and a JSON
round trip.
"""
from pathgraph import Graph, UndirectedGraph, Vertex, Edge, GraphError
from pathgraph.logging import setup_root_logger


STATIONS = {
    1: "intake",
    2: "filter",
    3: "booster",
    4: "reservoir",
}

PIPES = [
    (1, 2, 10),
    (2, 3, 20),
    (3, 4, 20),
    (2, 4, 50),
]


def build(graph: Graph) -> Graph:
    """Populate a graph with the demo stations and pipes."""
    vertices = {vid: Vertex(id=vid, name=name) for vid, name in STATIONS.items()}
    for vertex in vertices.values():
        graph.add_vertex(vertex)
    for from_id, to_id, weight in PIPES:
        graph.add_edge(Edge.between(vertices[from_id], vertices[to_id], weight=weight))
    return graph


def demonstrate_directed():
    print("=== Directed topology ===\n")
    graph = build(Graph(name="pumping"))
    print(graph)

    print(f"\nSimple paths: {len(graph.get_paths())}")
    print(f"Connected stations: {[v.name for v in graph.connected_vertices()]}")
    print(f"Connectivity: {graph.connectivity_percentage()}%")

    best = graph.shortest_path(1, 4)
    print(f"Cheapest intake -> reservoir: {best}")

    print(f"Reservoir back to intake: {graph.shortest_path(4, 1)}")

    try:
        graph.add_edge(Edge(from_id=1, to_id=2))
    except GraphError as e:
        print(f"✓ Duplicate pipe rejected: {e}")


def demonstrate_undirected():
    print("\n=== Undirected topology ===\n")
    graph = build(UndirectedGraph(name="pumping-bidirectional"))

    print(f"Edges after mirroring: {graph.edge_count()}")
    print(f"Connectivity: {graph.connectivity_percentage()}%")
    print(f"Cheapest reservoir -> intake: {graph.shortest_path(4, 1)}")

    restored = Graph.from_json(graph.to_json(indent=2))
    print(f"JSON round trip equal: {restored == graph} ({type(restored).__name__})")


if __name__ == "__main__":
    setup_root_logger()
    demonstrate_directed()
    demonstrate_undirected()
