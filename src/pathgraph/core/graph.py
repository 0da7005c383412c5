"""
pathgraph Core Graph Implementation

This module contains the Graph class: an in-memory directed graph of
weighted, labeled edges with a lazily built cache of every simple path, and
the UndirectedGraph variant that mirrors each edge mutation.
"""
from typing import (
    Dict,
    List,
    Optional,
    Any,
    Tuple,
    Iterable,
    Iterator,
    Union,
    DefaultDict,
)
from collections import defaultdict
from datetime import datetime
import threading
import uuid

from pathgraph.core import path_engine
from pathgraph.core.config import GraphConfig
from pathgraph.core.errors import (
    EdgeAlreadyExistsError,
    EdgeDoesNotExistError,
    EmptyGraphError,
    GraphError,
    VertexAlreadyExistsError,
    VertexDoesNotExistError,
)
from pathgraph.core.graph_edge import Edge
from pathgraph.core.graph_path import Path
from pathgraph.core.graph_vertex import Vertex
from pathgraph.core.snapshot import GraphSnapshot, snapshot_from_xml, snapshot_to_xml
from pathgraph.logging import get_logger

logger = get_logger(__name__)

VertexRef = Union[Vertex, int]


class Graph:
    """
    In-memory directed graph with simple-path enumeration.

    Every mutation and every cache rebuild runs under one re-entrant lock
    per graph, so readers never see a half-invalidated or half-built path
    cache.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        vertices: Optional[Iterable[Vertex]] = None,
        edges: Optional[Iterable[Edge]] = None,
        config: Optional[GraphConfig] = None,
    ):
        """Initialize a graph, optionally seeded with vertices and edges."""
        self.name = name or f"graph_{uuid.uuid4().hex[:8]}"
        self.created_at = datetime.now()
        self.config = config or GraphConfig()

        self._lock = threading.RLock()

        # Core storage, insertion ordered
        self._vertices: Dict[int, Vertex] = {}
        self._edges: Dict[Tuple[int, int], Edge] = {}

        # Outgoing adjacency: from_id -> to_id -> edge
        self._outgoing: DefaultDict[int, Dict[int, Edge]] = defaultdict(dict)

        # Path cache, fresh while _paths_version == _version
        self._version = 0
        self._paths: Optional[Tuple[Path, ...]] = None
        self._paths_version = -1

        for vertex in vertices or ():
            self.add_vertex(vertex)
        for edge in edges or ():
            self.add_edge(edge)

    @property
    def directed(self) -> bool:
        return self.config.directed

    # =============================================================================
    # VERTEX OPERATIONS
    # =============================================================================

    def add_vertex(self, vertex: Optional[Vertex]) -> Optional[Vertex]:
        """
        Add a vertex to the graph.

        Passing None is a no-op.

        Raises:
            VertexAlreadyExistsError: a vertex with the same id is present
        """
        if vertex is None:
            return None

        with self._lock:
            if vertex.id in self._vertices:
                raise VertexAlreadyExistsError(vertex)
            self._vertices[vertex.id] = vertex
            self._invalidate_cache()
            return vertex

    def remove_vertex(self, vertex: VertexRef) -> Vertex:
        """
        Remove a vertex and every edge incident to it.

        Incident edges are deleted directly, both halves of a mirrored pair
        included, from a list taken under the lock. Each listed edge is still
        stored when its turn comes, so the cascade never meets a missing edge
        and never goes through mirror rollback.

        Raises:
            VertexDoesNotExistError: the vertex is not in the graph
        """
        if vertex is None:
            raise VertexDoesNotExistError(None)
        vertex_id = self._vertex_id(vertex)

        with self._lock:
            for edge in self._incident_edges(vertex_id):
                self._delete_edge(edge)

            if vertex_id not in self._vertices:
                raise VertexDoesNotExistError(self._as_vertex(vertex))

            removed = self._vertices.pop(vertex_id)
            self._outgoing.pop(vertex_id, None)
            self._invalidate_cache()
            return removed

    # =============================================================================
    # EDGE OPERATIONS
    # =============================================================================

    def add_edge(self, edge: Optional[Edge]) -> Optional[Edge]:
        """
        Add an edge to the graph.

        On an undirected graph the reverse edge is added too, with the same
        weight. Passing None is a no-op.

        The graph stores its own copy of the edge; later changes to the
        caller's object do not reach it. Use update_edge to change a stored
        edge.

        Returns:
            The stored copy of the edge

        Raises:
            VertexDoesNotExistError: either endpoint is not in the graph
            EdgeAlreadyExistsError: an edge with the same endpoints exists
        """
        if edge is None:
            return None

        with self._lock:
            stored = self._insert_edge(edge)

            if not self.directed and not edge.is_self_loop:
                mirror = edge.reverse(label=self._mirror_label(edge))
                try:
                    self._insert_edge(mirror)
                except GraphError:
                    self._mirror_failed("add", edge, undo=lambda: self._delete_edge(edge))
                    raise

            return stored

    def remove_edge(self, edge: Edge) -> Edge:
        """
        Remove an edge from the graph.

        On an undirected graph the reverse edge is removed too.

        Returns:
            The stored edge that was removed

        Raises:
            EdgeDoesNotExistError: no edge with these endpoints exists
        """
        with self._lock:
            removed = self._delete_edge(edge)

            if not self.directed and not edge.is_self_loop:
                try:
                    self._delete_edge(Edge(from_id=edge.to_id, to_id=edge.from_id))
                except GraphError:
                    self._mirror_failed("remove", edge, undo=lambda: self._insert_edge(removed))
                    raise

            return removed

    def update_edge(
        self,
        edge: Edge,
        weight: Optional[int] = None,
        label: Optional[str] = None
    ) -> Edge:
        """
        Change the weight and/or label of a stored edge.

        The stored edge is replaced by an updated copy, so paths already
        handed out keep the edges they were built from. A weight change
        invalidates the path cache and, on an undirected graph, is copied
        onto the mirror edge.

        Returns:
            The new stored edge

        Raises:
            EdgeDoesNotExistError: no edge with these endpoints exists
        """
        with self._lock:
            stored = self._edges.get(edge.key)
            if stored is None:
                raise EdgeDoesNotExistError(edge)

            changes: Dict[str, Any] = {}
            if label is not None:
                changes["label"] = label
            weight_changed = weight is not None and weight != stored.weight
            if weight_changed:
                changes["weight"] = weight
            if not changes:
                return stored

            updated = self._replace_edge(stored, changes)

            if weight_changed:
                if not self.directed and not stored.is_self_loop:
                    mirror = self._edges.get((stored.to_id, stored.from_id))
                    if mirror is not None:
                        self._replace_edge(mirror, {"weight": weight})
                self._invalidate_cache()

            return updated

    def _insert_edge(self, edge: Edge) -> Edge:
        for vertex_id in (edge.from_id, edge.to_id):
            if vertex_id not in self._vertices:
                raise VertexDoesNotExistError(Vertex(id=vertex_id))
        if edge.key in self._edges:
            raise EdgeAlreadyExistsError(edge)

        stored = edge.model_copy()
        self._edges[edge.key] = stored
        self._outgoing[edge.from_id][edge.to_id] = stored
        self._invalidate_cache()
        return stored

    def _replace_edge(self, stored: Edge, changes: Dict[str, Any]) -> Edge:
        # model_copy skips validation, so route the changes through the model
        updated = Edge.model_validate({**stored.model_dump(), **changes})
        self._edges[stored.key] = self._outgoing[stored.from_id][stored.to_id] = updated
        return updated

    def _delete_edge(self, edge: Edge) -> Edge:
        if edge is None or edge.key not in self._edges:
            raise EdgeDoesNotExistError(edge)

        removed = self._edges.pop(edge.key)
        del self._outgoing[edge.from_id][edge.to_id]
        self._invalidate_cache()
        return removed

    def _mirror_label(self, edge: Edge) -> str:
        return f"{self._vertices[edge.to_id].name}->{self._vertices[edge.from_id].name}"

    def _mirror_failed(self, action: str, edge: Edge, undo) -> None:
        if self.config.atomic_mirror:
            undo()
            logger.warning(
                "Mirror %s failed for edge %s; forward half rolled back", action, edge
            )
        else:
            logger.warning(
                "Mirror %s failed for edge %s; graph '%s' is now asymmetric",
                action, edge, self.name
            )

    # =============================================================================
    # GRAPH QUERIES
    # =============================================================================

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """Vertices in insertion order."""
        with self._lock:
            return tuple(self._vertices.values())

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Edges in insertion order."""
        with self._lock:
            return tuple(self._edges.values())

    def get_vertex(self, vertex_id: int) -> Optional[Vertex]:
        """Get a vertex by ID."""
        with self._lock:
            return self._vertices.get(int(vertex_id))

    def has_vertex(self, vertex: VertexRef) -> bool:
        """Check if vertex exists."""
        with self._lock:
            return self._vertex_id(vertex) in self._vertices

    def get_edge(self, from_id: VertexRef, to_id: VertexRef) -> Optional[Edge]:
        """Get the edge joining two vertices, if any."""
        with self._lock:
            return self._edges.get((self._vertex_id(from_id), self._vertex_id(to_id)))

    def has_edge(self, from_id: VertexRef, to_id: VertexRef) -> bool:
        """Check if a directed edge exists between two vertices."""
        return self.get_edge(from_id, to_id) is not None

    def edges_from(self, vertex: VertexRef) -> List[Edge]:
        """
        Edges leaving a vertex, in insertion order.

        Raises:
            VertexDoesNotExistError: the vertex is not in the graph
        """
        with self._lock:
            vertex_id = self._require_vertex(vertex)
            return list(self._outgoing.get(vertex_id, {}).values())

    def edges_incident(self, vertex: VertexRef) -> List[Edge]:
        """
        Edges leaving or entering a vertex, in insertion order.

        Raises:
            VertexDoesNotExistError: the vertex is not in the graph
        """
        with self._lock:
            return self._incident_edges(self._require_vertex(vertex))

    def _incident_edges(self, vertex_id: int) -> List[Edge]:
        return [
            edge for edge in self._edges.values()
            if edge.from_id == vertex_id or edge.to_id == vertex_id
        ]

    # =============================================================================
    # PATHS
    # =============================================================================

    @property
    def version(self) -> int:
        """Structural version, bumped on every mutation."""
        with self._lock:
            return self._version

    @property
    def paths_fresh(self) -> bool:
        """True if the path cache matches the current structure."""
        with self._lock:
            return self._paths is not None and self._paths_version == self._version

    def get_paths(self) -> Tuple[Path, ...]:
        """All simple paths in the graph, rebuilding the cache if stale."""
        with self._lock:
            if not self.paths_fresh:
                self._paths = tuple(path_engine.enumerate_paths(
                    list(self._vertices),
                    lambda vertex_id: list(self._outgoing.get(vertex_id, {}).values()),
                ))
                self._paths_version = self._version
                logger.debug(
                    "Rebuilt path cache for graph '%s' at version %d: %d paths",
                    self.name, self._version, len(self._paths)
                )
            return self._paths

    def find_paths(self, from_vertex: VertexRef, to_vertex: VertexRef) -> List[Path]:
        """
        All cached paths from one vertex to another.

        Raises:
            VertexDoesNotExistError: either vertex is not in the graph
        """
        with self._lock:
            start = self._require_vertex(from_vertex)
            end = self._require_vertex(to_vertex)
            return path_engine.find_paths(self.get_paths(), start, end)

    def connected_vertices(self) -> List[Vertex]:
        """
        Vertices from which every other vertex can be reached.

        A graph with a single vertex has no connected vertices.
        """
        with self._lock:
            connected_ids = path_engine.connected_vertices(
                list(self._vertices), self.get_paths()
            )
            return [self._vertices[vertex_id] for vertex_id in connected_ids]

    def connectivity_percentage(self) -> int:
        """
        Share of connected vertices as a whole percentage, rounded down.

        Raises:
            EmptyGraphError: the graph has no vertices
        """
        with self._lock:
            if not self._vertices:
                raise EmptyGraphError(self.name)
            return len(self.connected_vertices()) * 100 // len(self._vertices)

    def shortest_path(self, from_vertex: VertexRef, to_vertex: VertexRef) -> Optional[Path]:
        """
        Minimum-length path between two vertices.

        Picks the cheapest of all enumerated paths; among equal lengths the
        first one enumerated wins. A vertex never has a path to itself.

        Returns:
            The path, or None if the target cannot be reached

        Raises:
            VertexDoesNotExistError: either vertex is not in the graph
        """
        with self._lock:
            start = self._require_vertex(from_vertex)
            end = self._require_vertex(to_vertex)
            return path_engine.shortest_path(self.get_paths(), start, end)

    # =============================================================================
    # GRAPH STATISTICS
    # =============================================================================

    def vertex_count(self) -> int:
        """Get total number of vertices."""
        with self._lock:
            return len(self._vertices)

    def edge_count(self) -> int:
        """Get total number of edges."""
        with self._lock:
            return len(self._edges)

    # =============================================================================
    # SERIALIZATION
    # =============================================================================

    def to_snapshot(self) -> GraphSnapshot:
        """Capture vertices and edges as a GraphSnapshot."""
        with self._lock:
            return GraphSnapshot(
                name=self.name,
                config=self.config,
                vertices=[v.model_copy() for v in self._vertices.values()],
                edges=[e.model_copy() for e in self._edges.values()],
            )

    @classmethod
    def from_snapshot(cls, snapshot: GraphSnapshot) -> 'Graph':
        """
        Rebuild a graph from a snapshot.

        Returns an UndirectedGraph when the snapshot is undirected. Edges are
        restored exactly as stored, since a snapshot already holds both halves
        of every mirrored pair.

        An undirected edge restored without its reverse is kept and logged at
        WARNING, since the graph is then asymmetric.
        """
        graph_cls = UndirectedGraph if not snapshot.config.directed else Graph
        graph = graph_cls(name=snapshot.name, config=snapshot.config)

        with graph._lock:
            for vertex in snapshot.vertices:
                graph.add_vertex(vertex)
            for edge in snapshot.edges:
                graph._insert_edge(edge)
            if not graph.directed:
                for edge in graph._edges.values():
                    if (edge.to_id, edge.from_id) not in graph._edges:
                        logger.warning(
                            "Restored edge %s has no mirror; graph '%s' is asymmetric",
                            edge, graph.name
                        )
            graph._invalidate_cache()

        return graph

    def to_dict(self) -> Dict[str, Any]:
        """Convert graph to dictionary representation."""
        return self.to_snapshot().model_dump()

    def to_json(self, indent: Optional[int] = None) -> str:
        """Convert graph to JSON string."""
        return self.to_snapshot().model_dump_json(indent=indent)

    def to_xml(self) -> str:
        """Convert graph to an XML document."""
        return snapshot_to_xml(self.to_snapshot())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Graph':
        """Create graph from dictionary representation."""
        return cls.from_snapshot(GraphSnapshot.model_validate(data))

    @classmethod
    def from_json(cls, json_str: str) -> 'Graph':
        """Create graph from JSON string."""
        return cls.from_snapshot(GraphSnapshot.model_validate_json(json_str))

    @classmethod
    def from_xml(cls, xml: str) -> 'Graph':
        """Create graph from an XML document."""
        return cls.from_snapshot(snapshot_from_xml(xml))

    # =============================================================================
    # UTILITIES
    # =============================================================================

    def _invalidate_cache(self):
        """Mark the path cache stale."""
        self._version += 1
        self._paths = None

    def _vertex_id(self, vertex: VertexRef) -> int:
        if isinstance(vertex, Vertex):
            return vertex.id
        return int(vertex)

    def _as_vertex(self, vertex: VertexRef) -> Vertex:
        if isinstance(vertex, Vertex):
            return vertex
        return self._vertices.get(int(vertex)) or Vertex(id=int(vertex))

    def _require_vertex(self, vertex: VertexRef) -> int:
        if vertex is None:
            raise VertexDoesNotExistError(None)
        vertex_id = self._vertex_id(vertex)
        if vertex_id not in self._vertices:
            raise VertexDoesNotExistError(self._as_vertex(vertex))
        return vertex_id

    def copy(self) -> 'Graph':
        """Create a deep copy of the graph."""
        return Graph.from_snapshot(self.to_snapshot())

    def clear(self):
        """Remove all vertices and edges."""
        with self._lock:
            self._vertices.clear()
            self._edges.clear()
            self._outgoing.clear()
            self._invalidate_cache()

    def __len__(self) -> int:
        """Return number of vertices."""
        return self.vertex_count()

    def __contains__(self, vertex: VertexRef) -> bool:
        """Check if vertex exists in graph."""
        return self.has_vertex(vertex)

    def __iter__(self) -> Iterator[Vertex]:
        """Iterate over vertices."""
        return iter(self.vertices)

    def __eq__(self, other: object) -> bool:
        """Graphs are equal when they hold the same vertices and edges."""
        if not isinstance(other, Graph):
            return NotImplemented
        # Both locks, always taken in id order
        first, second = sorted((self, other), key=id)
        with first._lock, second._lock:
            return (
                self._vertices.keys() == other._vertices.keys()
                and self._edges.keys() == other._edges.keys()
            )

    __hash__ = None

    def __repr__(self) -> str:
        """String representation of graph."""
        return (
            f"{type(self).__name__}(name='{self.name}', "
            f"vertices={self.vertex_count()}, edges={self.edge_count()})"
        )

    def __str__(self) -> str:
        lines = [f"{type(self).__name__}:", "\tVertices:"]
        lines.extend(f"\t{vertex}" for vertex in self.vertices)
        lines.append("\tEdges:")
        lines.extend(f"\t{edge}" for edge in self.edges)
        return "\n".join(lines)


class UndirectedGraph(Graph):
    """
    Graph whose edges run both ways.

    Every added edge is paired with its reverse (same weight) and every
    removed edge takes its reverse with it. If the second half of a pair
    fails, ``GraphConfig.atomic_mirror`` decides whether the first half is
    rolled back or left in place.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        vertices: Optional[Iterable[Vertex]] = None,
        edges: Optional[Iterable[Edge]] = None,
        config: Optional[GraphConfig] = None,
    ):
        config = (config or GraphConfig()).model_copy(update={"directed": False})
        super().__init__(name=name, vertices=vertices, edges=edges, config=config)
