"""
Simple-path enumeration and the queries derived from it.

The enumeration walks the graph depth-first from every vertex in turn and
accumulates every simple path it can build by extending already known paths
with the edge being visited. It is exponential in the worst case: simple-path
enumeration is inherently so. It targets small control/topology graphs; keep
graphs small when latency matters.
"""
from collections import defaultdict
from typing import (
    Callable,
    DefaultDict,
    Dict,
    Iterable,
    List,
    Optional,
    Sequence,
    Set,
    Tuple,
)

from pathgraph.core.graph_edge import Edge
from pathgraph.core.graph_path import Path


class _PathAccumulator:
    """Ordered path set with the lookups enumeration needs."""

    def __init__(self):
        self.paths: List[Path] = []
        # One edge per ordered vertex pair, so a route identifies its path
        self._routes: Set[Tuple[int, ...]] = set()
        self._by_end: DefaultDict[int, List[Path]] = defaultdict(list)
        self._endpoints: Set[Tuple[int, int]] = set()

    def add(self, path: Path) -> None:
        self.paths.append(path)
        self._routes.add(path.vertices)
        self._by_end[path.end].append(path)
        self._endpoints.add((path.start, path.end))

    def absorb(self, edge: Edge) -> None:
        # A pair already joined by some path gets no single-edge path of its own.
        is_new_pair = (edge.from_id, edge.to_id) not in self._endpoints

        extensions = []
        for path in self._by_end.get(edge.from_id, ()):
            if edge.to_id in path.vertices or path.vertices + (edge.to_id,) in self._routes:
                continue
            candidate = path.extend(edge)
            if candidate.is_valid:
                extensions.append(candidate)
        for path in extensions:
            self.add(path)

        if is_new_pair:
            direct = Path.from_edge(edge)
            if direct.is_valid:
                self.add(direct)


def enumerate_paths(
    roots: Iterable[int],
    outgoing: Callable[[int], Sequence[Edge]]
) -> List[Path]:
    """
    Enumerate simple paths reachable from every root.

    Args:
        roots: Vertex IDs to start from, in iteration order
        outgoing: Returns the edges leaving a vertex, in insertion order

    Returns:
        Paths in discovery order
    """
    accumulator = _PathAccumulator()

    for root in roots:
        processed: Set[int] = {root}
        stack = [iter(outgoing(root))]

        while stack:
            edge = next(stack[-1], None)
            if edge is None:
                stack.pop()
                continue

            accumulator.absorb(edge)

            if edge.to_id not in processed:
                processed.add(edge.to_id)
                stack.append(iter(outgoing(edge.to_id)))

    return accumulator.paths


def find_paths(paths: Iterable[Path], start: int, end: int) -> List[Path]:
    """All paths from ``start`` to ``end``, in cache order."""
    return [p for p in paths if p.start == start and p.end == end]


def connected_vertices(vertex_ids: Sequence[int], paths: Iterable[Path]) -> List[int]:
    """
    Vertices that reach every other vertex along some path.

    A lone vertex has nothing to reach and is not connected.
    """
    reachable: Dict[int, Set[int]] = defaultdict(set)
    for path in paths:
        reachable[path.start].add(path.end)

    connected = []
    for vertex_id in vertex_ids:
        others = set(vertex_ids)
        others.discard(vertex_id)
        if others and others <= reachable[vertex_id]:
            connected.append(vertex_id)
    return connected


def shortest_path(paths: Iterable[Path], start: int, end: int) -> Optional[Path]:
    """Minimum-length path from ``start`` to ``end``; first found wins ties."""
    best: Optional[Path] = None
    for path in find_paths(paths, start, end):
        if best is None or path.length < best.length:
            best = path
    return best
