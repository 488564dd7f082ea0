from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple

import networkx as nx

from .exceptions import GraphError

VertexId = Hashable


@dataclass(frozen=True)
class Vertex:
    id: VertexId
    label: Optional[str] = None
    # display coordinates, never read by the solvers
    x: float = 0.0
    y: float = 0.0

    @property
    def display_label(self) -> str:
        return self.label if self.label is not None else str(self.id)


@dataclass(frozen=True)
class Edge:
    source: VertexId
    target: VertexId

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


class Graph:
    """Ordered vertices plus an edge list.

    Vertex order is significant: it is the tie-break basis for every
    degree sort and the gene order of genetic chromosomes. Edges may
    repeat or name vertices that do not exist; both are tolerated by
    the solvers. Self-loops are not supported.
    """

    def __init__(self, vertices: Iterable[Vertex] = (), edges: Iterable[Edge] = ()):
        self.vertices: Tuple[Vertex, ...] = tuple(vertices)
        self.edges: Tuple[Edge, ...] = tuple(edges)
        self._index = {}
        for position, vertex in enumerate(self.vertices):
            if vertex.id in self._index:
                raise GraphError(f"Duplicate vertex id: {vertex.id!r}")
            self._index[vertex.id] = position

    def __len__(self):
        return len(self.vertices)

    def __repr__(self):
        return f"Graph(vertices={len(self.vertices)}, edges={len(self.edges)})"

    def vertex_ids(self) -> List[VertexId]:
        return [v.id for v in self.vertices]

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return vertex_id in self._index

    def position(self, vertex_id: VertexId) -> int:
        return self._index[vertex_id]

    def adjacency(self) -> Dict[VertexId, List[VertexId]]:
        """One neighbour entry per incident edge, in edge order.

        Dangling edges are dropped and a self-loop is listed once, so
        ``len(adj[v])`` is the same degree the naive edge scan counts.
        """
        adj: Dict[VertexId, List[VertexId]] = {v.id: [] for v in self.vertices}
        for edge in self.edges:
            u, v = edge.source, edge.target
            if u not in adj or v not in adj:
                continue
            adj[u].append(v)
            if u != v:
                adj[v].append(u)
        return adj

    def degrees(self) -> Dict[VertexId, int]:
        return {vertex_id: len(neighbors) for vertex_id, neighbors in self.adjacency().items()}

    def neighbors_by_scan(self, vertex_id: VertexId) -> List[VertexId]:
        neighbors = []
        for edge in self.edges:
            if not (self.has_vertex(edge.source) and self.has_vertex(edge.target)):
                continue
            if edge.source == vertex_id:
                neighbors.append(edge.target)
            elif edge.target == vertex_id:
                neighbors.append(edge.source)
        return neighbors

    def self_loops(self) -> List[Edge]:
        return [e for e in self.edges if e.is_self_loop and self.has_vertex(e.source)]

    @classmethod
    def from_edge_list(cls, edges: Iterable[Sequence[VertexId]],
                       vertices: Optional[Iterable[VertexId]] = None) -> "Graph":
        edge_objs = [Edge(pair[0], pair[1]) for pair in edges]
        if vertices is None:
            seen = {}
            for e in edge_objs:
                seen.setdefault(e.source, None)
                seen.setdefault(e.target, None)
            vertices = list(seen)
        return cls([Vertex(v) for v in vertices], edge_objs)

    @classmethod
    def from_networkx(cls, nx_graph: nx.Graph) -> "Graph":
        vertices = []
        for node, data in nx_graph.nodes(data=True):
            vertices.append(Vertex(node, label=data.get('label'), x=data.get('x', 0.0), y=data.get('y', 0.0)))
        return cls(vertices, [Edge(u, v) for u, v in nx_graph.edges()])

    def to_networkx(self) -> nx.Graph:
        G = nx.Graph()
        for v in self.vertices:
            G.add_node(v.id, label=v.display_label, x=v.x, y=v.y)
        G.add_edges_from((e.source, e.target) for e in self.edges
                         if self.has_vertex(e.source) and self.has_vertex(e.target))
        return G


def count_conflicts(graph: Graph, colors: Mapping[VertexId, int]) -> int:
    """Edges whose two endpoints are both colored with the same color."""
    conflicts = 0
    for edge in graph.edges:
        c1 = colors.get(edge.source)
        c2 = colors.get(edge.target)
        if c1 is not None and c2 is not None and c1 == c2:
            conflicts += 1
    return conflicts


def distinct_colors(colors: Mapping[VertexId, int]) -> int:
    return len(set(colors.values()))


def is_proper(graph: Graph, colors: Mapping[VertexId, int]) -> bool:
    return count_conflicts(graph, colors) == 0


@dataclass(frozen=True)
class AlgorithmStats:
    name: str
    chromatic_number: int
    elapsed: float
    steps: int
    conflicts: int


@dataclass(frozen=True)
class ColoringResult:
    colors: Mapping[VertexId, int]
    chromatic_number: int
    elapsed: float
    steps: int
    conflicts: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, 'colors', MappingProxyType(dict(self.colors)))

    @property
    def conflict_count(self) -> int:
        return self.conflicts or 0

    @classmethod
    def empty(cls, conflicts: Optional[int] = None) -> "ColoringResult":
        return cls({}, 0, 0.0, 0, conflicts)

    def to_stats(self, name: str) -> AlgorithmStats:
        return AlgorithmStats(name, self.chromatic_number, self.elapsed, self.steps, self.conflict_count)
