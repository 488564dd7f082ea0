from __future__ import annotations

import logging
import time
from typing import Dict, List, Optional

from .exceptions import ColoringCancelled
from .graph import ColoringResult, Graph, Vertex, VertexId

logger = logging.getLogger(__name__)


class ColoringSolver:
    """Shared state of one solver run.

    A solver instance owns its working state (adjacency, degrees, step
    counter) for a single ``solve()``; the input graph is only read.
    ``cancel`` is anything with ``is_set()``, e.g. ``threading.Event``.
    """

    name = "Coloring"

    def __init__(self, graph: Graph, cancel=None):
        self.graph = graph
        self.cancel = cancel
        self.adj = graph.adjacency()
        self.degrees = {node: len(neighbors) for node, neighbors in self.adj.items()}
        self.edge_count = len(graph.edges)
        self.steps = 0
        self_loops = graph.self_loops()
        if self_loops:
            logger.warning("[%s] graph has %d self-loop(s); self-loops are unsupported input",
                           self.name, len(self_loops))

    def _check_cancelled(self):
        if self.cancel is not None and self.cancel.is_set():
            raise ColoringCancelled(self.name, self.steps)

    def _sorted_by_degree(self) -> List[Vertex]:
        # sorted() is stable: equal degrees keep the input order
        return sorted(self.graph.vertices, key=lambda v: self.degrees[v.id], reverse=True)

    def _neighbor_colors(self, node: VertexId, coloring: Dict[VertexId, int]) -> set:
        # charged as a full edge scan
        self.steps += self.edge_count
        return {coloring[neighbor] for neighbor in self.adj[node] if neighbor in coloring}

    def _get_first_legal_color(self, node: VertexId, coloring: Dict[VertexId, int]) -> int:
        neighbor_colors = self._neighbor_colors(node, coloring)
        color = 0
        while color in neighbor_colors:
            color += 1
            self.steps += 1
        return color

    def _result(self, coloring: Dict[VertexId, int], chromatic_number: int, start_time: float,
                conflicts: Optional[int] = None) -> ColoringResult:
        duration = time.perf_counter() - start_time
        ordered = {v.id: coloring[v.id] for v in self.graph.vertices}
        logger.debug("[%s] %d vertices, %d colors, %d steps, %.4f s",
                     self.name, len(ordered), chromatic_number, self.steps, duration)
        return ColoringResult(ordered, chromatic_number, duration, self.steps, conflicts)

    def solve(self) -> ColoringResult:
        raise NotImplementedError
