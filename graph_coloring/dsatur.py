from __future__ import annotations

import time
from typing import List

from .base import ColoringSolver
from .graph import ColoringResult, Graph, VertexId


class DSaturColoring(ColoringSolver):
    """DSatur: always color the most constrained uncolored vertex next.

    Saturation counts colored-neighbour edge incidences: every edge to a
    freshly colored vertex adds one, whether or not that color was already
    seen around the vertex. On simple graphs this equals the number of
    colored neighbours. Ties go to the larger degree, then to the vertex
    that comes first in the graph.
    """

    name = "DSatur"

    def __init__(self, graph: Graph, cancel=None):
        super().__init__(graph, cancel=cancel)
        self.order: List[VertexId] = []

    def _get_dsatur_node(self, uncolored, saturation):
        best = None
        best_key = (-1, -1)
        # uncolored is kept in graph order so the first maximum wins ties
        for node in uncolored:
            key = (saturation[node], self.degrees[node])
            if key > best_key:
                best, best_key = node, key
            self.steps += 1
        return best

    def solve(self) -> ColoringResult:
        if not self.graph.vertices:
            return ColoringResult.empty()

        start_time = time.perf_counter()
        saturation = {v.id: 0 for v in self.graph.vertices}
        uncolored = {v.id: None for v in self.graph.vertices}
        coloring = {}

        while uncolored:
            self._check_cancelled()
            current_node = self._get_dsatur_node(uncolored, saturation)
            self.order.append(current_node)
            coloring[current_node] = self._get_first_legal_color(current_node, coloring)
            del uncolored[current_node]

            self.steps += self.edge_count
            for neighbor in self.adj[current_node]:
                if neighbor in uncolored:
                    saturation[neighbor] += 1

        return self._result(coloring, max(coloring.values()) + 1, start_time)


def dsatur_coloring(graph: Graph, cancel=None) -> ColoringResult:
    return DSaturColoring(graph, cancel=cancel).solve()
