from __future__ import annotations

import time

from .base import ColoringSolver
from .graph import ColoringResult, Graph


class GreedyColoring(ColoringSolver):
    """Largest-degree-first greedy coloring.

    Vertices are visited once, in descending degree order, and each gets
    the smallest color none of its already colored neighbours holds.
    """

    name = "Greedy"

    def solve(self) -> ColoringResult:
        if not self.graph.vertices:
            return ColoringResult.empty()

        start_time = time.perf_counter()
        coloring = {}
        for vertex in self._sorted_by_degree():
            self._check_cancelled()
            coloring[vertex.id] = self._get_first_legal_color(vertex.id, coloring)

        return self._result(coloring, max(coloring.values()) + 1, start_time)


def greedy_coloring(graph: Graph, cancel=None) -> ColoringResult:
    return GreedyColoring(graph, cancel=cancel).solve()
