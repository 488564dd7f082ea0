from __future__ import annotations

import time

from .base import ColoringSolver
from .graph import ColoringResult, Graph


class WelshPowellColoring(ColoringSolver):
    """Welsh-Powell: build one independent color class per pass.

    Each pass walks the degree-sorted vertices and admits an uncolored
    vertex when none of its neighbours was admitted earlier in the same
    pass. The chromatic number is the number of passes.
    """

    name = "Welsh-Powell"

    def solve(self) -> ColoringResult:
        if not self.graph.vertices:
            return ColoringResult.empty()

        start_time = time.perf_counter()
        sorted_vertices = self._sorted_by_degree()
        coloring = {}
        current_color = 0

        while len(coloring) < len(sorted_vertices):
            self._check_cancelled()
            color_class = []
            members = set()
            for vertex in sorted_vertices:
                if vertex.id in coloring:
                    continue
                self.steps += self.edge_count
                if not any(neighbor in members for neighbor in self.adj[vertex.id]):
                    color_class.append(vertex.id)
                    members.add(vertex.id)

            for node in color_class:
                coloring[node] = current_color
            current_color += 1
            self.steps += 1

        return self._result(coloring, current_color, start_time)


def welsh_powell_coloring(graph: Graph, cancel=None) -> ColoringResult:
    return WelshPowellColoring(graph, cancel=cancel).solve()
