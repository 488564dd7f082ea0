"""
Unit tests for graph_coloring.graph

Tests for:
    - Graph construction, adjacency and degree computation
    - Naive edge scan vs precomputed adjacency
    - Conflict helpers and ColoringResult
"""

import networkx as nx
import pytest

from graph_coloring import ColoringResult, Edge, Graph, GraphError, Vertex
from graph_coloring.graph import count_conflicts, distinct_colors, is_proper

from .conftest import make_graph


class TestGraphConstruction:

    def test_duplicate_vertex_ids_rejected(self):
        with pytest.raises(GraphError):
            Graph([Vertex("a"), Vertex("a")], [])

    def test_graph_error_is_value_error(self):
        with pytest.raises(ValueError):
            Graph([Vertex(1), Vertex(1)])

    def test_vertex_order_preserved(self):
        g = make_graph(["c", "a", "b"], [])
        assert g.vertex_ids() == ["c", "a", "b"]
        assert g.position("a") == 1

    def test_display_label_defaults_to_id(self):
        assert Vertex(7).display_label == "7"
        assert Vertex(7, label="seven").display_label == "seven"

    def test_from_edge_list_orders_by_first_appearance(self):
        g = Graph.from_edge_list([(3, 1), (1, 2)])
        assert g.vertex_ids() == [3, 1, 2]
        assert len(g.edges) == 2

    def test_from_edge_list_with_explicit_vertices(self):
        g = Graph.from_edge_list([(1, 2)], vertices=[2, 1, 5])
        assert g.vertex_ids() == [2, 1, 5]

    def test_networkx_conversion(self, triangle):
        G = triangle.to_networkx()
        assert G.number_of_nodes() == 3
        assert G.number_of_edges() == 3
        back = Graph.from_networkx(G)
        assert back.vertex_ids() == ["a", "b", "c"]

    def test_to_networkx_drops_dangling_edges(self, messy_graph):
        G = messy_graph.to_networkx()
        assert set(G.nodes()) == {1, 2, 3, 4}
        assert not G.has_node(99)

    def test_from_networkx_reads_coordinates(self):
        G = nx.Graph()
        G.add_node("p", x=1.5, y=-2.0, label="P")
        g = Graph.from_networkx(G)
        assert g.vertices[0] == Vertex("p", label="P", x=1.5, y=-2.0)


class TestAdjacency:

    def test_degrees_ignore_dangling_edges(self, messy_graph):
        # the duplicate 1-2 edge counts twice
        assert messy_graph.degrees() == {1: 3, 2: 3, 3: 2, 4: 2}

    def test_adjacency_matches_edge_scan(self, messy_graph, petersen):
        for g in (messy_graph, petersen):
            adj = g.adjacency()
            for vertex_id in g.vertex_ids():
                assert adj[vertex_id] == g.neighbors_by_scan(vertex_id)

    def test_self_loop_listed_once(self):
        g = make_graph(["a", "b"], [("a", "a"), ("a", "b")])
        assert g.adjacency()["a"] == ["a", "b"]
        assert g.neighbors_by_scan("a") == ["a", "b"]
        assert g.self_loops() == [Edge("a", "a")]

    def test_isolated_vertex_has_no_neighbors(self):
        g = make_graph(["a"], [])
        assert g.adjacency() == {"a": []}


class TestConflictHelpers:

    def test_count_conflicts(self, triangle):
        assert count_conflicts(triangle, {"a": 0, "b": 0, "c": 0}) == 3
        assert count_conflicts(triangle, {"a": 0, "b": 1, "c": 0}) == 1
        assert is_proper(triangle, {"a": 0, "b": 1, "c": 2})

    def test_count_conflicts_skips_uncolored_and_dangling(self, messy_graph):
        colors = {1: 0, 2: 1, 3: 0, 4: 0}
        # only 3-4 and 4-1 clash; 3-99 and 42-4 have no second color
        assert count_conflicts(messy_graph, colors) == 2

    def test_distinct_colors(self):
        assert distinct_colors({"a": 0, "b": 3, "c": 3}) == 2
        assert distinct_colors({}) == 0


class TestColoringResult:

    def test_colors_are_read_only(self):
        result = ColoringResult({"a": 0}, 1, 0.0, 1)
        with pytest.raises(TypeError):
            result.colors["a"] = 5

    def test_result_is_frozen(self):
        result = ColoringResult({"a": 0}, 1, 0.0, 1)
        with pytest.raises(AttributeError):
            result.chromatic_number = 2

    def test_conflict_count_defaults_to_zero(self):
        assert ColoringResult({}, 0, 0.0, 0).conflict_count == 0
        assert ColoringResult({}, 0, 0.0, 0, conflicts=4).conflict_count == 4

    def test_empty(self):
        result = ColoringResult.empty(conflicts=0)
        assert dict(result.colors) == {}
        assert (result.chromatic_number, result.elapsed, result.steps, result.conflicts) == (0, 0.0, 0, 0)

    def test_to_stats(self):
        stats = ColoringResult({"a": 0}, 1, 0.25, 9).to_stats("Greedy")
        assert stats.name == "Greedy"
        assert stats.conflicts == 0
        assert stats.steps == 9
