"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the graph_coloring tests.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ --quick            # Skip slow tests
"""

import json

import matplotlib
matplotlib.use("Agg")

import pytest

from graph_coloring import Edge, Graph, Vertex
from graph_coloring.dsatur import dsatur_coloring
from graph_coloring.greedy import greedy_coloring
from graph_coloring.welsh_powell import welsh_powell_coloring


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_addoption(parser):
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Graph Builders
# =============================================================================

def make_graph(vertex_ids, edge_pairs):
    return Graph([Vertex(v) for v in vertex_ids], [Edge(u, v) for u, v in edge_pairs])


def cycle(n, prefix="v"):
    ids = [f"{prefix}{i}" for i in range(n)]
    return make_graph(ids, [(ids[i], ids[(i + 1) % n]) for i in range(n)])


CONSTRUCTIVE = {
    "greedy": greedy_coloring,
    "welsh_powell": welsh_powell_coloring,
    "dsatur": dsatur_coloring,
}


@pytest.fixture(params=list(CONSTRUCTIVE))
def constructive(request):
    """Each of the three constructive colorers in turn."""
    return CONSTRUCTIVE[request.param]


# =============================================================================
# Graph Data Fixtures
# =============================================================================

@pytest.fixture
def empty_graph():
    return Graph()


@pytest.fixture
def triangle():
    return make_graph(["a", "b", "c"], [("a", "b"), ("b", "c"), ("c", "a")])


@pytest.fixture
def square():
    return cycle(4)


@pytest.fixture
def pentagon():
    return cycle(5)


@pytest.fixture
def k22():
    return make_graph(["l1", "l2", "r1", "r2"], [("l1", "r1"), ("l1", "r2"), ("l2", "r1"), ("l2", "r2")])


@pytest.fixture
def two_triangles():
    return make_graph(
        ["a", "b", "c", "x", "y", "z"],
        [("a", "b"), ("b", "c"), ("c", "a"), ("x", "y"), ("y", "z"), ("z", "x")],
    )


@pytest.fixture
def petersen():
    outer = [(i, (i + 1) % 5) for i in range(5)]
    spokes = [(i, i + 5) for i in range(5)]
    inner = [(5 + i, 5 + (i + 2) % 5) for i in range(5)]
    return make_graph(range(10), outer + spokes + inner)


@pytest.fixture
def messy_graph():
    """Duplicate edges and edges to vertices that do not exist."""
    return make_graph(
        [1, 2, 3, 4],
        [(1, 2), (1, 2), (2, 3), (3, 99), (42, 4), (3, 4), (4, 1)],
    )


@pytest.fixture
def triangle_config_file(tmp_path):
    path = tmp_path / "triangle.json"
    path.write_text(json.dumps({
        "graph": {"edges": [[1, 2], [2, 3], [3, 1]]},
        "genetic_params": {"population_size": 10, "generations": 5},
        "solver_params": {"seed": 3},
    }), encoding="utf-8")
    return path
