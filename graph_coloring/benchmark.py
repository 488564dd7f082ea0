"""
Side-by-side runs of the four colorers on one graph.

``compare_all`` is a single synchronous pass over the registry;
``collect_statistics`` repeats it and aggregates the numbers with numpy.
"""
from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Dict, List

import networkx as nx
import numpy as np

from .dsatur import dsatur_coloring
from .genetic import genetic_coloring
from .graph import AlgorithmStats, ColoringResult, Graph
from .greedy import greedy_coloring
from .welsh_powell import welsh_powell_coloring

logger = logging.getLogger(__name__)

ALGORITHMS = OrderedDict([
    ('greedy', "Greedy"),
    ('dsatur', "DSatur"),
    ('welshPowell', "Welsh-Powell"),
    ('genetic', "Genetic Algorithm"),
])

# single runs get a larger search than comparison runs
SINGLE_RUN_GENETIC = {'population_size': 100, 'generations': 200}
COMPARE_GENETIC = {'population_size': 50, 'generations': 100}


def run_algorithm(algorithm_id: str, graph: Graph, population_size=SINGLE_RUN_GENETIC['population_size'],
                  generations=SINGLE_RUN_GENETIC['generations'], rng=None, cancel=None) -> ColoringResult:
    if algorithm_id == 'greedy':
        return greedy_coloring(graph, cancel=cancel)
    elif algorithm_id == 'dsatur':
        return dsatur_coloring(graph, cancel=cancel)
    elif algorithm_id == 'welshPowell':
        return welsh_powell_coloring(graph, cancel=cancel)
    elif algorithm_id == 'genetic':
        return genetic_coloring(graph, population_size, generations, rng=rng, cancel=cancel)
    else:
        raise ValueError(f"Unknown algorithm: {algorithm_id!r} (expected one of {', '.join(ALGORITHMS)})")


def compare_all(graph: Graph, population_size=COMPARE_GENETIC['population_size'],
                generations=COMPARE_GENETIC['generations'], rng=None, cancel=None) -> List[AlgorithmStats]:
    if not graph.vertices:
        logger.info("Nothing to compare: graph has no vertices")
        return []

    rng = np.random.default_rng(rng)
    stats = []
    for algorithm_id, name in ALGORITHMS.items():
        result = run_algorithm(algorithm_id, graph, population_size, generations, rng=rng, cancel=cancel)
        stats.append(result.to_stats(name))
    return stats


def collect_statistics(graph: Graph, runs: int = 10, population_size=COMPARE_GENETIC['population_size'],
                       generations=COMPARE_GENETIC['generations'], rng=None) -> Dict[str, Dict[str, float]]:
    """Best / mean / std of every algorithm over ``runs`` repetitions."""
    if runs <= 0:
        raise ValueError(f"runs must be positive, got {runs}")

    rng = np.random.default_rng(rng)
    chromatic = {algorithm_id: [] for algorithm_id in ALGORITHMS}
    conflicts = {algorithm_id: [] for algorithm_id in ALGORITHMS}
    times = {algorithm_id: [] for algorithm_id in ALGORITHMS}

    for i in range(runs):
        logger.debug("Statistics run %d/%d", i + 1, runs)
        for algorithm_id in ALGORITHMS:
            result = run_algorithm(algorithm_id, graph, population_size, generations, rng=rng)
            chromatic[algorithm_id].append(result.chromatic_number)
            conflicts[algorithm_id].append(result.conflict_count)
            times[algorithm_id].append(result.elapsed)

    summary = OrderedDict()
    for algorithm_id in ALGORITHMS:
        chromatic_np = np.array(chromatic[algorithm_id])
        conflicts_np = np.array(conflicts[algorithm_id])
        times_np = np.array(times[algorithm_id])
        summary[algorithm_id] = {
            'best': int(np.min(chromatic_np)),
            'mean': float(np.mean(chromatic_np)),
            'std': float(np.std(chromatic_np)),
            'mean_conflicts': float(np.mean(conflicts_np)),
            'proper_runs': int(np.count_nonzero(conflicts_np == 0)),
            'mean_time': float(np.mean(times_np)),
        }
    return summary


def clique_lower_bound(graph: Graph) -> int:
    """Size of a maximum clique, a lower bound on the chromatic number."""
    if not graph.vertices:
        return 0
    G = graph.to_networkx()
    G.remove_edges_from(list(nx.selfloop_edges(G)))
    max_clique, _ = nx.algorithms.clique.max_weight_clique(G, weight=None)
    return len(max_clique)
