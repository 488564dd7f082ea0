from __future__ import annotations

import logging
import numbers
import time
from typing import List

import numpy as np

from .base import ColoringSolver
from .exceptions import InvalidParameterError
from .graph import ColoringResult, Graph

logger = logging.getLogger(__name__)

MAX_INITIAL_COLORS = 10
ELITE_FRACTION = 0.1
MUTATION_RATE = 0.1
COLOR_PENALTY = 0.1


class Chromosome:
    __slots__ = ('genes', 'conflicts', 'fitness')

    def __init__(self, genes, conflicts, fitness):
        self.genes = genes
        self.conflicts = conflicts
        self.fitness = fitness


def _check_parameters(population_size, generations):
    if isinstance(population_size, bool) or not isinstance(population_size, numbers.Integral):
        raise InvalidParameterError(f"population_size must be an integer, got {population_size!r}")
    if isinstance(generations, bool) or not isinstance(generations, numbers.Integral):
        raise InvalidParameterError(f"generations must be an integer, got {generations!r}")
    if population_size <= 0:
        raise InvalidParameterError(f"population_size must be positive, got {population_size}")
    if generations < 0:
        raise InvalidParameterError(f"generations must be non-negative, got {generations}")


class GeneticColoring(ColoringSolver):
    """Population-based search over complete colorings.

    Genes follow the graph's vertex order. Each generation keeps the top
    10% unchanged, then breeds the rest from parents drawn out of the
    better half: uniform crossover followed by a repair mutation that
    moves a gene to the smallest color its neighbours leave free. The
    winner is the chromosome with the fewest conflicts, then the highest
    fitness; it may still contain conflicts.
    """

    name = "Genetic Algorithm"

    def __init__(self, graph: Graph, population_size=50, generations=100, rng=None, cancel=None):
        _check_parameters(population_size, generations)
        super().__init__(graph, cancel=cancel)
        self.population_size = int(population_size)
        self.generations = int(generations)
        self.rng = np.random.default_rng(rng)
        self.num_nodes = len(graph.vertices)
        self.best_fitness_history: List[float] = []

        # edge endpoints as gene indices, dangling edges dropped
        pairs = [(graph.position(e.source), graph.position(e.target)) for e in graph.edges
                 if graph.has_vertex(e.source) and graph.has_vertex(e.target)]
        self.edge_u = np.array([u for u, _ in pairs], dtype=np.int64)
        self.edge_v = np.array([v for _, v in pairs], dtype=np.int64)
        self.neighbor_idx = [[graph.position(n) for n in self.adj[v.id]] for v in graph.vertices]

    def _count_conflicts(self, genes) -> int:
        if self.edge_u.size == 0:
            return 0
        return int(np.count_nonzero(genes[self.edge_u] == genes[self.edge_v]))

    def _evaluate(self, genes) -> Chromosome:
        conflicts = self._count_conflicts(genes)
        colors_used = len(np.unique(genes))
        fitness = 1.0 / (1.0 + conflicts + COLOR_PENALTY * colors_used)
        self.steps += 1
        return Chromosome(genes, conflicts, fitness)

    def _random_chromosome(self) -> Chromosome:
        max_initial_colors = min(MAX_INITIAL_COLORS, self.num_nodes)
        return self._evaluate(self.rng.integers(0, max_initial_colors, size=self.num_nodes))

    def _crossover(self, parent1, parent2):
        take_first = self.rng.random(self.num_nodes) < 0.5
        return np.where(take_first, parent1.genes, parent2.genes)

    def _mutate(self, genes):
        # repairs see the genes already rewritten earlier in this pass
        for i in np.flatnonzero(self.rng.random(self.num_nodes) < MUTATION_RATE):
            neighbor_colors = {int(genes[j]) for j in self.neighbor_idx[i]}
            color = 0
            while color in neighbor_colors:
                color += 1
            genes[i] = color
        return genes

    def _select_parent(self, population):
        return population[int(self.rng.random() * (self.population_size / 2))]

    def _select_best(self, population):
        # fewest conflicts first, fitness only breaks ties
        return sorted(population, key=lambda c: (c.conflicts, -c.fitness))[0]

    def _next_generation(self, population):
        population = sorted(population, key=lambda c: c.fitness, reverse=True)
        self.best_fitness_history.append(population[0].fitness)

        elite_count = int(self.population_size * ELITE_FRACTION)
        new_population = population[:elite_count]
        while len(new_population) < self.population_size:
            parent1 = self._select_parent(population)
            parent2 = self._select_parent(population)
            child = self._mutate(self._crossover(parent1, parent2))
            new_population.append(self._evaluate(child))
        return new_population

    def solve(self) -> ColoringResult:
        if not self.graph.vertices:
            return ColoringResult.empty(conflicts=0)

        start_time = time.perf_counter()
        population = [self._random_chromosome() for _ in range(self.population_size)]

        for gen in range(self.generations):
            self._check_cancelled()
            population = self._next_generation(population)
            logger.debug("[%s] generation %d: parent best fitness %.4f", self.name, gen + 1,
                         self.best_fitness_history[-1])

        self.best_fitness_history.append(max(c.fitness for c in population))
        best = self._select_best(population)
        coloring = {v.id: int(best.genes[i]) for i, v in enumerate(self.graph.vertices)}
        return self._result(coloring, len(set(coloring.values())), start_time, conflicts=best.conflicts)


def genetic_coloring(graph: Graph, population_size=50, generations=100, rng=None, cancel=None) -> ColoringResult:
    return GeneticColoring(graph, population_size, generations, rng=rng, cancel=cancel).solve()
