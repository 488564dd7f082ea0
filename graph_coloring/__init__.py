from .dsatur import DSaturColoring, dsatur_coloring
from .exceptions import ColoringCancelled, ColoringError, ConfigError, GraphError, InvalidParameterError
from .genetic import GeneticColoring, genetic_coloring
from .graph import (AlgorithmStats, ColoringResult, Edge, Graph, Vertex, count_conflicts,
                    distinct_colors, is_proper)
from .greedy import GreedyColoring, greedy_coloring
from .welsh_powell import WelshPowellColoring, welsh_powell_coloring

__version__ = "0.1.0"

__all__ = [
    'AlgorithmStats', 'ColoringResult', 'Edge', 'Graph', 'Vertex',
    'count_conflicts', 'distinct_colors', 'is_proper',
    'ColoringError', 'ColoringCancelled', 'ConfigError', 'GraphError', 'InvalidParameterError',
    'GreedyColoring', 'greedy_coloring',
    'WelshPowellColoring', 'welsh_powell_coloring',
    'DSaturColoring', 'dsatur_coloring',
    'GeneticColoring', 'genetic_coloring',
]
