import json
import logging

import networkx as nx

from .exceptions import ConfigError
from .graph import Graph

logger = logging.getLogger(__name__)

SECTIONS = ("graph", "genetic_params", "solver_params")


def get_default_config():
    return {
      "graph": {
        "edges": [
          [1, 3], [1, 4], [1, 5], [1, 9], [1, 10], [1, 11], [1, 13], [1, 14], [1, 16], [1, 20],
          [2, 4], [2, 7], [2, 10], [2, 12], [2, 13], [2, 15], [2, 18], [2, 19],
          [3, 6], [3, 12], [3, 13], [3, 17], [3, 18], [3, 20],
          [4, 6], [4, 7], [4, 11], [4, 13], [4, 15], [4, 16], [4, 17], [4, 18], [4, 19],
          [5, 6], [5, 7], [5, 10], [5, 11], [5, 15], [5, 16], [5, 17], [5, 18],
          [6, 12], [6, 13], [6, 19],
          [7, 8], [7, 9], [7, 10], [7, 12], [7, 13], [7, 17], [7, 18], [7, 19],
          [8, 10], [8, 11], [8, 12], [8, 13], [8, 14], [8, 15], [8, 19],
          [9, 11], [9, 13], [9, 17], [9, 18], [9, 19],
          [10, 12], [10, 13], [10, 15], [10, 19],
          [11, 13], [11, 18], [11, 20],
          [12, 14], [12, 15], [12, 16], [12, 17], [12, 20],
          [13, 15], [13, 16], [13, 17], [13, 19],
          [14, 15], [14, 16], [14, 19], [14, 20],
          [15, 16], [15, 17], [15, 18],
          [16, 18], [16, 20],
          [17, 18], [17, 19],
          [18, 19],
          [19, 20]
        ]
      },
      "genetic_params": {
        "population_size": 100, "generations": 200
      },
      "solver_params": {
        "algorithms": ["greedy", "dsatur", "welshPowell", "genetic"], "seed": None
      }
    }


def load_config(filepath):
    """Reads a JSON configuration; raises ConfigError when it is unusable."""
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {filepath}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file: {filepath} ({e})")

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration must be a JSON object, got {type(config).__name__}: {filepath}")
    for section in SECTIONS:
        if section in config and not isinstance(config[section], dict):
            raise ConfigError(f"'{section}' must be a JSON object, got {type(config[section]).__name__}")
    logger.info("Configuration loaded from: %s", filepath)
    return config


def create_graph_from_config(config):
    """Builds a Graph from ``config['graph']``.

    ``vertices`` is optional; without it vertices are ordered by their
    first appearance in ``edges``. Parallel edges collapse here because
    the edge list goes through a networkx graph.
    """
    graph_config = config.get('graph', {})
    if not isinstance(graph_config, dict):
        raise ConfigError(f"'graph' must be a JSON object, got {type(graph_config).__name__}")

    G = nx.Graph()
    try:
        G.add_nodes_from(graph_config.get('vertices', []))
        for edge in graph_config.get('edges', []):
            if len(edge) != 2:
                raise ConfigError(f"Edge must have exactly two endpoints: {edge!r}")
            G.add_edge(*edge)
    except TypeError as e:
        raise ConfigError(f"Unusable graph in configuration: {e}")
    logger.debug("Graph created: %d vertices, %d edges", G.number_of_nodes(), G.number_of_edges())
    return Graph.from_networkx(G)
