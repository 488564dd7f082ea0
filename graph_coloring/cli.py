import argparse
import logging
import sys

from .benchmark import (ALGORITHMS, COMPARE_GENETIC, SINGLE_RUN_GENETIC, clique_lower_bound,
                        collect_statistics, compare_all, run_algorithm)
from .config import create_graph_from_config, get_default_config, load_config
from .exceptions import ColoringError, ConfigError


def build_parser():
    parser = argparse.ArgumentParser(
        prog="graph-coloring",
        description="Graph coloring with greedy, Welsh-Powell, DSatur and genetic algorithms.",
        epilog="""Examples:
  graph-coloring                          (all algorithms on the built-in graph)
  graph-coloring my_config.json -a dsatur (one algorithm on a graph from a file)
  graph-coloring --stats                  (statistics over 10 runs)
  graph-coloring --stats 50 --seed 7      (statistics over 50 seeded runs)""",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "config_file", type=str, nargs='?', default=None,
        help="Optional path to a JSON configuration file."
    )
    parser.add_argument(
        '-a', '--algorithm', choices=list(ALGORITHMS) + ['all'], default='all',
        help="Algorithm to run (default: all)."
    )
    parser.add_argument('--population-size', type=int, default=None, help="Genetic algorithm population size.")
    parser.add_argument('--generations', type=int, default=None, help="Genetic algorithm generation count.")
    parser.add_argument('--seed', type=int, default=None, help="Seed for the genetic algorithm.")
    parser.add_argument(
        '--stats', type=int, nargs='?', const=10, default=None,
        help="Collect statistics over N runs of every algorithm (default N: 10)."
    )
    parser.add_argument('--plot', action='store_true', help="Show the coloring in a matplotlib window.")
    parser.add_argument('--save-plot', type=str, default=None, metavar='PATH', help="Save the coloring figure.")
    parser.add_argument('-v', '--verbose', action='store_true', help="Debug logging.")
    return parser


def _print_result(name, result):
    print(f"+++ [{name}] Done. Colors: {result.chromatic_number}, conflicts: {result.conflict_count}, "
          f"steps: {result.steps}, time: {result.elapsed:.4f} s +++")


def _print_statistics(summary):
    print("\n" + "=" * 40)
    print("====== STATISTICS ======")
    print("=" * 40)
    for algorithm_id, row in summary.items():
        print(f"\nAlgorithm: {ALGORITHMS[algorithm_id]}")
        print(f"  Best chromatic number:   {row['best']}")
        print(f"  Mean chromatic number:   {row['mean']:.3f} ± {row['std']:.3f}")
        print(f"  Mean conflicts:          {row['mean_conflicts']:.3f}")
        print(f"  Conflict-free runs:      {row['proper_runs']}")
        print(f"  Mean execution time:     {row['mean_time']:.4f} s")


def _plot(graph, result, name, args):
    import matplotlib.pyplot as plt
    from .plotting import draw_coloring

    ax = draw_coloring(graph, result, title=f"{name}: {result.chromatic_number} colors, "
                                            f"{result.conflict_count} conflicts")
    if args.save_plot:
        ax.figure.savefig(args.save_plot)
        print(f"INFO: Figure saved to {args.save_plot}")
    if args.plot:
        plt.show()


def _pick(cli_value, config_section, key, default):
    if cli_value is not None:
        return cli_value
    return config_section.get(key, default)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.config_file:
            config = load_config(args.config_file)
            print(f"INFO: Configuration loaded from: {args.config_file}")
        else:
            config = get_default_config()
            print("INFO: Using the default configuration.")
        graph = create_graph_from_config(config)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    print(f"Graph created: {len(graph.vertices)} vertices, {len(graph.edges)} edges.")

    genetic_params = config.get('genetic_params', {})
    solver_params = config.get('solver_params', {})
    seed = _pick(args.seed, solver_params, 'seed', None)
    print(f"Lower bound (maximum clique size): {clique_lower_bound(graph)}")

    if args.algorithm == 'all':
        algorithm_ids = solver_params.get('algorithms', list(ALGORITHMS))
    else:
        algorithm_ids = [args.algorithm]
    defaults = COMPARE_GENETIC if args.stats is not None or len(algorithm_ids) > 1 else SINGLE_RUN_GENETIC
    population_size = _pick(args.population_size, genetic_params, 'population_size', defaults['population_size'])
    generations = _pick(args.generations, genetic_params, 'generations', defaults['generations'])

    last = None
    try:
        if args.stats is not None:
            print(f"Collecting statistics over {args.stats} runs...")
            _print_statistics(collect_statistics(graph, args.stats, population_size, generations, rng=seed))
            return 0

        if list(algorithm_ids) == list(ALGORITHMS) and not (args.plot or args.save_plot):
            print("\n--- [Compare all] Running every algorithm ---")
            for stats in compare_all(graph, population_size, generations, rng=seed):
                print(f"{stats.name:<20} colors={stats.chromatic_number:<4} conflicts={stats.conflicts:<4} "
                      f"steps={stats.steps:<8} time={stats.elapsed:.4f} s")
            return 0

        for algorithm_id in algorithm_ids:
            name = ALGORITHMS.get(algorithm_id, algorithm_id)
            print(f"\n--- [{name}] Running ---")
            result = run_algorithm(algorithm_id, graph, population_size, generations, rng=seed)
            _print_result(name, result)
            last = (name, result)
    except (ColoringError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if last is not None and (args.plot or args.save_plot):
        _plot(graph, last[1], last[0], args)
    return 0


if __name__ == '__main__':
    sys.exit(main())
