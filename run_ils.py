"""
Run Iterated Local Search on a random Euclidean instance.

Progress is logged to stderr and every new best tour is appended to a
Python turtle script that replays the search when executed.
"""

import argparse
import logging
import os
import sys
from typing import Optional

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from ils_tsp import (
    Instance,
    MinStdGenerator,
    RunConfig,
    TurtleScriptReporter,
    solve,
)


def _ask(text: str, value: Optional[int]) -> int:
    """Return value, or prompt for it on stdin when it was not given."""
    if value is not None:
        return value
    return int(input(text))


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Iterated Local Search for the TSP.")
    ap.add_argument("-k", "--iterations", type=int, default=None, help="Number of iterations of ILS")
    ap.add_argument("-l", "--strength", type=int, default=None, help="Perturbation strength")
    ap.add_argument("-n", "--vertices", type=int, default=None, help="Number of vertices")
    ap.add_argument("--seed", type=int, default=1, help="Generator seed")
    ap.add_argument("--max_coord", type=int, default=1000, help="Coordinate bound")
    ap.add_argument("--script", type=str, default="script.py", help="Turtle script output path")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log local search passes")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        config = RunConfig(
            iterations=_ask("Number of iterations of ILS (k): ", args.iterations),
            perturbation_strength=_ask("Perturbation strength (l): ", args.strength),
            num_vertices=_ask("Number of vertices: ", args.vertices),
            seed=args.seed,
            max_coord=args.max_coord,
            script_path=args.script,
        )
    except ValueError as e:
        ap.error(str(e))

    rng = MinStdGenerator(config.seed)
    instance = Instance(config.num_vertices, rng, max_coord=config.max_coord)

    with open(config.script_path, "w") as fd:
        reporter = TurtleScriptReporter(fd, instance)
        result = solve(config, reporter, instance=instance, rng=rng)

    print(f"Best tour length = {result.cost}; improvements = {len(result.improvements)}; "
          f"Time = {result.elapsed:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
