"""
Run configuration and the end-to-end solve pipeline.
"""

from dataclasses import dataclass
from typing import Optional

from .core.rng import MinStdGenerator
from .instance.generator import Instance
from .reporting.reporters import TourReporter
from .solvers.ils import ILSParams, ILSResult, iterated_local_search


@dataclass(frozen=True)
class RunConfig:
    """
    Parameters of a single run, fixed for its whole duration.

    Attributes:
        iterations: Number of ILS rounds (k)
        perturbation_strength: Random swaps per perturbation (l)
        num_vertices: Number of vertices (n)
        seed: Initial state of the sequence generator
        max_coord: Exclusive upper bound of vertex coordinates
        script_path: Where the turtle script is written
    """

    iterations: int
    perturbation_strength: int
    num_vertices: int
    seed: int = 1
    max_coord: int = 1000
    script_path: str = "script.py"

    def __post_init__(self) -> None:
        if self.num_vertices < 1:
            raise ValueError("num_vertices must be at least 1")
        if self.max_coord < 1:
            raise ValueError("max_coord must be at least 1")
        # Constructors validate the remaining fields
        MinStdGenerator(self.seed)
        ILSParams(self.iterations, self.perturbation_strength)

    @property
    def ils_params(self) -> ILSParams:
        return ILSParams(
            iterations=self.iterations,
            perturbation_strength=self.perturbation_strength,
        )


def build_instance(config: RunConfig, rng: MinStdGenerator) -> Instance:
    """Generate the instance described by a configuration."""
    return Instance(config.num_vertices, rng, max_coord=config.max_coord)


def solve(
    config: RunConfig,
    reporter: Optional[TourReporter] = None,
    *,
    instance: Optional[Instance] = None,
    rng: Optional[MinStdGenerator] = None,
) -> ILSResult:
    """
    Generate an instance and run ILS on it.

    A single generator drives both instance generation and the search, so
    a configuration fully determines the result.

    Args:
        config: Run configuration
        reporter: Optional sink for improvements
        instance: Pre-built instance (its generator must be passed as rng)
        rng: Generator to use instead of one seeded from config.seed

    Returns:
        ILSResult of the run
    """
    if instance is not None and rng is None:
        raise ValueError("a pre-built instance must come with the generator that built it")
    if rng is None:
        rng = MinStdGenerator(config.seed)
    if instance is None:
        instance = build_instance(config, rng)

    return iterated_local_search(instance.cost_matrix(), config.ils_params, rng, reporter)
