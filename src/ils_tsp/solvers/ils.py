"""
Iterated Local Search for the symmetric TSP.

Start from a random tour brought to a 2-opt local optimum, then for a
fixed number of rounds perturb the best tour with random swaps,
re-optimise it, and keep it only if it is strictly shorter.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.cost import CostMatrix
from ..core.rng import MinStdGenerator
from ..core.tour import Tour, build_random_tour
from ..reporting.reporters import TourReporter
from .local_search import local_search

logger = logging.getLogger(__name__)


@dataclass
class ILSParams:
    """
    Parameters for Iterated Local Search.

    Attributes:
        iterations: Number of perturb/re-optimise rounds (k)
        perturbation_strength: Random swaps applied per perturbation (l)
    """

    iterations: int = 100
    perturbation_strength: int = 3

    def __post_init__(self) -> None:
        if self.iterations < 0:
            raise ValueError("iterations must be non-negative")
        if self.perturbation_strength < 0:
            raise ValueError("perturbation_strength must be non-negative")


@dataclass
class Improvement:
    """
    A round whose result replaced the best tour.

    Attributes:
        iteration: Round index, starting at 0
        cost: New best length
        elapsed: Seconds spent in the round's local search
    """

    iteration: int
    cost: int
    elapsed: float


@dataclass
class ILSResult:
    """
    Outcome of an ILS run.

    Attributes:
        tour: Best tour found
        initial_cost: Length of the random starting tour
        initial_local_opt_cost: Length after the first local search
        improvements: Accepted rounds, in order
        iterations: Rounds performed
        elapsed: Total wall time in seconds
    """

    tour: Tour
    initial_cost: int
    initial_local_opt_cost: int
    improvements: List[Improvement] = field(default_factory=list)
    iterations: int = 0
    elapsed: float = 0.0

    @property
    def cost(self) -> int:
        return self.tour.cost


def perturb(tour: Tour, strength: int, rng: MinStdGenerator) -> None:
    """
    Apply random transpositions to a tour in place.

    Both positions are drawn independently, so a swap may be a no-op. The
    cost is left stale and must be recomputed by the caller.
    """
    n = tour.n
    for _ in range(strength):
        a = rng.next(n)
        b = rng.next(n)
        tour.swap(a, b)


def iterated_local_search(
    matrix: CostMatrix,
    params: ILSParams,
    rng: MinStdGenerator,
    reporter: Optional[TourReporter] = None,
) -> ILSResult:
    """
    Run Iterated Local Search.

    Args:
        matrix: Cost matrix
        params: ILS parameters
        rng: Sequence generator, used for the initial tour and perturbations
        reporter: Notified synchronously with (iteration, tour, cost) each
            time a strictly shorter tour is found

    Returns:
        ILSResult with the best tour found
    """
    start = time.perf_counter()

    best = build_random_tour(matrix, rng)
    initial_cost = best.cost
    logger.info("Initial tour length = %d", initial_cost)

    t0 = time.perf_counter()
    local_search(best, matrix)
    logger.info(
        "Tour length after GreedyLS = %d; Time = %.6fs", best.cost, time.perf_counter() - t0
    )

    result = ILSResult(tour=best, initial_cost=initial_cost, initial_local_opt_cost=best.cost)

    for i in range(params.iterations):
        cur = best.copy()
        perturb(cur, params.perturbation_strength, rng)
        cur.cost = matrix.tour_length(cur.order)

        t0 = time.perf_counter()
        local_search(cur, matrix)
        elapsed = time.perf_counter() - t0

        if cur.cost < best.cost:
            best = cur
            result.improvements.append(Improvement(iteration=i, cost=best.cost, elapsed=elapsed))
            logger.info(
                "New best found at iteration %d; Total length = %d; Time = %.6f",
                i, best.cost, elapsed,
            )
            if reporter is not None:
                reporter.report(i, best.as_list(), best.cost)

    result.tour = best
    result.iterations = params.iterations
    result.elapsed = time.perf_counter() - start
    return result
