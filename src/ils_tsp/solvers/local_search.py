"""
Greedy 2-opt local search.

Best-improvement variant: every pass scans the whole 2-opt neighbourhood,
applies only the single best improving move, and starts over. The search
stops at the first pass without a strictly positive benefit.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..core.cost import CostMatrix
from ..core.tour import Tour

logger = logging.getLogger(__name__)


@dataclass
class LocalSearchStats:
    """
    Counters collected during one local search run.

    Attributes:
        passes: Number of full neighbourhood scans
        moves: Number of 2-opt moves applied
        gain: Total length removed from the tour
    """

    passes: int = 0
    moves: int = 0
    gain: int = 0


def _row_benefits(i: int, order: np.ndarray, nxt: np.ndarray, edge: np.ndarray,
                  values: np.ndarray) -> np.ndarray:
    """Benefits of the moves (i, j) for j = i+2..n, in scan order."""
    n = len(order)
    cols = np.arange(i + 2, n + 1) % n
    return (
        edge[i]
        + edge[cols]
        - values[order[i], order[cols]]
        - values[nxt[i], nxt[cols]]
    )


def two_opt_benefits(order: np.ndarray, matrix: CostMatrix) -> np.ndarray:
    """
    Compute the benefit of every 2-opt move of a tour.

    Row i and column j hold the length saved by replacing edges
    (t[i], t[i+1]) and (t[j], t[j+1]) with (t[i], t[j]) and
    (t[i+1], t[j+1]), indices modulo n. Columns run over j = 0..n so that
    row-major order is the (i, j) scan order; pairs outside j >= i + 2
    are set to 0 and can never be selected.

    Args:
        order: Vertex order of the tour
        matrix: Cost matrix

    Returns:
        Integer array of shape (n, n + 1)
    """
    values = matrix.values
    n = len(order)
    nxt = np.roll(order, -1)
    edge = values[order, nxt]

    benefit = np.zeros((n, n + 1), dtype=np.int64)
    for i in range(n - 1):
        benefit[i, i + 2:] = _row_benefits(i, order, nxt, edge, values)
    return benefit


def best_two_opt_move(order: np.ndarray, matrix: CostMatrix) -> Tuple[int, int, int]:
    """
    Find the best 2-opt move of a tour.

    Rows are scored one at a time, so extra memory stays linear in n. A
    row only replaces the current best on a strictly larger benefit, and
    argmax returns the first maximum within a row, so the first pair in
    scan order wins ties.

    Returns:
        Tuple of (i, j, benefit); benefit <= 0 means no improving move
    """
    values = matrix.values
    n = len(order)
    nxt = np.roll(order, -1)
    edge = values[order, nxt]

    best_i, best_j, best = 0, 0, 0
    for i in range(n - 1):
        row = _row_benefits(i, order, nxt, edge, values)
        k = int(np.argmax(row))
        if row[k] > best:
            best_i, best_j, best = i, i + 2 + k, int(row[k])
    return best_i, best_j, best


def local_search_with_stats(tour: Tour, matrix: CostMatrix) -> Tuple[Tour, LocalSearchStats]:
    """
    Run 2-opt local search to a local optimum.

    The tour is modified in place and its cost is updated incrementally.

    Args:
        tour: Tour to improve (owned by the caller, mutated)
        matrix: Cost matrix

    Returns:
        Tuple of (the same tour, statistics)
    """
    stats = LocalSearchStats()

    while True:
        stats.passes += 1
        i, j, benefit = best_two_opt_move(tour.order, matrix)
        if benefit <= 0:
            break

        tour.reverse(i + 1, j)
        tour.cost -= benefit
        stats.moves += 1
        stats.gain += benefit

    logger.debug(
        "2-opt converged after %d passes, %d moves, length %d",
        stats.passes, stats.moves, tour.cost,
    )
    return tour, stats


def local_search(tour: Tour, matrix: CostMatrix) -> Tour:
    """Improve a tour in place until no 2-opt move shortens it."""
    return local_search_with_stats(tour, matrix)[0]


def is_two_opt_optimal(tour: Tour, matrix: CostMatrix) -> bool:
    """Check that no single 2-opt move strictly improves the tour."""
    return best_two_opt_move(tour.order, matrix)[2] <= 0
