"""
Tour representation for the symmetric TSP.

A tour is a permutation of the vertices [0, n-1] read cyclically: the
edge from the last vertex back to the first is part of the tour.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from .cost import CostMatrix
from .rng import MinStdGenerator


@dataclass
class Tour:
    """
    A cyclic vertex ordering and its total length.

    Attributes:
        order: Vertex indices in visit order
        cost: Total length under the cost matrix the tour was built for
    """

    order: np.ndarray
    cost: int

    def __post_init__(self) -> None:
        """Store the order as an owned int64 array."""
        self.order = np.array(self.order, dtype=np.int64)
        if self.order.ndim != 1:
            raise ValueError("order must be one-dimensional")
        self.cost = int(self.cost)

    def copy(self) -> "Tour":
        """Create a deep copy of this tour."""
        return Tour(order=self.order.copy(), cost=self.cost)

    @property
    def n(self) -> int:
        """Number of vertices in the tour."""
        return len(self.order)

    def swap(self, a: int, b: int) -> None:
        """Exchange the vertices at positions a and b (no-op when a == b)."""
        self.order[a], self.order[b] = self.order[b], self.order[a]

    def reverse(self, start: int, stop: int) -> None:
        """
        Reverse the segment of positions start..stop (inclusive).

        Positions are taken modulo n, so a segment may run past the end of
        the array and wrap around to position 0. The cost is not updated.
        """
        if stop <= start:
            return
        idx = np.arange(start, stop + 1) % self.n
        self.order[idx] = self.order[idx[::-1]]

    def is_permutation(self) -> bool:
        """Check that the tour visits every vertex exactly once."""
        n = self.n
        if n == 0:
            return False
        if self.order.min() < 0 or self.order.max() >= n:
            return False
        return len(np.unique(self.order)) == n

    def as_list(self) -> List[int]:
        """Vertex order as a plain list of ints."""
        return [int(v) for v in self.order]

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"Tour(n={self.n}, cost={self.cost})"


def build_random_tour(matrix: CostMatrix, rng: MinStdGenerator) -> Tour:
    """
    Build a uniformly random tour.

    The first vertex is drawn among all n, then each following vertex is
    drawn among the remaining candidates. Drawn candidates are replaced
    by the last remaining one, so every draw is a single call to the
    generator.

    Args:
        matrix: Cost matrix
        rng: Sequence generator

    Returns:
        Random tour with its exact length
    """
    n = matrix.n
    values = matrix.values
    cand = list(range(n))
    order = [0] * n

    order[0] = rng.next(n)
    cand[order[0]] = n - 1
    remaining = n - 1
    total = 0

    for i in range(1, n):
        j = rng.next(remaining)
        order[i] = cand[j]
        remaining -= 1
        cand[j] = cand[remaining]
        total += int(values[order[i - 1], order[i]])

    total += int(values[order[n - 1], order[0]])
    return Tour(order=order, cost=total)
