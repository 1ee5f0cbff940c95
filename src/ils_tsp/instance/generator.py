"""
Random Euclidean TSP instances.

Vertices are placed at integer coordinates drawn from the same sequence
generator that later drives the search, and edge costs are truncated
Euclidean distances.
"""

import math
from typing import List, Tuple

import numpy as np
import networkx as nx

from ..core.cost import CostMatrix
from ..core.rng import MinStdGenerator


class Instance:
    """
    A complete graph over pseudo-randomly placed points.

    Each node carries a ``pos`` attribute and each edge a ``cost``
    attribute. The cost of a self-loop is the sentinel ``max_coord ** 2``,
    which exceeds every real edge (at most ``max_coord * sqrt(2)``).

    Attributes:
        max_coord: Coordinates are drawn in [0, max_coord - 1]
    """

    def __init__(self, num_vertices: int, rng: MinStdGenerator, *, max_coord: int = 1000):
        """
        Generate an instance.

        Args:
            num_vertices: Number of vertices
            rng: Sequence generator (advanced by two draws per vertex)
            max_coord: Exclusive upper bound of each coordinate
        """
        self._validate_parameters(num_vertices, max_coord)
        self.max_coord = max_coord

        positions: List[Tuple[int, int]] = []
        for _ in range(num_vertices):
            x = rng.next(max_coord)
            y = rng.next(max_coord)
            positions.append((x, y))

        self._graph = nx.complete_graph(num_vertices)
        for v, pos in enumerate(positions):
            self._graph.nodes[v]["pos"] = pos
        for u, v in self._graph.edges:
            (x1, y1), (x2, y2) = positions[u], positions[v]
            self._graph.edges[u, v]["cost"] = math.isqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)

    @staticmethod
    def _validate_parameters(num_vertices: int, max_coord: int) -> None:
        """Validate input parameters."""
        if num_vertices < 1:
            raise ValueError("num_vertices must be at least 1")
        if max_coord < 1:
            raise ValueError("max_coord must be at least 1")

    @property
    def num_vertices(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def sentinel(self) -> int:
        """Cost assigned to self-loops."""
        return self.max_coord * self.max_coord

    @property
    def positions(self) -> List[Tuple[int, int]]:
        """(x, y) coordinates, indexed by vertex."""
        return [self._graph.nodes[v]["pos"] for v in range(self.num_vertices)]

    @property
    def graph(self) -> nx.Graph:
        """Return a copy of the underlying graph."""
        return nx.Graph(self._graph)

    def cost_matrix(self) -> CostMatrix:
        """Build the cost matrix, with the sentinel on the diagonal."""
        values = nx.to_numpy_array(
            self._graph,
            nodelist=list(range(self.num_vertices)),
            weight="cost",
            nonedge=self.sentinel,
            dtype=np.int64,
        )
        return CostMatrix(values)

    def __repr__(self) -> str:
        return f"Instance(n={self.num_vertices}, max_coord={self.max_coord})"
