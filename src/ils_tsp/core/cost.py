"""
Cost matrix for the symmetric TSP.

The diagonal holds a sentinel larger than any real edge so that self-loops
never win a 2-opt comparison.
"""

from typing import Sequence

import numpy as np


class CostMatrix:
    """
    Read-only, validated n x n integer cost table.

    Values are stored as int64 so that a tour length (at most n times the
    largest edge) stays well within range.
    """

    def __init__(self, values):
        """
        Initialize the cost matrix.

        Args:
            values: Square, symmetric, non-negative integer table
                (nested sequences or a numpy array)
        """
        arr = np.asarray(values)
        self._validate_values(arr)

        self._values = arr.astype(np.int64, copy=True)
        self._values.setflags(write=False)

    @staticmethod
    def _validate_values(arr: np.ndarray) -> None:
        """Validate shape, type, sign, symmetry and the diagonal sentinel."""
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"cost matrix must be square, got shape {arr.shape}")
        if arr.shape[0] < 1:
            raise ValueError("cost matrix must have at least one vertex")
        if arr.dtype.kind not in "iu":
            if arr.dtype.kind != "f" or not np.all(np.isfinite(arr)) or not np.all(arr == np.floor(arr)):
                raise ValueError("cost matrix must hold integer values")
        if np.any(arr < 0):
            raise ValueError("cost matrix must be non-negative")
        if not np.array_equal(arr, arr.T):
            raise ValueError("cost matrix must be symmetric")
        n = arr.shape[0]
        # Self-loops must never win a 2-opt comparison
        if n > 1 and np.diag(arr).min() <= arr[~np.eye(n, dtype=bool)].max():
            raise ValueError("cost matrix diagonal must exceed every edge cost")

    @property
    def n(self) -> int:
        """Number of vertices."""
        return self._values.shape[0]

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the underlying table."""
        return self._values

    def cost(self, i: int, j: int) -> int:
        """Cost of edge (i, j)."""
        return int(self._values[i, j])

    def tour_length(self, order: Sequence[int]) -> int:
        """
        Compute the length of a cyclic tour from scratch.

        Args:
            order: Vertex sequence; the last vertex connects back to the first

        Returns:
            Sum of consecutive edge costs including the wrap-around edge
        """
        order = np.asarray(order, dtype=np.int64)
        return int(self._values[order, np.roll(order, -1)].sum())

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"CostMatrix(n={self.n})"
