"""Shared fixtures: small hand-made cost matrices."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest
from ils_tsp.core.cost import CostMatrix


SENTINEL = 100


@pytest.fixture
def rectangle():
    """
    Corners of a 4 x 3 rectangle, in order around the perimeter.

    0=(0,0), 1=(4,0), 2=(4,3), 3=(0,3); sides 4 and 3, diagonals 5.
    """
    return CostMatrix([
        [SENTINEL, 4, 5, 3],
        [4, SENTINEL, 3, 5],
        [5, 3, SENTINEL, 4],
        [3, 5, 4, SENTINEL],
    ])
