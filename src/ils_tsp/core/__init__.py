"""Core components: generator, cost matrix, tour."""

from .rng import MinStdGenerator
from .cost import CostMatrix
from .tour import Tour, build_random_tour

__all__ = ["MinStdGenerator", "CostMatrix", "Tour", "build_random_tour"]
