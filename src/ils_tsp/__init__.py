"""
ILS-TSP

Iterated Local Search with a best-improvement 2-opt kernel for the
symmetric Travelling Salesman Problem over pseudo-randomly placed points.
"""

from .core.rng import MinStdGenerator
from .core.cost import CostMatrix
from .core.tour import Tour, build_random_tour
from .instance.generator import Instance
from .solvers.local_search import local_search, is_two_opt_optimal
from .solvers.ils import ILSParams, ILSResult, iterated_local_search
from .reporting import (
    TourReporter,
    RecordingReporter,
    MultiReporter,
    TurtleScriptReporter,
)
from .config import RunConfig, solve

__version__ = "1.0.0"

__all__ = [
    "MinStdGenerator",
    "CostMatrix",
    "Tour",
    "build_random_tour",
    "Instance",
    "local_search",
    "is_two_opt_optimal",
    "ILSParams",
    "ILSResult",
    "iterated_local_search",
    "TourReporter",
    "RecordingReporter",
    "MultiReporter",
    "TurtleScriptReporter",
    "RunConfig",
    "solve",
]
