"""Search algorithms: 2-opt local search and Iterated Local Search."""

from .local_search import (
    LocalSearchStats,
    local_search,
    local_search_with_stats,
    is_two_opt_optimal,
    two_opt_benefits,
)
from .ils import ILSParams, ILSResult, Improvement, iterated_local_search, perturb

__all__ = [
    "LocalSearchStats",
    "local_search",
    "local_search_with_stats",
    "is_two_opt_optimal",
    "two_opt_benefits",
    "ILSParams",
    "ILSResult",
    "Improvement",
    "iterated_local_search",
    "perturb",
]
