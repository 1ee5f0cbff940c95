"""
Tour reporters: sinks notified each time the search finds a new best tour.
"""

from typing import List, Protocol, Sequence, Tuple


class TourReporter(Protocol):
    """Receives (iteration, tour, cost) for every strict improvement."""

    def report(self, iteration: int, tour: Sequence[int], cost: int) -> None:
        ...


class RecordingReporter:
    """
    Keep every reported improvement in memory.

    Attributes:
        events: List of (iteration, tour, cost) tuples in report order
    """

    def __init__(self):
        self.events: List[Tuple[int, List[int], int]] = []

    def report(self, iteration: int, tour: Sequence[int], cost: int) -> None:
        self.events.append((iteration, list(tour), cost))

    @property
    def costs(self) -> List[int]:
        return [cost for _, _, cost in self.events]

    def __len__(self) -> int:
        return len(self.events)


class MultiReporter:
    """Forward each report to several reporters, in order."""

    def __init__(self, *reporters: TourReporter):
        self.reporters = list(reporters)

    def report(self, iteration: int, tour: Sequence[int], cost: int) -> None:
        for r in self.reporters:
            r.report(iteration, tour, cost)
