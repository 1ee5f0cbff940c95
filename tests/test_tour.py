"""Tests for the tour model and random construction."""

import numpy as np
import pytest

from ils_tsp.core.cost import CostMatrix
from ils_tsp.core.rng import MinStdGenerator
from ils_tsp.core.tour import Tour, build_random_tour
from ils_tsp.instance.generator import Instance


def test_copy_does_not_alias():
    t = Tour(order=[0, 1, 2], cost=10)
    c = t.copy()
    c.swap(0, 2)
    c.cost = 3
    assert t.as_list() == [0, 1, 2]
    assert t.cost == 10


def test_swap_same_position_is_noop():
    t = Tour(order=[2, 0, 1], cost=0)
    t.swap(1, 1)
    assert t.as_list() == [2, 0, 1]


def test_reverse_inner_segment():
    t = Tour(order=[0, 1, 2, 3, 4, 5], cost=0)
    t.reverse(1, 4)
    assert t.as_list() == [0, 4, 3, 2, 1, 5]


def test_reverse_wraps_to_position_zero():
    """Segment 3..5 covers positions 3, 4 and 0."""
    t = Tour(order=[0, 1, 2, 3, 4], cost=0)
    t.reverse(3, 5)
    assert t.as_list() == [3, 1, 2, 0, 4]


def test_reverse_empty_segment():
    t = Tour(order=[0, 1, 2], cost=0)
    t.reverse(2, 2)
    t.reverse(2, 1)
    assert t.as_list() == [0, 1, 2]


@pytest.mark.parametrize(
    "order, expected",
    [
        ([0, 1, 2], True),
        ([2, 0, 1], True),
        ([0, 0, 2], False),
        ([0, 1, 3], False),
        ([-1, 0, 1], False),
        ([], False),
    ],
)
def test_is_permutation(order, expected):
    assert Tour(order=order, cost=0).is_permutation() is expected


def test_order_is_owned_array():
    src = np.array([1, 0, 2])
    t = Tour(order=src, cost=0)
    t.swap(0, 1)
    assert src.tolist() == [1, 0, 2]
    assert t.order.dtype == np.int64


def test_random_tour_draw_sequence(rectangle):
    """First vertex from n candidates, then from the shrinking candidate array."""
    rng = MinStdGenerator(1)
    # Draws: 16807 % 4 = 3, 282475249 % 3 = 1, 1622650073 % 2 = 1
    # cand [0,1,2,3] -> pick 3, cand [0,1,2] -> pick 1, cand [0,2] -> pick 2, then 0
    tour = build_random_tour(rectangle, rng)
    assert tour.as_list() == [3, 1, 2, 0]
    assert tour.cost == rectangle.tour_length([3, 1, 2, 0])


def test_random_tour_single_vertex():
    m = CostMatrix([[50]])
    tour = build_random_tour(m, MinStdGenerator(3))
    assert tour.as_list() == [0]
    assert tour.cost == 50


@pytest.mark.parametrize("n", [1, 2, 3, 10, 57])
@pytest.mark.parametrize("seed", [1, 99, 123456])
def test_random_tour_is_permutation_with_exact_cost(n, seed):
    rng = MinStdGenerator(seed)
    matrix = Instance(n, rng).cost_matrix()
    tour = build_random_tour(matrix, rng)
    assert tour.n == n
    assert tour.is_permutation()
    assert tour.cost == matrix.tour_length(tour.order)


def test_random_tour_is_deterministic():
    matrix = Instance(30, MinStdGenerator(5)).cost_matrix()
    a = build_random_tour(matrix, MinStdGenerator(11))
    b = build_random_tour(matrix, MinStdGenerator(11))
    assert a.as_list() == b.as_list()
    assert a.cost == b.cost


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
