"""Unit tests for the travelling-salesman example problem."""

from __future__ import annotations

import numpy as np
import pytest
from conftest import SQUARE_OPTIMUM

from annealkit.core.base import Solution, clone_solution
from annealkit.problems.tour import (
    DEMO_XS,
    DEMO_YS,
    Tour,
    brute_force_cost,
    random_cities,
)


class TestTour:
    def test_identity_tour(self, square_coords) -> None:
        tour = Tour(*square_coords, random_source=0)
        assert tour.visited == [0, 1, 2, 3, 0]
        assert isinstance(tour, Solution)

    def test_cost_floors_each_leg(self, square_coords) -> None:
        # two diagonals of length 14.14... floor to 14 each
        tour = Tour(*square_coords, random_source=0)
        assert tour.cost() == 14 + 10 + 14 + 10

    def test_optimal_order(self, square_coords) -> None:
        tour = Tour(*square_coords, random_source=0)
        tour.visited = [0, 2, 1, 3, 0]
        assert tour.cost() == SQUARE_OPTIMUM

    def test_perturb_keeps_a_closed_permutation(self) -> None:
        tour = Tour(list(DEMO_XS), list(DEMO_YS), random_source=1)
        for _ in range(200):
            tour.perturb()
            assert tour.visited[0] == 0 and tour.visited[-1] == 0
            assert sorted(tour.visited[:-1]) == list(range(tour.num_cities))

    def test_perturb_swaps_exactly_two(self) -> None:
        tour = Tour(list(DEMO_XS), list(DEMO_YS), random_source=2)
        before = list(tour.visited)
        tour.perturb()
        changed = [i for i, (a, b) in enumerate(zip(before, tour.visited)) if a != b]
        assert len(changed) == 2

    @pytest.mark.parametrize("n", [1, 2])
    def test_small_tours_do_not_change(self, n: int) -> None:
        tour = Tour([0, 5][:n], [0, 5][:n], random_source=0)
        before = list(tour.visited)
        tour.perturb()
        assert tour.visited == before

    def test_copy_is_independent(self) -> None:
        tour = Tour(list(DEMO_XS), list(DEMO_YS), random_source=4)
        cost = tour.cost()
        clone = clone_solution(tour)
        for _ in range(10):
            clone.perturb()
        assert tour.cost() == cost
        assert clone.visited != tour.visited

    def test_copy_shares_coordinates(self) -> None:
        tour = Tour(list(DEMO_XS), list(DEMO_YS), random_source=4)
        clone = tour.copy()
        assert clone.coords is tour.coords
        assert not tour.coords.flags.writeable

    def test_mismatched_coordinates(self) -> None:
        with pytest.raises(ValueError, match="same length"):
            Tour([0, 1], [0])

    def test_empty(self) -> None:
        with pytest.raises(ValueError):
            Tour([], [])

    def test_repr(self, square_coords) -> None:
        assert "cities=4" in repr(Tour(*square_coords, random_source=0))


class TestInstances:
    def test_demo_instance(self) -> None:
        assert len(DEMO_XS) == len(DEMO_YS) == 41

    def test_brute_force(self, square_coords) -> None:
        assert brute_force_cost(*square_coords) == SQUARE_OPTIMUM

    def test_random_cities_seeded(self) -> None:
        xs1, ys1 = random_cities(8, seed=3)
        xs2, ys2 = random_cities(8, seed=3)
        assert xs1 == xs2 and ys1 == ys2
        assert len(xs1) == 8
        assert all(0 <= v < 1000 for v in np.concatenate([xs1, ys1]))
