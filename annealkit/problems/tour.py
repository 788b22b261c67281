"""Tour — a travelling-salesman solution for the annealing engine.

A tour visits every city once in a closed loop that starts and ends at
city 0.  Its cost is the sum of the floored Euclidean lengths of its legs,
and a perturbation swaps two cities at distinct interior positions.

City coordinates are stored once as a read-only numpy array and shared by
every copy of a tour; only the visiting order is copied.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from annealkit.core.base import Solution
from annealkit.core.random_source import as_random_source, randbelow

logger = logging.getLogger(__name__)

# Reference 41-city instance used by the CLI demo.
DEMO_XS: Tuple[int, ...] = (
    0, 194, 908, 585, 666, 76, 633, 963, 789, 117, 409, 257, 229, 334, 837,
    382, 921, 54, 959, 532, 934, 720, 117, 519, 933, 408, 750, 465, 790,
    983, 605, 314, 272, 902, 340, 827, 915, 483, 466, 451, 698,
)
DEMO_YS: Tuple[int, ...] = (
    0, 956, 906, 148, 196, 59, 672, 801, 752, 620, 65, 747, 377, 608, 374,
    841, 910, 903, 743, 477, 794, 973, 555, 496, 152, 52, 3, 174, 890, 861,
    790, 430, 149, 674, 780, 507, 187, 931, 503, 435, 569,
)


class Tour(Solution):
    """Closed tour over a fixed set of cities.

    Attributes:
        coords: ``(n, 2)`` integer array of city coordinates (read-only,
            shared between copies).
        visited: Visiting order of length ``n + 1``; the first and last
            entries are always city 0.
    """

    def __init__(
        self,
        xs: Sequence[int],
        ys: Sequence[int],
        random_source: Any = None,
    ) -> None:
        """Create the identity tour ``0, 1, ..., n-1, 0``.

        Args:
            xs: x-coordinates, one per city.
            ys: y-coordinates, one per city.
            random_source: Source used to pick swap positions.  Shared with
                every copy of this tour.

        Raises:
            ValueError: If the coordinate lists differ in length or are
                empty.
        """
        if len(xs) != len(ys):
            raise ValueError(
                f"xs and ys must have the same length, got {len(xs)} and {len(ys)}"
            )
        if len(xs) == 0:
            raise ValueError("a tour needs at least one city")

        coords = np.column_stack([np.asarray(xs), np.asarray(ys)]).astype(np.int64)
        coords.setflags(write=False)
        self.coords = coords
        self.visited: List[int] = list(range(len(xs))) + [0]
        self._rng = as_random_source(random_source)

    @property
    def num_cities(self) -> int:
        return int(self.coords.shape[0])

    def cost(self) -> int:
        order = np.asarray(self.visited)
        legs = np.diff(self.coords[order], axis=0)
        return int(np.floor(np.hypot(legs[:, 0], legs[:, 1])).sum())

    def perturb(self) -> None:
        """Swap the cities at two distinct random interior positions.

        Tours with fewer than three cities have no two distinct interior
        positions and are left unchanged.
        """
        n = self.num_cities
        if n < 3:
            return
        i = 1 + randbelow(self._rng, n - 1)
        j = i
        while j == i:
            j = 1 + randbelow(self._rng, n - 1)
        self.visited[i], self.visited[j] = self.visited[j], self.visited[i]

    def copy(self) -> "Tour":
        clone = Tour.__new__(Tour)
        clone.coords = self.coords
        clone.visited = list(self.visited)
        clone._rng = self._rng
        return clone

    def __repr__(self) -> str:
        return f"Tour(cities={self.num_cities}, cost={self.cost()})"


def random_cities(
    n: int, seed: Optional[int] = None, extent: int = 1000
) -> Tuple[List[int], List[int]]:
    """Draw *n* integer city coordinates uniformly from ``[0, extent)``.

    Returns:
        ``(xs, ys)`` lists.
    """
    rng = np.random.default_rng(seed)
    pts = rng.integers(0, extent, size=(n, 2))
    return pts[:, 0].tolist(), pts[:, 1].tolist()


def brute_force_cost(xs: Sequence[int], ys: Sequence[int]) -> int:
    """Exact optimal tour cost by enumeration.

    Only practical for a handful of cities; used to check annealing runs
    against a known optimum.
    """
    tour = Tour(xs, ys, random_source=0)
    n = tour.num_cities
    best: Optional[int] = None
    for perm in itertools.permutations(range(1, n)):
        tour.visited = [0, *perm, 0]
        c = tour.cost()
        if best is None or c < best:
            best = c
    logger.debug("Brute-force optimum over %d cities: %s", n, best)
    return tour.cost() if best is None else best
