"""Quick-start demo for annealkit.

Anneals a number-partitioning problem: split a list of weights into two
groups whose sums are as close as possible.  Shows how to plug a custom
solution, acceptance function and cooling schedule into the engine.

Run it with:
    python examples/quick_run.py
"""

from __future__ import annotations

import os
import sys
from typing import List

# Ensure the repo root is on sys.path so annealkit can be imported without
# installation (useful for quick experiments).
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from annealkit import RunParameters, Solution, anneal
from annealkit.core import NumpyRandomSource, geometric_schedule, metropolis_acceptance
from annealkit.loggers import LocalFileLogger


class Partition(Solution):
    """Assignment of each weight to side 0 or side 1."""

    def __init__(self, weights: List[int], rng: NumpyRandomSource) -> None:
        self.weights = weights
        self.sides = [0] * len(weights)
        self.rng = rng

    def cost(self) -> int:
        total = sum(w if s else -w for w, s in zip(self.weights, self.sides))
        return abs(total)

    def perturb(self) -> None:
        i = self.rng.randbelow(len(self.weights))
        self.sides[i] ^= 1

    def copy(self) -> "Partition":
        clone = Partition(self.weights, self.rng)
        clone.sides = list(self.sides)
        return clone


def main() -> None:
    """Partition a fixed set of weights and print the result."""
    rng = NumpyRandomSource(seed=7)
    weights = [rng.randbelow(1000) + 1 for _ in range(40)]
    start = Partition(weights, rng)

    params = RunParameters(
        max_temperatures=150,
        iters_per_temperature=200,
        cost_reduction_tolerance=0.0,
    )
    logger = LocalFileLogger(run_dir="artifacts/quick_demo_logs")

    result = anneal(
        start,
        params,
        metropolis_acceptance(scale=50.0),
        cooling_schedule=geometric_schedule(0.95),
        random_source=11,
        run_logger=logger,
    )

    print(f"Initial imbalance: {result.initial_cost}")
    print(f"Final imbalance:   {result.final_cost}")
    print(f"Evaluations:       {result.evaluations}")
    print(f"Metrics written to {logger.metrics_path}")


if __name__ == "__main__":
    main()
