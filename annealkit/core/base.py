"""Solution interface, strategy signatures, and the run result container.

The engine never inspects a solution's internals.  It only needs to
evaluate it, perturb it, and take independent copies of it.  Anything that
offers ``cost()`` and ``perturb()`` works; :class:`Solution` exists for
callers who prefer an explicit base class.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Union

from annealkit.core.state_machine import RunState

Cost = Union[int, float]

AcceptanceFunction = Callable[[Cost, Cost, float], float]
"""``(old_cost, new_cost, temperature) -> probability`` of keeping a worse move."""

CoolingSchedule = Callable[[int], float]
"""``(outer_index) -> temperature``."""


class Solution(ABC):
    """Abstract candidate solution.

    Subclasses must implement :meth:`cost` and :meth:`perturb`.  The default
    :meth:`copy` deep-copies the object; override it when part of the state
    is immutable and can be shared between copies.
    """

    @abstractmethod
    def cost(self) -> Cost:
        """Return the cost of the current state.

        Must be a pure function of the state: two calls without an
        intervening :meth:`perturb` return the same value.
        """

    @abstractmethod
    def perturb(self) -> None:
        """Apply a small random modification in place."""

    def copy(self) -> "Solution":
        """Return an independent copy of this solution."""
        return copy.deepcopy(self)


def clone_solution(solution: Any) -> Any:
    """Copy *solution* using its own ``copy()`` when it has one.

    Args:
        solution: Any object satisfying the solution protocol.

    Returns:
        A copy unaffected by later mutation of *solution*.
    """
    copier = getattr(solution, "copy", None)
    if callable(copier):
        return copier()
    return copy.deepcopy(solution)


@dataclass(frozen=True)
class RunResult:
    """Outcome of a single annealing run.

    Attributes:
        best: The solution reported as the answer.  On a normal run this is
            the lowest-cost solution seen; on an early exit it is the
            solution that met the tolerance.
        final_cost: Cost of :attr:`best`.
        evaluations: Number of cost evaluations made by the loop (the
            initial evaluation is not counted).
        iterations: Outer (temperature) iterations completed.  On early
            exit this is the outer index at which the run stopped.
        state: Terminal state of the run.
        initial_cost: Cost of the solution the run started from.
    """

    best: Any
    final_cost: Cost
    evaluations: int
    iterations: int
    state: RunState = RunState.EXHAUSTED
    initial_cost: Cost = float("nan")

    @property
    def terminated_early(self) -> bool:
        """``True`` if the cost-reduction tolerance ended the run."""
        return self.state is RunState.EARLY_EXITED
