"""Annealer — the simulated-annealing driver.

The annealer owns the outer temperature loop and the inner
per-temperature loop.  At every inner step it perturbs a working copy of
the current solution, evaluates it, and decides whether to keep it:

* strictly better candidates are always kept;
* otherwise the acceptance function gives a probability ``p`` and a draw
  ``x`` from the random source in ``[0, 1)`` keeps the candidate iff
  ``p > x``.

The run ends when both loop bounds are consumed, or earlier when an accepted
cost falls below ``cost_reduction_tolerance * initial_cost``::

    annealer = Annealer(metropolis_acceptance(), geometric_schedule(0.95))
    result = annealer.run(tour, RunParameters(200, 50))
    print(result.final_cost, result.best)

Note that an early exit reports the solution that met the tolerance, while
a normal run reports the lowest-cost solution seen.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from annealkit.core.base import (
    AcceptanceFunction,
    CoolingSchedule,
    RunResult,
    clone_solution,
)
from annealkit.core.errors import ConfigurationError, NumericError
from annealkit.core.params import RunParameters
from annealkit.core.random_source import as_random_source, uniform_draw
from annealkit.core.state_machine import RunState, StateMachine
from annealkit.loggers.interface import LoggerInterface

logger = logging.getLogger(__name__)


class Annealer:
    """Simulated-annealing engine bound to a set of strategies.

    Attributes:
        acceptance_fn: ``(old_cost, new_cost, temperature) -> probability``.
        cooling_schedule: ``(outer_index) -> temperature``, or ``None`` to
            use the ``cooling_factor`` of the run parameters.
        random_source: Source for acceptance draws.  ``None`` means a fresh
            entropy-seeded source is created for every run.
        run_logger: Optional metrics logger receiving one record per
            temperature.
    """

    def __init__(
        self,
        acceptance_fn: AcceptanceFunction,
        cooling_schedule: Optional[CoolingSchedule] = None,
        random_source: Any = None,
        run_logger: Optional[LoggerInterface] = None,
    ) -> None:
        """Bind the annealer to its strategies.

        Args:
            acceptance_fn: Probability of keeping a candidate that is no
                better than the current solution.
            cooling_schedule: Temperature for each outer index.
            random_source: ``None``, an ``int`` seed, a numpy ``Generator``,
                or an object with ``next()`` and ``max()``.
            run_logger: Optional :class:`LoggerInterface` for per-temperature
                metrics.

        Raises:
            ConfigurationError: If a strategy has the wrong shape.
        """
        if not callable(acceptance_fn):
            raise ConfigurationError("acceptance_fn must be callable")
        if cooling_schedule is not None and not callable(cooling_schedule):
            raise ConfigurationError("cooling_schedule must be callable or None")

        self.acceptance_fn = acceptance_fn
        self.cooling_schedule = cooling_schedule
        self.random_source = (
            None if random_source is None else as_random_source(random_source)
        )
        self.run_logger = run_logger

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, initial_solution: Any, params: RunParameters) -> RunResult:
        """Anneal from *initial_solution* under *params*.

        The caller's *initial_solution* is never mutated.

        Args:
            initial_solution: Object with ``cost()`` and ``perturb()``.
            params: Run parameters.

        Returns:
            :class:`RunResult` for the run.

        Raises:
            ConfigurationError: If *params* or the strategies cannot drive a
                run.  Raised before any iteration.
            NumericError: If the initial cost is NaN, or early exit is
                enabled and the initial cost is zero or infinite.
        """
        params.validate()
        if self.cooling_schedule is None and params.cooling_factor is None:
            raise ConfigurationError(
                "no cooling schedule given and params.cooling_factor is unset"
            )

        sm = StateMachine()
        current = clone_solution(initial_solution)
        current_cost = current.cost()
        self._check_initial_cost(current_cost, params)

        rng = self.random_source
        if rng is None:
            rng = as_random_source(None)

        try:
            sm.transition(RunState.ANNEALING)
            if params.max_temperatures == 0 or params.iters_per_temperature == 0:
                logger.debug("Zero loop bound; returning the initial solution.")
                sm.transition(RunState.EXHAUSTED)
                return RunResult(
                    best=current,
                    final_cost=current_cost,
                    evaluations=0,
                    iterations=0,
                    state=sm.state,
                    initial_cost=current_cost,
                )
            return self._anneal(current, current_cost, params, rng, sm)
        finally:
            self._finish_logger()

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def _anneal(
        self,
        current: Any,
        current_cost: Any,
        params: RunParameters,
        rng: Any,
        sm: StateMachine,
    ) -> RunResult:
        initial_cost = current_cost
        best = clone_solution(current)
        best_cost = current_cost
        evaluations = 0
        tol = params.cost_reduction_tolerance
        temperature = 1.0

        for outer in range(params.max_temperatures):
            if self.cooling_schedule is not None:
                temperature = self.cooling_schedule(outer)
            else:
                temperature *= params.cooling_factor

            accepted_here = 0
            for inner in range(params.iters_per_temperature):
                candidate = clone_solution(current)
                candidate.perturb()
                candidate_cost = candidate.cost()
                evaluations += 1

                if candidate_cost < current_cost:
                    accepted = True
                    if candidate_cost < best_cost:
                        best = clone_solution(candidate)
                        best_cost = candidate_cost
                else:
                    p = self._acceptance_probability(
                        current_cost, candidate_cost, temperature, params.verbose
                    )
                    accepted = p > uniform_draw(rng)

                if not accepted:
                    continue

                if params.verbose:
                    logger.info(
                        "Accepted move at outer %d, inner %d: new cost %s (old %s)",
                        outer,
                        inner,
                        candidate_cost,
                        current_cost,
                    )
                current = candidate
                current_cost = candidate_cost
                accepted_here += 1

                if tol > 0 and current_cost / initial_cost < tol:
                    if params.verbose:
                        logger.info(
                            "Met cost reduction criterion at outer %d, inner %d.",
                            outer,
                            inner,
                        )
                    self._log_temperature(
                        outer, temperature, current_cost, best_cost,
                        accepted_here, evaluations,
                    )
                    sm.transition(RunState.EARLY_EXITED)
                    return RunResult(
                        best=current,
                        final_cost=current_cost,
                        evaluations=evaluations,
                        iterations=outer,
                        state=sm.state,
                        initial_cost=initial_cost,
                    )

            self._log_temperature(
                outer, temperature, current_cost, best_cost, accepted_here, evaluations
            )

        if params.verbose:
            logger.info(
                "Completed %d temperatures without meeting the cost reduction "
                "criterion; returning the best solution found.",
                params.max_temperatures,
            )

        if current_cost < best_cost:
            best, best_cost = current, current_cost

        sm.transition(RunState.EXHAUSTED)
        return RunResult(
            best=best,
            final_cost=best_cost,
            evaluations=evaluations,
            iterations=params.max_temperatures,
            state=sm.state,
            initial_cost=initial_cost,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _acceptance_probability(
        self, old_cost: Any, new_cost: Any, temperature: float, verbose: bool
    ) -> float:
        """Call the acceptance function, clamping non-finite output to 0."""
        p = self.acceptance_fn(old_cost, new_cost, temperature)
        try:
            p = float(p)
        except (TypeError, ValueError):
            p = math.nan
        if math.isfinite(p):
            return p

        log = logger.warning if verbose else logger.debug
        log(
            "Acceptance function returned %r for old=%s new=%s T=%s; rejecting.",
            p,
            old_cost,
            new_cost,
            temperature,
        )
        return 0.0

    @staticmethod
    def _check_initial_cost(cost: Any, params: RunParameters) -> None:
        try:
            value = float(cost)
        except (TypeError, ValueError) as exc:
            raise NumericError(f"initial cost {cost!r} is not a real number") from exc
        if math.isnan(value):
            raise NumericError("initial cost is NaN")
        if params.early_exit_enabled and (value == 0 or math.isinf(value)):
            raise NumericError(
                f"initial cost {cost!r} cannot be used with "
                f"cost_reduction_tolerance={params.cost_reduction_tolerance}"
            )

    def _log_temperature(
        self,
        outer: int,
        temperature: float,
        current_cost: Any,
        best_cost: Any,
        accepted: int,
        evaluations: int,
    ) -> None:
        if self.run_logger is None:
            return
        self.run_logger.log_metrics(
            step=outer,
            metrics={
                "temperature": float(temperature),
                "current_cost": float(current_cost),
                "best_cost": float(best_cost),
                "accepted": accepted,
                "evaluations": evaluations,
            },
        )

    def _finish_logger(self) -> None:
        if self.run_logger is not None:
            self.run_logger.finish()


def anneal(
    initial_solution: Any,
    params: RunParameters,
    acceptance_fn: AcceptanceFunction,
    cooling_schedule: Optional[CoolingSchedule] = None,
    random_source: Any = None,
    run_logger: Optional[LoggerInterface] = None,
) -> RunResult:
    """Run simulated annealing once.

    Functional shorthand for ``Annealer(...).run(initial_solution, params)``.

    Args:
        initial_solution: Object with ``cost()`` and ``perturb()``.
        params: Run parameters.
        acceptance_fn: ``(old_cost, new_cost, temperature) -> probability``.
        cooling_schedule: ``(outer_index) -> temperature``; ``None`` uses
            ``params.cooling_factor``.
        random_source: Optional random source or seed.  When omitted a fresh
            entropy-seeded generator is used for this run only.
        run_logger: Optional per-temperature metrics logger.

    Returns:
        :class:`RunResult` for the run.
    """
    annealer = Annealer(
        acceptance_fn,
        cooling_schedule=cooling_schedule,
        random_source=random_source,
        run_logger=run_logger,
    )
    return annealer.run(initial_solution, params)
