"""Core layer — the annealing driver, its parameters, and its strategies."""

from annealkit.core.annealer import Annealer, anneal
from annealkit.core.base import (
    AcceptanceFunction,
    CoolingSchedule,
    RunResult,
    Solution,
    clone_solution,
)
from annealkit.core.errors import AnnealError, ConfigurationError, NumericError
from annealkit.core.params import DEFAULT_PARAMS, RunParameters
from annealkit.core.random_source import (
    NumpyRandomSource,
    RandomSource,
    as_random_source,
)
from annealkit.core.schedules import (
    geometric_schedule,
    linear_schedule,
    metropolis_acceptance,
)
from annealkit.core.state_machine import RunState, StateMachine

__all__ = [
    "AcceptanceFunction",
    "Annealer",
    "AnnealError",
    "ConfigurationError",
    "CoolingSchedule",
    "DEFAULT_PARAMS",
    "NumericError",
    "NumpyRandomSource",
    "RandomSource",
    "RunParameters",
    "RunResult",
    "RunState",
    "Solution",
    "StateMachine",
    "anneal",
    "as_random_source",
    "clone_solution",
    "geometric_schedule",
    "linear_schedule",
    "metropolis_acceptance",
]
