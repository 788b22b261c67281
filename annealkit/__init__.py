"""annealkit — a generic simulated-annealing engine.

The engine is problem-agnostic: callers supply a candidate solution with
``cost()`` / ``perturb()``, an acceptance function, and a cooling schedule.
"""

__version__ = "0.1.0"

from annealkit.core import (
    DEFAULT_PARAMS,
    Annealer,
    AnnealError,
    ConfigurationError,
    NumericError,
    RunParameters,
    RunResult,
    RunState,
    Solution,
    anneal,
)

__all__ = [
    "DEFAULT_PARAMS",
    "Annealer",
    "AnnealError",
    "ConfigurationError",
    "NumericError",
    "RunParameters",
    "RunResult",
    "RunState",
    "Solution",
    "anneal",
    "__version__",
]
