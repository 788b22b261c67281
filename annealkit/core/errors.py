"""Exception hierarchy for the annealing engine."""

from __future__ import annotations


class AnnealError(Exception):
    """Base class for all errors raised by annealkit."""


class ConfigurationError(AnnealError, ValueError):
    """Run configuration is unusable.

    Raised before the first iteration, so a run is never partially executed.
    """


class NumericError(ConfigurationError):
    """The initial cost cannot support the requested run.

    Tolerance-based early exit divides by the initial cost, so a zero or
    non-finite initial cost is rejected up front.
    """
