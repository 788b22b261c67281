"""Ready-made cooling schedules and acceptance functions.

Both are plain closures, so they can be swapped for any callable with the
same signature.
"""

from __future__ import annotations

import math
from typing import Any

from annealkit.core.base import AcceptanceFunction, CoolingSchedule
from annealkit.core.errors import ConfigurationError


def geometric_schedule(alpha: float, t0: float = 1.0) -> CoolingSchedule:
    """Temperature ``t0 * alpha ** k`` at outer index ``k``.

    Args:
        alpha: Decay factor in ``(0, 1)``.
        t0: Temperature at ``k == 0``.

    Raises:
        ConfigurationError: If *alpha* or *t0* is out of range.
    """
    if not 0.0 < alpha < 1.0:
        raise ConfigurationError(f"alpha must lie in (0, 1), got {alpha!r}")
    if t0 <= 0:
        raise ConfigurationError(f"t0 must be positive, got {t0!r}")

    def schedule(k: int) -> float:
        return t0 * alpha**k

    return schedule


def linear_schedule(t0: float, t_min: float, n_steps: int) -> CoolingSchedule:
    """Linear ramp from *t0* down to *t_min* over *n_steps* outer indices.

    Indices past the ramp stay at *t_min*.
    """
    if n_steps < 1:
        raise ConfigurationError(f"n_steps must be >= 1, got {n_steps!r}")
    if not 0 <= t_min <= t0:
        raise ConfigurationError(
            f"expected 0 <= t_min <= t0, got t_min={t_min!r}, t0={t0!r}"
        )
    step = (t0 - t_min) / n_steps

    def schedule(k: int) -> float:
        return max(t_min, t0 - step * k)

    return schedule


def metropolis_acceptance(scale: float = 1.0) -> AcceptanceFunction:
    """Metropolis criterion ``exp((old - new) / T / scale)``.

    *scale* brings cost deltas to the range of the temperature; with a
    schedule starting at 1.0 it should be on the order of a typical move's
    cost change.  A non-positive temperature gives probability 0.
    """
    if scale <= 0:
        raise ConfigurationError(f"scale must be positive, got {scale!r}")

    def acceptance(old: Any, new: Any, temperature: float) -> float:
        if temperature <= 0:
            return 0.0
        exponent = (float(old) - float(new)) / temperature / scale
        if exponent >= 0:
            return 1.0
        return math.exp(exponent)

    return acceptance
