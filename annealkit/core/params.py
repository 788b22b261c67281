"""RunParameters — the immutable settings of one annealing run.

Parameters can be persisted as YAML alongside run artefacts and loaded back,
so a run can be repeated with exactly the same settings.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional

import yaml

from annealkit.core.errors import ConfigurationError


@dataclass(frozen=True)
class RunParameters:
    """Settings for a single annealing run.

    Attributes:
        max_temperatures: Number of temperatures (outer iterations).
        iters_per_temperature: Perturbations tried at each temperature.
        cooling_factor: Multiplicative decay in ``(0, 1)``.  Only used when
            no cooling schedule callable is given to the annealer.
        cost_reduction_tolerance: The run stops as soon as an accepted
            solution has ``cost / initial_cost`` below this value.  Zero or
            a negative value disables the check.
        verbose: Log every accepted move.  Has no effect on results.
    """

    max_temperatures: int
    iters_per_temperature: int
    cooling_factor: Optional[float] = None
    cost_reduction_tolerance: float = 0.0
    verbose: bool = False

    @property
    def early_exit_enabled(self) -> bool:
        """Whether the cost-reduction tolerance can end a run."""
        return self.cost_reduction_tolerance > 0

    def validate(self) -> "RunParameters":
        """Check every field and return ``self`` for chaining.

        Raises:
            ConfigurationError: If any field is out of range or of the
                wrong type.
        """
        for name in ("max_temperatures", "iters_per_temperature"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ConfigurationError(
                    f"{name} must be an integer, got {value!r}"
                )
            if value < 0:
                raise ConfigurationError(f"{name} must be >= 0, got {value}")

        if self.cooling_factor is not None:
            factor = self.cooling_factor
            if not isinstance(factor, numbers.Real) or not 0.0 < factor < 1.0:
                raise ConfigurationError(
                    f"cooling_factor must lie in (0, 1), got {factor!r}"
                )

        tol = self.cost_reduction_tolerance
        if (
            isinstance(tol, bool)
            or not isinstance(tol, numbers.Real)
            or not math.isfinite(tol)
        ):
            raise ConfigurationError(
                f"cost_reduction_tolerance must be a finite real number, got {tol!r}"
            )
        if not isinstance(self.verbose, bool):
            raise ConfigurationError(f"verbose must be a bool, got {self.verbose!r}")
        return self

    def replace(self, **changes: Any) -> "RunParameters":
        """Return a copy with *changes* applied."""
        return replace(self, **changes)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Convert the parameters to a plain dictionary.

        Returns:
            Serialisable dictionary.
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunParameters":
        """Build parameters from a mapping, rejecting unknown keys.

        Args:
            data: Mapping of field name to value.

        Returns:
            Validated :class:`RunParameters`.

        Raises:
            ConfigurationError: On unknown keys, missing loop bounds, or
                invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown run parameter(s): {', '.join(unknown)}")
        try:
            params = cls(**data)
        except TypeError as exc:
            raise ConfigurationError(str(exc)) from exc
        return params.validate()

    def to_yaml(self, path: str) -> None:
        """Write the parameters to a YAML file.

        Args:
            path: Target file path.
        """
        with open(path, "w", encoding="utf-8") as fh:
            yaml.dump(self.to_dict(), fh, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, path: str) -> "RunParameters":
        """Load :class:`RunParameters` from a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            Validated :class:`RunParameters`.
        """
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path}: expected a mapping of run parameters")
        return cls.from_dict(data)


# Reasonable starting point for small problems; tune per problem.
DEFAULT_PARAMS = RunParameters(
    max_temperatures=100,
    iters_per_temperature=500,
    cooling_factor=0.9,
    cost_reduction_tolerance=0.0001,
    verbose=False,
)
