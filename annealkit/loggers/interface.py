"""LoggerInterface — abstract base for run metric loggers.

The annealer reports one metrics record per temperature through this
interface, so any backend implementing it can follow a run.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class LoggerInterface(ABC):
    """Abstract logger interface.

    Subclasses must implement :meth:`log_metrics` and :meth:`log_artifact`.
    """

    @abstractmethod
    def log_metrics(self, step: int, metrics: Dict[str, float]) -> None:
        """Log scalar metrics at a given step.

        Args:
            step: Outer (temperature) index.
            metrics: Mapping of metric name → scalar value.
        """

    @abstractmethod
    def log_artifact(
        self, path: str, metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log an artifact file (parameter snapshot, result dump, etc.).

        Args:
            path: Local file path of the artifact.
            metadata: Optional metadata to attach.
        """

    def finish(self) -> None:
        """Finalise the logging session.

        Called once when a run ends.  The default implementation is a no-op.
        """
