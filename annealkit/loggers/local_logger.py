"""LocalFileLogger — JSON-lines metrics logger for annealing runs.

Writes one JSON object per temperature to ``metrics.json`` inside the run
directory and copies artefact files (parameter snapshots, result dumps)
next to it.  Needs no external service.
"""

from __future__ import annotations

import json
import os
import shutil
from typing import Any, Dict, List, Optional

from annealkit.loggers.interface import LoggerInterface


class LocalFileLogger(LoggerInterface):
    """Logger that persists metrics and artifacts to the local file system.

    Attributes:
        run_dir: Directory where logs and artifacts are stored.
        runs_finished: Number of runs that called :meth:`finish`.
    """

    def __init__(self, run_dir: str = "artifacts/runs") -> None:
        """Initialise the logger, creating *run_dir* if needed.

        Args:
            run_dir: Target directory for metrics and artifact files.
        """
        os.makedirs(run_dir, exist_ok=True)
        self.run_dir = run_dir
        self.runs_finished = 0
        self._metrics_path = os.path.join(run_dir, "metrics.json")

    @property
    def metrics_path(self) -> str:
        """Path of the JSON-lines metrics file."""
        return self._metrics_path

    def log_metrics(self, step: int, metrics: Dict[str, float]) -> None:
        """Append a metrics record as a JSON line.

        Args:
            step: Outer (temperature) index.
            metrics: Metric name → scalar value mapping.
        """
        record = {"run": self.runs_finished, "step": step, **metrics}
        with open(self._metrics_path, "a", encoding="utf-8") as fh:
            fh.write(json.dumps(record) + "\n")

    def log_artifact(
        self, path: str, metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Copy an artifact file into the run directory.

        Args:
            path: Source file path.
            metadata: Ignored by the local logger.
        """
        if not os.path.isfile(path):
            return  # missing artifacts are skipped
        dest = os.path.join(self.run_dir, os.path.basename(path))
        if os.path.abspath(dest) != os.path.abspath(path):
            shutil.copy2(path, dest)

    def finish(self) -> None:
        """Mark the current run as complete; later records get a new run id."""
        self.runs_finished += 1

    def read_metrics(self) -> List[Dict[str, Any]]:
        """Read all logged metrics from the JSON-lines file.

        Returns:
            List of metric records (dicts).
        """
        if not os.path.isfile(self._metrics_path):
            return []
        records = []
        with open(self._metrics_path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if line:
                    records.append(json.loads(line))
        return records
