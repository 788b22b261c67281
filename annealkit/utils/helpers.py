"""General-purpose helper utilities used across annealkit modules."""

from __future__ import annotations

import os
from datetime import datetime


def timestamp_id() -> str:
    """Return a compact timestamp string suitable for run directory naming.

    Returns:
        A string like ``20260206_143021``.
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def ensure_dir(path: str) -> str:
    """Create *path* (and parents) if it does not exist yet.

    Args:
        path: Directory path to create.

    Returns:
        The same *path* for chaining convenience.
    """
    os.makedirs(path, exist_ok=True)
    return path
