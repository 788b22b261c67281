"""Shared utility functions for the annealkit package."""

from annealkit.utils.helpers import ensure_dir, timestamp_id

__all__ = ["ensure_dir", "timestamp_id"]
