"""Loggers — per-temperature run metrics with a local JSON-lines backend."""

from annealkit.loggers.interface import LoggerInterface
from annealkit.loggers.local_logger import LocalFileLogger

__all__ = ["LoggerInterface", "LocalFileLogger"]
