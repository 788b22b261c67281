"""Uniform integer random sources used for acceptance draws.

A random source exposes ``next()`` (a uniform integer in ``[0, max()]``) and
``max()``.  The engine scales draws to ``[0, 1)`` itself, so any generator
with a known upper bound can be plugged in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import numpy as np

from annealkit.core.errors import ConfigurationError

_UINT32_MAX = 2**32 - 1


class RandomSource(ABC):
    """Abstract uniform integer generator with a known maximum."""

    @abstractmethod
    def next(self) -> int:
        """Return the next integer, uniform in ``[0, max()]``."""

    @abstractmethod
    def max(self) -> int:
        """Return the largest value :meth:`next` can produce."""

    def uniform(self) -> float:
        """Return a float uniform in ``[0, 1)``."""
        return uniform_draw(self)

    def randbelow(self, n: int) -> int:
        """Return an integer in ``[0, n)`` scaled from :meth:`next`."""
        return randbelow(self, n)


class NumpyRandomSource(RandomSource):
    """32-bit Mersenne Twister source backed by :mod:`numpy.random`.

    Attributes:
        seed: Seed the generator was created with, or ``None`` when it was
            seeded from OS entropy.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = np.random.Generator(np.random.MT19937(seed))

    @classmethod
    def from_generator(cls, generator: np.random.Generator) -> "NumpyRandomSource":
        """Wrap an existing numpy generator without reseeding it."""
        src = cls.__new__(cls)
        src.seed = None
        src._rng = generator
        return src

    def next(self) -> int:
        return int(self._rng.integers(0, _UINT32_MAX, endpoint=True))

    def max(self) -> int:
        return _UINT32_MAX


def uniform_draw(source: Any) -> float:
    """Scale one draw from *source* into ``[0, 1)``."""
    return source.next() / (source.max() + 1)


def randbelow(source: Any, n: int) -> int:
    """Return an integer in ``[0, n)`` from one draw of *source*."""
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    return min(int(uniform_draw(source) * n), n - 1)


def as_random_source(obj: Any = None) -> Any:
    """Resolve *obj* into something with ``next()`` / ``max()``.

    Args:
        obj: ``None`` for a fresh entropy-seeded source, an ``int`` seed,
            a :class:`numpy.random.Generator`, or an object already
            implementing the random-source protocol.

    Returns:
        A random source.

    Raises:
        ConfigurationError: If *obj* cannot be used as a random source.
    """
    if obj is None:
        return NumpyRandomSource()
    if isinstance(obj, bool):
        raise ConfigurationError("random source must not be a bool")
    if isinstance(obj, (int, np.integer)):
        return NumpyRandomSource(int(obj))
    if isinstance(obj, np.random.Generator):
        return NumpyRandomSource.from_generator(obj)
    if callable(getattr(obj, "next", None)) and callable(getattr(obj, "max", None)):
        upper = obj.max()
        if upper <= 0:
            raise ConfigurationError(
                f"random source max() must be positive, got {upper!r}"
            )
        return obj
    raise ConfigurationError(
        f"cannot use {type(obj).__name__} as a random source; "
        "expected next() and max() methods"
    )
