"""Shared test fixtures for the annealkit test suite."""

from __future__ import annotations

from typing import Iterable, List

import pytest

from annealkit.core.base import Solution


# ---------------------------------------------------------------------------
# Scripted solution: candidate costs come from a fixed sequence
# ---------------------------------------------------------------------------


class _Script:
    """Shared state between all copies of a ScriptedSolution."""

    def __init__(self, costs: Iterable[int]) -> None:
        self.costs: List[int] = list(costs)
        self.position = 0
        self.cost_calls = 0
        self.perturb_calls = 0


class ScriptedSolution(Solution):
    """Solution whose n-th perturbation yields the n-th scripted cost.

    All copies share one script, so the sequence of candidate costs the
    annealer sees is fixed regardless of which candidates it accepts.
    """

    def __init__(self, value: int, costs: Iterable[int] = ()) -> None:
        self.value = value
        self.script = _Script(costs)

    def cost(self) -> int:
        self.script.cost_calls += 1
        return self.value

    def perturb(self) -> None:
        script = self.script
        script.perturb_calls += 1
        self.value = script.costs[script.position % len(script.costs)]
        script.position += 1

    def copy(self) -> "ScriptedSolution":
        clone = type(self).__new__(type(self))
        clone.value = self.value
        clone.script = self.script
        return clone


class FixedRandomSource:
    """Random source that always returns the same draw."""

    def __init__(self, value: int = 0, upper: int = 99) -> None:
        self.value = value
        self.upper = upper
        self.calls = 0

    def next(self) -> int:
        self.calls += 1
        return self.value

    def max(self) -> int:
        return self.upper


def always_accept(old, new, temperature) -> float:
    return 1.0


def never_accept(old, new, temperature) -> float:
    return 0.0


def constant_schedule(k: int) -> float:
    return 1.0


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

SQUARE_XS = (0, 10, 0, 10)
SQUARE_YS = (0, 10, 10, 0)
SQUARE_OPTIMUM = 40


@pytest.fixture
def square_coords():
    """Four corners of a 10x10 square, ordered so the identity tour crosses."""
    return list(SQUARE_XS), list(SQUARE_YS)


@pytest.fixture
def fixed_rng() -> FixedRandomSource:
    """A random source whose draws scale to 0.0."""
    return FixedRandomSource(value=0)
