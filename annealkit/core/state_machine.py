"""Lifecycle state machine for an annealing run.

A run is linear: it initialises, anneals, and ends either because the
cost-reduction tolerance was met or because both loop bounds were consumed.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List


class RunState(Enum):
    """Possible states of an annealing run."""

    INITIALIZING = "initializing"
    ANNEALING = "annealing"
    EARLY_EXITED = "early_exited"
    EXHAUSTED = "exhausted"


# Allowed transitions encoded as adjacency list
_TRANSITIONS: Dict[RunState, List[RunState]] = {
    RunState.INITIALIZING: [RunState.ANNEALING],
    RunState.ANNEALING: [RunState.EARLY_EXITED, RunState.EXHAUSTED],
    RunState.EARLY_EXITED: [],
    RunState.EXHAUSTED: [],
}

TERMINAL_STATES = frozenset(s for s, nxt in _TRANSITIONS.items() if not nxt)


class StateMachine:
    """Tracks the state of a run and rejects illegal transitions.

    Raises :class:`ValueError` on illegal transition attempts.

    Example::

        sm = StateMachine()
        sm.transition(RunState.ANNEALING)
        sm.transition(RunState.EXHAUSTED)
        assert sm.is_terminal
    """

    def __init__(self) -> None:
        self._state = RunState.INITIALIZING

    @property
    def state(self) -> RunState:
        """Current run state."""
        return self._state

    @property
    def is_terminal(self) -> bool:
        """``True`` once the run has produced (or is producing) a result."""
        return self._state in TERMINAL_STATES

    def can_transition(self, target: RunState) -> bool:
        """Check whether transitioning to *target* is allowed.

        Args:
            target: Desired next state.

        Returns:
            ``True`` if the transition is valid.
        """
        return target in _TRANSITIONS.get(self._state, [])

    def transition(self, target: RunState) -> None:
        """Transition to *target* state.

        Args:
            target: Desired next state.

        Raises:
            ValueError: If the transition is not allowed.
        """
        if not self.can_transition(target):
            raise ValueError(
                f"Invalid transition: {self._state.value} -> {target.value}"
            )
        self._state = target
