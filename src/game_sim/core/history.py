"""
History - append-only record of a played game.

Each entry pairs a state with the joint action that produced it. The first
entry holds the initial state and an empty action map. The engine never
reads History; it is a passive recorder for UIs and replay tooling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, Iterator, List, Mapping, Tuple

from game_sim.core.simulator import A, S


@dataclass(frozen=True)
class HistoryEntry(Generic[S, A]):
    """One recorded step: the state reached and the actions taken to reach it."""
    state: S
    actions: Dict[int, A] = field(default_factory=dict)


class History(Generic[S, A]):
    """Keeps track of state transition history."""

    def __init__(self, initial_state: S):
        self._entries: List[HistoryEntry[S, A]] = [HistoryEntry(initial_state, {})]

    def add(self, state: S, actions: Mapping[int, A]) -> None:
        """
        Add the next state and the actions taken by each player
        to arrive at that state.
        """
        self._entries.append(HistoryEntry(state, dict(actions)))

    def clear(self) -> None:
        self._entries.clear()

    def pop(self) -> HistoryEntry[S, A]:
        """
        Remove and return the last entry.

        The initial entry cannot be removed this way; use clear() instead.
        """
        if not self._entries:
            raise IndexError("History is empty")
        if len(self._entries) < 2:
            raise IndexError("Cannot remove the initial state from history")
        return self._entries.pop()

    def peek(self) -> Tuple[S, Dict[int, A]]:
        """Return the most recent (state, actions) pair."""
        if not self._entries:
            raise IndexError("History is empty")
        entry = self._entries[-1]
        return entry.state, entry.actions

    @property
    def current_state(self) -> S:
        return self.peek()[0]

    def states(self) -> List[S]:
        return [entry.state for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry[S, A]]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> HistoryEntry[S, A]:
        return self._entries[index]
