"""
Job data structures for parallel simulation.

Defines the input (GameJob) and output (GameResult) types passed to and
from worker processes. Both are plain picklable values; simulators and
agents are built inside the worker and never cross the process boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from game_sim.core.reward import Reward
    from game_sim.core.simulator import State


@dataclass(frozen=True)
class GameJob:
    """
    Self-contained job for a worker process.

    Contains everything needed to run a single game without shared state.
    """
    domain: str
    agent_kinds: Tuple[str, ...]  # indexed by player id
    seed: Optional[int] = None
    max_turns: Optional[int] = None


@dataclass
class GameResult:
    """Outcome of one simulated game."""
    rewards: List["Reward"]
    turns: int
    final_state: "State"
    terminal: bool


class Tally(NamedTuple):
    """Outcome counts for one player across many games."""

    wins: int = 0
    draws: int = 0
    losses: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def win_rate(self) -> float:
        return self.wins / self.total if self.total else 0.0
