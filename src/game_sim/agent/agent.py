"""
Agents - strategies that pick one legal action for one player.

Agents only see the Simulator contract, never game rules. The engine does
not re-check an agent's choice; state_transition does that.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Callable, Optional

from game_sim.core.simulator import A, S, Simulator

logger = logging.getLogger(__name__)


class Agent(ABC):
    """An agent selects an action for a player from the current state."""

    @abstractmethod
    def select_action(self, player_id: int, state: S, simulator: Simulator[S, A]) -> A:
        """
        Select an action for the given player.

        Args:
            player_id: The player the agent is acting for.
            state: The current domain state.
            simulator: The simulator that determines action outcomes.

        Returns:
            A member of the player's legal actions from state.
        """
        pass


class RandomAgent(Agent):
    """
    Picks uniformly among the player's legal actions.

    The generator is owned by the agent: pass a seed (or a seeded
    random.Random) for reproducible games, nothing for interactive play.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        if rng is not None and seed is not None:
            raise ValueError("Pass either seed or rng, not both")
        self.rng = rng if rng is not None else random.Random(seed)

    def select_action(self, player_id: int, state: S, simulator: Simulator[S, A]) -> A:
        player_actions = list(simulator.calculate_legal_actions(state)[player_id])
        if not player_actions:
            raise ValueError(f"Player {player_id} has no legal actions")
        return self.rng.choice(player_actions)


class IoAgent(Agent):
    """
    Human agent: shows the legal actions and reads a choice.

    Input is matched exactly, after trimming whitespace, against each
    action's display form. Anything else re-prompts.
    """

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.read = read
        self.write = write

    def select_action(self, player_id: int, state: S, simulator: Simulator[S, A]) -> A:
        player_actions = simulator.calculate_legal_actions(state)[player_id]
        if len(player_actions) == 0:
            raise ValueError(f"Player {player_id} has no legal actions")

        while True:
            self.write(f"Select an action:\n{player_actions}")
            raw = self.read("Action: ")
            action = player_actions.find(raw.strip())
            if action is not None:
                return action
            logger.debug("Rejected input %r for player %d", raw, player_id)
            self.write(f"Not a legal action: {raw.strip()}")
