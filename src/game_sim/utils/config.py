"""
Configuration and domain/agent registries.
"""

from __future__ import annotations

import multiprocessing as mp
from typing import Optional, Sequence

from game_sim.agent.agent import IoAgent, RandomAgent
from game_sim.games import Connect4Simulator


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

DOMAINS = {
    "connect4": Connect4Simulator,
}

AGENTS = {
    "random": RandomAgent,
    "human": IoAgent,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_WORKER_COUNT = max(1, mp.cpu_count() - 1)
DEFAULT_DOMAIN = "connect4"
DEFAULT_PLAYERS = ("human", "random")


class Config:
    """Run configuration with sensible defaults."""

    def __init__(
        self,
        domain: str = DEFAULT_DOMAIN,
        players: Sequence[str] = DEFAULT_PLAYERS,
        games: int = 1,
        num_workers: int = DEFAULT_WORKER_COUNT,
        seed: Optional[int] = None,
        max_turns: Optional[int] = None,
    ):
        if domain not in DOMAINS:
            available = ", ".join(DOMAINS.keys())
            raise ValueError(f"Unknown domain: {domain}. Available: {available}")

        unknown = [kind for kind in players if kind not in AGENTS]
        if unknown:
            available = ", ".join(AGENTS.keys())
            raise ValueError(f"Unknown agent(s): {unknown}. Available: {available}")

        simulator = DOMAINS[domain]()
        num_players = simulator.number_of_players(simulator.generate_initial_state())
        if len(players) != num_players:
            raise ValueError(f"{domain} needs {num_players} players, got {len(players)}")

        if games < 1:
            raise ValueError(f"games must be at least 1, got {games}")
        if num_workers < 1:
            raise ValueError(f"num_workers must be at least 1, got {num_workers}")

        self.domain = domain
        self.players = tuple(players)
        self.games = games
        self.num_workers = num_workers
        self.seed = seed
        self.max_turns = max_turns

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def interactive(self) -> bool:
        """True if any player is driven by a human."""
        return "human" in self.players

