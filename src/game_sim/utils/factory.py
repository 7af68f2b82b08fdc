"""
Factory functions for creating simulators and agents.
"""

from typing import List, Optional, Sequence

from game_sim.agent.agent import Agent, RandomAgent
from game_sim.core.simulator import Simulator
from game_sim.utils.config import AGENTS, DOMAINS


def create_simulator(domain: str) -> Simulator:
    """
    Create a fresh simulator for a domain.

    Args:
        domain: Key from DOMAINS registry (e.g., "connect4")

    Returns:
        A new Simulator instance with empty caches
    """
    if domain not in DOMAINS:
        available = ", ".join(DOMAINS.keys())
        raise ValueError(f"Unknown domain: {domain}. Available: {available}")

    return DOMAINS[domain]()


def create_agent(kind: str, seed: Optional[int] = None) -> Agent:
    """
    Create a single agent by registry name.

    seed only applies to agents that own a random generator.
    """
    if kind not in AGENTS:
        available = ", ".join(AGENTS.keys())
        raise ValueError(f"Unknown agent: {kind}. Available: {available}")

    agent_class = AGENTS[kind]
    if agent_class is RandomAgent:
        return RandomAgent(seed=seed)
    return agent_class()


def create_agents(kinds: Sequence[str], seed: Optional[int] = None) -> List[Agent]:
    """
    Create one agent per player, indexed by player id.

    With a seed, player i's generator is seeded with seed * len(kinds) + i so
    players never share a random sequence.
    """
    agents: List[Agent] = []
    for player_id, kind in enumerate(kinds):
        player_seed = None if seed is None else seed * len(kinds) + player_id
        agents.append(create_agent(kind, seed=player_seed))
    return agents
