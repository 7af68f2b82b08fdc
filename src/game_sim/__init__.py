"""
game_sim - a generic engine for deterministic, turn-based multi-player games.

Games implement the Simulator contract (initial state, legal actions per
player, validated joint-action transitions, rewards). Agents pick actions
through that contract only, so any agent plays any conforming game.

Quick Start:
    from game_sim import Connect4Simulator, RandomAgent, play_game

    simulator = Connect4Simulator()
    history = play_game(simulator, [RandomAgent(seed=1), RandomAgent(seed=2)])
    print(simulator.calculate_rewards(history.current_state))

Modules:
    core       - Simulator/State/Action contract, rewards, history
    games      - Concrete domains (Connect Four)
    agent      - Random and human agents
    simulation - Driver loop and parallel batch runner
"""

from game_sim.agent.agent import Agent, IoAgent, RandomAgent
from game_sim.api import run
from game_sim.core import (
    Action,
    AdversarialReward,
    ContractViolation,
    History,
    LegalActions,
    Simulator,
    State,
)
from game_sim.games import Connect4Action, Connect4Simulator, Connect4State
from game_sim.simulation import BatchRunner, play_game
from game_sim.utils.config import Config

__version__ = "1.0.0"

__all__ = [
    # Main API
    "run",
    "play_game",
    "BatchRunner",
    "Config",
    # Contract
    "Action",
    "State",
    "LegalActions",
    "Simulator",
    "History",
    "AdversarialReward",
    "ContractViolation",
    # Agents
    "Agent",
    "RandomAgent",
    "IoAgent",
    # Games
    "Connect4Action",
    "Connect4State",
    "Connect4Simulator",
]
