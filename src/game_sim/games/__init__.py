"""
Games module - concrete Simulator implementations.
"""

from game_sim.games.connect4 import Connect4Action, Connect4Simulator, Connect4State

__all__ = [
    "Connect4Action",
    "Connect4State",
    "Connect4Simulator",
]
