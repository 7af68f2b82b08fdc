"""
Simulation module - driving games to completion.

Provides the sequential driver loop and the infrastructure for running
many independent games in parallel.
"""

from game_sim.simulation.driver import play_game, select_joint_action
from game_sim.simulation.jobs import GameJob, GameResult, Tally
from game_sim.simulation.runner import BatchRunner, make_jobs, tally_results

__all__ = [
    "play_game",
    "select_joint_action",
    "GameJob",
    "GameResult",
    "Tally",
    "BatchRunner",
    "make_jobs",
    "tally_results",
]
