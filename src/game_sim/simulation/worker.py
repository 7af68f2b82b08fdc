"""
Worker process logic for parallel simulation.

Every job builds its own Simulator and agents, so no memo cache or
random generator is ever shared between games.
"""

from __future__ import annotations

from typing import Optional

from game_sim.simulation.driver import play_game
from game_sim.simulation.jobs import GameJob, GameResult
from game_sim.utils.factory import create_agents, create_simulator


def run_game(job: GameJob) -> GameResult:
    """Execute a single game simulation."""
    if "human" in job.agent_kinds:
        raise ValueError("Human agents cannot play in worker processes")

    simulator = create_simulator(job.domain)
    agents = create_agents(job.agent_kinds, seed=job.seed)

    history = play_game(simulator, agents, max_turns=job.max_turns)
    final_state = history.current_state

    return GameResult(
        rewards=simulator.calculate_rewards(final_state),
        turns=len(history) - 1,
        final_state=final_state,
        terminal=simulator.is_terminal_state(final_state),
    )


def job_seed(base_seed: Optional[int], index: int) -> Optional[int]:
    """Seed for the index-th job of a batch; None stays unseeded."""
    if base_seed is None:
        return None
    return base_seed + index
