"""
Public API for playing and batch-simulating games.

Usage:
    from game_sim import Config, run

    run(Config(domain="connect4", players=("random", "random"), games=100, seed=7))
"""

from __future__ import annotations

import logging
from typing import Callable, List

from game_sim.core.history import History
from game_sim.simulation import BatchRunner, Tally, play_game, tally_results
from game_sim.utils.config import Config
from game_sim.utils.factory import create_agents, create_simulator

logger = logging.getLogger(__name__)


def play_single(config: Config, write: Callable[[str], None] = print) -> History:
    """Play one game, printing the board after every transition."""
    simulator = create_simulator(config.domain)
    agents = create_agents(config.players, seed=config.seed)

    state = simulator.generate_initial_state()
    write(f"Starting {config.domain}: " + " vs ".join(config.players))
    write(str(state))

    def show(next_state, actions):
        played = ", ".join(f"player {pid + 1} played {action}" for pid, action in sorted(actions.items()))
        write(f"\n{played}")
        write(str(next_state))

    history = play_game(simulator, agents, state=state, max_turns=config.max_turns, observer=show)

    final_state = history.current_state
    write("\n" + "=" * 40)
    if simulator.is_terminal_state(final_state):
        rewards = simulator.calculate_rewards(final_state)
        write("GAME OVER: " + ", ".join(f"player {pid + 1} {reward}" for pid, reward in enumerate(rewards)))
    else:
        write(f"Stopped after {len(history) - 1} turns")
    write("=" * 40)
    return history


def play_batch(config: Config, write: Callable[[str], None] = print) -> List[Tally]:
    """Play config.games games in worker processes and report per-player tallies."""
    if config.interactive:
        raise ValueError("Batch simulation needs non-human players only")

    with BatchRunner(config.num_workers) as runner:
        results = runner.run_batch(
            config.domain,
            config.players,
            config.games,
            seed=config.seed,
            max_turns=config.max_turns,
        )

    tallies = tally_results(results, config.num_players)
    for player_id, (kind, tally) in enumerate(zip(config.players, tallies)):
        write(
            f"Player {player_id + 1} ({kind}): "
            f"{tally.wins} wins, {tally.draws} draws, {tally.losses} losses"
        )
    return tallies


def run(config: Config, write: Callable[[str], None] = print) -> None:
    """Main entry point: one interactive game or a batch, depending on config."""
    try:
        if config.games > 1:
            play_batch(config, write=write)
        else:
            play_single(config, write=write)
    except KeyboardInterrupt:
        write("\nInterrupted - shutting down...")
    except Exception:
        logger.exception("Fatal error in simulation loop")
        raise


__all__ = [
    "play_single",
    "play_batch",
    "run",
]
