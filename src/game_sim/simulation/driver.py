"""
Sequential driver loop - plays one game with one agent per player.

Each turn the simulator reports legal actions, every active player's agent
picks one, and the joint action is applied. Every step is recorded in a
History.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Sequence, TYPE_CHECKING

from game_sim.core.history import History

if TYPE_CHECKING:
    from game_sim.agent.agent import Agent
    from game_sim.core.simulator import Action, Simulator, State

logger = logging.getLogger(__name__)

Observer = Callable[["State", Dict[int, "Action"]], None]


def select_joint_action(
    simulator: "Simulator",
    state: "State",
    agents: Sequence["Agent"],
) -> Dict[int, "Action"]:
    """Ask the agent of every player with legal actions to pick one."""
    legal_actions = simulator.calculate_legal_actions(state)
    return {
        player_id: agents[player_id].select_action(player_id, state, simulator)
        for player_id, player_actions in enumerate(legal_actions)
        if len(player_actions) > 0
    }


def play_game(
    simulator: "Simulator",
    agents: Sequence["Agent"],
    state: Optional["State"] = None,
    max_turns: Optional[int] = None,
    observer: Optional[Observer] = None,
) -> History:
    """
    Play until a terminal state (or max_turns transitions) is reached.

    Args:
        simulator: Rules of the domain. Owned by this loop for the whole game.
        agents: One agent per player, indexed by player id.
        state: Starting state; defaults to simulator.generate_initial_state().
        max_turns: Optional cap on the number of transitions.
        observer: Called with (state, actions) after every transition.

    Returns:
        The History of the game, starting with the initial state.
    """
    if state is None:
        state = simulator.generate_initial_state()

    players = simulator.number_of_players(state)
    if len(agents) < players:
        raise ValueError(f"Expected {players} agents, got {len(agents)}")

    history: History = History(state)
    turns = 0
    logger.info("Starting game with %d players", players)

    while not simulator.is_terminal_state(state):
        if max_turns is not None and turns >= max_turns:
            logger.info("Stopping after %d turns (turn limit)", turns)
            break

        actions = select_joint_action(simulator, state, agents)
        state = simulator.state_transition(state, actions)
        history.add(state, actions)
        turns += 1

        if observer is not None:
            observer(state, actions)

    logger.info("Game finished after %d turns", turns)
    return history
