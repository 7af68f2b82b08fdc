"""
Shared test fixtures for game_sim tests.

Design principles:
- Game-agnostic fixtures where possible
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import List, Mapping

import pytest

from game_sim.agent.agent import RandomAgent
from game_sim.core.reward import AdversarialReward, Reward
from game_sim.core.simulator import Action, LegalActions, Simulator, State
from game_sim.games.connect4 import Connect4Action, Connect4Simulator, Connect4State


# =============================================================================
# A minimal simultaneous-move domain for exercising the generic contract
# =============================================================================

class CountdownAction(Action):
    """Subtract 1 or 2 from the counter."""

    def __init__(self, amount: int):
        self.amount = amount

    def __eq__(self, other):
        return isinstance(other, CountdownAction) and other.amount == self.amount

    def __hash__(self):
        return hash(self.amount)

    def __str__(self):
        return f"-{self.amount}"


class CountdownState(State):
    """Both players act on every turn until the counter reaches zero."""

    def __init__(self, counter: int):
        self.counter = counter

    def current_player_ids(self) -> List[int]:
        return [0, 1] if self.counter > 0 else []

    def __eq__(self, other):
        return isinstance(other, CountdownState) and other.counter == self.counter

    def __hash__(self):
        return hash(self.counter)

    def __str__(self):
        return str(self.counter)


class CountdownSimulator(Simulator[CountdownState, CountdownAction]):
    """Relies on the default number_of_players and is_terminal_state."""

    def __init__(self, start: int = 3):
        self.start = start

    def generate_initial_state(self) -> CountdownState:
        return CountdownState(self.start)

    def calculate_legal_actions(self, state: CountdownState) -> List[LegalActions[CountdownAction]]:
        if state.counter <= 0:
            return [LegalActions(), LegalActions()]
        moves = [CountdownAction(n) for n in (1, 2) if n <= state.counter]
        return [LegalActions(moves), LegalActions(moves)]

    def state_transition(
        self,
        state: CountdownState,
        actions: Mapping[int, CountdownAction],
    ) -> CountdownState:
        self.check_joint_action(state, actions)
        return CountdownState(max(0, state.counter - max(a.amount for a in actions.values())))

    def calculate_rewards(self, state: CountdownState) -> List[Reward]:
        return [AdversarialReward.DRAW, AdversarialReward.DRAW]


# =============================================================================
# Simulator Fixtures
# =============================================================================

@pytest.fixture
def simulator() -> Connect4Simulator:
    """Fresh Connect Four simulator with empty caches."""
    return Connect4Simulator()


@pytest.fixture
def empty_state(simulator: Connect4Simulator) -> Connect4State:
    return simulator.generate_initial_state()


@pytest.fixture
def countdown() -> CountdownSimulator:
    return CountdownSimulator()


# =============================================================================
# Connect Four position Fixtures
# =============================================================================

# Column sequence filling all 42 cells without four in a row for either side
DRAW_SEQUENCE = (
    1, 4, 6, 6, 1, 1, 2, 2, 6, 1, 4, 6, 0, 4,
    4, 1, 1, 2, 6, 4, 4, 3, 5, 6, 0, 2, 2, 5,
    3, 0, 5, 2, 0, 0, 0, 5, 3, 3, 3, 5, 5, 3,
)


@pytest.fixture
def drawn_state() -> Connect4State:
    """Full board, no winner."""
    return Connect4State.from_moves(DRAW_SEQUENCE)


@pytest.fixture
def vertical_win_state() -> Connect4State:
    """Player 0 stacks four in column 0 while player 1 plays column 1."""
    return Connect4State.from_moves([0, 1, 0, 1, 0, 1, 0])


@pytest.fixture
def draw_sequence() -> List[int]:
    return list(DRAW_SEQUENCE)


@pytest.fixture
def drop(simulator: Connect4Simulator):
    """Drop a piece for whoever is to move, using the shared simulator."""
    def _drop(state: Connect4State, column: int) -> Connect4State:
        return simulator.state_transition(state, {state.player_to_move(): Connect4Action(column)})
    return _drop


# =============================================================================
# Agent Fixtures
# =============================================================================

@pytest.fixture
def random_agents() -> List[RandomAgent]:
    return [RandomAgent(seed=1), RandomAgent(seed=2)]
