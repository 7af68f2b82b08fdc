"""
Connect Four on a packed bit-board.

Player 0 plays X and always moves first; player 1 plays O. Whose turn it
is follows from piece-count parity, so the state needs nothing besides the
two bit-boards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Mapping, Optional

import numpy as np

from game_sim.core.cache import LastValueCache
from game_sim.core.reward import Reward, adversarial_draw, adversarial_p1_loss, adversarial_p1_win
from game_sim.core.simulator import Action, LegalActions, Simulator, State, contract_violation
from game_sim.games.bitboard import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    PLAYABLE,
    column_heights,
    count_ones,
    has_four_in_a_row,
    is_full,
    to_array,
)

logger = logging.getLogger(__name__)

N_PLAYERS = 2

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: "-", 1: "X", 2: "O"}


@dataclass(frozen=True)
class Connect4Action(Action):
    """Drop a piece into a column (0-based)."""
    location: int

    def __str__(self) -> str:
        return f"({self.location + 1})"


@dataclass(frozen=True)
class Connect4State(State):
    """
    Connect Four position as two bit-boards (see games.bitboard for layout).

    bit_board_1 holds player 0's pieces, bit_board_2 player 1's.
    """
    bit_board_1: int = 0
    bit_board_2: int = 0

    def __post_init__(self):
        if self.bit_board_1 & self.bit_board_2:
            raise ValueError("Bit-boards overlap: a cell cannot hold two pieces")
        if (self.bit_board_1 | self.bit_board_2) & ~PLAYABLE:
            raise ValueError("Bit-boards set cells outside the playable area")

    @classmethod
    def from_moves(cls, columns: Iterable[int]) -> "Connect4State":
        """
        Build a state by dropping pieces into the given columns in turn order.

        Every move is validated, so an illegal sequence raises ContractViolation.
        """
        simulator = Connect4Simulator()
        state = simulator.generate_initial_state()
        for column in columns:
            player = state.player_to_move()
            state = simulator.state_transition(state, {player: Connect4Action(column)})
        return state

    @property
    def occupied(self) -> int:
        return self.bit_board_1 | self.bit_board_2

    @property
    def piece_count(self) -> int:
        return count_ones(self.occupied)

    def player_1_turn(self) -> bool:
        """Player 0 moves when they have placed no more pieces than player 1."""
        return count_ones(self.bit_board_1) <= count_ones(self.bit_board_2)

    def player_to_move(self) -> int:
        return 0 if self.player_1_turn() else 1

    def current_player_ids(self) -> List[int]:
        return [self.player_to_move()]

    def bit_board(self, player_id: int) -> int:
        return self.bit_board_1 if player_id == 0 else self.bit_board_2

    def winner(self) -> Optional[int]:
        """Return the id of the player with four in a row, if any."""
        for player_id in range(N_PLAYERS):
            if has_four_in_a_row(self.bit_board(player_id)):
                return player_id
        return None

    def column_height(self, column: int) -> int:
        """Number of pieces in a column (0 to BOARD_HEIGHT)."""
        return column_heights(self.occupied)[column] % (BOARD_HEIGHT + 1)

    def to_array(self) -> np.ndarray:
        return to_array(self.bit_board_1, self.bit_board_2)

    def __str__(self) -> str:
        grid = self.to_array()
        return "\n".join(
            "".join(CELL_STRINGS[int(cell)] for cell in row)
            for row in grid
        )


class Connect4Simulator(Simulator[Connect4State, Connect4Action]):
    """
    Connect Four rules.

    Results are memoized per state in single-slot caches, so one instance
    must be used by one driver loop at a time.
    """

    def __init__(self):
        self._action_pool = tuple(Connect4Action(location) for location in range(BOARD_WIDTH))
        self._column_heights_cache: LastValueCache[Connect4State, List[int]] = LastValueCache()
        self._rewards_cache: LastValueCache[Connect4State, List[Reward]] = LastValueCache()
        self._legal_actions_cache: LastValueCache[
            Connect4State, List[LegalActions[Connect4Action]]
        ] = LastValueCache()

    def generate_initial_state(self) -> Connect4State:
        return Connect4State(bit_board_1=0, bit_board_2=0)

    def number_of_players(self, state: Connect4State) -> int:
        return N_PLAYERS

    def calculate_rewards(self, state: Connect4State) -> List[Reward]:
        return list(self._rewards(state))

    def calculate_legal_actions(self, state: Connect4State) -> List[LegalActions[Connect4Action]]:
        return [player_actions.copy() for player_actions in self._legal_actions(state)]

    def state_transition(
        self,
        state: Connect4State,
        actions: Mapping[int, Connect4Action],
    ) -> Connect4State:
        player = state.player_to_move()
        self.check_joint_action(state, actions, self._legal_actions(state))
        if player not in actions:
            contract_violation(f"No action for player {player} from terminal state\n{state}")

        action = actions[player]
        height = self._column_heights(state)[action.location]
        logger.debug("Player %d drops into column %d (bit %d)", player, action.location, height)

        if player == 0:
            return replace(state, bit_board_1=state.bit_board_1 ^ (1 << height))
        return replace(state, bit_board_2=state.bit_board_2 ^ (1 << height))

    # ------------------------------------------------------------------
    # Memoized internals (values returned here are shared, do not mutate)
    # ------------------------------------------------------------------

    def _column_heights(self, state: Connect4State) -> List[int]:
        return self._column_heights_cache.get(state, lambda s: column_heights(s.occupied))

    def _rewards(self, state: Connect4State) -> List[Reward]:
        return self._rewards_cache.get(state, _calculate_rewards)

    def _legal_actions(self, state: Connect4State) -> List[LegalActions[Connect4Action]]:
        return self._legal_actions_cache.get(state, self._compute_legal_actions)

    def _compute_legal_actions(self, state: Connect4State) -> List[LegalActions[Connect4Action]]:
        legal_actions: List[LegalActions[Connect4Action]] = [LegalActions() for _ in range(N_PLAYERS)]
        if state.winner() is not None:
            return legal_actions

        heights = self._column_heights(state)
        player_actions = legal_actions[state.player_to_move()]
        for location, height in enumerate(heights):
            if not is_full(height):
                player_actions.add(self._action_pool[location])
        return legal_actions


def _calculate_rewards(state: Connect4State) -> List[Reward]:
    winner = state.winner()
    if winner == 0:
        return adversarial_p1_win()
    if winner == 1:
        return adversarial_p1_loss()
    return adversarial_draw()
