"""
Simulator contract - the domain-agnostic interface every game implements.

IMPORTANT ARCHITECTURE NOTE:
-----------------------------
- Simulators are pure functions of (state, joint action) -> next state.
- States and actions are immutable values; nothing is mutated in place.
- A Simulator may keep memo caches keyed by State, nothing else.

Sequential games are modeled by giving every player except the one to
move an empty LegalActions set.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterable, Iterator, List, Mapping, Optional, TypeVar

from game_sim.core.errors import ContractViolation
from game_sim.core.reward import Reward

logger = logging.getLogger(__name__)


class Action(ABC):
    """
    A minimal descriptor of one move.

    Concrete actions must be hashable values whose equality means
    "same move", independent of how the action is displayed.
    str(action) is the form a human types to select it.
    """

    def clone(self) -> "Action":
        """Actions are immutable, so a clone is the action itself."""
        return self


class State(ABC):
    """
    An immutable description of one game position.

    Concrete states must be hashable values with a human-readable str().
    """

    def clone(self) -> "State":
        """States are immutable, so a clone is the state itself."""
        return self

    @abstractmethod
    def current_player_ids(self) -> List[int]:
        """Return the ids of the players expected to act from this state."""
        pass


S = TypeVar("S", bound=State)
A = TypeVar("A", bound=Action)


class LegalActions(Generic[A]):
    """
    The set of distinct actions available to one player at one state.

    Iteration follows insertion order so seeded agents are reproducible,
    but callers must not rely on any particular order.
    """

    __slots__ = ("_actions",)

    def __init__(self, actions: Iterable[A] = ()):
        self._actions: Dict[A, None] = dict.fromkeys(actions)

    def add(self, action: A) -> None:
        self._actions[action] = None

    def copy(self) -> "LegalActions[A]":
        return LegalActions(self._actions)

    def find(self, text: str) -> Optional[A]:
        """Return the action whose display form equals text, if any."""
        for action in self._actions:
            if str(action) == text:
                return action
        return None

    def __contains__(self, action: object) -> bool:
        return action in self._actions

    def __iter__(self) -> Iterator[A]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LegalActions):
            return NotImplemented
        return self._actions.keys() == other._actions.keys()

    def __repr__(self) -> str:
        return f"LegalActions({list(self._actions)!r})"

    def __str__(self) -> str:
        lines = ["["]
        lines.extend(str(action) for action in self._actions)
        lines.append("]")
        return "\n".join(lines)


class Simulator(ABC, Generic[S, A]):
    """
    Controls the state transitions of one domain.

    Subclasses implement the five domain operations; number_of_players and
    is_terminal_state are derived from calculate_legal_actions and may be
    overridden for speed as long as they agree with the defaults.
    """

    @abstractmethod
    def generate_initial_state(self) -> S:
        """
        Return a legal starting position.

        Not necessarily the same state on every call (a domain may deal
        randomly), but never an illegal one.
        """
        pass

    @abstractmethod
    def calculate_legal_actions(self, state: S) -> List[LegalActions[A]]:
        """Return the legal actions of every player, indexed by player id."""
        pass

    @abstractmethod
    def state_transition(self, state: S, actions: Mapping[int, A]) -> S:
        """
        Apply one action per active player and return the next state.

        Raises ContractViolation if any supplied action is not legal for its
        player, or an active player supplied none.
        """
        pass

    @abstractmethod
    def calculate_rewards(self, state: S) -> List[Reward]:
        """
        Return one reward per player, indexed by player id.

        Only meaningful once is_terminal_state(state) holds. Earlier calls
        return a neutral reward instead of failing.
        """
        pass

    def number_of_players(self, state: S) -> int:
        """
        The number of players in this domain.

        Can depend on the state, e.g. a game that continues after a player
        is eliminated.
        """
        return len(self.calculate_legal_actions(state))

    def is_terminal_state(self, state: S) -> bool:
        """A state is terminal if no player has any legal action."""
        return all(len(player_actions) == 0 for player_actions in self.calculate_legal_actions(state))

    def check_joint_action(
        self,
        state: S,
        actions: Mapping[int, A],
        legal_actions: Optional[List[LegalActions[A]]] = None,
    ) -> None:
        """
        Validate a joint action against the legal actions of state.

        Every player with a non-empty legal set must supply an action, and
        every supplied action must belong to its player's legal set.
        """
        if legal_actions is None:
            legal_actions = self.calculate_legal_actions(state)

        for player_id, player_actions in enumerate(legal_actions):
            if len(player_actions) > 0 and player_id not in actions:
                contract_violation(f"Missing action for active player {player_id} from state\n{state}")

        for player_id, action in actions.items():
            if not 0 <= player_id < len(legal_actions):
                contract_violation(f"Unknown player {player_id} played {action} from state\n{state}")
            if action not in legal_actions[player_id]:
                contract_violation(f"Illegal action {action} by player {player_id} from state\n{state}")


def contract_violation(message: str) -> None:
    """Log message and raise it as a ContractViolation."""
    logger.error(message)
    raise ContractViolation(message)
