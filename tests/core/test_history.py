"""
Tests for game_sim.core.history
"""

import pytest

from game_sim.core.history import History, HistoryEntry
from game_sim.games.connect4 import Connect4Action


@pytest.fixture
def history(empty_state) -> History:
    return History(empty_state)


class TestHistory:
    """History recording tests."""

    def test_seeded_with_initial_state(self, history, empty_state):
        """New history holds the initial state and an empty action map."""
        assert len(history) == 1
        assert history.peek() == (empty_state, {})

    def test_add_appends(self, history, empty_state, drop):
        next_state = drop(empty_state, 3)
        history.add(next_state, {0: Connect4Action(3)})

        assert len(history) == 2
        assert history.current_state == next_state
        assert history[1] == HistoryEntry(next_state, {0: Connect4Action(3)})

    def test_add_copies_action_map(self, history, empty_state, drop):
        actions = {0: Connect4Action(3)}
        history.add(drop(empty_state, 3), actions)
        actions[1] = Connect4Action(4)
        assert history.peek()[1] == {0: Connect4Action(3)}

    def test_states_in_order(self, history, empty_state, drop):
        first = drop(empty_state, 0)
        second = drop(first, 1)
        history.add(first, {0: Connect4Action(0)})
        history.add(second, {1: Connect4Action(1)})
        assert history.states() == [empty_state, first, second]

    def test_clear(self, history):
        history.clear()
        assert len(history) == 0
        with pytest.raises(IndexError):
            history.peek()

    def test_pop(self, history, empty_state, drop):
        history.add(drop(empty_state, 0), {0: Connect4Action(0)})
        entry = history.pop()
        assert entry.actions == {0: Connect4Action(0)}
        assert history.current_state == empty_state

    def test_pop_after_clear_raises(self, history):
        history.clear()
        with pytest.raises(IndexError, match="History is empty"):
            history.pop()

    def test_pop_initial_raises(self, history):
        with pytest.raises(IndexError, match="initial state"):
            history.pop()
