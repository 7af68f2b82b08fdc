"""
Core module - the domain-agnostic simulation contract.

This module provides the building blocks every game domain and agent uses.
"""

from game_sim.core.cache import LastValueCache
from game_sim.core.errors import ContractViolation
from game_sim.core.history import History, HistoryEntry
from game_sim.core.reward import (
    AdversarialReward,
    Reward,
    ScoreReward,
    adversarial_draw,
    adversarial_p1_loss,
    adversarial_p1_win,
)
from game_sim.core.simulator import Action, LegalActions, Simulator, State, contract_violation

__all__ = [
    # Contract
    "Action",
    "State",
    "LegalActions",
    "Simulator",
    "History",
    "HistoryEntry",
    # Rewards
    "Reward",
    "AdversarialReward",
    "ScoreReward",
    "adversarial_draw",
    "adversarial_p1_win",
    "adversarial_p1_loss",
    # Errors
    "ContractViolation",
    "contract_violation",
    # Caching
    "LastValueCache",
]
