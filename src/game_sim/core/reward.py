"""
Reward values - per-player outcomes, meaningful once a state is terminal.

Two families exist:
- AdversarialReward: WIN / DRAW / LOSS for two-player zero-sum framings
- ScoreReward: integer score for scoring domains

Within a family rewards are totally ordered (LOSS < DRAW < WIN).
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, NamedTuple, Union


class AdversarialReward(IntEnum):
    """Outcome of an adversarial game from one player's point of view."""
    LOSS = -1
    DRAW = 0
    WIN = 1

    def __str__(self) -> str:
        return self.name.lower()


class ScoreReward(NamedTuple):
    """Numeric score outcome."""
    score: int = 0

    def __str__(self) -> str:
        return str(self.score)


Reward = Union[AdversarialReward, ScoreReward]


def adversarial_draw() -> List[Reward]:
    return [AdversarialReward.DRAW, AdversarialReward.DRAW]


def adversarial_p1_win() -> List[Reward]:
    return [AdversarialReward.WIN, AdversarialReward.LOSS]


def adversarial_p1_loss() -> List[Reward]:
    return [AdversarialReward.LOSS, AdversarialReward.WIN]
