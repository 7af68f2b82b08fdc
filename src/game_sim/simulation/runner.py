"""
Parallel batch runner - plays many independent games in worker processes.

Each game runs start to finish inside one worker with its own Simulator
instance. Results come back as plain GameResult values.
"""

from __future__ import annotations

import atexit
import logging
import signal
from multiprocessing.pool import Pool
from typing import List, Optional, Sequence

from game_sim.core.reward import AdversarialReward
from game_sim.simulation.jobs import GameJob, GameResult, Tally
from game_sim.simulation.worker import job_seed, run_game
from game_sim.utils.config import DEFAULT_WORKER_COUNT

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Process cleanup
# ---------------------------------------------------------------------------

_active_runners: List["BatchRunner"] = []


def _shutdown_all():
    for runner in _active_runners[:]:
        runner.shutdown(force=True)


atexit.register(_shutdown_all)


def _worker_init():
    """Workers ignore SIGINT; only the main process handles Ctrl+C."""
    signal.signal(signal.SIGINT, signal.SIG_IGN)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class BatchRunner:
    """
    Manages a pool of worker processes for batch simulation.

    Usable as a context manager; the pool is created lazily and terminated
    on error.
    """

    def __init__(self, num_workers: int = DEFAULT_WORKER_COUNT):
        if num_workers < 1:
            raise ValueError(f"num_workers must be at least 1, got {num_workers}")
        self.num_workers = num_workers
        self._pool: Optional[Pool] = None

        _active_runners.append(self)

    def __enter__(self):
        self._ensure_pool()
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(force=exc_type is not None)

    def _ensure_pool(self) -> Pool:
        if self._pool is None:
            self._pool = Pool(processes=self.num_workers, initializer=_worker_init)
        return self._pool

    def shutdown(self, force: bool = False) -> None:
        if self in _active_runners:
            _active_runners.remove(self)

        if self._pool is None:
            return

        pool, self._pool = self._pool, None
        pool.terminate() if force else pool.close()
        pool.join()

    def run_batch(
        self,
        domain: str,
        agent_kinds: Sequence[str],
        num_games: int,
        seed: Optional[int] = None,
        max_turns: Optional[int] = None,
    ) -> List[GameResult]:
        """
        Play num_games independent games and return their results in job order.

        With a seed, game i uses seed + i, so a batch is reproducible
        regardless of worker count.
        """
        if num_games <= 0:
            return []

        jobs = make_jobs(domain, agent_kinds, num_games, seed, max_turns)
        pool = self._ensure_pool()

        logger.info("Running %d %s games on %d workers", num_games, domain, self.num_workers)
        try:
            results = pool.map(run_game, jobs)
        except KeyboardInterrupt:
            logger.info("Interrupted - terminating workers")
            self.shutdown(force=True)
            raise

        logger.info("Finished %d games", len(results))
        return results


def make_jobs(
    domain: str,
    agent_kinds: Sequence[str],
    count: int,
    seed: Optional[int] = None,
    max_turns: Optional[int] = None,
) -> List[GameJob]:
    kinds = tuple(agent_kinds)
    return [
        GameJob(domain=domain, agent_kinds=kinds, seed=job_seed(seed, i), max_turns=max_turns)
        for i in range(count)
    ]


def tally_results(results: Sequence[GameResult], num_players: int) -> List[Tally]:
    """
    Count wins, draws and losses per player.

    Games that stopped before a terminal state are not counted.
    """
    counts = [[0, 0, 0] for _ in range(num_players)]
    for result in results:
        if not result.terminal:
            continue
        for player_id, reward in enumerate(result.rewards[:num_players]):
            if reward == AdversarialReward.WIN:
                counts[player_id][0] += 1
            elif reward == AdversarialReward.LOSS:
                counts[player_id][2] += 1
            else:
                counts[player_id][1] += 1
    return [Tally(*player_counts) for player_counts in counts]
