"""
Command-line interface for playing and simulating games.
"""

import argparse
import logging
from typing import List, Optional

from game_sim.api import run
from game_sim.utils.config import (
    AGENTS,
    DEFAULT_DOMAIN,
    DEFAULT_PLAYERS,
    DEFAULT_WORKER_COUNT,
    DOMAINS,
    Config,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play turn-based games with human or random agents"
    )
    parser.add_argument(
        "--domain", "-d",
        choices=list(DOMAINS.keys()),
        default=DEFAULT_DOMAIN,
        help=f"Game to play (default: {DEFAULT_DOMAIN})",
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        default=",".join(DEFAULT_PLAYERS),
        help=f"Comma-separated agent per player, from: {', '.join(AGENTS)} (default: %(default)s)",
    )
    parser.add_argument(
        "--games", "-n",
        type=int,
        default=1,
        help="Number of games; more than 1 runs a batch without human players (default: 1)",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=DEFAULT_WORKER_COUNT,
        help="Number of worker processes for batches (default: CPU count - 1)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for random agents (default: unseeded)",
    )
    parser.add_argument(
        "--max-turns", "-t",
        type=int,
        default=None,
        help="Stop a game after this many turns (default: play to the end)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def parse_players(players_str: str) -> List[str]:
    """Parse and validate the players argument."""
    players = [p.strip() for p in players_str.split(",") if p.strip()]
    invalid = [p for p in players if p not in AGENTS]
    if invalid:
        raise ValueError(
            f"Invalid agent(s): {invalid}. Expected comma-separated names from: {', '.join(AGENTS)}."
        )
    return players


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config(
            domain=args.domain,
            players=parse_players(args.players),
            games=args.games,
            num_workers=args.workers,
            seed=args.seed,
            max_turns=args.max_turns,
        )
    except ValueError as e:
        parser.error(str(e))

    if config.games > 1 and config.interactive:
        parser.error("--games greater than 1 needs non-human players (e.g. --players random,random)")

    run(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
