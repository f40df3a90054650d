"""Tic Tac Toe — console entry point."""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from tictactoe.agent.base import Agent
from tictactoe.agent.heuristic_agent import HeuristicAgent
from tictactoe.agent.random_agent import RandomAgent
from tictactoe.game.match import DEFAULT_TARGET_SCORE
from tictactoe.ui.console import NO_PACING, ConsoleGame, Pacing

OPPONENTS = ("heuristic", "random")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tictactoe",
        description="Play Tic Tac Toe on an odd N x N grid against the computer.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer's random choices.")
    parser.add_argument(
        "--target-score",
        type=int,
        default=DEFAULT_TARGET_SCORE,
        help="Round wins needed to take the match (default: %(default)s).",
    )
    parser.add_argument("--opponent", choices=OPPONENTS, default="heuristic")
    parser.add_argument("--no-pause", action="store_true", help="Skip the display pauses.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def make_agent(opponent: str, rng: random.Random) -> Agent:
    if opponent == "random":
        return RandomAgent(rng=rng)
    return HeuristicAgent(rng=rng)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.target_score < 1:
        build_parser().error("--target-score must be at least 1")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    game = ConsoleGame(
        pacing=NO_PACING if args.no_pause else Pacing(),
        agent=make_agent(args.opponent, rng),
        rng=rng,
        target_score=args.target_score,
    )
    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print()
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
