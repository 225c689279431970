"""
Command line entry point.

Plays one game between two seats, each driven by a console player or a
random player:

    turngame --x console --o random --seed 7 -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .agents import Agent, ConsoleAgent, RandomAgent
from .environments import AgentId, get_env, list_envs
from .game import GameConfig, describe_outcome, play_game


_LEVELS_BY_VERBOSE = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}

AGENT_KINDS = ("console", "random")


def setup_logging(verbose_count: int = 0, logger_name: Optional[str] = None) -> logging.Logger:
    """Configure the root (or named) logger from a ``-v`` count.

    ``-v`` selects INFO, ``-vv`` DEBUG, no flag WARNING. Calling it again
    only adjusts the level.
    """
    level = _LEVELS_BY_VERBOSE.get(verbose_count, logging.DEBUG)
    logger = logging.getLogger(logger_name or "")
    logger.setLevel(level)

    if not any(getattr(h, "_turngame_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream=sys.stderr)
        handler._turngame_handler = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        ))
        logger.addHandler(handler)

    return logger


def make_agent(kind: str, identity: AgentId, seed: Optional[int] = None) -> Agent:
    """Build an agent of ``kind`` ('console' or 'random') for ``identity``."""
    if kind == "console":
        return ConsoleAgent(identity)
    if kind == "random":
        return RandomAgent(identity, seed=seed)
    raise ValueError(f"Unknown agent kind: '{kind}'. Available: {list(AGENT_KINDS)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turngame",
        description="Play a turn-based game between console and random players.",
    )
    parser.add_argument("--env", type=str, default="tictactoe", choices=list_envs(),
                        help="Environment to play (default: tictactoe)")
    parser.add_argument("--x", dest="x_kind", choices=AGENT_KINDS, default="console",
                        help="Player X (default: console)")
    parser.add_argument("--o", dest="o_kind", choices=AGENT_KINDS, default="random",
                        help="Player O (default: random)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for random players")
    parser.add_argument("--max-passes", type=int, default=None,
                        help="Give up after this many passes over the players")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity (-v INFO, -vv DEBUG)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    env = get_env(args.env)
    agents = [
        make_agent(args.x_kind, AgentId.X, args.seed),
        make_agent(args.o_kind, AgentId.O, None if args.seed is None else args.seed + 1),
    ]

    game_log = play_game(env, agents, GameConfig(max_passes=args.max_passes))

    for i, (identity, action) in enumerate(game_log, start=1):
        print(f"{i:>2}. {identity} -> {action}")
    print(env)
    print(f"Result: {describe_outcome(env)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
