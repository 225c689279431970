"""
Game driver.

:func:`play_game` runs one game to completion: on every pass over the agent
list, each agent whose identity matches ``env.turn()`` is asked for an action,
the action is submitted with ``env.update`` and the pair is appended to the
game log. Passes repeat until the environment is terminal.

Rejected actions are logged like accepted ones. The turn does not advance, so
the offending agent is asked again on the next pass, not immediately.

Example
-------
>>> from turngame import Board, AgentId, ScriptedAgent, play_game
>>> env = Board.initial_state()
>>> agents = [ScriptedAgent(AgentId.X, [0, 1, 2]), ScriptedAgent(AgentId.O, [3, 4])]
>>> play_game(env, agents)
[(<AgentId.X: 'X'>, 0), (<AgentId.O: 'O'>, 3), ...]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Hashable, List, Optional, Sequence, Tuple

from .agents import Agent
from .environments.base import Environment

logger = logging.getLogger(__name__)


GameLog = List[Tuple[Hashable, Any]]


@dataclass
class GameConfig:
    """Configuration for the game driver.

    Parameters
    ----------
    max_passes : int, optional
        Maximum number of passes over the agent list. None plays until the
        environment is terminal, however long that takes. When the limit is
        hit the partial log is returned.

    Examples
    --------
    >>> config = GameConfig(max_passes=100)
    >>> config.max_passes
    100
    """
    max_passes: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_passes is not None and self.max_passes < 1:
            raise ValueError(f"max_passes must be >= 1, got {self.max_passes}")


def play_game(
    env: Environment,
    agents: Sequence[Agent],
    config: Optional[GameConfig] = None,
) -> GameLog:
    """Play ``env`` to the end with ``agents``.

    Parameters
    ----------
    env : Environment
        Game state, mutated in place.
    agents : Sequence[Agent]
        Participants, polled in this order on every pass.
    config : GameConfig, optional
        Driver settings. Defaults to ``GameConfig()``.

    Returns
    -------
    List[Tuple[Hashable, Any]]
        ``(identity, action)`` for every submitted action, in chronological
        order, including actions the environment rejected.

    Raises
    ------
    ValueError
        If ``agents`` is empty.
    """
    if not agents:
        raise ValueError("play_game needs at least one agent")
    config = config or GameConfig()

    logger.info("Starting game: %s with %s", type(env).__name__,
                [str(agent.identity) for agent in agents])

    game_log: GameLog = []
    passes = 0

    while not env.is_terminal():
        if config.max_passes is not None and passes >= config.max_passes:
            logger.warning("Stopping after %d passes without reaching a terminal state",
                           passes)
            return game_log
        passes += 1

        for agent in agents:
            identity = agent.identity
            if identity == env.turn():
                action = agent.action(env)
                accepted = env.update(action)
                game_log.append((identity, action))

                if accepted:
                    logger.debug("%s played %r", identity, action)
                else:
                    logger.warning("%s submitted invalid action %r", identity, action)

                if env.is_terminal():
                    break

    logger.info("Game over after %d moves: %s", len(game_log), describe_outcome(env))
    return game_log


def describe_outcome(env: Environment) -> str:
    """Short human-readable result: ``"X wins"``, ``"draw"`` or ``"in progress"``."""
    if not env.is_terminal():
        return "in progress"
    winner = env.winner()
    if winner is None:
        return "draw"
    return f"{winner} wins"
