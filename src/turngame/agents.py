"""
Agent implementations.

An agent is a participant with a fixed seat (its identity) that is asked for
an action whenever the environment says it is that seat's turn. This module
provides the abstract contract and three mechanical participants:

- ScriptedAgent: replays a fixed list of actions
- RandomAgent: uniform random choice over the valid actions
- ConsoleAgent: reads a human's move from a line-oriented text stream

Agents are not required to return valid actions. The driver submits whatever
they return and the environment decides.
"""

from __future__ import annotations

import logging
import sys
import numpy as np
from abc import ABC, abstractmethod
from typing import Any, Callable, Hashable, Iterable, List, Optional, TextIO

from .environments.base import Environment

logger = logging.getLogger(__name__)


class Agent(ABC):
    """Abstract base class for game participants.

    Parameters
    ----------
    identity : Hashable
        Seat this agent plays, compared with ``env.turn()``.
    """

    def __init__(self, identity: Hashable) -> None:
        self._identity = identity

    @property
    def identity(self) -> Hashable:
        """The agent's seat. Fixed for the agent's lifetime."""
        return self._identity

    @abstractmethod
    def action(self, env: Environment) -> Any:
        """Choose an action for the current state.

        Parameters
        ----------
        env : Environment
            Current game state. Agents must treat it as read-only; use
            ``env.what_if`` to explore.

        Returns
        -------
        Any
            The action to submit. It is not required to be valid.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(identity={self._identity!s})"


class ScriptedAgent(Agent):
    """Agent that plays a predetermined sequence of actions.

    Parameters
    ----------
    identity : Hashable
        Seat this agent plays.
    actions : Iterable
        Actions returned, in order, one per call to :meth:`action`.

    Examples
    --------
    >>> from turngame.environments import AgentId, Board
    >>> agent = ScriptedAgent(AgentId.X, [4, 0])
    >>> agent.action(Board.initial_state())
    4
    """

    def __init__(self, identity: Hashable, actions: Iterable[Any]) -> None:
        super().__init__(identity)
        self._actions: List[Any] = list(actions)
        self._next = 0

    @property
    def remaining(self) -> int:
        """Number of scripted actions not yet played."""
        return len(self._actions) - self._next

    def action(self, env: Environment) -> Any:
        if self._next >= len(self._actions):
            raise ValueError(
                f"{self!r} ran out of scripted actions after {len(self._actions)} moves"
            )
        action = self._actions[self._next]
        self._next += 1
        return action


class RandomAgent(Agent):
    """Uniform random policy over the environment's valid actions.

    Parameters
    ----------
    identity : Hashable
        Seat this agent plays.
    seed : int, optional
        Random seed.
    """

    def __init__(self, identity: Hashable, seed: Optional[int] = None) -> None:
        super().__init__(identity)
        self._rng = np.random.RandomState(seed)

    def action(self, env: Environment) -> Any:
        legal_actions = list(env.valid_actions())
        if not legal_actions:
            raise ValueError("No legal actions available")
        return legal_actions[self._rng.randint(len(legal_actions))]


class ConsoleAgent(Agent):
    """Agent driven by a human typing moves on a console.

    Every attempt shows the board and a prompt on ``stdout``, then reads one
    line from ``stdin`` and converts it with ``parse``. Unparsable input is
    retried in a loop until a move is read.

    Parameters
    ----------
    identity : Hashable
        Seat this agent plays.
    parse : Callable[[str], Any], default=int
        Converts the stripped input line into an action. Must raise
        ``ValueError`` for malformed input.
    stdin : TextIO, optional
        Input stream, defaults to ``sys.stdin`` at call time.
    stdout : TextIO, optional
        Output stream, defaults to ``sys.stdout`` at call time.
    max_retries : int, optional
        Number of malformed lines tolerated per action. None retries until
        valid input arrives.

    Raises
    ------
    ValueError
        If ``max_retries`` is negative.

    Notes
    -----
    The parsed action is returned even if it is not a legal move; the
    environment rejects it and the player is asked again on a later pass.
    """

    def __init__(
        self,
        identity: Hashable,
        parse: Callable[[str], Any] = int,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        max_retries: Optional[int] = None,
    ) -> None:
        super().__init__(identity)
        if max_retries is not None and max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {max_retries}")
        self._parse = parse
        self._stdin = stdin
        self._stdout = stdout
        self.max_retries = max_retries

    def _prompt(self, env: Environment, out: TextIO) -> None:
        out.write("The current board looks like:\n")
        out.write(f"{env}\n")
        out.write(f"You are player: {self.identity}.\n")
        out.write("Please enter your action: \n")
        out.flush()

    def _read_line(self, stream: TextIO) -> str:
        try:
            line = stream.readline()
        except OSError as e:
            logger.error("Error reading input: %s", e)
            return "\n"
        if not line:
            raise EOFError("input stream closed while waiting for an action")
        return line

    def action(self, env: Environment) -> Any:
        stdin = self._stdin if self._stdin is not None else sys.stdin
        stdout = self._stdout if self._stdout is not None else sys.stdout

        failures = 0
        while True:
            self._prompt(env, stdout)
            text = self._read_line(stdin).strip()
            try:
                return self._parse(text)
            except ValueError:
                failures += 1
                logger.info("Could not parse %r as an action for %s", text, self.identity)
                if self.max_retries is not None and failures > self.max_retries:
                    raise ValueError(
                        f"no parsable action for {self.identity} after {failures} attempts"
                    ) from None
