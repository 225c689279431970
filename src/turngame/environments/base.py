"""
Base classes for game environments.

This module defines the abstract interface that all environments must implement.
An environment holds the complete state of one game together with the rules
for advancing it. Agents only ever see it read-only; the driver owns it and is
the only caller of ``update``.
"""

from __future__ import annotations

import copy
import numpy as np
from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterator, Optional, TypeVar


E = TypeVar("E", bound="Environment")


class Environment(ABC):
    """Abstract base class for turn-based game environments.

    All environments must implement this interface to be compatible with
    :func:`turngame.game.play_game`. Fallibility is expressed through return
    values only: ``update`` answers with a boolean and ``winner`` with
    ``None``. None of the game operations raise for illegal moves.

    Subclasses must implement all abstract methods.

    Examples
    --------
    >>> from turngame.environments import Board
    >>> env = Board.initial_state()
    >>> env.update(4)
    True
    >>> env.update(4)
    False
    """

    @classmethod
    @abstractmethod
    def initial_state(cls: type[E]) -> E:
        """Create the canonical starting position.

        Returns
        -------
        Environment
            A fresh environment, ready for the first move.
        """
        pass

    @abstractmethod
    def turn(self) -> Hashable:
        """Identity of the agent entitled to the next move.

        Returns
        -------
        Hashable
            The seat whose move is next. Unspecified once the environment is
            terminal, so callers check :meth:`is_terminal` first.
        """
        pass

    @abstractmethod
    def is_valid(self, action: Any) -> bool:
        """Check whether ``action`` is legal from the current state.

        Parameters
        ----------
        action : Any
            Candidate action.

        Returns
        -------
        bool
            True iff applying ``action`` now would be accepted by
            :meth:`update`.
        """
        pass

    @abstractmethod
    def update(self, action: Any) -> bool:
        """Apply ``action`` for the player whose turn it is.

        Parameters
        ----------
        action : Any
            Action to apply.

        Returns
        -------
        bool
            True if the state changed. False if the action was invalid, in
            which case the state is left untouched.
        """
        pass

    @abstractmethod
    def valid_actions(self) -> Iterator[Any]:
        """Lazily enumerate every legal action.

        Each call returns a new iterator over the current state. The iterator
        yields exactly the actions for which :meth:`is_valid` holds and is
        empty once the environment is terminal.
        """
        pass

    @abstractmethod
    def is_terminal(self) -> bool:
        """True iff the game is over (win or draw)."""
        pass

    @abstractmethod
    def winner(self) -> Optional[Hashable]:
        """Identity of the winner, or None.

        None covers both draws and unfinished games; combine with
        :meth:`is_terminal` to tell them apart.
        """
        pass

    def observation(self) -> np.ndarray:
        """Numeric view of the state, for agents and analysis code.

        Optional: the driver never calls it. Environments without a numeric
        view keep this default.

        Raises
        ------
        NotImplementedError
            If the environment does not provide an observation array.
        """
        raise NotImplementedError(
            f"{type(self).__name__} does not provide a numeric observation"
        )

    def what_if(self: E, action: Any) -> E:
        """Return the state that ``update(action)`` would produce.

        ``self`` is not modified. For an invalid action the result equals
        ``self``.
        """
        hypothetical = copy.deepcopy(self)
        hypothetical.update(action)
        return hypothetical
