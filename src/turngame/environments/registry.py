"""
Environment registry and factory functions.

Environments are registered by name so that front ends (the command line,
tests, scripts) can start a game without importing the concrete class.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Type

from .base import Environment

logger = logging.getLogger(__name__)


# Global environment registry
ENV_REGISTRY: Dict[str, Type[Environment]] = {}


def register_env(name: str, env_class: Type[Environment]) -> None:
    """Register an environment class.

    Parameters
    ----------
    name : str
        Name to register the environment under (case-insensitive).
    env_class : Type[Environment]
        Environment class to register.

    Raises
    ------
    ValueError
        If name is empty.
    TypeError
        If env_class is not a subclass of Environment.

    Examples
    --------
    >>> from turngame.environments import register_env, Board
    >>> register_env('noughts', Board)
    """
    if not isinstance(name, str) or not name:
        raise ValueError("name must be a non-empty string")

    if not isinstance(env_class, type) or not issubclass(env_class, Environment):
        raise TypeError("env_class must be a subclass of Environment")

    key = name.lower()
    if key in ENV_REGISTRY and ENV_REGISTRY[key] is not env_class:
        logger.debug("Replacing environment %r: %s -> %s",
                     key, ENV_REGISTRY[key].__name__, env_class.__name__)

    ENV_REGISTRY[key] = env_class


def get_env(name: str) -> Environment:
    """Create a fresh environment in its initial state.

    Parameters
    ----------
    name : str
        Environment name (case-insensitive).

    Returns
    -------
    Environment
        Result of ``initial_state()`` on the registered class.

    Raises
    ------
    ValueError
        If environment name is not registered.

    Examples
    --------
    >>> env = get_env('tictactoe')
    >>> list(env.valid_actions())
    [0, 1, 2, 3, 4, 5, 6, 7, 8]
    """
    key = name.lower()

    if key not in ENV_REGISTRY:
        available = list_envs()
        raise ValueError(
            f"Unknown environment: '{name}'. "
            f"Available: {available if available else '(none registered)'}"
        )

    return ENV_REGISTRY[key].initial_state()


def list_envs() -> List[str]:
    """Sorted list of registered environment names."""
    return sorted(ENV_REGISTRY.keys())


def is_registered(name: str) -> bool:
    """Check if environment is registered (case-insensitive)."""
    return name.lower() in ENV_REGISTRY
