"""
Environments module for turngame.

This module provides:
1. The abstract :class:`Environment` contract every game must satisfy
2. A name-based registry and factory
3. Internal reference implementations

Available Environments
----------------------
- ``tictactoe``: 2-player Tic-Tac-Toe on a bitboard

Examples
--------
>>> from turngame.environments import get_env, list_envs
>>> print(list_envs())
['tictactoe']
>>>
>>> env = get_env('tictactoe')
>>> print(list(env.valid_actions()))
[0, 1, 2, 3, 4, 5, 6, 7, 8]
"""

from .base import Environment
from .registry import get_env, list_envs, register_env, is_registered, ENV_REGISTRY

# Import internal implementations to register them
from .internal import AgentId, Board

__all__ = [
    # Base classes
    "Environment",
    # Tic-Tac-Toe
    "AgentId",
    "Board",
    # Factory functions
    "get_env",
    "list_envs",
    "register_env",
    "is_registered",
    "ENV_REGISTRY",
]
