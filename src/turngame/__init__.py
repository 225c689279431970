"""
turngame: a minimal turn-based game engine.

Environments hold a game's state and rules, agents choose actions for their
seat, and :func:`play_game` alternates between them until the game ends.
Tic-Tac-Toe ships as the reference environment, stored as a pair of 9-bit
occupancy masks.

Example
-------
>>> from turngame import Board, AgentId, RandomAgent, play_game
>>> env = Board.initial_state()
>>> log = play_game(env, [RandomAgent(AgentId.X, seed=1), RandomAgent(AgentId.O, seed=2)])
>>> env.is_terminal()
True
"""

__version__ = "1.0.0"

from .agents import Agent, ScriptedAgent, RandomAgent, ConsoleAgent
from .environments import get_env, list_envs, Environment, AgentId, Board
from .game import GameConfig, GameLog, play_game, describe_outcome

__all__ = [
    # Driver
    "play_game",
    "describe_outcome",
    "GameConfig",
    "GameLog",
    # Agents
    "Agent",
    "ScriptedAgent",
    "RandomAgent",
    "ConsoleAgent",
    # Environments
    "get_env",
    "list_envs",
    "Environment",
    "AgentId",
    "Board",
    # Metadata
    "__version__",
]
