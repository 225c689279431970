"""
Internal environment implementations.

Environments
------------
- TicTacToe: Classic 3x3 board game on a pair of bitmasks
"""

from .tictactoe import AgentId, Board

from ..registry import register_env

# Register all internal environments
register_env('tictactoe', Board)

__all__ = [
    'AgentId',
    'Board',
]
