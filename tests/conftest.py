"""
Pytest configuration and fixtures.

This module provides shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def _reachable_boards():
    """Every board reachable from the empty board through valid play."""
    from turngame.environments import Board

    start = Board.initial_state()
    seen = set()
    stack = [start]
    while stack:
        board = stack.pop()
        if board in seen:
            continue
        seen.add(board)
        if board.is_terminal():
            continue
        for action in board.valid_actions():
            stack.append(board.what_if(action))
    return list(seen)


_REACHABLE = None


@pytest.fixture
def reachable_boards():
    """Provide all reachable tic-tac-toe positions (computed once)."""
    global _REACHABLE
    if _REACHABLE is None:
        _REACHABLE = _reachable_boards()
    return _REACHABLE


@pytest.fixture
def board():
    """Provide an empty tic-tac-toe board."""
    from turngame import Board
    return Board.initial_state()


@pytest.fixture
def play():
    """Provide a helper that applies a list of moves to a fresh board."""
    from turngame import Board

    def _play(moves):
        board = Board.initial_state()
        for move in moves:
            assert board.update(move), f"move {move} rejected"
        return board

    return _play
