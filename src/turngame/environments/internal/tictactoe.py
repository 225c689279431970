"""
Tic-Tac-Toe Environment.

A classic 3x3 board game for two players. Players alternate placing marks
(X and O) on empty cells, with the goal of getting three in a row.

The board is stored as two 9-bit occupancy masks, one per player. Bit ``i``
of a mask is set when that player has marked cell ``i``:

    0 | 1 | 2
    ---------
    3 | 4 | 5
    ---------
    6 | 7 | 8

Game Properties
---------------
- Players: 2
- Information: Perfect
- Determinism: Deterministic
- Action space: 9 (cells 0-8)
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from ..base import Environment


NUM_CELLS = 9

# All nine cells occupied
FULL_BOARD = 0b111111111

# Winning line masks
WINNING_MASKS = (
    0b000000111, 0b000111000, 0b111000000,  # Rows
    0b001001001, 0b010010010, 0b100100100,  # Columns
    0b100010001, 0b001010100,               # Diagonals
)


class AgentId(Enum):
    """Seats at a tic-tac-toe table.

    Attributes
    ----------
    X : str
        First player.
    O : str
        Second player.
    """
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value

    @property
    def opponent(self) -> AgentId:
        return AgentId.O if self is AgentId.X else AgentId.X


def is_winning(moves: int) -> bool:
    """True iff the occupancy mask ``moves`` covers a full winning line."""
    for mask in WINNING_MASKS:
        if moves & mask == mask:
            return True
    return False


def is_filled(moves_first_player: int, moves_second_player: int) -> bool:
    """True iff every cell is occupied by one of the players."""
    return (moves_first_player | moves_second_player) & FULL_BOARD == FULL_BOARD


def _free_cells(occupied: int, start: int) -> Iterator[int]:
    """Yield clear bit positions of ``occupied`` from ``start`` up to cell 8.

    ``occupied`` must already be aligned so that its lowest bit is cell
    ``start``.
    """
    current = start
    while True:
        while occupied & 1:
            occupied >>= 1
            current += 1
        if current >= NUM_CELLS:
            return
        yield current
        occupied >>= 1
        current += 1


@dataclass
class Board(Environment):
    """Tic-Tac-Toe board as a pair of bitmasks.

    Parameters
    ----------
    moves_first_player : int, default=0
        Cells occupied by X, one bit per cell.
    moves_second_player : int, default=0
        Cells occupied by O, one bit per cell.
    turn_ : AgentId, default=AgentId.X
        Player that makes the next move.

    Raises
    ------
    ValueError
        If a mask has bits outside the board or both masks share a cell.
    TypeError
        If ``turn_`` is not an :class:`AgentId`.

    Examples
    --------
    >>> board = Board.initial_state()
    >>> board.update(4)
    True
    >>> board.turn()
    <AgentId.O: 'O'>
    >>> list(board.valid_actions())
    [0, 1, 2, 3, 5, 6, 7, 8]
    """
    moves_first_player: int = 0
    moves_second_player: int = 0
    turn_: AgentId = AgentId.X

    def __post_init__(self) -> None:
        """Validate board invariants."""
        for name in ("moves_first_player", "moves_second_player"):
            mask = getattr(self, name)
            if mask < 0 or mask & ~FULL_BOARD:
                raise ValueError(f"{name} has bits outside the board: {mask:#b}")
        overlap = self.moves_first_player & self.moves_second_player
        if overlap:
            raise ValueError(f"cells occupied by both players: {overlap:#011b}")
        if not isinstance(self.turn_, AgentId):
            raise TypeError(f"turn_ must be an AgentId, got {self.turn_!r}")

    @classmethod
    def initial_state(cls) -> Board:
        """Empty board with X to move."""
        return cls()

    def turn(self) -> AgentId:
        return self.turn_

    def is_valid(self, action: int) -> bool:
        """True iff ``action`` is a cell index in [0, 8] that nobody occupies."""
        if isinstance(action, bool) or not isinstance(action, (int, np.integer)):
            return False
        if action < 0 or action >= NUM_CELLS:
            return False
        occupied = self.moves_first_player | self.moves_second_player
        return not (occupied >> int(action)) & 1

    def update(self, action: int) -> bool:
        """Mark ``action`` for the current player and pass the turn.

        Returns False and leaves the board untouched if the cell is out of
        range or already taken.
        """
        if not self.is_valid(action):
            return False

        cell = 1 << int(action)
        if self.turn_ is AgentId.X:
            self.moves_first_player |= cell
        else:
            self.moves_second_player |= cell
        self.turn_ = self.turn_.opponent
        return True

    def what_if(self, action: int) -> Board:
        """Board after ``update(action)``, leaving this one unchanged."""
        board = Board(self.moves_first_player, self.moves_second_player, self.turn_)
        board.update(action)
        return board

    def valid_actions(self) -> Iterator[int]:
        """Lazily yield empty cells in ascending order.

        Nothing is yielded once the board is terminal.
        """
        occupied = self.moves_first_player | self.moves_second_player
        start = NUM_CELLS if self.is_terminal() else 0
        return _free_cells(occupied >> start, start)

    def is_terminal(self) -> bool:
        return (
            is_winning(self.moves_first_player)
            or is_winning(self.moves_second_player)
            or is_filled(self.moves_first_player, self.moves_second_player)
        )

    def winner(self) -> Optional[AgentId]:
        if is_winning(self.moves_first_player):
            return AgentId.X
        if is_winning(self.moves_second_player):
            return AgentId.O
        return None

    def is_draw(self) -> bool:
        """Full board with no winning line for either player."""
        return self.is_terminal() and self.winner() is None

    def observation(self) -> np.ndarray:
        """9-element float array: 1.0 for X, -1.0 for O, 0.0 for empty."""
        board = np.zeros(NUM_CELLS, dtype=np.float32)
        for i in range(NUM_CELLS):
            if (self.moves_first_player >> i) & 1:
                board[i] += 1.0
            if (self.moves_second_player >> i) & 1:
                board[i] -= 1.0
        return board

    def __str__(self) -> str:
        x = self.moves_first_player
        o = self.moves_second_player
        rows = []
        for _ in range(3):
            cells = []
            for _ in range(3):
                x_pos, o_pos = x & 1, o & 1
                x >>= 1
                o >>= 1
                if x_pos and o_pos:
                    mark = "?"
                elif x_pos:
                    mark = "X"
                elif o_pos:
                    mark = "O"
                else:
                    mark = " "
                cells.append(f"| {mark} |")
            rows.append("".join(cells))
        rows.append("End of board")
        return "\n".join(rows)

    def __hash__(self) -> int:
        # Hash of the current position; do not mutate a board stored in a set.
        return hash((self.moves_first_player, self.moves_second_player, self.turn_))

    def __repr__(self) -> str:
        return (
            f"Board(moves_first_player={self.moves_first_player:#011b}, "
            f"moves_second_player={self.moves_second_player:#011b}, "
            f"turn_=AgentId.{self.turn_.name})"
        )
