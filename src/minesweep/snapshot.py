"""
Read-only views of a game for the presentation layer.

A snapshot is a frozen copy: mutating the session afterwards does not
change it, and nothing in it reaches back into the board.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np

from .cell import Cell, CellState, Coordinate
from .difficulty import Difficulty

if TYPE_CHECKING:
    from .session import GameSession, GameStatus


@dataclass(frozen=True)
class CellView:
    """
    What a player may know about one cell.

    Attributes:
        row: Row index.
        col: Column index.
        state: Hidden, flagged or revealed.
        adjacent_mines: Count shown on a revealed safe cell, else None.
        is_mine: True only for a revealed mine.
        misflagged: True for a flag on a safe cell once the game is lost.
    """

    row: int
    col: int
    state: CellState
    adjacent_mines: Optional[int] = None
    is_mine: bool = False
    misflagged: bool = False

    def to_observation(self) -> int:
        """Numeric encoding matching Cell.to_observation."""
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines


@dataclass(frozen=True)
class SessionSnapshot:
    """Frozen picture of a session's visible state."""

    status: "GameStatus"
    difficulty: Difficulty
    elapsed_time: float
    flags_placed: int
    remaining_flags: int
    cells: Tuple[Tuple[CellView, ...], ...]
    detonated_at: Optional[Coordinate] = None

    def cell(self, coord: Coordinate) -> CellView:
        row, col = coord
        return self.cells[row][col]

    def to_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros(
            (self.difficulty.height, self.difficulty.width), dtype=np.int8
        )
        for row in self.cells:
            for view in row:
                obs[view.row, view.col] = view.to_observation()
        return obs


def _view_cell(row: int, col: int, cell: Cell, lost: bool) -> CellView:
    revealed_mine = cell.is_revealed and cell.is_mine
    return CellView(
        row=row,
        col=col,
        state=cell.state,
        adjacent_mines=(
            cell.adjacent_mines if cell.is_revealed and not cell.is_mine else None
        ),
        is_mine=revealed_mine,
        misflagged=lost and cell.is_flagged and not cell.is_mine,
    )


def take_snapshot(session: "GameSession") -> SessionSnapshot:
    """Build a snapshot of the session's current state."""
    board = session.board
    lost = session.is_lost
    cells = tuple(
        tuple(
            _view_cell(row, col, board.cell_at((row, col)), lost)
            for col in range(board.width)
        )
        for row in range(board.height)
    )
    return SessionSnapshot(
        status=session.status,
        difficulty=session.difficulty,
        elapsed_time=session.elapsed_time,
        flags_placed=session.flags_placed,
        remaining_flags=session.remaining_flags,
        cells=cells,
        detonated_at=session.detonated_at,
    )
