"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple

from .errors import MinesAlreadyPlacedError


# ============================================================================
# Constants
# ============================================================================

MAX_ADJACENT_MINES = 8

# (row, col) position on the board
Coordinate = Tuple[int, int]


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class RevealOutcome(Enum):
    """Result of revealing a cell or a region of cells."""

    ALREADY_REVEALED = auto()
    REVEALED_MINE = auto()
    REVEALED_SAFE = auto()
    REJECTED = auto()


class FlagOutcome(Enum):
    """Result of toggling a flag."""

    NOW_FLAGGED = auto()
    NOW_HIDDEN = auto()
    REJECTED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def mark_mine(self) -> None:
        """Put a mine in this cell."""
        if self.is_mine:
            raise MinesAlreadyPlacedError("Cell already holds a mine")
        self.is_mine = True

    def set_adjacency(self, count: int) -> None:
        """Store the number of mines among this cell's neighbors."""
        if not 0 <= count <= MAX_ADJACENT_MINES:
            raise ValueError(
                f"Adjacent mine count must be 0-{MAX_ADJACENT_MINES}, got {count}"
            )
        self.adjacent_mines = count

    def reveal(self) -> RevealOutcome:
        """
        Reveal this cell.

        Returns:
            REJECTED if the cell is flagged, ALREADY_REVEALED if it was
            revealed before, otherwise REVEALED_MINE or REVEALED_SAFE.
        """
        if self.state == CellState.FLAGGED:
            return RevealOutcome.REJECTED
        if self.state == CellState.REVEALED:
            return RevealOutcome.ALREADY_REVEALED
        self.state = CellState.REVEALED
        if self.is_mine:
            return RevealOutcome.REVEALED_MINE
        return RevealOutcome.REVEALED_SAFE

    def toggle_flag(self) -> FlagOutcome:
        """
        Toggle flag on this cell.

        Returns:
            The new flag state, or REJECTED if the cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return FlagOutcome.REJECTED
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
            return FlagOutcome.NOW_FLAGGED
        self.state = CellState.HIDDEN
        return FlagOutcome.NOW_HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to its numeric observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
