"""
Reveal engine for Minesweeper.

Implements single-cell reveals, breadth-first flood fill across
zero-count regions, and chording around satisfied numbered cells.
"""
import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Set, Tuple

import numpy as np

from .cell import Coordinate, RevealOutcome

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)


# ============================================================================
# Result Type
# ============================================================================

@dataclass(frozen=True)
class RevealResult:
    """
    Outcome of a reveal or chord action.

    Attributes:
        outcome: What happened at the target (or, for a chord, overall).
        cells_revealed: Newly revealed coordinates, in reveal order.
    """

    outcome: RevealOutcome
    cells_revealed: Tuple[Coordinate, ...] = ()

    @property
    def hit_mine(self) -> bool:
        """Check if a mine was revealed."""
        return self.outcome == RevealOutcome.REVEALED_MINE

    @property
    def count(self) -> int:
        """Number of newly revealed cells."""
        return len(self.cells_revealed)


# ============================================================================
# Reveal
# ============================================================================

def reveal(
    board: "Board",
    coord: Coordinate,
    rng: Optional[np.random.Generator] = None,
) -> RevealResult:
    """
    Reveal a cell, placing mines first if this is the opening move.

    Args:
        board: Board to operate on.
        coord: (row, col) position to reveal.
        rng: Random source used if mines still need placing.

    Returns:
        Result with the outcome and newly revealed cells.
    """
    cell = board.cell_at(coord)

    # A flagged target leaves the board untouched, including mine placement
    if cell.is_flagged:
        return RevealResult(RevealOutcome.REJECTED)

    if not board.mines_placed:
        board.place_mines(coord, rng)

    if cell.is_revealed:
        return RevealResult(RevealOutcome.ALREADY_REVEALED)

    if cell.is_mine:
        board.reveal_cell(coord)
        return RevealResult(RevealOutcome.REVEALED_MINE, (coord,))

    revealed = flood_fill(board, coord)
    return RevealResult(RevealOutcome.REVEALED_SAFE, tuple(revealed))


def flood_fill(board: "Board", start: Coordinate) -> List[Coordinate]:
    """
    Reveal a safe cell and every cell reachable through zero-count cells.

    Numbered cells on the frontier are revealed but not expanded.
    Flagged cells are left untouched.

    Args:
        board: Board to operate on.
        start: Hidden, non-mine cell to start from.

    Returns:
        Coordinates revealed, in breadth-first order.
    """
    revealed: List[Coordinate] = []
    visited: Set[Coordinate] = {start}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        cell = board.cell_at(current)
        if board.reveal_cell(current) != RevealOutcome.REVEALED_SAFE:
            continue
        revealed.append(current)

        if cell.adjacent_mines > 0:
            continue

        for neighbor in board.neighbors(current):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            neighbor_cell = board.cell_at(neighbor)
            if neighbor_cell.is_hidden and not neighbor_cell.is_mine:
                queue.append(neighbor)

    logger.debug("Flood fill from %s revealed %d cells", start, len(revealed))
    return revealed


# ============================================================================
# Chord
# ============================================================================

def chord(board: "Board", coord: Coordinate) -> RevealResult:
    """
    Reveal all hidden, unflagged neighbors of a satisfied numbered cell.

    A cell is satisfied when it is revealed, shows a non-zero count, and
    has exactly that many flagged neighbors. Stops at the first mine.

    Args:
        board: Board to operate on.
        coord: (row, col) of the numbered cell.

    Returns:
        REJECTED if the chord is not allowed, REVEALED_MINE if a neighbor
        was a mine, otherwise REVEALED_SAFE with every newly revealed cell.
    """
    if not can_chord(board, coord):
        return RevealResult(RevealOutcome.REJECTED)

    revealed: List[Coordinate] = []
    for neighbor in board.neighbors(coord):
        if not board.cell_at(neighbor).is_hidden:
            continue
        result = reveal(board, neighbor)
        revealed.extend(result.cells_revealed)
        if result.hit_mine:
            return RevealResult(RevealOutcome.REVEALED_MINE, tuple(revealed))

    return RevealResult(RevealOutcome.REVEALED_SAFE, tuple(revealed))


def can_chord(board: "Board", coord: Coordinate) -> bool:
    """Check if chord action is valid."""
    cell = board.cell_at(coord)
    if not cell.is_revealed or cell.is_mine or cell.adjacent_mines == 0:
        return False
    return board.count_adjacent_flags(coord) == cell.adjacent_mines
