"""
Board module for Minesweeper game.

Implements the game board with deferred mine placement, adjacency
computation, neighbor enumeration and flag bookkeeping. Revealing is
delegated to the reveal engine.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Set

import numpy as np

from . import reveal as reveal_engine
from .cell import Cell, CellState, Coordinate, FlagOutcome, RevealOutcome
from .difficulty import Difficulty
from .errors import MinesAlreadyPlacedError, OutOfBoundsError
from .reveal import RevealResult

logger = logging.getLogger(__name__)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement and adjacency counts.
    Mines are placed lazily on the first reveal so the opening move is
    always safe.
    """

    difficulty: Difficulty = field(default_factory=Difficulty)
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _mines_placed: bool = field(default=False, init=False)
    _flags_placed: int = field(default=0, init=False)
    _safe_revealed: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.width)]
            for _ in range(self.height)
        ]

    def place_mines(
        self,
        exclude: Coordinate,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Place mines uniformly at random, keeping a safe opening area.

        The excluded cell and its neighbors stay mine-free when the rest
        of the board can hold every mine; on crowded boards only the
        excluded cell itself is guaranteed safe.

        Args:
            exclude: (row, col) position of the opening move.
            rng: Random source; a fresh unseeded generator if omitted.

        Raises:
            MinesAlreadyPlacedError: If mines were already placed.
        """
        self._require_unplaced()
        self._require_in_bounds(exclude)
        rng = rng if rng is not None else np.random.default_rng()

        candidates = self._get_valid_mine_positions(exclude)
        chosen: Iterable[int] = ()
        if self.mine_count > 0:
            chosen = rng.choice(len(candidates), size=self.mine_count, replace=False)
        self._set_mines(candidates[int(index)] for index in chosen)
        logger.debug(
            "Placed %d mines on %dx%d board, opening at %s",
            self.mine_count, self.height, self.width, exclude,
        )

    def lay_mines(self, positions: Iterable[Coordinate]) -> None:
        """
        Place mines at explicit positions.

        Args:
            positions: Exactly mine_count distinct in-bounds coordinates.

        Raises:
            MinesAlreadyPlacedError: If mines were already placed.
            ValueError: If the number of distinct positions is wrong.
        """
        self._require_unplaced()
        layout = set(positions)
        for coord in layout:
            self._require_in_bounds(coord)
        if len(layout) != self.mine_count:
            raise ValueError(
                f"Expected {self.mine_count} mine positions, got {len(layout)}"
            )
        self._set_mines(sorted(layout))

    def _set_mines(self, positions: Iterable[Coordinate]) -> None:
        """Mark mines and derive adjacency counts."""
        for row, col in positions:
            self._grid[row][col].mark_mine()
        self._mines_placed = True
        self.compute_adjacency()

    def _require_unplaced(self) -> None:
        if self._mines_placed:
            raise MinesAlreadyPlacedError("Mines have already been placed")

    def _get_valid_mine_positions(self, exclude: Coordinate) -> List[Coordinate]:
        """Get all valid positions for mine placement."""
        safe_zone: Set[Coordinate] = {exclude, *self.neighbors(exclude)}
        if self.difficulty.cell_count - len(safe_zone) < self.mine_count:
            safe_zone = {exclude}
        return [coord for coord in self.iter_coords() if coord not in safe_zone]

    def compute_adjacency(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row, col in self.iter_coords():
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.set_adjacency(self._count_adjacent_mines((row, col)))

    def _count_adjacent_mines(self, coord: Coordinate) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(1 for n in self.neighbors(coord) if self.cell_at(n).is_mine)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, coord: Coordinate) -> Iterator[Coordinate]:
        """
        Yield valid neighboring cell positions.

        Args:
            coord: (row, col) of the center cell.

        Yields:
            In-bounds (row, col) tuples around the center, row by row.
        """
        row, col = coord
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                neighbor = (row + delta_row, col + delta_col)
                if self.in_bounds(neighbor):
                    yield neighbor

    def in_bounds(self, coord: Coordinate) -> bool:
        """Check if position is within board bounds."""
        row, col = coord
        return 0 <= row < self.height and 0 <= col < self.width

    def _require_in_bounds(self, coord: Coordinate) -> None:
        if not self.in_bounds(coord):
            raise OutOfBoundsError(coord, self.height, self.width)

    def iter_coords(self) -> Iterator[Coordinate]:
        """Yield every coordinate in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield row, col

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(
        self,
        coord: Coordinate,
        rng: Optional[np.random.Generator] = None,
    ) -> RevealResult:
        """
        Reveal a cell at the given position.

        On first reveal, places mines avoiding this cell. Empty cells
        flood outwards to their neighbors.

        Args:
            coord: (row, col) to reveal.
            rng: Random source for deferred mine placement.

        Returns:
            Result describing the outcome and newly revealed cells.
        """
        return reveal_engine.reveal(self, coord, rng)

    def chord(self, coord: Coordinate) -> RevealResult:
        """Reveal unflagged neighbors of a satisfied numbered cell."""
        return reveal_engine.chord(self, coord)

    def reveal_cell(self, coord: Coordinate) -> RevealOutcome:
        """Reveal exactly one cell, without propagation."""
        outcome = self.cell_at(coord).reveal()
        if outcome == RevealOutcome.REVEALED_SAFE:
            self._safe_revealed += 1
        return outcome

    def reveal_all_mines(self) -> List[Coordinate]:
        """
        Reveal every hidden mine, leaving flags in place.

        Returns:
            Coordinates of the mines that were newly revealed.
        """
        revealed = []
        for coord in self.iter_coords():
            cell = self.cell_at(coord)
            if cell.is_mine and cell.is_hidden:
                cell.reveal()
                revealed.append(coord)
        return revealed

    def toggle_flag(self, coord: Coordinate) -> FlagOutcome:
        """
        Toggle flag on a cell.

        Args:
            coord: (row, col) to flag or unflag.

        Returns:
            The flag outcome reported by the cell.
        """
        outcome = self.cell_at(coord).toggle_flag()
        if outcome == FlagOutcome.NOW_FLAGGED:
            self._flags_placed += 1
        elif outcome == FlagOutcome.NOW_HIDDEN:
            self._flags_placed -= 1
        return outcome

    def count_adjacent_flags(self, coord: Coordinate) -> int:
        """Count flagged cells adjacent to position."""
        return sum(1 for n in self.neighbors(coord) if self.cell_at(n).is_flagged)

    def is_fully_cleared(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return self._mines_placed and self._safe_revealed == self.difficulty.safe_cell_count

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.difficulty.width

    @property
    def height(self) -> int:
        return self.difficulty.height

    @property
    def mine_count(self) -> int:
        return self.difficulty.mine_count

    @property
    def mines_placed(self) -> bool:
        """Check if mines have been laid on this board."""
        return self._mines_placed

    @property
    def flags_placed(self) -> int:
        """Number of currently flagged cells."""
        return self._flags_placed

    @property
    def safe_revealed(self) -> int:
        """Number of revealed non-mine cells."""
        return self._safe_revealed

    def cell_at(self, coord: Coordinate) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBoundsError: If the position is off the board.
        """
        self._require_in_bounds(coord)
        row, col = coord
        return self._grid[row][col]

    def mine_positions(self) -> List[Coordinate]:
        """Get coordinates of every mine in row-major order."""
        return [coord for coord in self.iter_coords() if self.cell_at(coord).is_mine]

    def count_state(self, state: CellState) -> int:
        """Count cells currently in the given state."""
        return sum(1 for row in self._grid for cell in row if cell.state == state)
